
import logging

CONFIG = {
    "CELL_SIZE": 30,
    "PREVIEW_CELL": 20,
    "FPS": 60,
    "BASE_DROP_MS": 1000,
    "DROP_STEP_MS": 100,
    "MIN_DROP_MS": 100,
    "LINES_PER_LEVEL": 10,
    "PARTICLES_PER_CELL": 8,
    "SOUND_ON": True,
    "VOLUME": 0.1,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}

def setup_logging(level=None):
    logging.basicConfig(
        level=level or CONFIG["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
