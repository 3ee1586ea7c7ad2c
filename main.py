import logging
import sys
import pygame
from tetris_audio import ToneAudio
from tetris_config import CONFIG, setup_logging
from tetris_input import handle_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_session import GameSession

log = logging.getLogger("tetris")


def create_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    setup_logging()
    pygame.mixer.pre_init(44100, -16, 1, 512)
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = create_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 48)

    render = RenderAssets(dims, font, big_font)
    session = GameSession(audio=ToneAudio())
    clock = pygame.time.Clock()
    log.info("window %dx%d, seed %s", dims.total_w, dims.total_h, session.seed)

    while True:
        clock.tick(CONFIG["FPS"])
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                handle_key(session, e.key)

        session.advance(pygame.time.get_ticks())
        render.draw(screen, session)
        pygame.display.flip()


if __name__ == '__main__':
    main()
