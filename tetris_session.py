
"""
Game session: owns the board, the piece controller, particles and counters,
and drives everything from ``tick(elapsed_ms)``.

The host loop calls ``advance(now_ms)`` once per frame (or ``tick`` directly
with a simulated clock) and forwards input events to the handler methods.
Handlers other than pause/restart/sound are ignored unless the session is
running.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional

from tetris_audio import Cue, NullAudio
from tetris_board import Board, new_board, sweep
from tetris_config import CONFIG
from tetris_controller import PieceController
from tetris_effects import Effects, Particle
from tetris_piece import COLORS, CW, Piece
from tetris_rng import PieceRandom

log = logging.getLogger(__name__)

LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 800}


def level_for_lines(lines: int) -> int:
    return lines // CONFIG["LINES_PER_LEVEL"] + 1


def drop_interval(level: int) -> int:
    """Milliseconds between automatic drops at ``level``."""
    return max(CONFIG["MIN_DROP_MS"], CONFIG["BASE_DROP_MS"] - (level - 1) * CONFIG["DROP_STEP_MS"])


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameSession:
    def __init__(self, audio=None, seed: Optional[int] = None):
        self.audio = audio if audio is not None else NullAudio()
        self.seed = CONFIG["SEED"] if seed is None else seed
        self.effects = Effects(self.seed)
        self.reset()

    def reset(self):
        self.board: Board = new_board()
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval = drop_interval(self.level)
        self.drop_counter = 0.0
        self._last_time: Optional[float] = None
        self.effects.clear()
        self.pieces = PieceController(self.board, PieceRandom(self.seed), self.audio)
        self.state = GameState.RUNNING
        log.info("new game")
        self._spawn()

    # ---------- read-only views ----------
    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def sound_on(self) -> bool:
        return not self.audio.muted

    @property
    def current(self) -> Piece:
        return self.pieces.current

    @property
    def next_type(self) -> int:
        return self.pieces.next_type

    @property
    def particles(self) -> List[Particle]:
        return self.effects.particles

    @property
    def ghost_y(self) -> int:
        return self.pieces.ghost_y()

    # ---------- timing ----------
    def advance(self, now_ms: float):
        """Tick with the time elapsed since the previous call."""
        if self._last_time is None or not self.running:
            self._last_time = now_ms
            return
        elapsed = now_ms - self._last_time
        self._last_time = now_ms
        self.tick(elapsed)

    def tick(self, elapsed_ms: float):
        if not self.running:
            return
        self.drop_counter += elapsed_ms
        if self.drop_counter > self.drop_interval:
            self.soft_drop()
            self.drop_counter = 0
        self.effects.update()

    # ---------- input handlers ----------
    def move_left(self) -> bool:
        return self.running and self.pieces.move(-1)

    def move_right(self) -> bool:
        return self.running and self.pieces.move(1)

    def rotate(self, direction: int = CW) -> bool:
        return self.running and self.pieces.rotate(direction)

    def soft_drop(self) -> bool:
        if not self.running:
            return False
        if self.pieces.soft_drop():
            self._after_lock()
            return True
        return False

    def hard_drop(self) -> int:
        if not self.running:
            return 0
        rows = self.pieces.hard_drop()
        self._after_lock()
        return rows

    def toggle_pause(self):
        if self.game_over:
            return
        if self.paused:
            self.state = GameState.RUNNING
            self._last_time = None
            log.info("resumed")
        else:
            self.state = GameState.PAUSED
            log.info("paused")

    def restart(self):
        self.reset()

    def toggle_sound(self):
        self.audio.muted = not self.audio.muted
        log.info("sound %s", "on" if self.sound_on else "off")

    # ---------- locking ----------
    def _after_lock(self):
        cleared = sweep(self.board, self._on_clear_cell)
        if cleared:
            self.audio.play(Cue.LINE_CLEAR)
            self._score(cleared)
        self._spawn()
        self.drop_counter = 0

    def _on_clear_cell(self, x: int, y: int, v: int):
        self.effects.burst(x, y, COLORS[v])

    def _score(self, cleared: int):
        self.score += LINE_SCORES[cleared] * self.level
        self.lines += cleared
        level = level_for_lines(self.lines)
        log.debug("cleared %d rows, score %d", cleared, self.score)
        if level != self.level:
            self.level = level
            self.drop_interval = drop_interval(level)
            log.info("level %d, drop every %d ms", level, self.drop_interval)

    def _spawn(self):
        if not self.pieces.spawn():
            self.state = GameState.GAME_OVER
            log.info("game over, final score %d", self.score)
