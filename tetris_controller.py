
"""Active piece: spawn, move, rotate with wall kick, drops and locking"""
from typing import Optional
from tetris_audio import Cue
from tetris_board import Board, collide, merge, ghost_y
from tetris_piece import Piece, rotated
from tetris_rng import PieceRandom

class PieceController:
    def __init__(self, board: Board, rng: PieceRandom, audio):
        self.board = board
        self.rng = rng
        self.audio = audio
        self.current: Optional[Piece] = None
        self.next_type = rng.next_piece()

    def spawn(self) -> bool:
        """Promote the next piece; False when the spawn spot is already taken."""
        self.current = Piece.spawn(self.next_type)
        self.next_type = self.rng.next_piece()
        if collide(self.board, self.current):
            self.audio.play(Cue.GAME_OVER)
            return False
        return True

    def move(self, direction: int) -> bool:
        assert direction in (-1, 1), f"bad move direction {direction!r}"
        t = self.current.moved(dx=direction)
        if collide(self.board, t): return False
        self.current = t
        self.audio.play(Cue.MOVE)
        return True

    def rotate(self, direction: int) -> bool:
        p = self.current
        t = Piece(p.t, rotated(p.shape, direction), p.x, p.y)
        # kick sequence +1, -2, +3, -4 ... applied cumulatively
        offset = 1
        while collide(self.board, t):
            t.x += offset
            offset = -(offset + (1 if offset > 0 else -1))
            if offset > t.width:
                return False
        self.current = t
        self.audio.play(Cue.ROTATE)
        return True

    def soft_drop(self) -> bool:
        """Step down one row. Returns True when the piece locked instead."""
        t = self.current.moved(dy=1)
        if collide(self.board, t):
            self.lock()
            return True
        self.current = t
        return False

    def hard_drop(self) -> int:
        y0 = self.current.y
        self.current = self.current.moved(dy=self.ghost_y() - y0)
        self.lock()
        return self.current.y - y0

    def lock(self):
        merge(self.board, self.current)
        self.audio.play(Cue.LOCK)

    def ghost_y(self) -> int:
        return ghost_y(self.board, self.current)
