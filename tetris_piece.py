
"""Piece catalog, piece model and rotation helpers"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

COLS, ROWS = 10, 20

# index == cell value written into the board
SHAPES: List[List[List[int]]] = [
    [],
    [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    [[2,0,0],[2,2,2],[0,0,0]],
    [[0,0,3],[3,3,3],[0,0,0]],
    [[4,4],[4,4]],
    [[0,5,5],[5,5,0],[0,0,0]],
    [[0,6,0],[6,6,6],[0,0,0]],
    [[7,7,0],[0,7,7],[0,0,0]],
]

COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (0,240,240),
    2: (0,0,240),
    3: (240,160,0),
    4: (240,240,0),
    5: (0,240,0),
    6: (160,0,240),
    7: (240,0,0),
}

PIECE_IDS = range(1, len(SHAPES))

CW, CCW = 1, -1

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]
def rotate_ccw(m): return [list(c) for c in zip(*m)][::-1]

def rotated(m, direction):
    assert direction in (CW, CCW), f"bad rotation direction {direction!r}"
    return rotate_cw(m) if direction == CW else rotate_ccw(m)

def create_shape(t: int) -> List[List[int]]:
    assert t in PIECE_IDS, f"unknown piece id {t!r}"
    return [r[:] for r in SHAPES[t]]

@dataclass
class Piece:
    t: int
    shape: List[List[int]]
    x: int
    y: int

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @staticmethod
    def spawn(t: int):
        s = create_shape(t)
        return Piece(t, s, COLS // 2 - len(s[0]) // 2, 0)

    def moved(self, dx=0, dy=0):
        return Piece(self.t, self.shape, self.x + dx, self.y + dy)

    def cells(self):
        for y, row in enumerate(self.shape):
            for x, v in enumerate(row):
                if v:
                    yield self.x + x, self.y + y
