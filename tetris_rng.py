
"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import PIECE_IDS

class PieceRandom:
    def __init__(self, seed: Optional[int]=None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> int:
        return self._rng.choice(PIECE_IDS)
