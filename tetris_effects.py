
"""Row-clear particles (decoration only)"""
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple
from tetris_config import CONFIG

GRAVITY = 0.2

@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    color: Tuple[int,int,int]
    decay: float
    size: float
    life: float = 1.0

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self):
        self.x += self.vx; self.y += self.vy
        self.vy += GRAVITY
        self.life -= self.decay


class Effects:
    def __init__(self, seed: Optional[int]=None):
        self.particles: List[Particle] = []
        self._rng = random.Random(seed)

    def burst(self, col: int, row: int, color):
        cell = CONFIG["CELL_SIZE"]
        px = col*cell + cell/2; py = row*cell + cell/2
        r = self._rng
        for _ in range(CONFIG["PARTICLES_PER_CELL"]):
            self.particles.append(Particle(
                px, py,
                (r.random()-0.5)*8, (r.random()-0.5)*8,
                color,
                decay=r.random()*0.03 + 0.02,
                size=r.random()*4 + 2,
            ))

    def update(self):
        for p in self.particles: p.update()
        self.particles = [p for p in self.particles if p.alive]

    def clear(self):
        self.particles.clear()
