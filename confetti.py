"""
Confetti particles for the win celebration.
Particle state is kept in numpy arrays and advanced one frame at a time;
ui.py draws them on a Tk canvas.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from game import GameConfig


@dataclass
class Particle:
    """One drawable confetti piece."""
    x: float
    y: float
    size: float
    rotation: float     # degrees
    color: str
    shape: str          # "rect" or "circle"


class ConfettiField:
    """
    A field of falling confetti.

    Particles start above the visible area, fall with a small sideways
    drift and spin, and respawn at the top once they leave the bottom.
    """

    MIN_SIZE, MAX_SIZE = 5.0, 15.0
    MIN_FALL, MAX_FALL = 2.0, 5.0
    MAX_DRIFT = 2.0
    MAX_SPIN = 5.0
    RESPAWN_Y = -20.0

    def __init__(
        self,
        width: int,
        height: int,
        count: int = GameConfig.CONFETTI_COUNT,
        rng: Optional[np.random.Generator] = None
    ):
        self.width = width
        self.height = height
        self.count = count
        self.rng = rng if rng is not None else np.random.default_rng()
        self.colors = list(GameConfig.CONFETTI_COLORS)

        self.x = np.zeros(count)
        self.y = np.zeros(count)
        self.size = np.zeros(count)
        self.speed_x = np.zeros(count)
        self.speed_y = np.zeros(count)
        self.rotation = np.zeros(count)
        self.spin = np.zeros(count)
        self.color_index = np.zeros(count, dtype=int)
        self.is_rect = np.zeros(count, dtype=bool)

        self._spawn(np.arange(count))
        # First wave is spread over one screen height above the top
        self.y = self.rng.uniform(-height, 0, count)

    def _spawn(self, idx: np.ndarray):
        """(Re)initialise the particles at idx just above the top edge."""
        n = len(idx)
        if n == 0:
            return
        self.x[idx] = self.rng.uniform(0, self.width, n)
        self.y[idx] = self.RESPAWN_Y
        self.size[idx] = self.rng.uniform(self.MIN_SIZE, self.MAX_SIZE, n)
        self.speed_y[idx] = self.rng.uniform(self.MIN_FALL, self.MAX_FALL, n)
        self.speed_x[idx] = self.rng.uniform(-self.MAX_DRIFT, self.MAX_DRIFT, n)
        self.rotation[idx] = self.rng.uniform(0, 360, n)
        self.spin[idx] = self.rng.uniform(-self.MAX_SPIN, self.MAX_SPIN, n)
        self.color_index[idx] = self.rng.integers(0, len(self.colors), n)
        self.is_rect[idx] = self.rng.random(n) > 0.5

    def step(self):
        """Advance every particle by one frame."""
        self.x += self.speed_x
        self.y += self.speed_y
        self.rotation = (self.rotation + self.spin) % 360

        # Respawn anything that fell off the bottom
        gone = np.flatnonzero(self.y > self.height + 20)
        self._spawn(gone)

    def particles(self) -> Iterator[Particle]:
        """Yield the particles currently in the field."""
        for i in range(self.count):
            yield Particle(
                x=float(self.x[i]),
                y=float(self.y[i]),
                size=float(self.size[i]),
                rotation=float(self.rotation[i]),
                color=self.colors[self.color_index[i]],
                shape="rect" if self.is_rect[i] else "circle",
            )
