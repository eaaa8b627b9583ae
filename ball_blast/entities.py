"""
entities.py - Game entity dataclasses
Plain data; all behavior lives in simulation.py and its helpers.
"""

from dataclasses import dataclass
from typing import Tuple

from .settings import (
    CANNON_WIDTH, CANNON_HEIGHT, BALL_RADIUS, BALL_COLOR, BLOCK_SIZE,
    POWERUP_RADIUS, PARTICLE_LIFETIME,
)

Color = Tuple[int, int, int]


@dataclass
class Cannon:
    """Player-controlled emitter at the bottom of the screen"""
    x: float
    y: float
    target_x: float
    width: float = CANNON_WIDTH
    height: float = CANNON_HEIGHT


@dataclass
class Ball:
    """Projectile fired upward by the cannon"""
    x: float
    y: float
    vx: float
    vy: float
    power: int = 1
    radius: float = BALL_RADIUS
    color: Color = BALL_COLOR


@dataclass
class Block:
    """Descending target; top-left anchored"""
    x: float
    y: float
    hp: int
    max_hp: int
    color: Color
    width: float = BLOCK_SIZE
    height: float = BLOCK_SIZE

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Particle:
    """Cosmetic spark; life counts down in ticks"""
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    color: Color
    life: int = PARTICLE_LIFETIME


@dataclass
class PowerUp:
    """Falling pickup dropped by a destroyed block"""
    x: float
    y: float
    kind: str
    radius: float = POWERUP_RADIUS


@dataclass
class CoinPopup:
    """Floating '+N' text; life fades from 1 to 0"""
    x: float
    y: float
    amount: int
    life: float = 1.0
