"""
spawner.py - Wave spawning and difficulty scaling
"""

import math
import random

from .entities import Block, PowerUp
from .settings import (
    BLOCK_SIZE, BLOCK_COLUMN_WIDTH, BLOCK_SPAWN_THRESHOLD,
    BLOCK_BASE_HP, BLOCK_HP_PER_LEVEL, BLOCK_HP_RANDOM_PER_LEVEL,
    BLOCK_SPAWN_JITTER, BLOCK_COLOR_BANDS, BLOCK_COLOR_MAX,
    BASE_FALL_SPEED, FALL_SPEED_PER_LEVEL, MAX_FALL_SPEED, SPEED_MULT_PER_LEVEL,
    WAVE_CLEAR_ROW, WAVE_EARLY_CHANCE,
    POWERUP_TYPES, POWERUP_DROP_CHANCE,
)


def block_color(hp):
    """Map hit-points to one of seven color bands."""
    for limit, color in BLOCK_COLOR_BANDS:
        if hp < limit:
            return color
    return BLOCK_COLOR_MAX


def fall_speed(level):
    """Base block fall speed for a level, clamped to MAX_FALL_SPEED."""
    return min(MAX_FALL_SPEED, BASE_FALL_SPEED + level * FALL_SPEED_PER_LEVEL)


def speed_multiplier(level):
    return 1.0 + level * SPEED_MULT_PER_LEVEL


class Spawner:
    """Generates block waves and power-up drops for a given level."""

    def __init__(self, rng=None):
        self.rng = rng or random.Random()

    def block_hp(self, level):
        """HP grows linearly with level plus a random share of the level."""
        return math.floor(BLOCK_BASE_HP + level * BLOCK_HP_PER_LEVEL
                          + self.rng.random() * level * BLOCK_HP_RANDOM_PER_LEVEL)

    def spawn_wave(self, level, canvas_width):
        """Return a new list of blocks laid out in columns above the screen."""
        cols = max(1, int(canvas_width // BLOCK_COLUMN_WIDTH))
        spacing = max(0.0, (canvas_width - cols * BLOCK_SIZE) / (cols + 1))

        blocks = []
        for i in range(cols):
            if self.rng.random() <= BLOCK_SPAWN_THRESHOLD:
                continue
            hp = self.block_hp(level)
            blocks.append(Block(
                x=spacing + i * (BLOCK_SIZE + spacing),
                y=-BLOCK_SIZE - self.rng.random() * BLOCK_SPAWN_JITTER,
                hp=hp,
                max_hp=hp,
                color=block_color(hp),
            ))
        return blocks

    def roll_powerup(self, x, y):
        """Chance-based drop at a destroyed block's center; None if no drop."""
        if self.rng.random() < POWERUP_DROP_CHANCE:
            return self.spawn_powerup(x, y)
        return None

    def spawn_powerup(self, x, y):
        kind = self.rng.choice(list(POWERUP_TYPES))
        return PowerUp(x=x, y=y, kind=kind)

    def should_advance(self, blocks):
        """A new wave comes when the field is clear, or sometimes once every
        block has dropped below WAVE_CLEAR_ROW."""
        if not blocks:
            return True
        if all(b.y > WAVE_CLEAR_ROW for b in blocks):
            return self.rng.random() < WAVE_EARLY_CHANCE
        return False
