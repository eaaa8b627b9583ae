"""
particles.py - Cosmetic particle bursts
Particles live for a fixed number of ticks and fall under constant gravity.
"""

import random

from .entities import Particle
from .settings import (
    MAX_PARTICLES, PARTICLE_LIFETIME, PARTICLE_GRAVITY, PARTICLE_SPEED,
    PARTICLE_MIN_SIZE, PARTICLE_SIZE_RANGE, GOLD,
    HIT_PARTICLES, BREAK_PARTICLES, PICKUP_PARTICLES,
)


class ParticleSystem:
    """Owns the live particle list; capped at MAX_PARTICLES."""

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.particles = []

    def emit(self, x, y, color, count=5):
        """Emit particles with random velocity around (x, y)."""
        rng = self.rng
        for _ in range(count):
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=(rng.random() - 0.5) * PARTICLE_SPEED,
                vy=(rng.random() - 0.5) * PARTICLE_SPEED,
                radius=rng.random() * PARTICLE_SIZE_RANGE + PARTICLE_MIN_SIZE,
                color=color,
                life=PARTICLE_LIFETIME,
            ))
        overflow = len(self.particles) - MAX_PARTICLES
        if overflow > 0:
            # Oldest sparks go first
            del self.particles[:overflow]

    def emit_hit(self, x, y, color):
        self.emit(x, y, color, count=HIT_PARTICLES)

    def emit_break(self, x, y, color):
        self.emit(x, y, color, count=BREAK_PARTICLES)

    def emit_pickup(self, x, y):
        self.emit(x, y, GOLD, count=PICKUP_PARTICLES)

    def update(self):
        alive = []
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.vy += PARTICLE_GRAVITY
            p.life -= 1
            if p.life > 0:
                alive.append(p)
        self.particles = alive

    def clear(self):
        self.particles = []

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)
