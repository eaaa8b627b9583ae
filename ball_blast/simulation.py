"""
simulation.py - One session of Ball Blast, advanced a fixed tick at a time
Pure game state: no pygame, no persistence. Anything the outside world
needs to react to is returned from step() as a list of GameEvents.
"""

import logging
import math
import random
from dataclasses import dataclass

from .entities import Cannon, Ball, CoinPopup
from .particles import ParticleSystem
from .spawner import Spawner, block_color, fall_speed, speed_multiplier
from .utils import clamp, circle_rect_collide
from .settings import (
    MIN_WIDTH, MIN_HEIGHT, GROUND_OFFSET,
    CANNON_GROUND_OFFSET, CANNON_MUZZLE_OFFSET,
    BALL_SPEED, BALL_SPREAD, BALL_BOUNCE_NUDGE,
    BASE_FALL_SPEED, BLOCK_KILL_SCORE, BLOCK_KILL_COINS,
    POWERUP_FALL_SPEED, POWERUP_PICKUP_RANGE,
    MAX_BALLS_CAP, MULTIBALL_BONUS, SPEED_FIRE_BONUS, SPEED_FIRE_FLOOR,
    POWER_LIVE_BONUS, POWER_BASE_BONUS, COINS_BONUS,
    COIN_POPUP_MARGIN_X, COIN_POPUP_Y, COIN_POPUP_RISE, COIN_POPUP_FADE,
)

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """Something the controller or presentation layer should react to.

    kind is one of: fire, hit, break, coins, powerup, wave, game_over,
    notice, achievement, daily_reward.
    """
    kind: str
    text: str = ""
    amount: int = 0


class Simulation:
    """Owns every entity of a single session."""

    def __init__(self, width, height, loadout, rng=None):
        self.rng = rng or random.Random()
        self.spawner = Spawner(self.rng)
        self.particles = ParticleSystem(self.rng)

        self.width = MIN_WIDTH
        self.height = MIN_HEIGHT
        self.ground_y = MIN_HEIGHT - GROUND_OFFSET
        self.cannon = None
        self.resize(width, height)
        self.reset(loadout)

    def reset(self, loadout):
        """Fresh session state with the first wave already queued."""
        self.score = 0
        self.level = 1
        self.session_coins = 0
        self.game_over = False

        self.cannon = Cannon(
            x=self.width / 2,
            y=self.ground_y + CANNON_GROUND_OFFSET,
            target_x=self.width / 2,
        )
        self.balls = []
        self.blocks = []
        self.powerups = []
        self.coin_popups = []
        self.particles.clear()

        self.fire_counter = 0
        self.block_speed = BASE_FALL_SPEED
        self.apply_loadout(loadout)

        self.blocks.extend(self.spawner.spawn_wave(self.level, self.width))

    def apply_loadout(self, loadout):
        self.max_balls = loadout.max_balls
        self.fire_interval = loadout.fire_interval
        self.ball_power = loadout.ball_power
        self.move_speed = loadout.move_speed

    # ── Environment ─────────────────────────────────────

    def resize(self, width, height):
        """Adopt a new canvas size, clamped to sane minimums."""
        try:
            width = float(width)
            height = float(height)
        except (TypeError, ValueError):
            return
        if not (math.isfinite(width) and math.isfinite(height)):
            return
        self.width = max(MIN_WIDTH, width)
        self.height = max(MIN_HEIGHT, height)
        self.ground_y = self.height - GROUND_OFFSET
        if self.cannon is not None:
            self.cannon.y = self.ground_y + CANNON_GROUND_OFFSET
            self.cannon.x = self._clamp_cannon_x(self.cannon.x)

    def set_target(self, x):
        """Pointer position the cannon will glide toward."""
        if not math.isfinite(x):
            return
        self.cannon.target_x = x

    def _clamp_cannon_x(self, x):
        half = self.cannon.width / 2
        return clamp(x, half, self.width - half)

    # ── Tick ────────────────────────────────────────────

    def step(self):
        """Advance one tick. Returns the events raised during it."""
        events = []
        if self.game_over:
            return events

        self._move_cannon()
        self._update_firing(events)
        self._update_balls(events)

        if self._update_blocks():
            self.game_over = True
            logger.info("Game over at level %d with score %d", self.level, self.score)
            events.append(GameEvent("game_over", amount=self.score))
            return events

        if self.spawner.should_advance(self.blocks):
            self._advance_wave(events)

        self.particles.update()
        self._update_powerups(events)
        self._update_coin_popups()
        return events

    def _move_cannon(self):
        c = self.cannon
        c.x += (c.target_x - c.x) * self.move_speed
        c.x = self._clamp_cannon_x(c.x)

    def _update_firing(self, events):
        self.fire_counter += 1
        if self.fire_counter >= self.fire_interval:
            if self.fire_ball():
                events.append(GameEvent("fire"))
            self.fire_counter = 0

    def fire_ball(self):
        """Launch one ball from the muzzle unless the ball cap is reached."""
        if len(self.balls) >= self.max_balls:
            return False
        spread = (self.rng.random() - 0.5) * BALL_SPREAD
        self.balls.append(Ball(
            x=self.cannon.x,
            y=self.cannon.y - CANNON_MUZZLE_OFFSET,
            vx=spread * BALL_SPEED,
            vy=-BALL_SPEED,
            power=self.ball_power,
        ))
        return True

    def _update_balls(self, events):
        kept = []
        for ball in self.balls:
            ball.x += ball.vx
            ball.y += ball.vy

            # Wall bounce
            if ball.x - ball.radius < 0 or ball.x + ball.radius > self.width:
                ball.vx = -ball.vx
                ball.x = clamp(ball.x, ball.radius, self.width - ball.radius)

            # Ceiling bounce
            if ball.y - ball.radius < 0:
                ball.vy = -ball.vy
                ball.y = ball.radius

            if ball.y > self.ground_y:
                continue
            kept.append(ball)

            # Newest blocks are tested first
            for block in reversed(self.blocks):
                if block.hp <= 0:
                    continue
                if circle_rect_collide(ball.x, ball.y, ball.radius,
                                       block.x, block.y, block.width, block.height):
                    self._hit_block(ball, block, events)
                    break

        self.balls = kept
        self.blocks = [b for b in self.blocks if b.hp > 0]

    def _hit_block(self, ball, block, events):
        block.hp = max(0, block.hp - ball.power)
        block.color = block_color(block.hp)
        self.score += ball.power

        ball.vy = -ball.vy
        ball.y += ball.vy * BALL_BOUNCE_NUDGE

        self.particles.emit_hit(ball.x, ball.y, block.color)
        events.append(GameEvent("hit", amount=ball.power))

        if block.hp <= 0:
            cx, cy = block.center
            self.particles.emit_break(cx, cy, block.color)
            self.score += BLOCK_KILL_SCORE
            self.add_coins(BLOCK_KILL_COINS, events)
            events.append(GameEvent("break"))

            powerup = self.spawner.roll_powerup(cx, cy)
            if powerup is not None:
                self.powerups.append(powerup)

    def _update_blocks(self):
        """Move blocks down. Returns True as soon as one reaches the ground."""
        speed = self.block_speed * speed_multiplier(self.level)
        for block in self.blocks:
            block.y += speed
            if block.bottom > self.ground_y:
                return True
        return False

    def _advance_wave(self, events):
        self.level += 1
        self.block_speed = max(self.block_speed, fall_speed(self.level))
        self.blocks.extend(self.spawner.spawn_wave(self.level, self.width))
        logger.debug("Wave %d spawned, %d blocks on field", self.level, len(self.blocks))
        events.append(GameEvent("wave", amount=self.level))

    def _update_powerups(self, events):
        kept = []
        cannon = self.cannon
        for pu in self.powerups:
            pu.y += POWERUP_FALL_SPEED

            if (abs(pu.x - cannon.x) < POWERUP_PICKUP_RANGE
                    and abs(pu.y - cannon.y) < POWERUP_PICKUP_RANGE):
                self.apply_powerup(pu.kind, events)
                continue

            if pu.y > self.height:
                continue
            kept.append(pu)
        self.powerups = kept

    def apply_powerup(self, kind, events):
        if kind == "multiball":
            self.max_balls = min(MAX_BALLS_CAP, self.max_balls + MULTIBALL_BONUS)
        elif kind == "speed":
            self.fire_interval = max(SPEED_FIRE_FLOOR, self.fire_interval - SPEED_FIRE_BONUS)
        elif kind == "power":
            for ball in self.balls:
                ball.power += POWER_LIVE_BONUS
            self.ball_power += POWER_BASE_BONUS
        elif kind == "coins":
            self.add_coins(COINS_BONUS, events)
        else:
            raise ValueError(f"unknown power-up kind: {kind!r}")

        self.particles.emit_pickup(self.cannon.x, self.cannon.y)
        events.append(GameEvent("powerup", text=kind))

    def add_coins(self, amount, events):
        self.session_coins += amount
        self.coin_popups.append(CoinPopup(
            x=self.width - COIN_POPUP_MARGIN_X,
            y=COIN_POPUP_Y,
            amount=amount,
        ))
        events.append(GameEvent("coins", amount=amount))

    def _update_coin_popups(self):
        kept = []
        for popup in self.coin_popups:
            popup.y -= COIN_POPUP_RISE
            popup.life -= COIN_POPUP_FADE
            if popup.life > 0:
                kept.append(popup)
        self.coin_popups = kept
