"""
progression.py - Persistent meta-progression
Coins, shop upgrades, achievements and the daily login reward.
Every mutation that must survive a crash is saved straight away.
"""

import logging
import math
from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from .settings import (
    UPGRADES, ACHIEVEMENTS, DAILY_REWARDS,
    BASE_MAX_BALLS, BASE_FIRE_INTERVAL, MIN_FIRE_INTERVAL,
    CANNON_BASE_SPEED, CANNON_SPEED_PER_TIER,
)

logger = logging.getLogger(__name__)


def _default_upgrades():
    return {key: 1 for key in UPGRADES}


@dataclass
class ProgressionState:
    """Aggregates kept across sessions."""
    coins: int = 0
    high_score: int = 0
    best_level: int = 1
    total_games: int = 0
    last_daily: int = 0         # epoch milliseconds of the last claim
    daily_streak: int = 0
    achievements: Dict[str, bool] = field(default_factory=dict)
    upgrades: Dict[str, int] = field(default_factory=_default_upgrades)

    @classmethod
    def from_dict(cls, data):
        """Build a state from saved data; each bad or missing field falls
        back to its default on its own."""
        state = cls()
        if not isinstance(data, dict):
            return state

        def _int(key, minimum):
            value = data.get(key)
            # bool is an int subclass; a saved true/false is not a count
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return getattr(state, key)
            if not math.isfinite(value):
                return getattr(state, key)
            return max(minimum, int(value))

        state.coins = _int("coins", 0)
        state.high_score = _int("high_score", 0)
        state.best_level = _int("best_level", 1)
        state.total_games = _int("total_games", 0)
        state.last_daily = _int("last_daily", 0)
        state.daily_streak = _int("daily_streak", 0)

        achievements = data.get("achievements")
        if isinstance(achievements, dict):
            state.achievements = {str(k): True for k, v in achievements.items() if v is True}

        upgrades = data.get("upgrades")
        if isinstance(upgrades, dict):
            for key, info in UPGRADES.items():
                tier = upgrades.get(key)
                if isinstance(tier, int) and not isinstance(tier, bool):
                    state.upgrades[key] = max(1, min(info["max_level"], tier))
        return state

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class Loadout:
    """Simulation parameters derived from upgrade tiers."""
    max_balls: int
    fire_interval: int
    ball_power: int
    move_speed: float

    @classmethod
    def from_upgrades(cls, upgrades):
        return cls(
            max_balls=BASE_MAX_BALLS + upgrades["ball_count"],
            fire_interval=max(MIN_FIRE_INTERVAL, BASE_FIRE_INTERVAL - upgrades["fire_rate"]),
            ball_power=upgrades["ball_power"],
            move_speed=CANNON_BASE_SPEED + upgrades["cannon_speed"] * CANNON_SPEED_PER_TIER,
        )


class Progression:
    """Wraps a ProgressionState and its store."""

    def __init__(self, store=None):
        self.store = store
        data = store.load() if store is not None else None
        self.state = ProgressionState.from_dict(data)

    def save(self):
        """Best-effort write; a failed save never ends the session."""
        if self.store is None:
            return True
        ok = self.store.save(self.state.to_dict())
        if not ok:
            logger.warning("Progress could not be saved; continuing without it")
        return ok

    # ── Coins ─────────────────────────────────────────────

    @property
    def coins(self):
        return self.state.coins

    def add_coins(self, amount):
        self.state.coins += amount
        self.save()

    # ── Shop ──────────────────────────────────────────────

    def tier(self, upgrade_id):
        return self.state.upgrades[upgrade_id]

    def upgrade_price(self, upgrade_id):
        return UPGRADES[upgrade_id]["base_price"] * self.state.upgrades[upgrade_id]

    def is_maxed(self, upgrade_id):
        return self.state.upgrades[upgrade_id] >= UPGRADES[upgrade_id]["max_level"]

    def buy_upgrade(self, upgrade_id) -> Tuple[bool, str]:
        """Try to buy the next tier. Returns (success, notice text).

        Raises KeyError for an unknown upgrade id.
        """
        if upgrade_id not in UPGRADES:
            raise KeyError(upgrade_id)
        if self.is_maxed(upgrade_id):
            return False, "Already maxed!"
        price = self.upgrade_price(upgrade_id)
        if self.state.coins < price:
            return False, "Not enough coins!"

        self.state.coins -= price
        self.state.upgrades[upgrade_id] += 1
        self.save()
        logger.info("Bought %s tier %d for %d coins",
                    upgrade_id, self.state.upgrades[upgrade_id], price)
        return True, "Upgraded!"

    def loadout(self):
        return Loadout.from_upgrades(self.state.upgrades)

    # ── Sessions ──────────────────────────────────────────

    def record_game_start(self):
        self.state.total_games += 1
        self.save()

    def record_game_over(self, score, level) -> List[Tuple[str, int]]:
        """Fold a finished session into the aggregates and persist.
        Returns the achievements unlocked by it."""
        if score > self.state.high_score:
            self.state.high_score = score
        if level > self.state.best_level:
            self.state.best_level = level
        unlocked = self.check_achievements()
        self.save()
        return unlocked

    def check_achievements(self) -> List[Tuple[str, int]]:
        """Grant every newly satisfied achievement exactly once."""
        unlocked = []
        for ach_id, stat, threshold, reward in ACHIEVEMENTS:
            if self.state.achievements.get(ach_id):
                continue
            if getattr(self.state, stat) >= threshold:
                self.state.achievements[ach_id] = True
                self.state.coins += reward
                unlocked.append((ach_id, reward))
                logger.info("Achievement %s unlocked (+%d coins)", ach_id, reward)
        return unlocked

    # ── Daily reward ──────────────────────────────────────

    def claim_daily_reward(self, now: Optional[datetime] = None) -> Optional[Tuple[int, int]]:
        """Grant today's login reward if a new calendar day has begun.

        Returns (reward, streak), or None when already claimed today.
        """
        now = now or datetime.now()
        try:
            last_day = datetime.fromtimestamp(self.state.last_daily / 1000).date()
        except (OverflowError, OSError, ValueError):
            last_day = date.min
        today = now.date()
        if today <= last_day:
            return None

        # One missed calendar day still keeps the streak alive
        if (today - last_day).days <= 2:
            self.state.daily_streak += 1
        else:
            self.state.daily_streak = 1

        streak = self.state.daily_streak
        reward = DAILY_REWARDS[min(streak, len(DAILY_REWARDS)) - 1]
        self.state.coins += reward
        self.state.last_daily = int(now.timestamp() * 1000)
        self.save()
        logger.info("Daily reward: day %d streak, +%d coins", streak, reward)
        return reward, streak
