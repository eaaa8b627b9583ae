"""
session.py - Session state machine and command interface
The pygame shell binds keys and buttons to these commands; nothing in
here knows how the game is drawn.
"""

import logging

from .progression import Progression
from .simulation import Simulation, GameEvent
from .settings import SCREEN_WIDTH, SCREEN_HEIGHT

logger = logging.getLogger(__name__)


class GameState:
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "gameover"


class SessionController:
    """Owns the current Simulation and the player's Progression."""

    def __init__(self, progression=None, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, rng=None):
        self.progression = progression or Progression()
        self.state = GameState.START
        self.shop_open = False
        self.events = []
        self.simulation = Simulation(width, height, self.progression.loadout(), rng=rng)

    # ── Commands ────────────────────────────────────────

    def start(self):
        """Leave the start screen."""
        if self.state != GameState.START:
            return False
        self._begin_playing()
        return True

    def restart(self):
        """Throw the finished session away and play a fresh one."""
        if self.state != GameState.GAME_OVER:
            return False
        self.simulation.reset(self.progression.loadout())
        self.state = GameState.START
        self._begin_playing()
        return True

    def open_shop(self):
        if self.state == GameState.PLAYING:
            return False
        self.shop_open = True
        return True

    def close_shop(self):
        self.shop_open = False

    def buy_upgrade(self, upgrade_id):
        ok, message = self.progression.buy_upgrade(upgrade_id)
        self.notify(message)
        return ok

    def set_pointer(self, x):
        if self.state != GameState.PLAYING:
            return
        self.simulation.set_target(x)

    def resize(self, width, height):
        self.simulation.resize(width, height)

    def claim_daily_reward(self, now=None):
        result = self.progression.claim_daily_reward(now)
        if result is None:
            return None
        reward, streak = result
        self.events.append(GameEvent("daily_reward", text=f"Day {streak} Streak!", amount=reward))
        return result

    # ── Frame ───────────────────────────────────────────

    def tick(self):
        """Run one simulation tick while playing."""
        if self.state != GameState.PLAYING:
            return
        for event in self.simulation.step():
            if event.kind == "coins":
                self.progression.add_coins(event.amount)
            elif event.kind == "powerup":
                self.notify(event.text.upper() + "!")
            self.events.append(event)
            if event.kind == "game_over":
                self._end_game()

    def drain_events(self):
        events, self.events = self.events, []
        return events

    def notify(self, text):
        self.events.append(GameEvent("notice", text=text))

    # ── Transitions ─────────────────────────────────────

    def _begin_playing(self):
        self.state = GameState.PLAYING
        self.shop_open = False
        self.simulation.apply_loadout(self.progression.loadout())
        self.progression.record_game_start()
        logger.info("Game %d started", self.progression.state.total_games)

    def _end_game(self):
        self.state = GameState.GAME_OVER
        sim = self.simulation
        unlocked = self.progression.record_game_over(sim.score, sim.level)
        for ach_id, reward in unlocked:
            self.events.append(GameEvent("achievement", text=ach_id, amount=reward))
            self.notify(f"Achievement! +{reward} coins")

    @property
    def summary(self):
        """Values shown on the game-over screen."""
        state = self.progression.state
        return {
            "score": self.simulation.score,
            "best": state.high_score,
            "level": self.simulation.level,
            "session_coins": self.simulation.session_coins,
        }
