"""Ball Blast - arcade block breaker with persistent upgrades"""

from .session import SessionController, GameState
from .simulation import Simulation, GameEvent
from .progression import Progression, ProgressionState, Loadout

__all__ = [
    'SessionController', 'GameState',
    'Simulation', 'GameEvent',
    'Progression', 'ProgressionState', 'Loadout',
]
