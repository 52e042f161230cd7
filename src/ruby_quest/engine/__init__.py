"""Game engine module."""

from ruby_quest.engine.actions import ActionResult, execute_action
from ruby_quest.engine.engine import GameEngine, TurnResult

__all__ = [
    "ActionResult",
    "GameEngine",
    "TurnResult",
    "execute_action",
]
