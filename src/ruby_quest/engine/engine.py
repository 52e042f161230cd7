"""
engine.py

PURPOSE: Core game engine that executes commands and manages game state.
DEPENDENCIES: models, parser, actions, views

ARCHITECTURE NOTES:
The GameEngine is the central coordinator:
- Owns the one GameState of a session
- Parses each line of input into a Command
- Executes Commands by delegating to action handlers
- Reports quit and win as flags on the TurnResult

The engine never reads or prints anything itself; the CLI feeds it one line
at a time and prints the lines it gets back, in order.
"""

import logging
from dataclasses import dataclass, field

from opentelemetry import trace

from ruby_quest.catalog import WORLD
from ruby_quest.engine.actions import execute_action
from ruby_quest.engine.views import describe_room
from ruby_quest.models.command import Verb
from ruby_quest.models.state import GameState
from ruby_quest.models.world import World
from ruby_quest.observability import get_tracer
from ruby_quest.parser.parser import ParseResult, parse

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


@dataclass
class TurnResult:
    """Result of processing a player turn."""

    lines: list[str] = field(default_factory=list)  # Narrative lines to display
    game_over: bool = False
    won: bool = False
    error: bool = False  # True if the command was refused or not understood

    @property
    def message(self) -> str:
        return "\n".join(self.lines)

    @property
    def keep_playing(self) -> bool:
        """False once the session should end (quit or win)."""
        return not self.game_over


class GameEngine:
    """
    The core game engine.

    Manages game state and executes player commands.
    """

    def __init__(self, world: World = WORLD, state: GameState | None = None):
        """
        Initialize the engine.

        Args:
            world: The world definition to play
            state: Optional existing state (to start mid-game)
        """
        self.world = world
        self.state = state if state is not None else GameState.from_world(world)

    def describe_current_room(self) -> list[str]:
        """Describe the current room; shown once before the first prompt."""
        return describe_room(self.world, self.state)

    def process_input(self, user_input: str) -> TurnResult:
        """
        Process a line of player input.

        This is the main entry point for the game loop.

        Args:
            user_input: Raw text from the player

        Returns:
            TurnResult with narrative lines and end-of-game flags
        """
        with tracer.start_as_current_span("engine.process_input") as span:
            span.set_attribute("game.room", self.state.current_room.name)
            result = self._process(user_input)
            span.set_attribute("game.error", result.error)
            span.set_attribute("game.game_over", result.game_over)
            span.set_attribute("game.won", result.won)
            return result

    def _process(self, user_input: str) -> TurnResult:
        # Check if game is already over
        if self.state.flags.won:
            return TurnResult(lines=["THE GAME IS OVER."], game_over=True, won=True)

        parse_result: ParseResult = parse(user_input)
        if parse_result.is_empty:
            return TurnResult()
        if not parse_result.success:
            error = parse_result.error
            assert error is not None
            logger.debug(f"Unparsed input {error.raw_input!r}: {error.message}")
            return TurnResult(lines=[error.message], error=True)

        command = parse_result.command
        assert command is not None
        logger.debug(f"Parsed {command.raw_input!r} as {command.verb.name} {command.tag or ''}")
        trace.get_current_span().set_attribute("game.verb", command.verb.name)

        if command.verb == Verb.QUIT:
            return TurnResult(game_over=True)

        action_result = execute_action(command, self.world, self.state)

        if action_result.success:
            self.state.increment_turns()

        if self.state.flags.won:
            return TurnResult(lines=action_result.lines, game_over=True, won=True)

        return TurnResult(lines=action_result.lines, error=not action_result.success)
