"""
conftest.py

Shared pytest fixtures for ruby_quest tests.
"""

from collections.abc import Callable

import pytest

from ruby_quest.catalog import WORLD
from ruby_quest.engine.engine import GameEngine
from ruby_quest.models.state import GameState
from ruby_quest.models.world import CARRIED, Location, ObjectId, RoomId, World


@pytest.fixture
def world() -> World:
    """The fixed game world."""
    return WORLD


@pytest.fixture
def new_state(world: World) -> GameState:
    """State of a freshly started game."""
    return GameState.from_world(world)


@pytest.fixture
def engine() -> GameEngine:
    """Engine for a freshly started game."""
    return GameEngine()


StateFactory = Callable[..., GameState]


@pytest.fixture
def make_state(world: World) -> StateFactory:
    """
    Build a mid-game state.

    Usage:
        state = make_state(RoomId.GARAGE, carrying=[ObjectId.SALT],
                           place={ObjectId.SWORD: NOWHERE}, gloved=True)
    """

    def _make(
        room: RoomId,
        carrying: list[ObjectId] | None = None,
        place: dict[ObjectId, Location] | None = None,
        **flags: bool,
    ) -> GameState:
        state = GameState.from_world(world)
        state.current_room = room
        for obj_id in carrying or []:
            state.move_object(obj_id, CARRIED)
        for obj_id, location in (place or {}).items():
            state.move_object(obj_id, location)
        for name, value in flags.items():
            setattr(state.flags, name, value)
        return state

    return _make


@pytest.fixture
def engine_at(make_state: StateFactory) -> Callable[..., GameEngine]:
    """Build an engine around a mid-game state (same arguments as make_state)."""

    def _make(room: RoomId, **kwargs: object) -> GameEngine:
        return GameEngine(state=make_state(room, **kwargs))

    return _make
