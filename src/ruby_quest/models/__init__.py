"""Domain models for the adventure."""

from ruby_quest.models.command import Arity, Command, Verb, VerbRule
from ruby_quest.models.state import MAX_CARRIED, GameState, PuzzleFlags
from ruby_quest.models.world import (
    CARRIED,
    GUARDED,
    NOWHERE,
    Carried,
    Direction,
    Fixed,
    GameObject,
    InRoom,
    Location,
    Nowhere,
    ObjectId,
    Passage,
    Room,
    RoomId,
    World,
)

__all__ = [
    "CARRIED",
    "GUARDED",
    "MAX_CARRIED",
    "NOWHERE",
    "Arity",
    "Carried",
    "Command",
    "Direction",
    "Fixed",
    "GameObject",
    "GameState",
    "InRoom",
    "Location",
    "Nowhere",
    "ObjectId",
    "Passage",
    "PuzzleFlags",
    "Room",
    "RoomId",
    "Verb",
    "VerbRule",
    "World",
]
