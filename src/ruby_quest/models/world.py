"""
world.py

PURPOSE: Pydantic models for the static world (rooms, objects, exits).
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
These models define the STATIC world content - what exists and where it starts.
They are separate from GameState, which tracks MUTABLE state during play.
The World model is the root - it contains all rooms and objects.

Room and object identifiers are IntEnums so that a room number can never be
passed where an object number is expected. The one guarded passage in the
world is marked with the GUARDED sentinel instead of a room number.

An object location is one of four variants (InRoom, Fixed, Carried, Nowhere)
rather than a packed integer, so "fixed in room 5" and "lying in room 5" can
never be confused with each other or with the inventory.
"""

from enum import Enum, IntEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RoomId(IntEnum):
    """Identifiers of every room in the world."""

    LIVING_ROOM = 1
    KITCHEN = 2
    LIBRARY = 3
    FRONT_YARD = 4
    GARAGE = 5
    OPEN_FIELD = 6
    FOREST_EDGE = 7
    TREE_BRANCH = 8
    WINDING_ROAD_1 = 9
    WINDING_ROAD_2 = 10
    WINDING_ROAD_3 = 11
    SOUTH_BANK = 12
    BOAT = 13
    NORTH_BANK = 14
    WELL_TRAVELED_ROAD = 15
    CASTLE_GATE = 16
    NARROW_HALL = 17
    LARGE_HALL = 18
    TREE_TOP = 19


class ObjectId(IntEnum):
    """Identifiers of every object in the world."""

    DIARY = 1
    BOX = 2
    CABINET = 3
    SALT = 4
    DICTIONARY = 5
    BARREL = 6
    BOTTLE = 7
    LADDER = 8
    SHOVEL = 9
    TREE = 10
    SWORD = 11
    BOAT = 12
    FAN = 13
    GUARD = 14
    CASE = 15
    RUBY = 16
    GLOVES = 17


class Direction(Enum):
    """Compass and vertical exit directions, in the order exits are listed."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"
    DOWN = "DOWN"
    UP = "UP"


class Passage(Enum):
    """Exit markers that are not plain room numbers."""

    GUARDED = "guarded"  # leads to the narrow hall once the guard is gone


GUARDED = Passage.GUARDED

ExitTarget = RoomId | Passage


class InRoom(BaseModel):
    """Lying on the floor of a room; can be picked up."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["room"] = "room"
    room: RoomId

    def is_at(self, room: RoomId) -> bool:
        return self.room == room


class Fixed(BaseModel):
    """Fixed in a room; visible there but never carried."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    room: RoomId

    def is_at(self, room: RoomId) -> bool:
        return self.room == room


class Carried(BaseModel):
    """In the player's inventory."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["carried"] = "carried"

    def is_at(self, room: RoomId) -> bool:  # noqa: ARG002
        return False


class Nowhere(BaseModel):
    """Not in play: not yet revealed, or removed for good."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["nowhere"] = "nowhere"

    def is_at(self, room: RoomId) -> bool:  # noqa: ARG002
        return False


Location = Annotated[InRoom | Fixed | Carried | Nowhere, Field(discriminator="kind")]

CARRIED = Carried()
NOWHERE = Nowhere()


class Room(BaseModel):
    """
    A location in the world.

    Only exits that lead somewhere are stored; a missing direction means
    there is no exit that way.
    """

    model_config = ConfigDict(frozen=True)

    id: RoomId
    description: str = Field(..., min_length=1)
    exits: dict[Direction, ExitTarget] = Field(default_factory=dict)

    def exit_to(self, direction: Direction) -> ExitTarget | None:
        """Get the exit target in a direction, or None when there is no exit."""
        return self.exits.get(direction)

    def open_directions(self) -> list[Direction]:
        """Directions with an exit, in canonical listing order."""
        return [d for d in Direction if d in self.exits]


class GameObject(BaseModel):
    """
    An object template: display name, parser tag and starting location.

    The tag is the three-letter key the parser uses to refer to the object.
    """

    model_config = ConfigDict(frozen=True)

    id: ObjectId
    name: str = Field(..., min_length=1)
    tag: str = Field(..., pattern=r"^[A-Z]{3}$")
    start: Location


class World(BaseModel):
    """
    The complete world definition.

    Validated once when the catalog is built; never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    rooms: list[Room] = Field(..., min_length=1)
    objects: list[GameObject] = Field(default_factory=list)
    start_room: RoomId

    @model_validator(mode="after")
    def validate_references(self) -> "World":
        """Ensure identifiers are unique and all room references resolve."""
        room_ids = [room.id for room in self.rooms]
        if len(set(room_ids)) != len(room_ids):
            raise ValueError("Duplicate room id in world")

        object_ids = [obj.id for obj in self.objects]
        if len(set(object_ids)) != len(object_ids):
            raise ValueError("Duplicate object id in world")

        tags = [obj.tag for obj in self.objects]
        if len(set(tags)) != len(tags):
            raise ValueError("Duplicate object tag in world")

        known = set(room_ids)

        if self.start_room not in known:
            raise ValueError(f"Start room {self.start_room!r} not found")

        for room in self.rooms:
            for direction, target in room.exits.items():
                if isinstance(target, RoomId) and target not in known:
                    raise ValueError(
                        f"Room {room.id.name} has exit {direction.value} to unknown room {target!r}"
                    )

        for obj in self.objects:
            if isinstance(obj.start, InRoom | Fixed) and obj.start.room not in known:
                raise ValueError(f"Object {obj.tag} starts in unknown room {obj.start.room!r}")

        return self

    def get_room(self, room_id: RoomId) -> Room:
        """Get a room by ID."""
        for room in self.rooms:
            if room.id == room_id:
                return room
        raise KeyError(room_id)

    def get_object(self, object_id: ObjectId) -> GameObject:
        """Get an object by ID."""
        for obj in self.objects:
            if obj.id == object_id:
                return obj
        raise KeyError(object_id)

    def find_by_tag(self, tag: str) -> GameObject | None:
        """Get the object with the given parser tag, if there is one."""
        for obj in self.objects:
            if obj.tag == tag:
                return obj
        return None
