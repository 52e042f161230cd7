"""
state.py

PURPOSE: Mutable game state that changes during play.
DEPENDENCIES: pydantic, world.py

ARCHITECTURE NOTES:
GameState is separate from the static World definition.
It tracks what has changed: player location, object locations and puzzle flags.
The engine modifies state in response to commands.
Any state can be built directly, which is how the tests set up puzzles.
"""

from pydantic import BaseModel, Field

from ruby_quest.models.world import (
    CARRIED,
    Carried,
    Fixed,
    GameObject,
    InRoom,
    Location,
    ObjectId,
    RoomId,
    World,
)

# The player's hands are full at five items
MAX_CARRIED = 5


class PuzzleFlags(BaseModel):
    """The one-way switches of the puzzle chain."""

    salted: bool = Field(default=False, description="Salt poured into the barrel")
    formulated: bool = Field(default=False, description="Formula poured into the barrel")
    gloved: bool = Field(default=False, description="Rubber gloves are being worn")
    won: bool = Field(default=False)


class GameState(BaseModel):
    """
    Complete mutable state of a game in progress.

    Exactly one engine owns a GameState for the lifetime of a session.
    """

    current_room: RoomId = Field(..., description="ID of the room the player is in")
    objects: dict[ObjectId, Location] = Field(
        default_factory=dict,
        description="Current location of each object by ID",
    )
    flags: PuzzleFlags = Field(default_factory=PuzzleFlags)
    turns: int = Field(default=0, description="Number of successful commands")

    @classmethod
    def from_world(cls, world: World) -> "GameState":
        """Create the initial state of a new game."""
        return cls(
            current_room=world.start_room,
            objects={obj.id: obj.start for obj in world.objects},
        )

    def location_of(self, object_id: ObjectId) -> Location:
        """Get the current location of an object."""
        return self.objects[object_id]

    def move_object(self, object_id: ObjectId, location: Location) -> None:
        """Move an object to a new location."""
        self.objects[object_id] = location

    def is_carried(self, object_id: ObjectId) -> bool:
        return isinstance(self.objects.get(object_id), Carried)

    def is_present(self, object_id: ObjectId) -> bool:
        """Whether the object is carried or can be seen in the current room."""
        location = self.objects.get(object_id)
        if location is None:
            return False
        return isinstance(location, Carried) or location.is_at(self.current_room)

    def objects_at(self, room: RoomId) -> list[ObjectId]:
        """Objects lying or fixed in a room, in catalog order."""
        return [obj_id for obj_id, location in self.objects.items() if location.is_at(room)]

    def carried(self) -> list[ObjectId]:
        """Objects in the player's inventory, in catalog order."""
        return [obj_id for obj_id, location in self.objects.items() if location == CARRIED]

    def carried_count(self) -> int:
        return len(self.carried())

    def find_present(self, world: World, tag: str) -> GameObject | None:
        """Look up a tag and return the object only if it is present."""
        obj = world.find_by_tag(tag)
        if obj is None or not self.is_present(obj.id):
            return None
        return obj

    def drop_here(self, object_id: ObjectId) -> None:
        """Put an object on the floor of the current room."""
        self.move_object(object_id, InRoom(room=self.current_room))

    def fixed_room_of(self, object_id: ObjectId) -> RoomId | None:
        """The room an immobile object is fixed in, if it is fixed."""
        location = self.objects.get(object_id)
        if isinstance(location, Fixed):
            return location.room
        return None

    def increment_turns(self) -> None:
        """Increment the turn counter."""
        self.turns += 1
