"""
catalog.py

PURPOSE: The fixed world: every room, every object, and the story text.
DEPENDENCIES: models

ARCHITECTURE NOTES:
The world comes from Christopher Lampton's "How to Create Adventure Games"
(1986). It is built once at import time; the World validators reject a
broken exit or starting position before the first turn is ever played.
"""

from ruby_quest.models.world import (
    GUARDED,
    NOWHERE,
    Direction,
    Fixed,
    GameObject,
    InRoom,
    ObjectId,
    Room,
    RoomId,
    World,
)

N, S, E, W, U, D = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
    Direction.UP,
    Direction.DOWN,
)

ROOMS: list[Room] = [
    # The house
    Room(
        id=RoomId.LIVING_ROOM,
        description="IN YOUR LIVING ROOM.",
        exits={N: RoomId.FRONT_YARD, S: RoomId.LIBRARY, E: RoomId.KITCHEN},
    ),
    Room(id=RoomId.KITCHEN, description="IN THE KITCHEN.", exits={W: RoomId.LIVING_ROOM}),
    Room(id=RoomId.LIBRARY, description="IN THE LIBRARY.", exits={N: RoomId.LIVING_ROOM}),
    Room(
        id=RoomId.FRONT_YARD,
        description="IN THE FRONT YARD.",
        exits={S: RoomId.LIVING_ROOM, W: RoomId.GARAGE},
    ),
    Room(id=RoomId.GARAGE, description="IN THE GARAGE.", exits={E: RoomId.FRONT_YARD}),
    # The other world
    Room(
        id=RoomId.OPEN_FIELD,
        description="IN AN OPEN FIELD.",
        exits={N: RoomId.WINDING_ROAD_1, S: RoomId.FOREST_EDGE},
    ),
    Room(
        id=RoomId.FOREST_EDGE,
        description="AT THE EDGE OF A FOREST.",
        exits={N: RoomId.OPEN_FIELD},
    ),
    Room(
        id=RoomId.TREE_BRANCH,
        description="ON A BRANCH OF A TREE.",
        exits={D: RoomId.FOREST_EDGE},
    ),
    Room(
        id=RoomId.WINDING_ROAD_1,
        description="ON A LONG, WINDING ROAD.",
        exits={S: RoomId.OPEN_FIELD, E: RoomId.WINDING_ROAD_2},
    ),
    Room(
        id=RoomId.WINDING_ROAD_2,
        description="ON A LONG, WINDING ROAD.",
        exits={N: RoomId.WINDING_ROAD_3, W: RoomId.WINDING_ROAD_1},
    ),
    Room(
        id=RoomId.WINDING_ROAD_3,
        description="ON A LONG, WINDING ROAD.",
        exits={S: RoomId.WINDING_ROAD_2, W: RoomId.SOUTH_BANK},
    ),
    Room(
        id=RoomId.SOUTH_BANK,
        description="ON THE SOUTH BANK OF A RIVER.",
        exits={E: RoomId.WINDING_ROAD_3},
    ),
    Room(id=RoomId.BOAT, description="INSIDE THE WOODEN BOAT."),
    Room(
        id=RoomId.NORTH_BANK,
        description="ON THE NORTH BANK OF A RIVER.",
        exits={N: RoomId.WELL_TRAVELED_ROAD},
    ),
    Room(
        id=RoomId.WELL_TRAVELED_ROAD,
        description="ON A WELL-TRAVELED ROAD.",
        exits={N: RoomId.CASTLE_GATE, S: RoomId.NORTH_BANK},
    ),
    Room(
        id=RoomId.CASTLE_GATE,
        description="IN FRONT OF A LARGE CASTLE.",
        exits={N: GUARDED, S: RoomId.WELL_TRAVELED_ROAD},
    ),
    Room(
        id=RoomId.NARROW_HALL,
        description="IN A NARROW HALL.",
        exits={S: RoomId.CASTLE_GATE, U: RoomId.LARGE_HALL},
    ),
    Room(id=RoomId.LARGE_HALL, description="IN A LARGE HALL.", exits={D: RoomId.NARROW_HALL}),
    Room(id=RoomId.TREE_TOP, description="ON THE TOP OF A TREE.", exits={D: RoomId.TREE_BRANCH}),
]

OBJECTS: list[GameObject] = [
    GameObject(
        id=ObjectId.DIARY, name="AN OLD DIARY", tag="DIA", start=InRoom(room=RoomId.LIVING_ROOM)
    ),
    GameObject(
        id=ObjectId.BOX, name="A SMALL BOX", tag="BOX", start=InRoom(room=RoomId.LIVING_ROOM)
    ),
    GameObject(
        id=ObjectId.CABINET, name="A CABINET", tag="CAB", start=Fixed(room=RoomId.KITCHEN)
    ),
    GameObject(id=ObjectId.SALT, name="A SALT SHAKER", tag="SAL", start=NOWHERE),
    GameObject(
        id=ObjectId.DICTIONARY, name="A DICTIONARY", tag="DIC", start=InRoom(room=RoomId.LIBRARY)
    ),
    GameObject(
        id=ObjectId.BARREL, name="A WOODEN BARREL", tag="BAR", start=Fixed(room=RoomId.GARAGE)
    ),
    GameObject(id=ObjectId.BOTTLE, name="A SMALL BOTTLE", tag="BOT", start=NOWHERE),
    GameObject(
        id=ObjectId.LADDER, name="A LADDER", tag="LAD", start=InRoom(room=RoomId.FRONT_YARD)
    ),
    GameObject(id=ObjectId.SHOVEL, name="A SHOVEL", tag="SHO", start=InRoom(room=RoomId.GARAGE)),
    GameObject(id=ObjectId.TREE, name="A TREE", tag="TRE", start=Fixed(room=RoomId.FOREST_EDGE)),
    GameObject(id=ObjectId.SWORD, name="A GOLDEN SWORD", tag="SWO", start=NOWHERE),
    GameObject(
        id=ObjectId.BOAT, name="A WOODEN BOAT", tag="BOA", start=Fixed(room=RoomId.SOUTH_BANK)
    ),
    GameObject(
        id=ObjectId.FAN, name="A MAGIC FAN", tag="FAN", start=InRoom(room=RoomId.TREE_BRANCH)
    ),
    GameObject(
        id=ObjectId.GUARD,
        name="A NASTY-LOOKING GUARD",
        tag="GUA",
        start=Fixed(room=RoomId.CASTLE_GATE),
    ),
    GameObject(
        id=ObjectId.CASE, name="A GLASS CASE", tag="CAS", start=Fixed(room=RoomId.LARGE_HALL)
    ),
    GameObject(id=ObjectId.RUBY, name="A GLOWING RUBY", tag="RUB", start=NOWHERE),
    GameObject(
        id=ObjectId.GLOVES,
        name="A PAIR OF RUBBER GLOVES",
        tag="GLO",
        start=InRoom(room=RoomId.TREE_TOP),
    ),
]

WORLD = World(rooms=ROOMS, objects=OBJECTS, start_room=RoomId.LIVING_ROOM)

# Where the guarded passage leads once the guard has gone
GUARDED_DESTINATION = RoomId.NARROW_HALL

# Banks from which the boat can be boarded
RIVER_BANKS = (RoomId.SOUTH_BANK, RoomId.NORTH_BANK)

TITLE = "THE MAGIC RUBY"

INTRO = """\
ALL YOUR LIFE YOU HAD HEARD THE STORIES
ABOUT YOUR CRAZY UNCLE SIMON. HE WAS AN
INVENTOR, WHO KEPT DISAPPEARING FOR
LONG PERIODS OF TIME, NEVER TELLING
ANYONE WHERE HE HAD BEEN.

YOU NEVER BELIEVED THE STORIES, BUT
WHEN YOUR UNCLE DIED AND LEFT YOU HIS
DIARY, YOU LEARNED THAT THEY WERE TRUE.
YOUR UNCLE HAD DISCOVERED A MAGIC
LAND, AND A SECRET FORMULA THAT COULD
TAKE HIM THERE. IN THAT LAND WAS A
MAGIC RUBY, AND HIS DIARY CONTAINED
THE INSTRUCTIONS FOR GOING THERE TO
FIND IT."""

WIN_MESSAGE = "CONGRATULATIONS! YOU'VE WON!"
