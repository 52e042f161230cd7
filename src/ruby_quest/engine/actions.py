"""
actions.py

PURPOSE: Action handlers for game commands.
DEPENDENCIES: models, catalog, views

ARCHITECTURE NOTES:
Each verb has an action handler that:
- Validates the action is possible
- Updates game state
- Returns narrative lines

Handlers take (command, world, state) and touch nothing but the state they
are given, so each puzzle rule can be tested by building a state directly.
A refusal is a normal result with success=False, never an exception.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ruby_quest.catalog import GUARDED_DESTINATION, RIVER_BANKS
from ruby_quest.engine.views import describe_inventory, describe_items, describe_room
from ruby_quest.models.command import MOVEMENT_DIRECTIONS, Command, Verb
from ruby_quest.models.state import MAX_CARRIED, GameState
from ruby_quest.models.world import (
    CARRIED,
    NOWHERE,
    Carried,
    Fixed,
    InRoom,
    Nowhere,
    ObjectId,
    Passage,
    RoomId,
    World,
)

logger = logging.getLogger(__name__)

NOT_HERE = "THAT ISN'T HERE!"

# Tags the ground can be called by when digging
GROUND_TAGS = frozenset({"GRO", "HOL"})


@dataclass
class ActionResult:
    """Result of executing an action."""

    lines: list[str] = field(default_factory=list)
    success: bool = True

    @property
    def message(self) -> str:
        return "\n".join(self.lines)


def _ok(*lines: str) -> ActionResult:
    return ActionResult(lines=list(lines))


def _refuse(*lines: str) -> ActionResult:
    return ActionResult(lines=list(lines), success=False)


def _relocate(world: World, state: GameState, room: RoomId, *lines: str) -> ActionResult:
    """Move the player and describe where they end up."""
    state.current_room = room
    return ActionResult(lines=[*lines, *describe_room(world, state)])


def _revealed(world: World, state: GameState, *lines: str) -> ActionResult:
    """Narrate a reveal and re-list what can be seen here."""
    return ActionResult(lines=[*lines, "", *describe_items(world, state)])


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------


def handle_go(command: Command, world: World, state: GameState) -> ActionResult:  # noqa: ARG001
    """Handle a bare GO."""
    return _refuse("GO WHERE?")


def handle_move(command: Command, world: World, state: GameState) -> ActionResult:
    """Handle the six directions and boarding the boat."""
    if command.verb == Verb.BOARD:
        target = RoomId.BOAT if state.current_room in RIVER_BANKS else None
    else:
        room = world.get_room(state.current_room)
        target = room.exit_to(MOVEMENT_DIRECTIONS[command.verb])

    if isinstance(target, RoomId):
        return _relocate(world, state, target)

    if target == Passage.GUARDED:
        if not isinstance(state.location_of(ObjectId.GUARD), Nowhere):
            return _refuse("THE GUARD WON'T LET YOU!")
        return _relocate(world, state, GUARDED_DESTINATION)

    return _refuse("YOU CAN'T GO THERE!")


# ---------------------------------------------------------------------------
# Looking around
# ---------------------------------------------------------------------------


def handle_look(command: Command, world: World, state: GameState) -> ActionResult:  # noqa: ARG001
    """Handle LOOK (describe the room again)."""
    return ActionResult(lines=describe_room(world, state))


def handle_inventory(
    command: Command,  # noqa: ARG001
    world: World,
    state: GameState,
) -> ActionResult:
    """Handle INVENTORY."""
    return ActionResult(lines=describe_inventory(world, state))


def handle_examine(command: Command, world: World, state: GameState) -> ActionResult:
    """Handle EXAMINE/LOOK <object>, including the ground itself."""
    if command.tag == "GRO":
        if state.current_room != RoomId.OPEN_FIELD:
            return _ok("IT LOOKS LIKE GROUND!")
        if isinstance(state.location_of(ObjectId.SWORD), Nowhere):
            return _ok("IT LOOKS LIKE SOMETHING'S BURIED HERE.")
        return _ok("THERE'S A HOLE HERE.")

    obj = state.find_present(world, command.tag or "")
    if obj is None:
        return _refuse(NOT_HERE)

    match obj.id:
        case ObjectId.BOTTLE:
            return _ok("THERE'S SOMETHING WRITTEN ON IT!")
        case ObjectId.CASE:
            return _ok("THERE'S A JEWEL INSIDE!")
        case ObjectId.BARREL:
            return _ok("IT'S FILLED WITH RAINWATER.")
    return _ok("YOU SEE NOTHING UNUSUAL.")


def handle_read(command: Command, world: World, state: GameState) -> ActionResult:
    """Handle READ."""
    obj = state.find_present(world, command.tag or "")
    if obj is None:
        return _refuse(NOT_HERE)

    match obj.id:
        case ObjectId.DIARY:
            return _ok(
                "IT SAYS: 'ADD SODIUM CHLORIDE PLUS THE",
                "FORMULA TO RAINWATER, TO REACH THE",
                "OTHER WORLD.'",
            )
        case ObjectId.DICTIONARY:
            return _ok("IT SAYS: SODIUM CHLORIDE IS", "COMMON TABLE SALT.")
        case ObjectId.BOTTLE:
            return _ok("IT READS: 'SECRET FORMULA'.")
    return _refuse("YOU CAN'T READ THAT!")


# ---------------------------------------------------------------------------
# Taking and dropping
# ---------------------------------------------------------------------------


def handle_take(command: Command, world: World, state: GameState) -> ActionResult:
    """
    Handle TAKE/GET.

    Picking up the ruby wins the game outright instead of adding it to the
    inventory, even when the player's hands are already full.
    """
    obj = world.find_by_tag(command.tag or "")
    if obj is None:
        return _refuse("YOU CAN'T GET THAT!")

    location = state.location_of(obj.id)
    if isinstance(location, Carried):
        return _refuse("YOU ALREADY HAVE IT!")
    if isinstance(location, Fixed):
        return _refuse("YOU CAN'T GET THAT!")
    if not location.is_at(state.current_room):
        return _refuse(NOT_HERE)

    if obj.id == ObjectId.RUBY:
        logger.info("Ruby taken, game won")
        state.flags.won = True
        return _ok()

    if state.carried_count() >= MAX_CARRIED:
        return _refuse("YOU CAN'T CARRY ANY MORE.")

    state.move_object(obj.id, CARRIED)
    return _ok("TAKEN.")


def handle_drop(command: Command, world: World, state: GameState) -> ActionResult:
    """Handle DROP."""
    obj = world.find_by_tag(command.tag or "")
    if obj is None or not state.is_carried(obj.id):
        return _refuse("YOU DON'T HAVE THAT!")

    state.drop_here(obj.id)
    return _ok("DROPPED.")


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


def _reveal_once(
    world: World,
    state: GameState,
    hidden: ObjectId,
    found: str,
    already: str,
) -> ActionResult:
    if not isinstance(state.location_of(hidden), Nowhere):
        return _refuse(already)
    state.drop_here(hidden)
    return _revealed(world, state, found)


def handle_open(command: Command, world: World, state: GameState) -> ActionResult:
    """
    Handle OPEN.

    The box, the cabinet and the glass case each hide one object. Opening
    one puts its object in the room; after that it is simply "already open".
    The case is electrified and only opens for a player wearing gloves.
    """
    obj = state.find_present(world, command.tag or "")
    if obj is None:
        return _refuse(NOT_HERE)

    match obj.id:
        case ObjectId.BOX:
            return _reveal_once(
                world, state, ObjectId.BOTTLE, "SOMETHING FELL OUT!", "THE BOX IS ALREADY OPEN."
            )
        case ObjectId.CABINET:
            return _reveal_once(
                world,
                state,
                ObjectId.SALT,
                "THERE'S SOMETHING INSIDE!",
                "THE CABINET IS ALREADY OPEN.",
            )
        case ObjectId.CASE:
            if not isinstance(state.location_of(ObjectId.RUBY), Nowhere):
                return _refuse("THE CASE IS ALREADY OPEN.")
            if not state.flags.gloved:
                return _refuse("THE CASE IS ELECTRIFIED!")
            logger.info("Glass case opened")
            state.drop_here(ObjectId.RUBY)
            return _revealed(
                world,
                state,
                "THE GLOVES INSULATE AGAINST THE",
                "ELECTRICITY! THE CASE OPENS!",
            )
    return _refuse("YOU CAN'T OPEN THAT!")


# ---------------------------------------------------------------------------
# Puzzle actions
# ---------------------------------------------------------------------------


def _poured_into_barrel(world: World, state: GameState) -> ActionResult:
    if not (state.flags.salted and state.flags.formulated):
        return _ok("POURED!")
    logger.info("Barrel exploded, moving player to the other world")
    return _relocate(
        world,
        state,
        RoomId.OPEN_FIELD,
        "POURED!",
        "THERE IS AN EXPLOSION!",
        "EVERYTHING GOES BLACK!",
        "SUDDENLY YOU ARE. . .",
        ". . .SOMEWHERE ELSE!",
    )


def handle_pour(command: Command, world: World, state: GameState) -> ActionResult:
    """
    Handle POUR.

    Salt and formula each pour once, and only into the barrel in the garage.
    The second one to go in sets off the explosion.
    """
    obj = state.find_present(world, command.tag or "")
    if obj is None:
        return _refuse(NOT_HERE)

    in_garage = state.current_room == RoomId.GARAGE
    if obj.id == ObjectId.SALT:
        if state.flags.salted:
            return _refuse("THE SALT SHAKER IS EMPTY.")
        if in_garage:
            state.flags.salted = True
            return _poured_into_barrel(world, state)
    elif obj.id == ObjectId.BOTTLE:
        if state.flags.formulated:
            return _refuse("THE BOTTLE IS EMPTY.")
        if in_garage:
            state.flags.formulated = True
            return _poured_into_barrel(world, state)
    return _refuse("YOU CAN'T POUR THAT!")


def handle_climb(command: Command, world: World, state: GameState) -> ActionResult:
    """Handle CLIMB. The ladder sinks into the soft ground at the forest edge."""
    if command.tag == "TRE" and state.is_present(ObjectId.TREE):
        return _refuse("YOU CAN'T REACH THE BRANCHES!")
    if command.tag == "LAD" and state.is_present(ObjectId.LADDER):
        if state.current_room != RoomId.FOREST_EDGE:
            return _ok("WHATEVER FOR?")
        logger.info("Ladder sank into the ground")
        state.move_object(ObjectId.LADDER, NOWHERE)
        return _ok("THE LADDER SINKS UNDER YOUR WEIGHT!", "IT DISAPPEARS INTO THE GROUND!")
    return _refuse("IT WON'T DO ANY GOOD.")


def handle_jump(command: Command, world: World, state: GameState) -> ActionResult:  # noqa: ARG001
    """Handle JUMP: a way up the tree, one branch at a time."""
    if state.current_room == RoomId.FOREST_EDGE:
        return _relocate(
            world,
            state,
            RoomId.TREE_BRANCH,
            "YOU GRAB THE LOWEST BRANCH OF THE",
            "TREE AND PULL YOURSELF UP. . . .",
        )
    if state.current_room == RoomId.TREE_BRANCH:
        return _relocate(
            world,
            state,
            RoomId.TREE_TOP,
            "YOU GRAB A HIGHER BRANCH OF THE",
            "TREE AND PULL YOURSELF UP. . . .",
        )
    return _ok("WHEE! THAT WAS FUN!")


def handle_dig(command: Command, world: World, state: GameState) -> ActionResult:
    """Handle DIG. The sword is buried in the open field."""
    if command.tag not in GROUND_TAGS:
        return _refuse("YOU CAN'T DIG THAT!")
    if not state.is_present(ObjectId.SHOVEL):
        return _refuse("YOU DON'T HAVE A SHOVEL!")
    if state.current_room != RoomId.OPEN_FIELD:
        return _ok("YOU DON'T FIND ANYTHING.")
    if not isinstance(state.location_of(ObjectId.SWORD), Nowhere):
        return _ok("THERE'S NOTHING ELSE THERE!")

    logger.info("Sword unearthed")
    state.move_object(ObjectId.SWORD, InRoom(room=RoomId.OPEN_FIELD))
    return _revealed(world, state, "THERE'S SOMETHING THERE!")


def handle_row(command: Command, world: World, state: GameState) -> ActionResult:  # noqa: ARG001
    """Handle ROW. There is no oar, so this never goes anywhere."""
    if command.tag != "BOA":
        return _refuse("HOW CAN YOU ROW THAT?")
    if state.current_room != RoomId.BOAT:
        return _refuse("YOU'RE NOT IN A BOAT!")
    return _refuse("YOU DON'T HAVE AN OAR!")


def handle_wave(command: Command, world: World, state: GameState) -> ActionResult:  # noqa: ARG001
    """Handle WAVE. Waving the fan in the boat blows it to the other bank."""
    if command.tag != "FAN":
        return _refuse("YOU CAN'T WAVE THAT!")
    if not state.is_present(ObjectId.FAN):
        return _refuse("YOU DON'T HAVE A FAN!")
    if state.current_room != RoomId.BOAT:
        return _ok("YOU FEEL A REFRESHING BREEZE!")

    south, north = RIVER_BANKS
    moored = state.fixed_room_of(ObjectId.BOAT)
    other_bank = north if moored == south else south
    logger.info(f"Boat crossing to {other_bank.name}")
    state.move_object(ObjectId.BOAT, Fixed(room=other_bank))
    return _ok("A POWERFUL BREEZE PROPELS THE BOAT", "TO THE OPPOSITE SHORE!")


def handle_leave(command: Command, world: World, state: GameState) -> ActionResult:
    """Handle LEAVE/EXIT. Only the boat can be left; you step out where it is moored."""
    if state.current_room != RoomId.BOAT:
        return _refuse("PLEASE GIVE A DIRECTION!")
    if command.tag != "BOA":
        return _refuse("HUH?")

    bank = state.fixed_room_of(ObjectId.BOAT)
    if bank is None:
        return _refuse("HUH?")
    return _relocate(world, state, bank)


def handle_fight(command: Command, world: World, state: GameState) -> ActionResult:  # noqa: ARG001
    """Handle FIGHT. The guard backs off from anyone carrying the sword."""
    if command.tag != "GUA":
        return _refuse("YOU CAN'T FIGHT THEM!")
    if not state.is_present(ObjectId.GUARD):
        return _refuse("THERE'S NO GUARD HERE!")
    if not state.is_carried(ObjectId.SWORD):
        return _refuse("YOU DON'T HAVE A WEAPON!")

    logger.info("Guard retreated, castle passage open")
    state.move_object(ObjectId.GUARD, NOWHERE)
    return _ok("THE GUARD, NOTICING YOUR SWORD,", "WISELY RETREATS INTO THE CASTLE.")


def handle_wear(command: Command, world: World, state: GameState) -> ActionResult:  # noqa: ARG001
    """Handle WEAR. Worn gloves leave the inventory and are only a flag from then on."""
    if command.tag != "GLO":
        return _refuse("YOU CAN'T WEAR THAT!")
    if state.flags.gloved:
        return _refuse("YOU ARE ALREADY WEARING THE RUBBER GLOVES.")
    if not state.is_present(ObjectId.GLOVES):
        return _refuse("YOU DON'T HAVE THE GLOVES.")

    state.flags.gloved = True
    state.move_object(ObjectId.GLOVES, NOWHERE)
    return _ok("YOU ARE NOW WEARING THE GLOVES.")


Handler = Callable[[Command, World, GameState], ActionResult]

HANDLERS: dict[Verb, Handler] = {
    Verb.GO: handle_go,
    Verb.NORTH: handle_move,
    Verb.SOUTH: handle_move,
    Verb.EAST: handle_move,
    Verb.WEST: handle_move,
    Verb.UP: handle_move,
    Verb.DOWN: handle_move,
    Verb.BOARD: handle_move,
    Verb.LOOK: handle_look,
    Verb.INVENTORY: handle_inventory,
    Verb.EXAMINE: handle_examine,
    Verb.READ: handle_read,
    Verb.TAKE: handle_take,
    Verb.DROP: handle_drop,
    Verb.OPEN: handle_open,
    Verb.POUR: handle_pour,
    Verb.CLIMB: handle_climb,
    Verb.JUMP: handle_jump,
    Verb.DIG: handle_dig,
    Verb.ROW: handle_row,
    Verb.WAVE: handle_wave,
    Verb.LEAVE: handle_leave,
    Verb.FIGHT: handle_fight,
    Verb.WEAR: handle_wear,
}


def execute_action(command: Command, world: World, state: GameState) -> ActionResult:
    """
    Execute a parsed command.

    This is the main dispatch function that routes to specific handlers.

    Args:
        command: The parsed command
        world: The world definition
        state: The current game state (will be modified)

    Returns:
        ActionResult with narrative lines and success status
    """
    handler = HANDLERS.get(command.verb)
    if handler:
        return handler(command, world, state)

    return _refuse("I DON'T KNOW HOW TO DO THAT.")
