"""
views.py

PURPOSE: Read-only text views of the world: room, visible items, inventory.
DEPENDENCIES: models

ARCHITECTURE NOTES:
Views never change state. Each returns a list of output lines so that
callers can splice them into a longer narrative in the right order.
"""

from ruby_quest.models.state import GameState
from ruby_quest.models.world import World

INDENT = "    "


def describe_items(world: World, state: GameState) -> list[str]:
    """List every object lying or fixed in the current room."""
    lines = ["YOU CAN SEE:"]
    here = state.objects_at(state.current_room)
    if not here:
        lines.append(f"{INDENT}THERE IS NOTHING OF INTEREST HERE.")
    for obj_id in here:
        lines.append(f"{INDENT}{world.get_object(obj_id).name}")
    return lines


def describe_room(world: World, state: GameState) -> list[str]:
    """Describe the current room: description, exits, then visible items."""
    room = world.get_room(state.current_room)
    exits = "".join(f" {direction.value}" for direction in room.open_directions())
    return [
        "",
        f"YOU ARE {room.description}",
        f"YOU CAN GO:{exits}",
        *describe_items(world, state),
    ]


def describe_inventory(world: World, state: GameState) -> list[str]:
    """Describe what the player is wearing and carrying."""
    lines: list[str] = []
    if state.flags.gloved:
        lines.append("YOU ARE WEARING RUBBER GLOVES.")
    lines.append("YOU ARE CARRYING:")
    carried = state.carried()
    if not carried:
        lines.append(f"{INDENT}NOTHING")
    for obj_id in carried:
        lines.append(f"{INDENT}{world.get_object(obj_id).name}")
    return lines
