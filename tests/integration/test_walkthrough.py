"""
TEST DOC: Full Walkthrough

WHAT: Plays the whole game from the living room to the ruby
WHY: Every puzzle has to be solvable in one session, in order
HOW: Feed the winning command sequence to one engine, checking milestones

CASES:
- The barrel explosion moves the player to the other world
- The sword, ladder, jump, fan, gloves, boat and guard puzzles
- Taking the ruby ends the game

EDGE CASES:
- The carrying limit forces a drop along the way
- The gloves are worn without being picked up
- The ruby is taken with full hands
"""

from ruby_quest.engine.engine import GameEngine
from ruby_quest.models.state import MAX_CARRIED
from ruby_quest.models.world import NOWHERE, Fixed, ObjectId, RoomId


def play(engine: GameEngine, *commands: str) -> None:
    """Play commands that must all succeed."""
    for command in commands:
        result = engine.process_input(command)
        assert not result.error, f"{command!r} failed: {result.message}"


class TestWalkthrough:
    """The winning route, one leg at a time on the same engine."""

    def test_winning_route(self):
        engine = GameEngine()
        state = engine.state

        # The house
        play(engine, "READ DIARY", "TAKE DIARY", "OPEN BOX", "TAKE BOTTLE", "READ BOTTLE")
        play(engine, "EAST", "OPEN CABINET", "TAKE SALT", "WEST", "SOUTH", "READ DICTIONARY")
        play(engine, "NORTH", "NORTH", "TAKE LADDER", "WEST", "TAKE SHOVEL")
        assert state.current_room == RoomId.GARAGE
        assert state.carried_count() == MAX_CARRIED

        # The barrel
        play(engine, "EXAMINE BARREL", "DROP DIARY", "POUR SALT")
        result = engine.process_input("POUR FORMULA")
        assert "THERE IS AN EXPLOSION!" in result.lines
        assert state.current_room == RoomId.OPEN_FIELD

        # The sword and the tree
        play(engine, "DIG", "TAKE SWORD", "SOUTH", "CLIMB LADDER")
        assert state.location_of(ObjectId.LADDER) == NOWHERE
        play(engine, "JUMP", "TAKE FAN", "JUMP")
        assert state.current_room == RoomId.TREE_TOP
        assert state.carried_count() == MAX_CARRIED
        assert engine.process_input("TAKE GLOVES").message == "YOU CAN'T CARRY ANY MORE."
        play(engine, "WEAR GLOVES")
        assert state.flags.gloved

        # The river
        play(engine, "DOWN", "DOWN", "NORTH", "NORTH", "EAST", "NORTH", "WEST")
        assert state.current_room == RoomId.SOUTH_BANK
        play(engine, "BOARD", "WAVE FAN")
        assert state.location_of(ObjectId.BOAT) == Fixed(room=RoomId.NORTH_BANK)
        play(engine, "LEAVE")
        assert state.current_room == RoomId.NORTH_BANK

        # The castle
        play(engine, "NORTH", "NORTH")
        assert engine.process_input("NORTH").message == "THE GUARD WON'T LET YOU!"
        play(engine, "FIGHT GUARD", "NORTH", "UP")
        assert state.current_room == RoomId.LARGE_HALL
        play(engine, "EXAMINE CASE", "OPEN CASE")

        result = engine.process_input("TAKE RUBY")
        assert result.won
        assert not result.keep_playing
        assert engine.process_input("LOOK").message == "THE GAME IS OVER."

    def test_quit_midway(self):
        engine = GameEngine()
        play(engine, "TAKE DIARY", "NORTH")
        result = engine.process_input("QUIT")
        assert not result.keep_playing
        assert not result.won
