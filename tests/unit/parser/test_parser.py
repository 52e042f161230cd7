"""
TEST DOC: Parser

WHAT: Tests for turning input text into Commands
WHY: The parser decides which handler runs, or what the player is told instead
HOW: Parse many inputs and check the resulting Command or error

CASES:
- Directions, with and without GO
- Boarding the boat
- Verbs with required, optional and ignored objects
- Object synonyms

EDGE CASES:
- Blank input is a silent no-op
- Bare GO, GO somewhere unknown
- Too many words
- Movement wins over verbs
"""

import pytest

from ruby_quest.models.command import Verb
from ruby_quest.parser.parser import UNKNOWN_COMMAND, parse


class TestMovement:
    """Direction words resolve to movement before anything else."""

    @pytest.mark.parametrize(
        ("text", "verb"),
        [
            ("N", Verb.NORTH),
            ("NORTH", Verb.NORTH),
            ("south", Verb.SOUTH),
            ("E", Verb.EAST),
            ("WEST", Verb.WEST),
            ("U", Verb.UP),
            ("UP", Verb.UP),
            ("DOWN", Verb.DOWN),
            ("BOARD", Verb.BOARD),
        ],
    )
    def test_direction_words(self, text: str, verb: Verb):
        result = parse(text)
        assert result.success
        assert result.command is not None
        assert result.command.verb == verb
        assert result.command.tag is None

    def test_go_direction(self):
        """GO followed by a direction moves."""
        result = parse("GO NORTH")
        assert result.command is not None
        assert result.command.verb == Verb.NORTH

    def test_go_boat(self):
        """GO BOAT boards the boat."""
        result = parse("go boat")
        assert result.command is not None
        assert result.command.verb == Verb.BOARD

    def test_bare_go(self):
        """GO alone is a GO command, which asks where to."""
        result = parse("GO")
        assert result.command is not None
        assert result.command.verb == Verb.GO

    def test_go_unknown_place(self):
        """GO with a word that isn't a direction is not understood."""
        result = parse("GO HOME")
        assert not result.success
        assert result.error is not None
        assert result.error.message == UNKNOWN_COMMAND

    def test_direction_with_trailing_words(self):
        """Movement is decided by the first word alone."""
        result = parse("NORTH QUICKLY NOW")
        assert result.command is not None
        assert result.command.verb == Verb.NORTH


class TestVerbs:
    """Verb words and their objects."""

    def test_take_object(self):
        result = parse("TAKE DIARY")
        assert result.command is not None
        assert result.command.verb == Verb.TAKE
        assert result.command.tag == "DIA"

    def test_get_is_take(self):
        result = parse("GET SHOVEL")
        assert result.command is not None
        assert result.command.verb == Verb.TAKE
        assert result.command.tag == "SHO"

    def test_look_alone(self):
        result = parse("LOOK")
        assert result.command is not None
        assert result.command.verb == Verb.LOOK

    def test_look_at_object_examines(self):
        """LOOK with an object examines it."""
        result = parse("LOOK GROUND")
        assert result.command is not None
        assert result.command.verb == Verb.EXAMINE
        assert result.command.tag == "GRO"

    def test_short_look_takes_no_object(self):
        assert parse("L BOX").error is not None

    @pytest.mark.parametrize("text", ["I", "INVENTORY", "inv"])
    def test_inventory(self, text: str):
        result = parse(text)
        assert result.command is not None
        assert result.command.verb == Verb.INVENTORY

    @pytest.mark.parametrize("text", ["Q", "QUIT"])
    def test_quit(self, text: str):
        result = parse(text)
        assert result.command is not None
        assert result.command.verb == Verb.QUIT

    def test_dig_defaults_to_ground(self):
        result = parse("DIG")
        assert result.command is not None
        assert result.command.verb == Verb.DIG
        assert result.command.tag == "GRO"

    def test_dig_hole(self):
        result = parse("DIG HOLE")
        assert result.command is not None
        assert result.command.tag == "HOL"

    def test_leave_defaults_to_boat(self):
        for text in ("LEAVE", "EXIT"):
            result = parse(text)
            assert result.command is not None
            assert result.command.verb == Verb.LEAVE
            assert result.command.tag == "BOA"

    def test_row_defaults_to_boat(self):
        result = parse("ROW")
        assert result.command is not None
        assert result.command.verb == Verb.ROW
        assert result.command.tag == "BOA"

    def test_jump_ignores_object(self):
        result = parse("JUMP UP")
        # UP is a direction only in the first position
        assert result.command is not None
        assert result.command.verb == Verb.JUMP
        assert result.command.tag is None

    def test_fight_and_wear_keep_any_object(self):
        """The handlers, not the parser, refuse the wrong target."""
        fight = parse("FIGHT DRAGON")
        wear = parse("WEAR HAT")
        assert fight.command is not None and fight.command.tag == "DRA"
        assert wear.command is not None and wear.command.tag == "HAT"


class TestMissingObject:
    """Verbs that need an object ask for one."""

    @pytest.mark.parametrize(
        ("text", "prompt"),
        [
            ("EXAMINE", "WHAT DO YOU WANT TO EXAMINE?"),
            ("GET", "WHAT DO YOU WANT TO GET?"),
            ("TAKE", "WHAT DO YOU WANT TO GET?"),
            ("DROP", "WHAT DO YOU WANT TO DROP?"),
            ("OPEN", "WHAT DO YOU WANT TO OPEN?"),
            ("READ", "WHAT DO YOU WANT TO READ?"),
            ("POUR", "WHAT DO YOU WANT TO POUR?"),
            ("CLIMB", "WHAT DO YOU WANT TO CLIMB?"),
            ("WAVE", "WHAT DO YOU WANT TO WAVE?"),
            ("WEAR", "WHAT DO YOU WANT TO WEAR?"),
            ("FIGHT", "WHOM DO YOU WANT TO FIGHT?"),
        ],
    )
    def test_prompt(self, text: str, prompt: str):
        result = parse(text)
        assert not result.success
        assert result.error is not None
        assert result.error.message == prompt


class TestSynonyms:
    """Alternate object words are mapped onto real tags."""

    def test_shaker_is_salt(self):
        result = parse("TAKE SHAKER")
        assert result.command is not None
        assert result.command.tag == "SAL"

    def test_formula_is_bottle(self):
        result = parse("POUR FORMULA")
        assert result.command is not None
        assert result.command.tag == "BOT"


class TestUnrecognized:
    """Input that matches nothing."""

    def test_empty_input_is_silent(self):
        for text in ("", "   "):
            result = parse(text)
            assert result.is_empty
            assert not result.success

    def test_unknown_verb(self):
        result = parse("DANCE")
        assert result.error is not None
        assert result.error.message == UNKNOWN_COMMAND

    def test_too_many_words(self):
        result = parse("TAKE THE DIARY")
        assert result.error is not None
        assert result.error.message == UNKNOWN_COMMAND

    def test_zero_ary_verb_with_object(self):
        result = parse("QUIT NOW")
        assert result.error is not None
        assert result.error.message == UNKNOWN_COMMAND
