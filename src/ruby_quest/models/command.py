"""
command.py

PURPOSE: Define the Command model and Verb enum for parsed player input.
DEPENDENCIES: world.py (Direction)

ARCHITECTURE NOTES:
Commands represent fully parsed player input. The parser produces Command objects,
and the game engine consumes them. This provides a clean boundary between parsing
and execution.

Every word the parser sees has already been cut down to its first three
letters, so all vocabulary tables here are keyed by those short tags.
"""

from dataclasses import dataclass
from enum import Enum, auto

from ruby_quest.models.world import Direction


class Verb(Enum):
    """
    All verbs supported by the game engine.

    Movement verbs are the six directions plus BOARD (get into the boat).
    GO on its own asks for a destination.
    """

    # Movement
    GO = auto()
    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()
    UP = auto()
    DOWN = auto()
    BOARD = auto()

    # Object manipulation
    TAKE = auto()  # aliases: GET
    DROP = auto()
    OPEN = auto()
    POUR = auto()
    WAVE = auto()
    WEAR = auto()
    DIG = auto()

    # Examination
    EXAMINE = auto()  # aliases: LOOK <object>
    READ = auto()

    # Body
    CLIMB = auto()
    JUMP = auto()
    ROW = auto()
    LEAVE = auto()  # aliases: EXIT
    FIGHT = auto()

    # Meta commands
    INVENTORY = auto()  # aliases: I
    LOOK = auto()  # aliases: L
    QUIT = auto()  # aliases: Q


class Arity(Enum):
    """How many object words a verb accepts after it."""

    NONE = auto()  # verb alone
    OPTIONAL = auto()  # verb, or verb + object
    REQUIRED = auto()  # verb + object, prompts otherwise
    IGNORED = auto()  # verb alone or with one word that is thrown away


@dataclass(frozen=True)
class VerbRule:
    """
    How one verb word is parsed.

    Attributes:
        verb: The verb produced
        arity: Whether an object word may or must follow
        prompt: Question asked when a required object is missing
        default_tag: Object tag used when an optional object is omitted
        with_object: Verb produced instead when an object is given
    """

    verb: Verb
    arity: Arity = Arity.NONE
    prompt: str | None = None
    default_tag: str | None = None
    with_object: Verb | None = None


@dataclass(frozen=True)
class Command:
    """
    A fully parsed player command.

    Examples:
        - NORTH -> Command(verb=NORTH)
        - GET DIARY -> Command(verb=TAKE, tag="DIA")
        - LOOK GROUND -> Command(verb=EXAMINE, tag="GRO")
        - DIG -> Command(verb=DIG, tag="GRO")

    Attributes:
        verb: The action to perform
        tag: Three-letter object tag, already canonicalized (optional)
        raw_input: The original player input string
    """

    verb: Verb
    tag: str | None = None
    raw_input: str = ""

    def __post_init__(self) -> None:
        """Validate command structure."""
        if self.tag is not None and not self.tag:
            raise ValueError("Command tag must not be empty")
        if self.verb in MOVEMENT_VERBS and self.tag is not None:
            raise ValueError("Movement commands take no object")


# Direction words, checked before any other verb
DIRECTION_WORDS: dict[str, Verb] = {
    "N": Verb.NORTH,
    "NOR": Verb.NORTH,
    "S": Verb.SOUTH,
    "SOU": Verb.SOUTH,
    "E": Verb.EAST,
    "EAS": Verb.EAST,
    "W": Verb.WEST,
    "WES": Verb.WEST,
    "U": Verb.UP,
    "UP": Verb.UP,
    "D": Verb.DOWN,
    "DOW": Verb.DOWN,
    "BOA": Verb.BOARD,
}

# Movement verb -> exit direction (BOARD has no exit field of its own)
MOVEMENT_DIRECTIONS: dict[Verb, Direction] = {
    Verb.NORTH: Direction.NORTH,
    Verb.SOUTH: Direction.SOUTH,
    Verb.EAST: Direction.EAST,
    Verb.WEST: Direction.WEST,
    Verb.UP: Direction.UP,
    Verb.DOWN: Direction.DOWN,
}

MOVEMENT_VERBS: set[Verb] = set(MOVEMENT_DIRECTIONS) | {Verb.BOARD}


def _missing(verb_word: str) -> str:
    return f"WHAT DO YOU WANT TO {verb_word}?"


# Verb words and how each one is parsed
VERB_RULES: dict[str, VerbRule] = {
    # Meta
    "Q": VerbRule(Verb.QUIT),
    "QUI": VerbRule(Verb.QUIT),
    "I": VerbRule(Verb.INVENTORY),
    "INV": VerbRule(Verb.INVENTORY),
    "L": VerbRule(Verb.LOOK),
    "LOO": VerbRule(Verb.LOOK, Arity.OPTIONAL, with_object=Verb.EXAMINE),
    "GO": VerbRule(Verb.GO),
    # Examination
    "EXA": VerbRule(Verb.EXAMINE, Arity.REQUIRED, _missing("EXAMINE")),
    "REA": VerbRule(Verb.READ, Arity.REQUIRED, _missing("READ")),
    # Object manipulation
    "GET": VerbRule(Verb.TAKE, Arity.REQUIRED, _missing("GET")),
    "TAK": VerbRule(Verb.TAKE, Arity.REQUIRED, _missing("GET")),
    "DRO": VerbRule(Verb.DROP, Arity.REQUIRED, _missing("DROP")),
    "OPE": VerbRule(Verb.OPEN, Arity.REQUIRED, _missing("OPEN")),
    "POU": VerbRule(Verb.POUR, Arity.REQUIRED, _missing("POUR")),
    "WAV": VerbRule(Verb.WAVE, Arity.REQUIRED, _missing("WAVE")),
    "WEA": VerbRule(Verb.WEAR, Arity.REQUIRED, _missing("WEAR")),
    "DIG": VerbRule(Verb.DIG, Arity.OPTIONAL, default_tag="GRO"),
    # Body
    "CLI": VerbRule(Verb.CLIMB, Arity.REQUIRED, _missing("CLIMB")),
    "JUM": VerbRule(Verb.JUMP, Arity.IGNORED),
    "ROW": VerbRule(Verb.ROW, Arity.OPTIONAL, default_tag="BOA"),
    "LEA": VerbRule(Verb.LEAVE, Arity.OPTIONAL, default_tag="BOA"),
    "EXI": VerbRule(Verb.LEAVE, Arity.OPTIONAL, default_tag="BOA"),
    "FIG": VerbRule(Verb.FIGHT, Arity.REQUIRED, "WHOM DO YOU WANT TO FIGHT?"),
}

# Alternate words accepted for an object, mapped onto its real tag
TAG_SYNONYMS: dict[str, str] = {
    "SHA": "SAL",  # salt SHAKER
    "FOR": "BOT",  # FORMULA in the bottle
}


def canonical_tag(tag: str) -> str:
    """Map a synonym onto the tag it stands for; other tags pass through."""
    return TAG_SYNONYMS.get(tag, tag)
