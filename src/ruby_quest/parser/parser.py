"""
parser.py

PURPOSE: Parse tokenized input into Command objects.
DEPENDENCIES: lexer, command model

ARCHITECTURE NOTES:
The grammar is tiny:
    COMMAND := DIRECTION | GO DIRECTION | VERB [OBJECT]

Every word is a three-letter tag. Movement is tried first: the first word,
or the second one after GO, is looked up as a direction. Everything else
goes through the VERB_RULES table, which says whether an object word may
or must follow. Object synonyms are canonicalized here, before the engine
ever sees the tag.

The parser does NOT look objects up in the world - that is the engine's job.
"""

from dataclasses import dataclass

from ruby_quest.models.command import (
    DIRECTION_WORDS,
    VERB_RULES,
    Arity,
    Command,
    canonical_tag,
)
from ruby_quest.parser.lexer import tokenize, tokens_to_words

UNKNOWN_COMMAND = "I DON'T KNOW HOW TO DO THAT."


@dataclass
class ParseError:
    """Represents a parsing error with a user-facing message."""

    message: str
    raw_input: str


@dataclass
class ParseResult:
    """Result of parsing - a Command, an error, or nothing at all (blank line)."""

    command: Command | None
    error: ParseError | None

    @property
    def success(self) -> bool:
        return self.command is not None

    @property
    def is_empty(self) -> bool:
        """True for blank input, which should just re-prompt."""
        return self.command is None and self.error is None

    @classmethod
    def ok(cls, command: Command) -> "ParseResult":
        return cls(command=command, error=None)

    @classmethod
    def fail(cls, message: str, raw_input: str) -> "ParseResult":
        return cls(command=None, error=ParseError(message, raw_input))

    @classmethod
    def empty(cls) -> "ParseResult":
        return cls(command=None, error=None)


def parse(text: str) -> ParseResult:
    """
    Parse player input into a Command.

    Never raises: unknown input comes back as a failed ParseResult.

    Args:
        text: Raw player input string

    Returns:
        ParseResult containing a Command, an error, or nothing
    """
    raw_input = text.strip()
    words = tokens_to_words(tokenize(raw_input))

    if not words:
        return ParseResult.empty()

    # Are we going somewhere? ("GO" is optional)
    direction_word = words[1] if len(words) > 1 and words[0] == "GO" else words[0]
    if direction_word in DIRECTION_WORDS:
        return ParseResult.ok(Command(verb=DIRECTION_WORDS[direction_word], raw_input=raw_input))

    rule = VERB_RULES.get(words[0])
    if rule is None or len(words) > 2:
        return ParseResult.fail(UNKNOWN_COMMAND, raw_input)

    tag = canonical_tag(words[1]) if len(words) == 2 else None

    match rule.arity:
        case Arity.NONE:
            if tag is not None:
                return ParseResult.fail(UNKNOWN_COMMAND, raw_input)
            return ParseResult.ok(Command(verb=rule.verb, raw_input=raw_input))
        case Arity.IGNORED:
            return ParseResult.ok(Command(verb=rule.verb, raw_input=raw_input))
        case Arity.REQUIRED:
            if tag is None:
                return ParseResult.fail(rule.prompt or UNKNOWN_COMMAND, raw_input)
            return ParseResult.ok(Command(verb=rule.verb, tag=tag, raw_input=raw_input))
        case Arity.OPTIONAL:
            if tag is None:
                return ParseResult.ok(
                    Command(verb=rule.verb, tag=rule.default_tag, raw_input=raw_input)
                )
            verb = rule.with_object or rule.verb
            return ParseResult.ok(Command(verb=verb, tag=tag, raw_input=raw_input))

    return ParseResult.fail(UNKNOWN_COMMAND, raw_input)
