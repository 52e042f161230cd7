"""
lexer.py

PURPOSE: Tokenize player input for the parser.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
The lexer converts raw input strings into a list of short tokens.
It handles:
- Uppercasing
- Splitting on whitespace
- Cutting every word down to its first three letters

Only the first three letters of a word are significant, so DIARY, DIAL and
DIA all become the same token. Shorter words (N, GO, UP) pass through as-is.
"""

from dataclasses import dataclass

# Number of significant letters in a word
WORD_LENGTH = 3


@dataclass(frozen=True)
class Token:
    """A single token from lexer output."""

    value: str


def tokenize(text: str) -> list[Token]:
    """
    Convert input text into a list of tokens.

    Args:
        text: Raw player input

    Returns:
        List of Token objects (empty for blank input)
    """
    return [Token(word[:WORD_LENGTH]) for word in text.upper().split()]


def tokens_to_words(tokens: list[Token]) -> list[str]:
    """Extract just the truncated values from a token list."""
    return [t.value for t in tokens]
