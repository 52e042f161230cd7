"""Parser module for player commands."""

from ruby_quest.parser.lexer import Token, tokenize, tokens_to_words
from ruby_quest.parser.parser import ParseError, ParseResult, parse

__all__ = [
    "ParseError",
    "ParseResult",
    "Token",
    "parse",
    "tokenize",
    "tokens_to_words",
]
