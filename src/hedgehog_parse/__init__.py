"""Hedgehog shell front end: tokenizer and handler-stack parser."""

from .errors import (
    NestingTooDeep,
    ParseError,
    StructuralError,
    UnexpectedToken,
    UnterminatedString,
    UnterminatedSubstitution,
)
from .leaf import LK, Leaf
from .parser import Parser, ParserState, parse_source, parse_tokens
from .token_types import TT, Tok
from .tokenizer import Tokenizer, tokenize

__all__ = [
    "LK",
    "Leaf",
    "NestingTooDeep",
    "ParseError",
    "Parser",
    "ParserState",
    "StructuralError",
    "TT",
    "Tok",
    "Tokenizer",
    "UnexpectedToken",
    "UnterminatedString",
    "UnterminatedSubstitution",
    "parse_source",
    "parse_tokens",
    "tokenize",
]
