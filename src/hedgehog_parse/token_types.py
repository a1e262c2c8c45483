"""
Token Types for the Hedgehog parser

Shared between tokenizer and parser to avoid circular dependencies.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TT(Enum):
    """Token Types - one per tokenizer output class"""

    # Single characters
    SPACE = auto()
    EQUALS = auto()
    SINGLE_QUOTE = auto()
    BACKTICK = auto()
    DOUBLE_QUOTE = auto()
    NEWLINE = auto()
    SEMICOLON = auto()
    BACKSLASH = auto()
    DOLLAR = auto()
    LEFT_PARENTHESIS = auto()
    RIGHT_PARENTHESIS = auto()
    FORWARD_SLASH = auto()

    # Words
    WORD_STARTING_WITH_LETTER = auto()
    WORD_STARTING_WITH_NUMBER = auto()
    NUMBER = auto()

    # Operators
    PIPE = auto()  # |
    AND = auto()  # &&
    OR = auto()  # ||
    AMPERSAND = auto()  # &

    # Special
    END = auto()


QUOTES = frozenset({TT.SINGLE_QUOTE, TT.DOUBLE_QUOTE})
OPERATORS = frozenset({TT.PIPE, TT.AND, TT.OR})
SEPARATORS = frozenset({TT.SEMICOLON, TT.NEWLINE})


@dataclass(frozen=True)
class Tok:
    """Token with its source offset (offset is ignored by equality)"""

    type: TT
    text: str
    offset: int = field(default=0, compare=False)

    def __repr__(self):
        return f"Tok({self.type.name}, {self.text!r})"
