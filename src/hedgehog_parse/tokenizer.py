"""
Tokenizer for Hedgehog command lines

Converts raw text into a list of tokens terminated by an END token.

Features:
- Single pass, one character at a time, through a small state machine
- Never raises: characters it does not classify are folded into words
- Offset tracking (relative to the unstripped input)
"""

import logging
import string
from enum import Enum, auto
from typing import List

from .token_types import TT, Tok

logger = logging.getLogger(__name__)

# ============================================================================
# Character classes
# ============================================================================

SINGLE_CHAR_TOKENS = {
    " ": TT.SPACE,
    "=": TT.EQUALS,
    "'": TT.SINGLE_QUOTE,
    "`": TT.BACKTICK,
    '"': TT.DOUBLE_QUOTE,
    "\n": TT.NEWLINE,
    ";": TT.SEMICOLON,
    "\\": TT.BACKSLASH,
    "$": TT.DOLLAR,
    "(": TT.LEFT_PARENTHESIS,
    ")": TT.RIGHT_PARENTHESIS,
    "/": TT.FORWARD_SLASH,
}

# Pending operator character => (single token, doubled token)
OPERATOR_CHARS = {
    "|": (TT.PIPE, TT.OR),
    "&": (TT.AMPERSAND, TT.AND),
}

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)

# Outer characters dropped before tokenizing; anything else is word text
BLANKS = " \n"


class State(Enum):
    EMPTY = auto()
    WORD_STARTING_WITH_LETTER = auto()
    WORD_STARTING_WITH_NUMBER = auto()
    NUMBER = auto()
    PIPE = auto()
    AMPERSAND = auto()


# Token emitted when a word state is flushed
STATE_TOKEN = {
    State.WORD_STARTING_WITH_LETTER: TT.WORD_STARTING_WITH_LETTER,
    State.WORD_STARTING_WITH_NUMBER: TT.WORD_STARTING_WITH_NUMBER,
    State.NUMBER: TT.NUMBER,
}

WORD_STATES = frozenset(STATE_TOKEN)


def _ends_word(ch: str) -> bool:
    return ch in SINGLE_CHAR_TOKENS or ch in OPERATOR_CHARS


# ============================================================================
# Tokenizer Implementation
# ============================================================================

class Tokenizer:
    """
    Character-class state machine.

    From EMPTY, a character either emits a one-character token, enters a
    pending operator state (``|``/``&``) or starts a word. Word states
    accumulate until a punctuation character, which flushes the word and is
    re-dispatched through EMPTY.
    """

    def __init__(self, text: str):
        self.text = text.strip(BLANKS)
        self.base = len(text) - len(text.lstrip(BLANKS))
        self.tokens: List[Tok] = []
        self.state = State.EMPTY
        self.word = ""
        self.word_start = 0
        self.pos = 0

    def tokenize(self) -> List[Tok]:
        """Tokenize the whole text, return token list ending with END"""
        for pos, ch in enumerate(self.text):
            self.pos = pos
            self.handle_char(ch)

        self.handle_end()
        return self.tokens

    # ========================================================================
    # States
    # ========================================================================

    def handle_char(self, ch: str):
        logger.debug("character %r in state %s", ch, self.state.name)

        if self.state is State.EMPTY:
            self.handle_empty(ch)
        elif self.state is State.NUMBER:
            self.handle_number(ch)
        elif self.state in WORD_STATES:
            self.handle_word(ch)
        else:
            self.handle_operator(ch)

    def handle_empty(self, ch: str):
        if ch in SINGLE_CHAR_TOKENS:
            self.emit(SINGLE_CHAR_TOKENS[ch], ch, self.pos)
            return

        self.word = ch
        self.word_start = self.pos

        if ch in OPERATOR_CHARS:
            self.state = State.PIPE if ch == "|" else State.AMPERSAND
        elif ch in DIGITS:
            self.state = State.NUMBER
        else:
            # Letters, and anything unclassified
            self.state = State.WORD_STARTING_WITH_LETTER

    def handle_word(self, ch: str):
        if _ends_word(ch):
            self.end_word()
            self.handle_empty(ch)
            return

        self.word += ch

    def handle_number(self, ch: str):
        if _ends_word(ch):
            self.end_word()
            self.handle_empty(ch)
            return

        if ch not in DIGITS:
            self.state = State.WORD_STARTING_WITH_NUMBER
        self.word += ch

    def handle_operator(self, ch: str):
        pending = self.word
        single, double = OPERATOR_CHARS[pending]
        self.state = State.EMPTY
        self.word = ""

        if ch == pending:
            logger.debug("  second %r found", ch)
            self.emit(double, pending + ch, self.word_start)
            return

        self.emit(single, pending, self.word_start)
        # Re-handle the current character from scratch
        self.handle_empty(ch)

    def handle_end(self):
        if self.state is not State.EMPTY:
            kind = STATE_TOKEN.get(self.state)
            if kind is None:
                kind = OPERATOR_CHARS[self.word][0]
            self.emit(kind, self.word, self.word_start)

        self.state = State.EMPTY
        self.word = ""
        self.emit(TT.END, "", len(self.text))

    # ========================================================================
    # Utilities
    # ========================================================================

    def end_word(self):
        self.emit(STATE_TOKEN[self.state], self.word, self.word_start)
        self.state = State.EMPTY
        self.word = ""

    def emit(self, token_type: TT, text: str, pos: int):
        """Emit a token"""
        logger.debug("  + adding token %s (%r)", token_type.name, text)
        self.tokens.append(Tok(token_type, text, self.base + pos))


def tokenize(text: str) -> List[Tok]:
    """Convenience function to tokenize a command line"""
    return Tokenizer(text).tokenize()
