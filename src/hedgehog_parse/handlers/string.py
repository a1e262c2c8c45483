from __future__ import annotations

from typing import Optional

from ..errors import UnterminatedString
from ..leaf import LK, Leaf
from ..token_types import TT, Tok
from .base import BaseHandler

# Tokens a backslash escapes inside double quotes
DOUBLE_QUOTE_ESCAPES = frozenset({TT.DOUBLE_QUOTE, TT.BACKSLASH})


class StringHandler(BaseHandler):
    """Quoted string, entered on its opening quote.

    Every inner token becomes one ``string_part``, newlines included. Inside
    double quotes ``\\"`` and ``\\\\`` are kept as escape pairs and never close
    the string; single quotes have no escapes.
    """

    def __init__(self, state):
        super().__init__(state)
        self.opener: Optional[Tok] = None

    def enter(self) -> None:
        self.opener = self.state.consume_current_token()
        self.log("opened with %r", self.opener.text)

    def handle_token(self) -> None:
        assert self.opener is not None
        tok = self.current_token

        if tok.type is TT.END:
            raise UnterminatedString(f"Unterminated string, expected closing {self.opener.text}", tok)

        if tok.type is self.opener.type:
            self.state.consume_current_token()
            self.pop()
            return

        if (self.opener.type is TT.DOUBLE_QUOTE and tok.type is TT.BACKSLASH
                and self.state.peek_type(1) in DOUBLE_QUOTE_ESCAPES):
            self.parts.append(self.state.consume_current_token())

        self.parts.append(self.state.consume_current_token())

    def build_leaves(self) -> Leaf:
        assert self.opener is not None
        tokens = self.parts or [Tok(self.opener.type, "", self.opener.offset + 1)]
        children = [Leaf(LK.STRING_PART, tok) for tok in tokens]
        return Leaf(LK.STRING, children=children, quote=self.opener.text)
