from __future__ import annotations

import re
from typing import Optional

from ..leaf import LK, Leaf
from ..token_types import OPERATORS, TT, Tok
from .argument import ARGUMENT_TERMINATORS, ArgumentHandler, ValueHandler
from .base import BaseHandler

# Ends the command; left for the enclosing root
COMMAND_TERMINATORS = frozenset({
    TT.END,
    TT.SEMICOLON,
    TT.NEWLINE,
    TT.RIGHT_PARENTHESIS,
}) | OPERATORS

IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")


class CommandHandler(BaseHandler):
    """Simple command: assignments and arguments separated by spaces."""

    def handle_token(self) -> None:
        tok = self.current_token

        if tok.type in COMMAND_TERMINATORS:
            self.pop()
        elif tok.type is TT.SPACE:
            self.state.consume_current_token()
        elif self.state.at_continuation():
            self.state.consume_current_token()
            self.state.consume_current_token()
            self.log("line continuation")
        elif self._at_assignment(tok):
            self.parts.append(self.spawn(EnvVarHandler))
        else:
            self.parts.append(self.spawn(ArgumentHandler))

    def _at_assignment(self, tok: Tok) -> bool:
        return (tok.type is TT.WORD_STARTING_WITH_LETTER
                and self.state.peek_type(1) is TT.EQUALS
                and IDENTIFIER_RE.match(tok.text) is not None)

    def build_leaves(self) -> Leaf:
        return Leaf(LK.COMMAND, children=[part.build_leaves() for part in self.parts])


class EnvVarHandler(BaseHandler):
    """``NAME=value``; the value is optional (``NAME=`` assigns nothing)."""

    def __init__(self, state):
        super().__init__(state)
        self.name: Optional[Tok] = None
        self.value: Optional[ValueHandler] = None

    def enter(self) -> None:
        self.name = self.state.expect(TT.WORD_STARTING_WITH_LETTER)
        self.state.expect(TT.EQUALS)

    def handle_token(self) -> None:
        if self.value is None and not self._at_value_boundary():
            self.value = self.spawn(ValueHandler)
            return

        self.pop()

    def _at_value_boundary(self) -> bool:
        return self.current_token.type in ARGUMENT_TERMINATORS or self.state.at_continuation()

    def build_leaves(self) -> Leaf:
        assert self.name is not None
        children = [Leaf(LK.LHS, self.name)]
        if self.value is not None:
            children.append(self.value.build_leaves())
        return Leaf(LK.ENV_VAR, children=children)
