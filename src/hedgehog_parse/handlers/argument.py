from __future__ import annotations

from ..leaf import LK, Leaf
from ..token_types import OPERATORS, QUOTES, TT, Tok
from .base import BaseHandler
from .string import StringHandler
from .substitution import CommandSubstitutionHandler

# Ends the argument; left for the enclosing command
ARGUMENT_TERMINATORS = frozenset({
    TT.SPACE,
    TT.END,
    TT.NEWLINE,
    TT.RIGHT_PARENTHESIS,
    TT.SEMICOLON,
}) | OPERATORS

# Ends a run of literal tokens
BULK_STOP = ARGUMENT_TERMINATORS | QUOTES | {TT.DOLLAR}


class ArgumentHandler(BaseHandler):
    """One shell word: literal runs, quoted strings and ``$(...)`` glued together.

    A bare ``$`` is literal text; expanding variables is the executor's job.
    """

    kind = LK.ARGUMENT
    part_kind = LK.ARGUMENT_PART

    def handle_token(self) -> None:
        tok = self.current_token

        if tok.type in ARGUMENT_TERMINATORS or self.state.at_continuation():
            self.pop()
        elif tok.type in QUOTES:
            self.parts.append(self.spawn(StringHandler))
        elif tok.type is TT.DOLLAR:
            if self.state.peek_type(1) is TT.LEFT_PARENTHESIS:
                self.parts.append(self.spawn(CommandSubstitutionHandler))
            else:
                self.parts.append(self.state.consume_current_token())
        else:
            consumed = self.consume_tokens_until(self._at_boundary)
            self.log("consumed %d tokens", len(consumed))
            self.parts.extend(consumed)

    def _at_boundary(self, tok: Tok) -> bool:
        return tok.type in BULK_STOP or self.state.at_continuation()

    def build_leaves(self) -> Leaf:
        if len(self.parts) == 1 and isinstance(self.parts[0], Tok):
            return Leaf(self.kind, self.parts[0])

        children = []
        for part in self.parts:
            if isinstance(part, Tok):
                children.append(Leaf(self.part_kind, part))
            else:
                children.append(part.build_leaves())
        return Leaf(self.kind, children=children)


class ValueHandler(ArgumentHandler):
    """Right-hand side of ``NAME=value``; same grammar as an argument."""

    kind = LK.RHS
    part_kind = LK.VALUE_PART
