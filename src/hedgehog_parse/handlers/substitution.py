from __future__ import annotations

from ..errors import UnterminatedSubstitution
from ..leaf import LK, Leaf
from ..token_types import TT
from .base import BaseHandler


class CommandSubstitutionHandler(BaseHandler):
    """``$( ... )``: a full nested command sequence between the parentheses."""

    def enter(self) -> None:
        # Imported here: root -> command -> argument -> substitution -> root
        from .root import RootHandler

        self.state.expect(TT.DOLLAR)
        self.state.expect(TT.LEFT_PARENTHESIS)
        self.parts.append(self.spawn(RootHandler, nested=True))

    def handle_token(self) -> None:
        tok = self.current_token
        if tok.type is not TT.RIGHT_PARENTHESIS:
            raise UnterminatedSubstitution("Unterminated command substitution, expected )", tok)

        self.state.consume_current_token()
        self.pop()

    def build_leaves(self) -> Leaf:
        return Leaf(LK.COMMAND_SUBSTITUTION, children=[self.parts[0].build_leaves()])
