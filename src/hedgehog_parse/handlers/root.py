from __future__ import annotations

from typing import Any, List

from ..errors import NestingTooDeep, UnexpectedToken, UnterminatedSubstitution
from ..leaf import LK, Leaf
from ..token_types import OPERATORS, SEPARATORS, TT, Tok
from .base import BaseHandler
from .command import CommandHandler

OPERATOR_KINDS = {
    TT.PIPE: LK.PIPE,
    TT.AND: LK.AND,
    TT.OR: LK.OR,
}


def _binary(kind: LK, lhs: Leaf, rhs: Leaf) -> Leaf:
    return Leaf(kind, children=[
        Leaf(LK.LHS, children=[lhs]),
        Leaf(LK.RHS, children=[rhs]),
    ])


class RootHandler(BaseHandler):
    """
    Command sequence: items separated by ``;`` or newlines.

    Each item is a run of commands joined by ``|``, ``&&`` and ``||``, kept as
    [command, op, command, op, ...] until build time. Chains fold to the left
    and ``|`` binds tighter than ``&&``/``||``, so ``a && b | c`` is
    ``and(a, pipe(b, c))``.

    The top-level root consumes END. A nested root (inside ``$(``) stops
    before the closing parenthesis and leaves it for its parent.
    """

    def __init__(self, state, nested: bool = False):
        super().__init__(state)
        self.nested = nested
        self.items: List[List[Any]] = []
        self.current: List[Any] = []

    def handle_token(self) -> None:
        tok = self.current_token
        t = tok.type

        if t is TT.SPACE:
            self.state.consume_current_token()
        elif self.state.at_continuation():
            self.state.consume_current_token()
            self.state.consume_current_token()
        elif t in SEPARATORS:
            self.handle_separator(tok)
        elif t in OPERATORS:
            self.handle_operator(tok)
        elif t is TT.END:
            if self.nested:
                raise UnterminatedSubstitution("Unterminated command substitution, expected )", tok)
            self.close(tok)
            self.state.consume_current_token()
            self.pop()
        elif t is TT.RIGHT_PARENTHESIS:
            if not self.nested:
                raise UnexpectedToken("Unexpected )", tok)
            self.close(tok)
            self.pop()
        else:
            self.current.append(self.spawn(CommandHandler))

    def handle_separator(self, tok: Tok) -> None:
        if self.awaiting_operand():
            # An operator carries on over a line break
            if tok.type is not TT.NEWLINE:
                raise UnexpectedToken(f"Expected a command after {self.current[-1].text}", tok)
        else:
            self.finish_item()
        self.state.consume_current_token()

    def handle_operator(self, tok: Tok) -> None:
        if not self.current or self.awaiting_operand():
            raise UnexpectedToken(f"Unexpected {tok.text}", tok)

        operands = (len(self.current) + 1) // 2
        if operands >= self.state.max_depth:
            raise NestingTooDeep(f"More than {self.state.max_depth} chained commands", tok)

        self.current.append(self.state.consume_current_token())

    def awaiting_operand(self) -> bool:
        return bool(self.current) and isinstance(self.current[-1], Tok)

    def finish_item(self) -> None:
        # Doubled or trailing separators leave empty items behind; drop them
        if self.current:
            self.items.append(self.current)
            self.current = []

    def close(self, tok: Tok) -> None:
        if self.awaiting_operand():
            raise UnexpectedToken(f"Expected a command after {self.current[-1].text}", tok)
        self.finish_item()
        if not self.items:
            raise UnexpectedToken("Expected a command", tok)

    # ========================================================================
    # Leaves
    # ========================================================================

    def build_leaves(self) -> Leaf:
        return Leaf(LK.ROOT, children=[self.build_item(item) for item in self.items])

    def build_item(self, item: List[Any]) -> Leaf:
        commands = [handler.build_leaves() for handler in item[0::2]]
        ops: List[Tok] = item[1::2]

        # Pipelines first, then the && / || list over them
        operands = [commands[0]]
        list_ops: List[Tok] = []
        for op, command in zip(ops, commands[1:]):
            if op.type is TT.PIPE:
                operands[-1] = _binary(LK.PIPE, operands[-1], command)
            else:
                list_ops.append(op)
                operands.append(command)

        result = operands[0]
        for op, rhs in zip(list_ops, operands[1:]):
            result = _binary(OPERATOR_KINDS[op.type], result, rhs)
        return result
