"""AST node ("leaf") produced by the handler-stack parser.

A leaf is either terminal (wraps exactly one token) or non-terminal (wraps an
ordered, non-empty list of child leaves). Both kinds can be turned back into
source text and projected into a nested dict/list structure for tests.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Optional, Union

from typing_extensions import TypeAlias

from .token_types import Tok


class LK(Enum):
    """Leaf kinds"""

    COMMAND = "command"
    ARGUMENT = "argument"
    ARGUMENT_PART = "argument_part"
    STRING = "string"
    STRING_PART = "string_part"
    ENV_VAR = "env_var"
    LHS = "lhs"
    RHS = "rhs"
    COMMAND_SUBSTITUTION = "command_substitution"
    PIPE = "pipe"
    AND = "and"
    OR = "or"
    ROOT = "root"
    VALUE_PART = "value_part"


Structure: TypeAlias = Union[str, Dict[str, "Structure"], List["Structure"]]

BINARY_JOINERS = {
    LK.PIPE: " | ",
    LK.AND: " && ",
    LK.OR: " || ",
}


class Leaf:
    """Tree node holding either one token or a list of children."""
    __slots__ = ('kind', 'token', 'children', 'quote')

    def __init__(self, kind: LK, token: Optional[Tok] = None,
                 children: Optional[List[Leaf]] = None, quote: Optional[str] = None):
        if token is not None and children:
            raise ValueError(f"{kind.value} leaf cannot hold both a token and children")
        if token is None and not children:
            raise ValueError(f"{kind.value} leaf needs a token or at least one child")

        self.kind = kind
        self.token = token
        self.children: List[Leaf] = list(children) if children else []
        self.quote = quote

    @property
    def is_terminal(self) -> bool:
        return self.token is not None

    @property
    def text(self) -> str:
        """Literal text of a terminal leaf."""
        if self.token is None:
            raise ValueError(f"{self.kind.value} leaf is not terminal")
        return self.token.text

    def child(self, kind: LK) -> Optional[Leaf]:
        for ch in self.children:
            if ch.kind is kind:
                return ch

        return None

    def walk(self) -> Iterator[Leaf]:
        """Pre-order iteration over this leaf and its descendants."""
        yield self
        for ch in self.children:
            yield from ch.walk()

    # ========================================================================
    # Reconstruction
    # ========================================================================

    def to_source(self) -> str:
        if self.token is not None:
            return self.token.text

        parts = [ch.to_source() for ch in self.children]
        kind = self.kind

        if kind is LK.COMMAND:
            return " ".join(parts)
        if kind is LK.ROOT:
            return "; ".join(parts)
        if kind is LK.STRING:
            quote = self.quote or ""
            return f"{quote}{''.join(parts)}{quote}"
        if kind is LK.COMMAND_SUBSTITUTION:
            return f"$({''.join(parts)})"
        if kind is LK.ENV_VAR:
            # lhs [rhs]
            return "=".join(parts) if len(parts) > 1 else f"{parts[0]}="
        if kind in BINARY_JOINERS:
            return BINARY_JOINERS[kind].join(parts)

        return "".join(parts)

    def __str__(self) -> str:
        return self.to_source()

    # ========================================================================
    # Projection
    # ========================================================================

    def structure(self) -> Structure:
        """Nested kind-name projection.

        Terminal leaves project to their bare kind name. A non-terminal with a
        single child projects to ``{kind: child}``; with several children to
        ``{kind: [child, ...]}``.
        """
        if self.token is not None:
            return self.kind.value

        if len(self.children) == 1:
            return {self.kind.value: self.children[0].structure()}

        return {self.kind.value: [ch.structure() for ch in self.children]}

    def pretty(self, indent: str = '  ') -> str:
        """Return pretty-printed tree representation."""
        def _pretty(node: Leaf, level: int = 0) -> str:
            if node.token is not None:
                return f'{indent * level}{node.kind.value}\t{node.token.text!r}\n'
            lines = [f'{indent * level}{node.kind.value}\n']
            for ch in node.children:
                lines.append(_pretty(ch, level + 1))
            return ''.join(lines)
        return _pretty(self)

    def __repr__(self) -> str:
        if self.token is not None:
            return f'Leaf({self.kind.value!r}, {self.token!r})'
        return f'Leaf({self.kind.value!r}, {self.children!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Leaf):
            return False
        return (self.kind is other.kind and self.token == other.token
                and self.children == other.children and self.quote == other.quote)

    def __hash__(self) -> int:
        return hash((self.kind, self.token, tuple(self.children), self.quote))
