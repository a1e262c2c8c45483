"""
Handler-stack parser for Hedgehog command lines

Structure:
- Tokenizer: token stream from text (see tokenizer.py)
- ParserState: token cursor plus a LIFO stack of grammar handlers
- Handlers: one per production (see handlers/); pushing a handler enters a
  sub-grammar, popping returns from it, and the handler's build_leaves() is
  the return value
- Parser: seeds a root handler and runs the top of the stack until it is empty
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from .errors import NestingTooDeep, StructuralError, UnexpectedToken
from .handlers.root import RootHandler
from .leaf import Leaf
from .token_types import TT, Tok
from .tokenizer import tokenize
from .utils import max_depth_from_env

if TYPE_CHECKING:
    from .handlers.base import BaseHandler

logger = logging.getLogger(__name__)

# ============================================================================
# Parser State
# ============================================================================

class ParserState:
    """Token cursor and handler stack shared by every handler of one parse."""

    def __init__(self, tokens: Sequence[Tok], max_depth: int):
        self.tokens: List[Tok] = list(tokens)
        self.pos = 0
        self.max_depth = max_depth
        self.handlers: List["BaseHandler"] = []
        self.last_consumed: Optional[Tok] = None

    # ========================================================================
    # Token Navigation
    # ========================================================================

    @property
    def current_token(self) -> Tok:
        if self.pos >= len(self.tokens):
            raise StructuralError("Expected end at the end of the token list", self.last_consumed)
        return self.tokens[self.pos]

    def peek(self, n: int = 1) -> List[Tok]:
        """Look ahead at the next n tokens (current one included) without consuming"""
        return self.tokens[self.pos:self.pos + n]

    def peek_type(self, offset: int = 0) -> Optional[TT]:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx].type
        return None

    def check(self, *types: TT) -> bool:
        """Check if current token matches any of the given types"""
        return self.current_token.type in types

    def at_continuation(self) -> bool:
        """Current tokens are a backslash-newline line continuation"""
        return self.peek_type() is TT.BACKSLASH and self.peek_type(1) is TT.NEWLINE

    def consume_current_token(self) -> Tok:
        """Consume current token and move to next"""
        tok = self.current_token
        self.pos += 1
        self.last_consumed = tok
        return tok

    def expect(self, token_type: TT) -> Tok:
        """Consume token of expected type or raise error"""
        tok = self.current_token
        if tok.type is not token_type:
            raise UnexpectedToken(f"Expected {token_type.name}, got {tok.type.name}", tok)
        return self.consume_current_token()

    # ========================================================================
    # Handler Stack
    # ========================================================================

    @property
    def depth(self) -> int:
        return len(self.handlers)

    def push_handler(self, handler: "BaseHandler") -> None:
        if len(self.handlers) >= self.max_depth:
            raise NestingTooDeep(f"Nesting deeper than {self.max_depth} levels", self.current_token)
        self.handlers.append(handler)
        logger.debug("%spush %s", "  " * (self.depth - 1), type(handler).__name__)

    def pop_handler(self, handler: "BaseHandler") -> None:
        top = self.handlers[-1]
        if top is not handler:
            raise RuntimeError(f"{type(handler).__name__} popped while {type(top).__name__} was on top")
        self.handlers.pop()
        logger.debug("%spop %s", "  " * self.depth, type(handler).__name__)

# ============================================================================
# Parser
# ============================================================================

class Parser:
    """
    Handler-stack parser.

    Pushes a top-level RootHandler, then repeatedly lets the handler on top of
    the stack handle the current token until the stack is empty. The whole
    token list, END included, must be consumed exactly once.
    """

    def __init__(self, tokens: Sequence[Tok], max_depth: Optional[int] = None):
        if max_depth is None:
            max_depth = max_depth_from_env()
        self.state = ParserState(tokens, max_depth)

    def parse(self) -> Leaf:
        state = self.state
        root = RootHandler(state)
        state.push_handler(root)
        root.enter()

        while state.handlers:
            state.handlers[-1].handle_token()

        last = state.last_consumed
        if last is None or last.type is not TT.END:
            raise StructuralError("Expected end at the end of the token list", last)
        if state.pos != len(state.tokens):
            raise StructuralError("Tokens found after end", state.tokens[state.pos])

        return root.build_leaves()


def parse_tokens(tokens: Sequence[Tok], max_depth: Optional[int] = None) -> Leaf:
    """Parse an already tokenized command line"""
    return Parser(tokens, max_depth=max_depth).parse()


def parse_source(text: str, max_depth: Optional[int] = None) -> Leaf:
    """Tokenize and parse a command line"""
    return parse_tokens(tokenize(text), max_depth=max_depth)
