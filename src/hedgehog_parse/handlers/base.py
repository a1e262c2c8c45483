from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, List, Type, TypeVar

from ..leaf import Leaf
from ..token_types import Tok

if TYPE_CHECKING:
    from ..parser import ParserState

logger = logging.getLogger(__name__)

H = TypeVar("H", bound="BaseHandler")


class BaseHandler:
    """One grammar production in progress.

    A handler sits on the parser's handler stack. Each ``handle_token`` call
    must make progress: consume a token, spawn a child handler, or pop itself.
    Once popped, ``build_leaves`` turns the accumulated parts into one leaf.
    """

    def __init__(self, state: ParserState):
        self.state = state
        self.parts: List[Any] = []

    def enter(self) -> None:
        """Called right after the handler is pushed; consumes opening tokens."""

    def handle_token(self) -> None:
        raise NotImplementedError

    def build_leaves(self) -> Leaf:
        raise NotImplementedError

    # ========================================================================
    # Helpers
    # ========================================================================

    @property
    def current_token(self) -> Tok:
        return self.state.current_token

    def spawn(self, handler_cls: Type[H], **kwargs: Any) -> H:
        """Push a child handler; its leaf becomes one of our parts."""
        handler = handler_cls(self.state, **kwargs)
        self.state.push_handler(handler)
        handler.enter()
        return handler

    def pop(self) -> None:
        self.state.pop_handler(self)

    def consume_tokens_until(self, predicate: Callable[[Tok], bool]) -> List[Tok]:
        consumed: List[Tok] = []
        while not predicate(self.current_token):
            consumed.append(self.state.consume_current_token())
        return consumed

    def log(self, message: str, *args: Any) -> None:
        logger.debug("%s%s: " + message, "  " * self.state.depth, type(self).__name__, *args)
