"""Errors raised by the Hedgehog parser.

Any of these aborts the whole parse; no partial tree is ever returned. The
tokenizer itself never raises.
"""

from typing import Optional

from .token_types import Tok


class ParseError(Exception):
    """Parse error with position info"""
    def __init__(self, message: str, token: Optional[Tok] = None):
        self.message = message
        self.token = token
        super().__init__(
            f"{message} at offset {token.offset}" if token else message
        )


class StructuralError(ParseError):
    """Token stream is not anchored by a consumed END token"""
    pass


class UnexpectedToken(ParseError):
    """A production met a token it cannot accept"""
    pass


class UnterminatedString(UnexpectedToken):
    """END reached before the closing quote"""
    pass


class UnterminatedSubstitution(UnexpectedToken):
    """END reached before the closing parenthesis of ``$(``"""
    pass


class NestingTooDeep(ParseError):
    """Handler stack exceeded its depth limit"""
    pass
