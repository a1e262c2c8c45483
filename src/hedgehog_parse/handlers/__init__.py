"""Grammar handlers, one per production."""

from .argument import ArgumentHandler, ValueHandler
from .base import BaseHandler
from .command import CommandHandler, EnvVarHandler
from .root import RootHandler
from .string import StringHandler
from .substitution import CommandSubstitutionHandler

__all__ = [
    "ArgumentHandler",
    "BaseHandler",
    "CommandHandler",
    "CommandSubstitutionHandler",
    "EnvVarHandler",
    "RootHandler",
    "StringHandler",
    "ValueHandler",
]
