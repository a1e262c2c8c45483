from __future__ import annotations

import os as _os
from typing import Optional

DEFAULT_MAX_DEPTH = 100

MAX_DEPTH_ENV = "HEDGEHOG_PARSE_MAX_DEPTH"
DEBUG_ENV = "HEDGEHOG_PARSE_DEBUG"
PY_TRACE_ENV = "HEDGEHOG_DEBUG_PY_TRACE"

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return _os.environ.get(name, "").strip().lower() in _TRUTHY


def debug_logging_enabled() -> bool:
    """True when HEDGEHOG_PARSE_DEBUG asks for parser trace logging."""
    return _flag(DEBUG_ENV)


def debug_py_trace_enabled() -> bool:
    return _flag(PY_TRACE_ENV)


def max_depth_from_env(default: int = DEFAULT_MAX_DEPTH) -> int:
    """Handler-stack depth limit, from HEDGEHOG_PARSE_MAX_DEPTH if it is a positive int."""
    raw: Optional[str] = _os.environ.get(MAX_DEPTH_ENV)
    if raw is None:
        return default

    try:
        value = int(raw)
    except ValueError:
        return default

    return value if value > 0 else default
