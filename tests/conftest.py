from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = (BASE_DIR / "src").resolve()

if str(BASE_DIR) not in sys.path:
    sys.path.append(str(BASE_DIR))
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))

from hedgehog_parse.utils import DEBUG_ENV, MAX_DEPTH_ENV, PY_TRACE_ENV


@pytest.fixture(autouse=True)
def _clean_hedgehog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's HEDGEHOG_* settings out of the suite."""
    for name in (DEBUG_ENV, MAX_DEPTH_ENV, PY_TRACE_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def parser_trace(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture the tokenizer and handler-stack DEBUG trace."""
    caplog.set_level(logging.DEBUG, logger="hedgehog_parse")
    return caplog
