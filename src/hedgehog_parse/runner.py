from __future__ import annotations

import json
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from .errors import ParseError
from .parser import parse_tokens
from .tokenizer import BLANKS, tokenize
from .utils import debug_logging_enabled, debug_py_trace_enabled

logger = logging.getLogger(__name__)

MODES = {"--source", "--tokens", "--structure", "--pretty"}

USAGE = "usage: hedgehog-parse [--source|--tokens|--structure|--pretty] [--debug] [SOURCE|PATH|-]"


def _read_source(arg: Optional[str]) -> str:
    """Command-line text from stdin (no argument or ``-``), a script file, or the argument itself."""
    if arg in (None, "-"):
        source = sys.stdin.read()
        if not source.strip(BLANKS):
            raise SystemExit("No input provided on stdin")
        logger.debug("read %d characters from stdin", len(source))
        return source

    script = Path(arg)
    if script.is_file():
        logger.debug("reading script %s", script)
        return script.read_text(encoding="utf-8")

    return arg


def render(source: str, mode: str = "--source") -> str:
    tokens = tokenize(source)
    if mode == "--tokens":
        return "\n".join(repr(tok) for tok in tokens)

    root = parse_tokens(tokens)
    if mode == "--structure":
        return json.dumps(root.structure(), indent=2)
    if mode == "--pretty":
        return root.pretty().rstrip("\n")
    return root.to_source()


def main(argv: Optional[List[str]] = None) -> int:
    mode = "--source"
    debug = debug_logging_enabled()
    arg = None

    for token in sys.argv[1:] if argv is None else argv:
        if token in MODES:
            mode = token
            continue

        if token == "--debug":
            debug = True
            continue

        if token in ("-h", "--help"):
            print(USAGE)
            return 0

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    source = _read_source(arg)

    try:
        print(render(source, mode))
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if debug_py_trace_enabled():
            print("\nPython traceback:", file=sys.stderr)
            traceback.print_exc(file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
