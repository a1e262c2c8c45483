"""prompt_toolkit lexer for live Hedgehog command-line highlighting."""

from __future__ import annotations

from typing import Callable, List, Optional

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.lexers import Lexer

from .token_types import OPERATORS, QUOTES, SEPARATORS, TT, Tok
from .tokenizer import tokenize

# Map highlight groups → prompt_toolkit style strings.
GROUP_STYLE = {
    "command": "bold",
    "string": "ansigreen",
    "number": "ansimagenta",
    "variable": "ansicyan",
    "substitution": "bold ansiyellow",
    "operator": "bold ansiblue",
    "separator": "ansigray",
    "escape": "ansiyellow",
}

_TT_GROUP = {
    TT.NUMBER: "number",
    TT.SINGLE_QUOTE: "string",
    TT.DOUBLE_QUOTE: "string",
    TT.BACKSLASH: "escape",
    TT.EQUALS: "operator",
    TT.AMPERSAND: "operator",
    TT.BACKTICK: "substitution",
}
_TT_GROUP.update({tt: "operator" for tt in OPERATORS})
_TT_GROUP.update({tt: "separator" for tt in SEPARATORS})


def _group_for(tokens: List[Tok], idx: int, quote: Optional[TT], at_command: bool) -> str:
    tok = tokens[idx]
    nxt = tokens[idx + 1].type if idx + 1 < len(tokens) else None
    prev = tokens[idx - 1].type if idx > 0 else None

    if quote is not None:
        return "string"
    if tok.type is TT.DOLLAR:
        return "substitution" if nxt is TT.LEFT_PARENTHESIS else "variable"
    if tok.type is TT.LEFT_PARENTHESIS and prev is TT.DOLLAR:
        return "substitution"
    if tok.type is TT.WORD_STARTING_WITH_LETTER:
        if prev is TT.DOLLAR:
            return "variable"
        if nxt is TT.EQUALS:
            return "variable"
        if at_command:
            return "command"
    return _TT_GROUP.get(tok.type, "")


def _highlight_line(text: str) -> StyleAndTextTuples:
    """Tokenize a single line and return styled fragments."""
    if not text:
        return [("", "")]

    tokens = tokenize(text)
    result: StyleAndTextTuples = []
    pos = 0
    quote: Optional[TT] = None
    # Substitution depth, so ')' closing a '$(' is styled like its opener
    depth = 0
    at_command = True
    # Inside the value of a NAME=value prefix
    assigning = False

    for i, tok in enumerate(tokens):
        if tok.type is TT.END or not tok.text:
            continue

        # Unstyled gap before token (stripped leading whitespace).
        if tok.offset > pos:
            result.append(("", text[pos:tok.offset]))

        group = _group_for(tokens, i, quote, at_command and not assigning)
        if quote is None and tok.type is TT.RIGHT_PARENTHESIS and depth:
            depth -= 1
            group = "substitution"
        elif quote is None and group == "substitution" and tok.type is TT.LEFT_PARENTHESIS:
            depth += 1

        result.append((GROUP_STYLE.get(group, ""), tok.text))
        pos = tok.offset + len(tok.text)

        if tok.type in QUOTES and (quote is None or quote is tok.type):
            prev = tokens[i - 1].type if i > 0 else None
            escaped = quote is TT.DOUBLE_QUOTE and prev is TT.BACKSLASH
            if not escaped:
                quote = None if quote is not None else tok.type

        if quote is None:
            nxt = tokens[i + 1].type if i + 1 < len(tokens) else None
            if tok.type in OPERATORS or tok.type in SEPARATORS or group == "substitution":
                at_command = True
                assigning = False
            elif tok.type is TT.SPACE:
                assigning = False
            elif at_command and group == "variable" and nxt is TT.EQUALS:
                assigning = True
            elif not assigning and tok.type is not TT.EQUALS:
                at_command = False

    # Trailing unstyled text.
    if pos < len(text):
        result.append(("", text[pos:]))

    return result if result else [("", text)]


class HedgehogLexer(Lexer):
    """prompt_toolkit Lexer that highlights Hedgehog command lines from the tokenizer."""

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        lines = document.lines

        # Pre-compute highlights for all lines.
        cache: dict[int, StyleAndTextTuples] = {}

        def get_line(lineno: int) -> StyleAndTextTuples:
            if lineno not in cache:
                if lineno < len(lines):
                    cache[lineno] = _highlight_line(lines[lineno])
                else:
                    cache[lineno] = [("", "")]

            return cache[lineno]

        return get_line
