from __future__ import annotations

from typing import List, Tuple

import pytest
from prompt_toolkit.document import Document

from hedgehog_parse.highlight import GROUP_STYLE, HedgehogLexer

COMMAND = GROUP_STYLE["command"]
STRING = GROUP_STYLE["string"]
VARIABLE = GROUP_STYLE["variable"]
OPERATOR = GROUP_STYLE["operator"]
SUBST = GROUP_STYLE["substitution"]


def _fragments(line: str) -> List[Tuple[str, str]]:
    get_line = HedgehogLexer().lex_document(Document(line))
    return [(style, text) for style, text, *_ in get_line(0)]


@pytest.mark.parametrize(
    "line",
    [
        "ls -la",
        "  padded  ",
        "FOO=bar make && make install",
        "echo \"a \\\" b\" 'c' | wc -l",
        "echo $(date +%s) $HOME",
        "echo 'unterminated",
        "echo $(unterminated",
        ") stray",
        "sleep 10 & `date`",
    ],
)
def test_fragments_cover_the_line(line: str) -> None:
    assert "".join(text for _, text in _fragments(line)) == line


def test_assignment_prefix_and_command() -> None:
    assert _fragments("FOO=bar ls") == [
        (VARIABLE, "FOO"),
        (OPERATOR, "="),
        ("", "bar"),
        ("", " "),
        (COMMAND, "ls"),
    ]


def test_quoted_text_is_one_group() -> None:
    assert _fragments("echo 'hi there' | grep x") == [
        (COMMAND, "echo"),
        ("", " "),
        (STRING, "'"),
        (STRING, "hi"),
        (STRING, " "),
        (STRING, "there"),
        (STRING, "'"),
        ("", " "),
        (OPERATOR, "|"),
        ("", " "),
        (COMMAND, "grep"),
        ("", " "),
        ("", "x"),
    ]


def test_substitution_starts_a_command() -> None:
    assert _fragments("echo $(date)") == [
        (COMMAND, "echo"),
        ("", " "),
        (SUBST, "$"),
        (SUBST, "("),
        (COMMAND, "date"),
        (SUBST, ")"),
    ]


def test_variable_reference() -> None:
    assert _fragments("echo $HOME")[-2:] == [(VARIABLE, "$"), (VARIABLE, "HOME")]


def test_separator_starts_a_command() -> None:
    assert _fragments("a; b") == [
        (COMMAND, "a"),
        (GROUP_STYLE["separator"], ";"),
        ("", " "),
        (COMMAND, "b"),
    ]


def test_numbers() -> None:
    assert _fragments("sleep 10")[-1] == (GROUP_STYLE["number"], "10")


def test_stripped_whitespace_is_kept_unstyled() -> None:
    assert _fragments("  ls  ") == [("", "  "), (COMMAND, "ls"), ("", "  ")]


def test_lines_are_highlighted_independently() -> None:
    get_line = HedgehogLexer().lex_document(Document("ls\necho 'x"))

    assert get_line(0) == [(COMMAND, "ls")]
    assert get_line(1)[0] == (COMMAND, "echo")
    assert get_line(1) is get_line(1)
    assert get_line(7) == [("", "")]


def test_empty_line() -> None:
    assert _fragments("") == [("", "")]
