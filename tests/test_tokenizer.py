from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pytest

from hedgehog_parse.tokenizer import Tokenizer
from tests.support.harness import TT, Tok, tokenize, types_of

W = TT.WORD_STARTING_WITH_LETTER
WN = TT.WORD_STARTING_WITH_NUMBER


@dataclass(frozen=True)
class Case:
    """Unified tokenizer case payload."""

    name: str
    source: str
    expected: Optional[Tuple[Tuple[TT, str], ...]] = None
    expected_types: Optional[Tuple[TT, ...]] = None


WORD_CASES: List[Case] = [
    Case("letter-word", "ls", expected=((W, "ls"),)),
    Case("number", "123", expected=((TT.NUMBER, "123"),)),
    Case("word-starting-with-number", "1bc", expected=((WN, "1bc"),)),
    Case("number-then-letters-then-digits", "12ab34", expected=((WN, "12ab34"),)),
    Case("number-with-dot", "1.5", expected=((WN, "1.5"),)),
    Case("letters-and-digits", "a1b2", expected=((W, "a1b2"),)),
    Case("dash-flag", "-la", expected=((W, "-la"),)),
    Case("underscore-name", "FOO_BAR", expected=((W, "FOO_BAR"),)),
    Case("non-ascii", "über", expected=((W, "über"),)),
    Case("flag-with-value", "ls -la", expected=((W, "ls"), (TT.SPACE, " "), (W, "-la"))),
]

PUNCTUATION_CASES: List[Case] = [
    Case("assignment", "a=b", expected=((W, "a"), (TT.EQUALS, "="), (W, "b"))),
    Case("assignment-number", "x=1", expected=((W, "x"), (TT.EQUALS, "="), (TT.NUMBER, "1"))),
    Case("semicolon", "a;b", expected=((W, "a"), (TT.SEMICOLON, ";"), (W, "b"))),
    Case(
        "path",
        "/usr/bin/grep",
        expected_types=(TT.FORWARD_SLASH, W, TT.FORWARD_SLASH, W, TT.FORWARD_SLASH, W),
    ),
    Case(
        "single-quoted",
        "echo 'hi there'",
        expected_types=(W, TT.SPACE, TT.SINGLE_QUOTE, W, TT.SPACE, W, TT.SINGLE_QUOTE),
    ),
    Case(
        "double-quoted-escape",
        'echo "\\""',
        expected_types=(W, TT.SPACE, TT.DOUBLE_QUOTE, TT.BACKSLASH, TT.DOUBLE_QUOTE, TT.DOUBLE_QUOTE),
    ),
    Case(
        "substitution",
        "$(ls)",
        expected_types=(TT.DOLLAR, TT.LEFT_PARENTHESIS, W, TT.RIGHT_PARENTHESIS),
    ),
    Case("backticks", "`x`", expected_types=(TT.BACKTICK, W, TT.BACKTICK)),
    Case(
        "line-continuation",
        "a\\\nb",
        expected_types=(W, TT.BACKSLASH, TT.NEWLINE, W),
    ),
    Case("number-ends-at-space", "12 ab", expected_types=(TT.NUMBER, TT.SPACE, W)),
]

OPERATOR_CASES: List[Case] = [
    Case("pipe", "a|b", expected=((W, "a"), (TT.PIPE, "|"), (W, "b"))),
    Case("or", "a||b", expected=((W, "a"), (TT.OR, "||"), (W, "b"))),
    Case("and-spaced", "a && b", expected_types=(W, TT.SPACE, TT.AND, TT.SPACE, W)),
    Case("ampersand", "a&b", expected=((W, "a"), (TT.AMPERSAND, "&"), (W, "b"))),
    Case("trailing-pipe", "a |", expected_types=(W, TT.SPACE, TT.PIPE)),
    Case("trailing-ampersand", "sleep 1 &", expected_types=(W, TT.SPACE, TT.NUMBER, TT.SPACE, TT.AMPERSAND)),
    Case("triple-pipe", "|||", expected=((TT.OR, "||"), (TT.PIPE, "|"))),
    Case("triple-ampersand", "&&&", expected=((TT.AND, "&&"), (TT.AMPERSAND, "&"))),
    Case("pipe-then-ampersand", "|&", expected=((TT.PIPE, "|"), (TT.AMPERSAND, "&"))),
    Case("pipe-before-quote", "|'", expected_types=(TT.PIPE, TT.SINGLE_QUOTE)),
    Case("number-before-pipe", "1|2", expected_types=(TT.NUMBER, TT.PIPE, TT.NUMBER)),
]

ALL_CASES = WORD_CASES + PUNCTUATION_CASES + OPERATOR_CASES


@pytest.mark.parametrize("case", ALL_CASES, ids=lambda case: case.name)
def test_tokenize_cases(case: Case) -> None:
    tokens = tokenize(case.source)

    assert tokens[-1] == Tok(TT.END, "")
    body = tokens[:-1]

    if case.expected is not None:
        assert [(tok.type, tok.text) for tok in body] == list(case.expected)
    if case.expected_types is not None:
        assert types_of(body) == list(case.expected_types)


@pytest.mark.parametrize("source", ["", "   ", "\n\n", " \n \n "])
def test_blank_input_is_just_end(source: str) -> None:
    assert tokenize(source) == [Tok(TT.END, "")]


def test_outer_whitespace_is_stripped() -> None:
    assert types_of(tokenize("\n  ls \n")) == [W, TT.END]


@pytest.mark.parametrize("source", ["\tls\t", "ls\r", "\t"])
def test_tabs_and_carriage_returns_at_the_edges_are_word_text(source: str) -> None:
    tokens = tokenize(source)

    assert types_of(tokens) == [W, TT.END]
    assert tokens[0].text == source


def test_tokens_concatenate_back_to_stripped_text() -> None:
    source = "  FOO=1bc echo \"a b\" $(ls -l /tmp) || x&&y | z; w\n"
    tokens = tokenize(source)

    assert "".join(tok.text for tok in tokens) == source.strip()


def test_offsets_track_original_text() -> None:
    tokens = tokenize("ls -la | wc")

    assert [(tok.text, tok.offset) for tok in tokens] == [
        ("ls", 0),
        (" ", 2),
        ("-la", 3),
        (" ", 6),
        ("|", 7),
        (" ", 8),
        ("wc", 9),
        ("", 11),
    ]


def test_offsets_skip_leading_whitespace() -> None:
    tokens = tokenize("  a  ")

    assert [tok.offset for tok in tokens] == [2, 3]


def test_offset_does_not_affect_equality() -> None:
    assert Tok(W, "abc", 7) == Tok(W, "abc")


def test_unclassified_characters_never_raise() -> None:
    tokens = tokenize("~!@#%^*+[]{}<>?,.:")

    assert types_of(tokens) == [W, TT.END]
    assert tokens[0].text == "~!@#%^*+[]{}<>?,.:"


def test_tokenizer_instance_collects_tokens() -> None:
    tokenizer = Tokenizer("a b")
    tokens = tokenizer.tokenize()

    assert tokens is tokenizer.tokens
    assert types_of(tokens) == [W, TT.SPACE, W, TT.END]


def test_tokenizer_traces_at_debug(parser_trace) -> None:
    tokenize("a|b")

    messages = [record.getMessage() for record in parser_trace.records]
    assert any("adding token PIPE" in message for message in messages)
