import pytest

from forth_lang.config_classes import EvaluatorConfig
from forth_lang.forth_parser.lexer import (
    NUMBER,
    WORD,
    LexError,
    is_number_literal,
    tokenize,
)


def lex(text, config=None):
    return [(t.type, t.value) for t in tokenize(text, config)]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("   ", []),
        ("1 2", [(NUMBER, 1), (NUMBER, 2)]),
        ("-5 +7", [(NUMBER, -5), (NUMBER, 7)]),
        ("DUP Dup dup", [(WORD, "dup")] * 3),
        ("1\t2\n+", [(NUMBER, 1), (NUMBER, 2), (WORD, "+")]),
        ("12abc 1-", [(WORD, "12abc"), (WORD, "1-")]),
        ("- + : ;", [(WORD, "-"), (WORD, "+"), (WORD, ":"), (WORD, ";")]),
        (": Foo 1 ;", [(WORD, ":"), (WORD, "foo"), (NUMBER, 1), (WORD, ";")]),
    ],
)
def test_tokens(text, expected):
    assert lex(text) == expected


def test_stream_is_restartable():
    stream = tokenize("1 swap")
    first = [(t.type, t.value) for t in stream]
    second = [(t.type, t.value) for t in stream]
    assert first == second == [(NUMBER, 1), (WORD, "swap")]


def test_stream_is_lazy():
    # The bad literal is only reached after the first token has been produced
    tokens = iter(tokenize("1 99999999999"))
    assert next(tokens).value == 1
    with pytest.raises(LexError):
        next(tokens)


@pytest.mark.parametrize(
    "bits, ok, too_big",
    [
        (16, ["32767", "-32768"], ["32768", "-32769"]),
        (32, ["2147483647", "-2147483648"], ["2147483648", "-2147483649"]),
    ],
)
def test_cell_range(bits, ok, too_big):
    config = EvaluatorConfig(cell_bits=bits)
    for text in ok:
        assert lex(text, config) == [(NUMBER, int(text))]
    for text in too_big:
        with pytest.raises(LexError):
            lex(text, config)


def test_lex_error_points_at_token():
    with pytest.raises(LexError) as exc:
        lex("1 2 4294967296")
    assert exc.value.index == 4
    assert exc.value.suggested_fix.endswith("\n    ^")


@pytest.mark.parametrize(
    "text, expected",
    [("5", True), ("-5", True), ("+5", True), ("-", False), ("5x", False), ("", False)],
)
def test_is_number_literal(text, expected):
    assert is_number_literal(text) is expected
