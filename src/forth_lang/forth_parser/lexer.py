"""Split Forth source text into NUMBER and WORD tokens"""

import re

from sly import Lexer

from ..config_classes import EvaluatorConfig
from ..exceptions import UserResolvableError

NUMBER = "NUMBER"
WORD = "WORD"

# Underscore-prefixed so that sly doesn't turn it into a token name inside the
# lexer class body
_NUMBER_PATTERN = r"[+-]?[0-9]+"


class LexError(UserResolvableError):
    """Invalid token"""

    def __init__(self, msg, text, index):
        self.text = text
        self.index = index
        super().__init__(msg, f"{text}\n{' ' * index}^")


class ForthLexer(Lexer):
    def __init__(self, config: EvaluatorConfig = None):
        super().__init__()
        self.config = config or EvaluatorConfig()

    tokens = {NUMBER, WORD}

    # Any run of whitespace (not just spaces) separates tokens
    ignore_whitespace = r"\s+"

    # Only a whole whitespace-delimited run is a number, so "12abc" is a WORD
    @_(_NUMBER_PATTERN + r"(?!\S)")
    def NUMBER(self, t):
        value = int(t.value)
        if not self.config.in_range(value):
            raise LexError(
                f"`{t.value}' does not fit in a {self.config.cell_bits}-bit cell",
                self.text,
                t.index,
            )
        t.value = value
        return t

    @_(r"\S+")
    def WORD(self, t):
        t.value = t.value.lower()
        return t


class TokenStream:
    """A lazy, restartable sequence of tokens

    Every iteration lexes the text again from the start, so the stream can be
    walked more than once.
    """

    def __init__(self, text: str, config: EvaluatorConfig = None):
        self.text = text
        self.config = config or EvaluatorConfig()

    def __iter__(self):
        return ForthLexer(self.config).tokenize(self.text)

    def __repr__(self):
        return f"<TokenStream {self.text!r}>"


def tokenize(text: str, config: EvaluatorConfig = None) -> TokenStream:
    """Tokenize a line of Forth"""
    return TokenStream(text, config)


def is_number_literal(text: str) -> bool:
    """Check whether text would lex as a single NUMBER"""
    return re.fullmatch(_NUMBER_PATTERN, text) is not None
