"""The Forth evaluator

Executes one line at a time against a single data stack. Evaluation is
atomic: if anything goes wrong the stack is put back the way it was before
the line started, and the error is raised to the caller. Definitions that
completed earlier in a failing line are kept.
"""

import logging
from functools import singledispatchmethod
from typing import Iterable, List

from ..config import load as load_config
from ..config_classes import EvaluatorConfig
from ..exceptions import UserResolvableError
from ..forth_parser.lexer import NUMBER, tokenize
from .dictionary import Definition, Dictionary, InvalidDefinition, UnknownWord
from .instruction import Instruction
from .instructionset import *
from .state import Stack

LOG = logging.getLogger(__name__)

START_DEFINITION = ":"
END_DEFINITION = ";"


class DivisionByZero(UserResolvableError):
    """Division by zero"""

    def __init__(self, dividend: int):
        super().__init__(f"cannot divide {dividend} by 0", "")


class UnbalancedDefinition(UserResolvableError):
    """Unbalanced definition"""

    def __init__(self, msg: str):
        super().__init__(msg, "Every `:' needs a matching `;'.")


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (not floor, like //)"""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class Evaluator:
    """Evaluate lines of Forth

    Each Evaluator owns its own Dictionary and Stack.
    """

    def __init__(self, config: EvaluatorConfig = None):
        self.config = config or EvaluatorConfig()
        self.dictionary = Dictionary()
        self._stack = Stack()

    @classmethod
    def from_config_file(cls, path=None, missing_ok: bool = False) -> "Evaluator":
        """Make an Evaluator configured by a TOML file (see forth_lang.config)"""
        return cls(load_config(path, missing_ok=missing_ok).evaluator)

    @property
    def stack(self) -> List[int]:
        """The stack contents, bottom to top"""
        return self._stack.values()

    def evaluate(self, line: str) -> List[int]:
        """Evaluate a line and return the resulting stack, bottom to top"""
        snapshot = self._stack.snapshot()
        try:
            self._run(tokenize(line, self.config))
        except Exception as exc:
            LOG.debug("Rolling back %r: %s", line, type(exc).__name__)
            self._stack.restore(snapshot)
            raise
        return self.stack

    def evaluate_many(self, lines: Iterable[str]) -> List[int]:
        """Evaluate lines in order, stopping at the first error"""
        for line in lines:
            self.evaluate(line)
        return self.stack

    def _run(self, tokens):
        name = None
        body = None  # not None while defining

        for token in tokens:
            if body is None:
                if token.type == NUMBER:
                    self._stack.push(token.value)
                elif token.value == START_DEFINITION:
                    body = []
                elif token.value == END_DEFINITION:
                    raise UnbalancedDefinition(f"`{END_DEFINITION}' without `:'")
                else:
                    self.execute(token.value)

            elif name is None:
                if token.type == NUMBER or token.value in (
                    START_DEFINITION,
                    END_DEFINITION,
                ):
                    raise InvalidDefinition(
                        f"expected a word name after `:', got `{token.value}'"
                    )
                name = token.value

            elif token.type != NUMBER and token.value == END_DEFINITION:
                self.dictionary.define(name, body)
                name = None
                body = None

            elif token.type != NUMBER and token.value == START_DEFINITION:
                raise InvalidDefinition(f"definition of `{name}' contains `:'")

            else:
                body.append(token)

        if body is not None:
            what = f"definition of `{name}'" if name else f"`{START_DEFINITION}'"
            raise UnbalancedDefinition(f"{what} is missing `{END_DEFINITION}'")

    def execute(self, word: str):
        """Execute a word against the stack"""
        definition: Definition = self.dictionary.lookup(word)
        if definition is None:
            raise UnknownWord(word)
        for instr in definition.instructions():
            self._stack.require(instr.arity, word)
            self.evali(instr)

    @singledispatchmethod
    def evali(self, i: Instruction):
        """Evaluate instruction"""
        raise NotImplementedError(i)

    @evali.register
    def _(self, i: PushV):
        self._stack.push(i.operands[0])

    @evali.register
    def _(self, i: Plus):
        b = self._stack.pop()
        a = self._stack.pop()
        self._stack.push(a + b)

    @evali.register
    def _(self, i: Minus):
        b = self._stack.pop()
        a = self._stack.pop()
        self._stack.push(a - b)

    @evali.register
    def _(self, i: Multiply):
        b = self._stack.pop()
        a = self._stack.pop()
        self._stack.push(a * b)

    @evali.register
    def _(self, i: Divide):
        b = self._stack.pop()
        a = self._stack.pop()
        if b == 0:
            raise DivisionByZero(a)
        self._stack.push(truncating_div(a, b))

    @evali.register
    def _(self, i: Dup):
        self._stack.push(self._stack.peek(0))

    @evali.register
    def _(self, i: Drop):
        self._stack.pop()

    @evali.register
    def _(self, i: Swap):
        b = self._stack.pop()
        a = self._stack.pop()
        self._stack.push(b)
        self._stack.push(a)

    @evali.register
    def _(self, i: Over):
        self._stack.push(self._stack.peek(1))
