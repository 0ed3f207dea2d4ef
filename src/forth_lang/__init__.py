"""A small Forth evaluator: arithmetic, stack words and word definitions"""

__version__ = "0.1.0"

from .config_classes import EvaluatorConfig
from .exceptions import ForthError, UnexpectedError, UserResolvableError
from .forth_parser.lexer import LexError, tokenize
from .machine.dictionary import (
    Composite,
    Dictionary,
    InvalidDefinition,
    Primitive,
    UnknownWord,
)
from .machine.evaluator import DivisionByZero, Evaluator, UnbalancedDefinition
from .machine.state import Stack, StackUnderflow
