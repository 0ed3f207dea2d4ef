"""The word dictionary

Words are compiled when they are defined: every word used in a definition's
body is resolved against the dictionary *at that moment*. A Composite keeps
the Definition objects it was built from (which are immutable), never their
names, so redefining a word later does not change words already built on it.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from ..exceptions import UserResolvableError
from ..forth_parser.lexer import NUMBER, WORD, is_number_literal
from .instruction import Instruction
from .instructionset import *

LOG = logging.getLogger(__name__)

PRIMITIVES = {
    "+": Plus,
    "-": Minus,
    "*": Multiply,
    "/": Divide,
    "dup": Dup,
    "drop": Drop,
    "swap": Swap,
    "over": Over,
}

RESERVED = (":", ";")


class UnknownWord(UserResolvableError):
    """Unknown word"""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"`{word}' is not defined", "")


class InvalidDefinition(UserResolvableError):
    """Invalid definition"""

    def __init__(self, msg: str):
        super().__init__(msg, "Definitions look like `: name body... ;'")


@dataclass(frozen=True)
class Primitive:
    """A built-in word"""

    name: str
    instruction: Instruction

    def instructions(self) -> Iterator[Instruction]:
        yield self.instruction


@dataclass(frozen=True)
class Composite:
    """A user-defined word

    body holds Instructions, and Composites that were current when this word
    was defined.
    """

    name: str
    body: Tuple[Union[Instruction, "Composite"], ...]

    def instructions(self) -> Iterator[Instruction]:
        """Walk the body, expanding nested Composites, without recursion"""
        pending = [iter(self.body)]
        while pending:
            op = next(pending[-1], None)
            if op is None:
                pending.pop()
            elif isinstance(op, Composite):
                pending.append(iter(op.body))
            else:
                yield op

    def listing(self) -> List[Instruction]:
        """The fully flattened instruction sequence"""
        return list(self.instructions())


Definition = Union[Primitive, Composite]


def canonical(name: str) -> str:
    return name.lower()


class Dictionary:
    """Mapping from canonical word name to Definition"""

    def __init__(self):
        self._words: Dict[str, Definition] = {
            name: Primitive(name, cls()) for name, cls in PRIMITIVES.items()
        }

    def lookup(self, name: str) -> Optional[Definition]:
        return self._words.get(canonical(name))

    def define(self, name: str, body_tokens: Iterable) -> Composite:
        """Compile body_tokens and install them as name

        Nothing is installed if any word in the body is unknown.
        """
        name = canonical(name)
        if not name or name in RESERVED or is_number_literal(name):
            raise InvalidDefinition(f"`{name}' cannot be used as a word name")

        body = []
        for token in body_tokens:
            if token.type == NUMBER:
                body.append(PushV(token.value))
            elif token.type == WORD:
                definition = self.lookup(token.value)
                if definition is None:
                    raise UnknownWord(token.value)
                if isinstance(definition, Primitive):
                    body.append(definition.instruction)
                elif definition.body:
                    body.append(definition)
            else:
                raise TypeError(f"Not a token: {token!r}")

        word = Composite(name, tuple(body))
        if name in self._words:
            LOG.debug("Redefining %s", name)
        else:
            LOG.debug("Defining %s", name)
        self._words[name] = word
        return word

    def names(self) -> List[str]:
        return sorted(self._words)

    def __contains__(self, name):
        return canonical(name) in self._words

    def __len__(self):
        return len(self._words)
