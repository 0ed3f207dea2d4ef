"""Machine state representation"""

from typing import List, Tuple

from ..exceptions import UserResolvableError


class StackUnderflow(UserResolvableError):
    """Stack underflow"""

    def __init__(self, needed: int, available: int, word: str = None):
        self.needed = needed
        self.available = available
        self.word = word
        where = f"`{word}' " if word else ""
        super().__init__(
            f"{where}needs {needed} value(s), but the stack holds {available}",
            "Push more values before using this word.",
        )


class Stack:
    """The data stack: a LIFO sequence of integers"""

    def __init__(self, data=()):
        self._ds = list(data)

    def push(self, val: int):
        if type(val) is not int:
            raise TypeError(f"Cannot store {val} ({type(val)})")
        self._ds.append(val)

    def pop(self) -> int:
        self.require(1)
        return self._ds.pop()

    def peek(self, offset: int = 0) -> int:
        """Peek at the Nth value from the top of the stack (0-indexed)"""
        self.require(offset + 1)
        return self._ds[-(offset + 1)]

    def require(self, n: int, word: str = None):
        """Check that at least n values are on the stack"""
        if len(self._ds) < n:
            raise StackUnderflow(n, len(self._ds), word)

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self._ds)

    def restore(self, snapshot: Tuple[int, ...]):
        self._ds = list(snapshot)

    def values(self) -> List[int]:
        """The stack contents, bottom to top"""
        return list(self._ds)

    def __len__(self):
        return len(self._ds)

    def __eq__(self, other):
        return isinstance(other, Stack) and self._ds == other._ds

    def __str__(self):
        return f"<Stack {self._ds}>"
