import string
import typing as t

from brace.diagnostics import Diagnostic

ALPHABET: t.Final[t.Tuple[str, ...]] = tuple(string.ascii_lowercase)

# Position of "i", the conventional innermost loop counter.
DEFAULT_START: t.Final = 8


class IteratorAllocator:
    """Hands out loop counter names that never repeat until reset.

    Names run ``i`` .. ``z``, then continue with each letter repeated once
    more per trip through the alphabet (``aa``, ``bb``, .., ``zz``, ``aaa``).
    The name only depends on how many were handed out since the last reset;
    the surrounding code is never consulted.
    """

    def __init__(self, start: int = DEFAULT_START):
        assert start >= 0
        self._start = start
        self.position = start

    def next_name(self) -> str:
        repeat, index = divmod(self.position, len(ALPHABET))
        name = ALPHABET[index] * (repeat + 1)
        # Warn once per name length, not on every allocation
        if repeat and (index == 0 or self.position == self._start):
            Diagnostic.repeated_iterator_name(name)
        self.position += 1
        return name

    __next__ = next_name

    def __iter__(self) -> "IteratorAllocator":
        return self

    def reset(self) -> None:
        self.position = self._start


default_allocator: t.Final = IteratorAllocator()


def next_iterator_name() -> str:
    return default_allocator.next_name()


def reset_iterator_names() -> None:
    default_allocator.reset()
