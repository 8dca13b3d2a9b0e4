import re
import typing as t
from dataclasses import dataclass

from brace.exc import BraceTypeError

_duplicate_terminators = re.compile(r";{2,}")


def clean_line(line: str) -> str:
    """Collapse every run of statement terminators into a single one."""
    return _duplicate_terminators.sub(";", line)


@dataclass(frozen=True)
class Formatter:
    """Re-indents a rendered block one level relative to its delimiters.

    The first and last lines of a block are its opening and closing
    delimiter lines; they are left where the enclosing template puts them.
    Every line in between gets exactly one indentation unit. Because each
    construct only indents its own interior, nested blocks end up at the
    right depth without any of them knowing how deep they are.
    """

    spaces_per_tab: int = 4
    tabs: int = 1

    def indentation(self, tabs: int) -> str:
        return " " * (self.spaces_per_tab * tabs)

    def format(self, code: str) -> str:
        if not isinstance(code, str):
            raise BraceTypeError("code", "a string", code)

        lines = code.split("\n")
        last = len(lines) - 1
        unit = self.indentation(self.tabs)
        return "\n".join(
            clean_line(line) if i in (0, last) else unit + clean_line(line)
            for i, line in enumerate(lines)
        )

    __call__ = format


default_formatter: t.Final = Formatter()


def format_block(code: str) -> str:
    return default_formatter.format(code)
