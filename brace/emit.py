import typing as t

from brace.exc import BraceTypeError
from brace.snippets import Text, is_text


class Emitter:
    """Collects statements into one multi-line body.

    ``emitter.get`` is itself a body producer, so it can be handed to a
    block construct before all of its statements have been emitted.
    """

    def __init__(self) -> None:
        self._buf: t.List[str] = []

    def emit(self, *fragments: Text) -> None:
        if not fragments:
            self._buf.append("")
            return
        for fragment in fragments:
            if not is_text(fragment):
                raise BraceTypeError("fragment", "a string or a snippet", fragment)
        self._buf.extend(str(fragment) for fragment in fragments)

    def get(self) -> str:
        return "\n".join(self._buf)
