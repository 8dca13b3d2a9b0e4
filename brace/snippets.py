import abc
import dataclasses
import inspect
import types
import typing as t
from dataclasses import dataclass

from typing_extensions import TypeGuard

from brace.exc import BraceTypeError


@dataclass(frozen=True)
class Snippet:
    """One rendered fragment plus the input that produced it."""

    code: str
    data: t.Optional[t.Mapping[str, t.Any]] = None

    def __post_init__(self):
        if self.data is not None:
            # Copy so later changes to the caller's mapping don't leak in
            object.__setattr__(self, "data", types.MappingProxyType(dict(self.data)))

    def __str__(self):
        return self.code


Text = t.Union[str, Snippet]
Body = t.Union[Text, t.Callable[..., Text]]


def is_text(value: object) -> TypeGuard[Text]:
    return isinstance(value, (str, Snippet))


def takes_arguments(producer: t.Callable[..., t.Any], *args: t.Any) -> bool:
    try:
        inspect.signature(producer).bind(*args)
    except TypeError:
        return False
    return True


def render_body(body: Body, *args: t.Any) -> str:
    """Produce the text of a body, calling it first if it is a producer.

    Producers that accept them are passed *args, others are called with
    no arguments. Exceptions raised by a producer are not caught here.
    """
    if callable(body):
        body = body(*args) if takes_arguments(body, *args) else body()
    if not is_text(body):
        raise BraceTypeError(
            "body", "a string, a snippet or a callable returning one", body
        )
    return str(body)


class Construct(abc.ABC):
    """Base for the emitter input records in ``brace.nodes``."""

    @abc.abstractmethod
    def _render(self) -> str:
        ...

    def data(self) -> t.Dict[str, t.Any]:
        return {
            field.name: getattr(self, field.name)
            for field in dataclasses.fields(t.cast(t.Any, self))
        }

    def render(self) -> Snippet:
        return Snippet(code=self._render(), data=self.data())
