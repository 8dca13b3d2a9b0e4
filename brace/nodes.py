import typing as t
from dataclasses import dataclass
from functools import partial

from patina import None_, Option, Some

from brace.diagnostics import Diagnostic
from brace.formatting import clean_line, format_block
from brace.iterators import IteratorAllocator, default_allocator
from brace.snippets import Body, Construct, Snippet, render_body

T = t.TypeVar("T")


def _maybe(value: t.Optional[T]) -> Option[T]:
    # An empty string counts as absent
    if value is None or value == "":
        return None_()
    return Some(value)


def _args(args: t.Sequence[str]) -> str:
    return ", ".join(args)


def _block(construct: str, head: str, body: str, tail: str = "}") -> str:
    if not body.strip():
        Diagnostic.empty_body(construct)
    return format_block(f"{head}\n{body}\n{tail}")


@dataclass
class Variable(Construct):
    name: str
    value: t.Optional[str] = None

    def _render(self) -> str:
        value = _maybe(self.value).map(lambda v: f" = {v}").unwrap_or("")
        return clean_line(f"var {self.name}{value};")


@dataclass
class ReassignVariable(Construct):
    name: str
    value: str

    def _render(self) -> str:
        return clean_line(f"{self.name} = {self.value};")


@dataclass
class IncrementVariable(Construct):
    name: str
    value: t.Optional[str] = None

    # Without a value this is an expression, usable as a for loop update
    def _render(self) -> str:
        return clean_line(
            _maybe(self.value)
            .map(lambda v: f"{self.name} += {v};")
            .unwrap_or(f"{self.name}++")
        )


@dataclass
class DecrementVariable(Construct):
    name: str
    value: t.Optional[str] = None

    def _render(self) -> str:
        return clean_line(
            _maybe(self.value)
            .map(lambda v: f"{self.name} -= {v};")
            .unwrap_or(f"{self.name}--")
        )


@dataclass
class FirstClassFunction(Construct):
    name: str
    body: Body
    args: t.Sequence[str] = ()

    def _render(self) -> str:
        return _block(
            "function",
            f"var {self.name} = function({_args(self.args)}) " + "{",
            render_body(self.body),
            "};",
        )


@dataclass
class NewInstance(Construct):
    type: str
    args: t.Sequence[str] = ()

    def _render(self) -> str:
        return clean_line(f"new {self.type}({_args(self.args)});")


@dataclass
class ObjectFunction(Construct):
    func_name: str
    body: Body
    obj_name: str = "this"
    args: t.Sequence[str] = ()

    def _render(self) -> str:
        return _block(
            "function",
            f"{self.obj_name}.{self.func_name} = function({_args(self.args)}) "
            + "{",
            render_body(self.body),
            "};",
        )


@dataclass
class DoStatement(Construct):
    condition: str
    body: Body

    def _render(self) -> str:
        return _block(
            "do",
            "do {",
            render_body(self.body),
            "} while (%s);" % self.condition,
        )


@dataclass
class WhileStatement(Construct):
    condition: str
    body: Body

    def _render(self) -> str:
        return _block(
            "while", "while (%s) {" % self.condition, render_body(self.body)
        )


@dataclass
class IfStatement(Construct):
    condition: str
    body: Body

    def _render(self) -> str:
        return _block("if", "if (%s) {" % self.condition, render_body(self.body))


@dataclass
class ElseIfStatement(Construct):
    condition: str
    body: Body

    def _render(self) -> str:
        return _block(
            "else if", "else if (%s) {" % self.condition, render_body(self.body)
        )


@dataclass
class ElseStatement(Construct):
    body: Body

    def _render(self) -> str:
        return _block("else", "else {", render_body(self.body))


@dataclass
class ForLoop(Construct):
    start_condition: str
    stop_condition: str
    increment_action: str
    body: Body

    def _render(self) -> str:
        head = "for (%s; %s; %s) {" % (
            self.start_condition,
            self.stop_condition,
            self.increment_action,
        )
        return _block("for", head, render_body(self.body))


@dataclass
class ForEachLoop(Construct):
    object_array: str
    iteration_name: str
    body: Body

    def _render(self) -> str:
        return _block(
            "forEach",
            f"{self.object_array}.forEach({self.iteration_name} => " + "{",
            render_body(self.body),
            "});",
        )


@dataclass
class TryBlock(Construct):
    body: Body

    def _render(self) -> str:
        return _block("try", "try {", render_body(self.body))


@dataclass
class CatchBlock(Construct):
    body: Body
    arg: t.Optional[str] = None

    # A producer body that takes a parameter is handed the caught name
    def _render(self) -> str:
        return _block(
            "catch",
            "catch(%s) {" % _maybe(self.arg).unwrap_or(""),
            render_body(self.body, self.arg),
        )


@dataclass
class ObjectFunctionCall(Construct):
    func_name: str
    obj_name: str = "this"
    args: t.Sequence[str] = ()

    def _render(self) -> str:
        return clean_line(f"{self.obj_name}.{self.func_name}({_args(self.args)});")


@dataclass
class ChainFunction(Construct):
    name: str
    args: t.Sequence[str] = ()

    def _render(self) -> str:
        return clean_line(f".{self.name}({_args(self.args)})")


@dataclass
class ObjectPropertyAssignment(Construct):
    prop_name: str
    value: str
    obj_name: str = "this"
    dot_notation: bool = True

    @property
    def target(self) -> str:
        if self.dot_notation:
            return f"{self.obj_name}.{self.prop_name}"
        return f'{self.obj_name}["{self.prop_name}"]'

    def data(self) -> t.Dict[str, t.Any]:
        return {**super().data(), "name": self.target}

    def _render(self) -> str:
        return clean_line(f"{self.target} = {self.value};")


@dataclass
class ReturnStatement(Construct):
    value: t.Optional[str] = None

    def _render(self) -> str:
        return clean_line(
            _maybe(self.value).map(lambda v: f"return {v};").unwrap_or("return;")
        )


@dataclass
class ConsoleLog(Construct):
    args: t.Sequence[str] = ()

    def _render(self) -> str:
        return clean_line(f"console.log({_args(self.args)});")


@dataclass
class Comment(Construct):
    text: str
    block: bool = False

    def _render(self) -> str:
        if self.block:
            return format_block(f"/*\n{self.text}\n*/")
        return clean_line(f"// {self.text}")


def for_loop_over(
    length: str,
    body: Body,
    allocator: t.Optional[IteratorAllocator] = None,
) -> Snippet:
    """Render ``for (var i = 0; i < length; i++)`` with a fresh counter.

    A callable body that takes a parameter is called with the counter
    name, so nested calls made from inside it get the next name along.
    """
    if allocator is None:
        allocator = default_allocator
    name = allocator.next_name()

    # render_body decides whether the producer gets the name
    loop_body: Body = partial(render_body, body, name) if callable(body) else body

    return ForLoop(
        start_condition=f"var {name} = 0",
        stop_condition=f"{name} < {length}",
        increment_action=IncrementVariable(name).render().code,
        body=loop_body,
    ).render()
