import pytest

from brace.emit import Emitter
from brace.exc import BraceTypeError
from brace.nodes import FirstClassFunction, ReturnStatement, Variable


def test_emit_joins_lines():
    e = Emitter()
    e.emit("a();", "b();")
    e.emit()
    e.emit(ReturnStatement("1").render())
    assert e.get() == "a();\nb();\n\nreturn 1;"


def test_empty_emitter():
    assert Emitter().get() == ""


def test_get_is_a_deferred_body():
    e = Emitter()
    fn = FirstClassFunction("main", body=e.get)
    e.emit(Variable("x", "1").render(), ReturnStatement("x").render())
    assert fn.render().code == "var main = function() {\n    var x = 1;\n    return x;\n};"


def test_bad_fragment_leaves_buffer_untouched():
    e = Emitter()
    with pytest.raises(BraceTypeError):
        e.emit("ok();", 3)  # type: ignore
    assert e.get() == ""
