import pytest

from brace.exc import BraceTypeError
from brace.formatting import Formatter, clean_line, format_block


def test_single_line_is_only_cleaned():
    assert format_block("var x = 1;;") == "var x = 1;"
    assert format_block("    already indented") == "    already indented"


def test_boundary_lines_get_no_indentation():
    code = "if (x) {;;\n}"
    assert format_block(code) == "if (x) {;\n}"


def test_interior_lines_get_one_unit():
    code = "while (true) {\na();;\nb();\n}"
    assert format_block(code) == "while (true) {\n    a();\n    b();\n}"


def test_line_count_is_preserved():
    code = "a\nb\nc\nd\ne"
    assert len(format_block(code).split("\n")) == 5


def test_empty_interior_line_is_still_indented():
    assert format_block("{\n\n}") == "{\n    \n}"


def test_nested_blocks_compose():
    inner = format_block("if (c) {\nf();\n}")
    outer = format_block(f"for (;;) {{\n{inner}\n}}")
    assert outer.split("\n") == [
        "for (;) {",
        "    if (c) {",
        "        f();",
        "    }",
        "}",
    ]


def test_three_levels_deep():
    code = "d();"
    for head in ("if (c) {", "while (b) {", "try {"):
        code = format_block(f"{head}\n{code}\n}}")
    assert code.split("\n")[3] == "            d();"


@pytest.mark.parametrize(
    "line,expected",
    [
        ("a;;;;b", "a;b"),
        ("a;;b;;;c", "a;b;c"),
        ("a;b", "a;b"),
        ("ab", "ab"),
        (";;", ";"),
        ("", ""),
    ],
)
def test_clean_line(line, expected):
    assert clean_line(line) == expected


def test_duplicates_collapsed_on_interior_lines():
    assert format_block("{\nx;;;\n}") == "{\n    x;\n}"


def test_custom_width():
    fmt = Formatter(spaces_per_tab=2, tabs=2)
    assert fmt.indentation(fmt.tabs) == "    "
    assert fmt("{\nx\n}") == "{\n    x\n}"


def test_zero_tabs_adds_nothing():
    fmt = Formatter(tabs=0)
    assert fmt.format("{\nx\n}") == "{\nx\n}"


def test_empty_input():
    assert format_block("") == ""


def test_non_string_is_rejected():
    with pytest.raises(BraceTypeError):
        format_block(["not", "code"])  # type: ignore

    with pytest.raises(TypeError):
        format_block(None)  # type: ignore
