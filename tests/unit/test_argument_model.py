"""
Tests for the argument/tool data model: type coercion, defaults, builders
"""

import pytest

from dispatchcore.core.errors import UnknownArgumentType
from dispatchcore.core.tools import ArgumentType, define_arg, define_tool


def test_array_is_compact_json():
    assert ArgumentType.ARRAY.format(["item1", "item2"]) == '["item1","item2"]'


def test_array_keeps_nested_values():
    assert ArgumentType.ARRAY.format([1, {"k": "v"}, None]) == '[1,{"k":"v"},null]'


def test_number_decimal_text():
    assert ArgumentType.NUMBER.format(42) == "42"
    assert ArgumentType.NUMBER.format(5.5) == "5.5"
    # integral floats drop the fractional part
    assert ArgumentType.NUMBER.format(8.0) == "8"
    assert ArgumentType.NUMBER.format(-3) == "-3"


@pytest.mark.parametrize("value, expected", [
    (1e20, "100000000000000000000"),
    (1e-07, "0.0000001"),
    (2.5e-5, "0.000025"),
    (-1.5e-10, "-0.00000000015"),
    (0.1, "0.1"),
])
def test_number_never_uses_exponent(value, expected):
    assert ArgumentType.NUMBER.format(value) == expected


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_number_rejected(value):
    with pytest.raises(TypeError):
        ArgumentType.NUMBER.format(value)


@pytest.mark.parametrize("text", ["nan", "inf", "-Infinity"])
def test_non_finite_default_rejected(text):
    with pytest.raises(ValueError):
        define_arg("x", ArgumentType.NUMBER, default=text)


def test_boolean_spelling():
    assert ArgumentType.BOOLEAN.format(True) == "true"
    assert ArgumentType.BOOLEAN.format(False) == "false"


def test_string_as_is():
    assert ArgumentType.STRING.format("hello world") == "hello world"


@pytest.mark.parametrize(
    "arg_type, value",
    [
        (ArgumentType.STRING, 5),
        (ArgumentType.NUMBER, "5"),
        (ArgumentType.NUMBER, True),
        (ArgumentType.BOOLEAN, "true"),
        (ArgumentType.BOOLEAN, 1),
        (ArgumentType.ARRAY, "a,b"),
        (ArgumentType.ARRAY, {"a": 1}),
    ],
)
def test_wrong_type_rejected(arg_type, value):
    with pytest.raises(TypeError):
        arg_type.format(value)


def test_parse_spellings():
    assert ArgumentType.parse("string") is ArgumentType.STRING
    assert ArgumentType.parse("array") is ArgumentType.ARRAY


def test_parse_unknown_spelling():
    with pytest.raises(UnknownArgumentType) as exc:
        ArgumentType.parse("integer")
    assert exc.value.type_string == "integer"
    assert "Unknown arg type: integer" in exc.value.message


def test_default_values_parsed_by_type():
    assert define_arg("n", "number", default="10").default_value() == 10
    assert define_arg("n", "number", default="2.5").default_value() == 2.5
    assert define_arg("b", "boolean", default="TRUE").default_value() is True
    assert define_arg("a", "array", default='["x"]').default_value() == ["x"]
    assert define_arg("s", "string", default="abc").default_value() == "abc"
    assert define_arg("s", "string").default_value() is None


def test_invalid_default_rejected_by_builder():
    with pytest.raises(ValueError):
        define_arg("b", "boolean", default="maybe")
    with pytest.raises(ValueError):
        define_arg("a", "array", default='{"not": "array"}')


def test_define_tool_rejects_duplicate_args():
    with pytest.raises(ValueError, match="more than once"):
        define_tool("t", "d", "echo", [define_arg("x"), define_arg("x")])


def test_define_tool_requires_command_or_handler():
    with pytest.raises(ValueError):
        define_tool("t", "d")
    tool = define_tool("t", "d", internal_handler="add")
    assert tool.is_internal


def test_to_schema():
    tool = define_tool(
        "file_info",
        "Get file information",
        "stat",
        [
            define_arg("path", "string", description="File path", required=True),
            define_arg("format", "string", description="Output format", cli_flag="-f", default="%s"),
        ],
    )
    schema = tool.to_schema()
    assert schema["name"] == "file_info"
    assert schema["parameters"]["type"] == "object"
    assert schema["parameters"]["required"] == ["path"]
    assert schema["parameters"]["properties"]["path"] == {"description": "File path", "type": "string"}
    assert schema["parameters"]["properties"]["format"]["default"] == "%s"


def test_full_description_includes_example():
    tool = define_tool("t", "Does things", "echo", example_output={"status": "ok"})
    text = tool.full_description()
    assert text.startswith("Does things\n\nExample output:\n```json\n")
    assert '"status": "ok"' in text
    assert text.endswith("```")

    plain = define_tool("t", "Does things", "echo")
    assert plain.full_description() == "Does things"


def test_definitions_are_immutable():
    tool = define_tool("t", "d", "echo")
    with pytest.raises(AttributeError):
        tool.name = "other"
