# dispatchcore/core/tools/spec.py
"""
Tool Specification - declarative tool and argument definitions

A ToolDefinition is created from a tools document (see dispatchcore.config)
or with the define_tool() builder, and is immutable once registered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union
import json
import math

from ..errors import UnknownArgumentType


class ArgumentType(str, Enum):
    """
    Declared type of a tool argument.

    Determines how a caller-supplied JSON value is rendered as a
    command-line token.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"

    @classmethod
    def parse(cls, spelling: str) -> "ArgumentType":
        """Resolve a configuration spelling, raising UnknownArgumentType"""
        try:
            return cls(spelling)
        except ValueError:
            raise UnknownArgumentType(str(spelling)) from None

    def format(self, value: Any) -> str:
        """
        Render a JSON value as a single command-line token.

        Raises:
            TypeError: If the value is not of this type
        """
        if self is ArgumentType.STRING:
            if not isinstance(value, str):
                raise TypeError("expected string")
            return value

        if self is ArgumentType.NUMBER:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError("expected number")
            return format_number(value)

        if self is ArgumentType.BOOLEAN:
            if not isinstance(value, bool):
                raise TypeError("expected boolean")
            return "true" if value else "false"

        if not isinstance(value, (list, tuple)):
            raise TypeError("expected array")
        return json.dumps(list(value), separators=(",", ":"), ensure_ascii=False)

    def parse_default(self, text: str) -> Any:
        """
        Convert a declared default (always text) into a JSON value of this type.

        Raises:
            ValueError: If the text is not a valid literal for this type
        """
        if self is ArgumentType.STRING:
            return text

        if self is ArgumentType.NUMBER:
            try:
                return int(text)
            except ValueError:
                pass
            value = float(text)
            if not math.isfinite(value):
                raise ValueError(f"not a finite number: {text!r}")
            return value

        if self is ArgumentType.BOOLEAN:
            lowered = text.strip().lower()
            if lowered not in ("true", "false"):
                raise ValueError(f"not a boolean literal: {text!r}")
            return lowered == "true"

        value = json.loads(text)
        if not isinstance(value, list):
            raise ValueError(f"not a JSON array: {text!r}")
        return value


def format_number(value: Union[int, float]) -> str:
    """
    Plain decimal text form, never an exponent.

    Integral floats drop the fractional part; other floats use the shortest
    digits that round-trip.

    Raises:
        TypeError: If the value is NaN or infinite
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise TypeError("expected finite number")
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class ArgumentDefinition:
    """
    One declared parameter of a tool.

    Attributes:
        name: Parameter name (unique within a tool)
        description: Human-readable description
        required: Fail the call when the parameter is absent and has no default
        type: Declared ArgumentType
        cli_flag: Flag emitted before the value; None means positional
        default: Default value as text, applied when the parameter is absent
    """
    name: str
    type: ArgumentType = ArgumentType.STRING
    description: str = ""
    required: bool = False
    cli_flag: Optional[str] = None
    default: Optional[str] = None

    @property
    def positional(self) -> bool:
        return self.cli_flag is None

    def default_value(self) -> Any:
        """Parsed default, or None when no default is declared"""
        if self.default is None:
            return None
        return self.type.parse_default(self.default)


@dataclass(frozen=True)
class ToolDefinition:
    """
    One catalogue entry.

    A tool is either external (``command`` + ``args`` + ``static_flags``) or
    internal (``internal_handler`` names a built-in operation; ``command`` and
    ``args`` are then informational only).
    """
    name: str
    description: str
    command: str = ""
    args: Tuple[ArgumentDefinition, ...] = ()
    static_flags: Tuple[str, ...] = ()
    internal_handler: Optional[str] = None
    example_output: Any = field(default=None, compare=False)

    @property
    def is_internal(self) -> bool:
        return self.internal_handler is not None

    def get_arg(self, name: str) -> Optional[ArgumentDefinition]:
        for arg in self.args:
            if arg.name == name:
                return arg
        return None

    def full_description(self) -> str:
        """Description with the example output appended, when one is declared"""
        if self.example_output is None:
            return self.description
        example = json.dumps(self.example_output, indent=2, ensure_ascii=False)
        return f"{self.description}\n\nExample output:\n```json\n{example}\n```"

    def to_schema(self) -> Dict[str, Any]:
        """JSON-schema style metadata for discovery surfaces"""
        properties: Dict[str, Any] = {}
        for arg in self.args:
            prop: Dict[str, Any] = {
                "description": arg.description,
                "type": arg.type.value,
            }
            if arg.default is not None:
                prop["default"] = arg.default_value()
            properties[arg.name] = prop

        return {
            "name": self.name,
            "description": self.full_description(),
            "parameters": {
                "type": "object",
                "properties": properties,
                "required": [a.name for a in self.args if a.required],
            },
        }


# ---------------------------
# Builders
# ---------------------------

def define_arg(
    name: str,
    type: Union[ArgumentType, str] = ArgumentType.STRING,
    *,
    description: str = "",
    required: bool = False,
    cli_flag: Optional[str] = None,
    default: Optional[str] = None,
) -> ArgumentDefinition:
    """
    Build an ArgumentDefinition.

    Raises:
        UnknownArgumentType: If ``type`` is an unrecognized spelling
        ValueError: If ``default`` is not a valid literal for ``type``
    """
    arg_type = type if isinstance(type, ArgumentType) else ArgumentType.parse(type)
    arg = ArgumentDefinition(
        name=name,
        type=arg_type,
        description=description,
        required=required,
        cli_flag=cli_flag,
        default=default,
    )
    arg.default_value()
    return arg


def define_tool(
    name: str,
    description: str,
    command: str = "",
    args: Iterable[ArgumentDefinition] = (),
    *,
    static_flags: Sequence[str] = (),
    internal_handler: Optional[str] = None,
    example_output: Any = None,
) -> ToolDefinition:
    """
    Build a ToolDefinition.

    Example:
        >>> define_tool(
        ...     "json_format", "Format JSON data", "jq",
        ...     [define_arg("filter", "string", required=True),
        ...      define_arg("compact", "boolean", cli_flag="-c")],
        ... )

    Raises:
        ValueError: On empty name, duplicate argument names, or a missing
            command for an external tool
    """
    if not name or not isinstance(name, str):
        raise ValueError("tool name must be non-empty str")

    arg_list: List[ArgumentDefinition] = list(args)
    seen = set()
    for arg in arg_list:
        if arg.name in seen:
            raise ValueError(f"Tool '{name}' declares argument '{arg.name}' more than once")
        seen.add(arg.name)

    if internal_handler is None and not command:
        raise ValueError(f"Tool '{name}' needs a command or an internal_handler")

    return ToolDefinition(
        name=name,
        description=description,
        command=command,
        args=tuple(arg_list),
        static_flags=tuple(static_flags),
        internal_handler=internal_handler,
        example_output=example_output,
    )


__all__ = [
    "ArgumentType",
    "ArgumentDefinition",
    "ToolDefinition",
    "define_arg",
    "define_tool",
    "format_number",
]
