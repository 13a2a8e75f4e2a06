# dispatchcore/core/tools/mapper.py
"""
Parameter Mapper - turns a parameter map into a command-line token list

Token order:
1. static_flags, verbatim
2. declared arguments in declaration order, ``flag value`` or ``value``

Nothing here has side effects; a MappingError means no process was spawned.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from ..errors import InvalidArgumentType, MissingRequiredArgument
from .spec import ArgumentDefinition, ToolDefinition


def map_parameters(definition: ToolDefinition, params: Optional[Mapping[str, Any]]) -> List[str]:
    """
    Map a runtime parameter map onto argv tokens for ``definition``.

    Args:
        definition: Tool being invoked
        params: Caller-supplied values keyed by argument name

    Returns:
        Ordered argv tokens (the command itself excluded)

    Raises:
        MissingRequiredArgument: A required argument has no value and no default
        InvalidArgumentType: A value does not match the declared type
    """
    params = params or {}
    argv: List[str] = list(definition.static_flags)

    for arg in definition.args:
        value = params.get(arg.name)

        if value is None:
            value = arg.default_value()

        if value is None:
            if arg.required:
                raise MissingRequiredArgument(definition.name, arg.name)
            continue

        token = _format(definition, arg, value)
        if arg.cli_flag is not None:
            argv.append(arg.cli_flag)
        argv.append(token)

    return argv


def _format(definition: ToolDefinition, arg: ArgumentDefinition, value: Any) -> str:
    try:
        return arg.type.format(value)
    except TypeError:
        raise InvalidArgumentType(definition.name, arg.name, arg.type.value) from None


__all__ = ["map_parameters"]
