# dispatchcore/core/tools/__init__.py
"""
Tool model, parameter mapping, built-in handlers and the catalogue.
"""

from .spec import (
    ArgumentType,
    ArgumentDefinition,
    ToolDefinition,
    define_arg,
    define_tool,
)
from .mapper import map_parameters
from .builtin import InternalHandler, dispatch_internal
from .registry import ToolCatalogue, LoadOutcome

__all__ = [
    "ArgumentType",
    "ArgumentDefinition",
    "ToolDefinition",
    "define_arg",
    "define_tool",
    "map_parameters",
    "InternalHandler",
    "dispatch_internal",
    "ToolCatalogue",
    "LoadOutcome",
]
