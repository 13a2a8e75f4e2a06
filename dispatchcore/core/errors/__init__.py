# dispatchcore/core/errors/__init__.py
"""
Core error types for dispatchcore.

No side effects on import.
"""

from . import codes
from .exceptions import (
    DispatchError,
    LoadError,
    ConfigReadError,
    ConfigParseError,
    UnknownArgumentType,
    ToolNotFound,
    MappingError,
    MissingRequiredArgument,
    InvalidArgumentType,
    ExecutionError,
    SpawnFailed,
    CommandFailed,
    InvalidOutputFormat,
    HandlerError,
    UnknownInternalHandler,
    MissingOrInvalidParameter,
    DirectoryUnreadable,
    ResultOutOfRange,
)

__all__ = [
    "codes",
    "DispatchError",
    "LoadError",
    "ConfigReadError",
    "ConfigParseError",
    "UnknownArgumentType",
    "ToolNotFound",
    "MappingError",
    "MissingRequiredArgument",
    "InvalidArgumentType",
    "ExecutionError",
    "SpawnFailed",
    "CommandFailed",
    "InvalidOutputFormat",
    "HandlerError",
    "UnknownInternalHandler",
    "MissingOrInvalidParameter",
    "DirectoryUnreadable",
    "ResultOutOfRange",
]
