# dispatchcore/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


@dataclass(eq=False)
class DispatchError(Exception):
    """
    The one public exception type for dispatchcore.

    Every user-triggered failure (bad configuration, unknown tool, bad
    parameters, failing command) is raised as a subclass of this type and
    rendered by the dispatcher as ``{"error": message}``.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "DISPATCH_ERROR"
    phase: str = "unknown"              # load / resolve / map / execute / handler
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        # More useful in logs
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "phase": self.phase,
            "details": self.details,
        }


# ---------------------------
# Catalogue loading
# ---------------------------

class LoadError(DispatchError):
    """Base for failures while loading a tools document."""


class ConfigReadError(LoadError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(
            message=f"Failed to read config file: {cause}",
            error_code=codes.CONFIG_READ_ERROR,
            error_type="LOAD_ERROR",
            phase="load",
            details={"path": path},
            cause=cause,
        )
        self.path = path


class ConfigParseError(LoadError):
    def __init__(self, reason: str, *, path: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(
            message=f"Failed to parse YAML: {reason}",
            error_code=codes.CONFIG_PARSE_ERROR,
            error_type="LOAD_ERROR",
            phase="load",
            details={"path": path} if path else {},
            cause=cause,
        )
        self.reason = reason
        self.path = path


class UnknownArgumentType(LoadError):
    def __init__(self, type_string: str, *, tool: Optional[str] = None, arg: Optional[str] = None):
        super().__init__(
            message=f"Unknown arg type: {type_string}",
            error_code=codes.UNKNOWN_ARGUMENT_TYPE,
            error_type="LOAD_ERROR",
            phase="load",
            details={"type": type_string, "tool": tool, "arg": arg},
        )
        self.type_string = type_string
        self.tool = tool
        self.arg = arg


# ---------------------------
# Resolution
# ---------------------------

class ToolNotFound(DispatchError):
    def __init__(self, tool: str):
        super().__init__(
            message=f"Tool not found: {tool}",
            error_code=codes.TOOL_NOT_FOUND,
            error_type="RESOLVE_ERROR",
            phase="resolve",
            details={"tool": tool},
        )
        self.tool = tool


# ---------------------------
# Parameter mapping
# ---------------------------

class MappingError(DispatchError):
    """Base for parameter validation failures; raised before any spawn."""


class MissingRequiredArgument(MappingError):
    def __init__(self, tool: str, arg: str):
        super().__init__(
            message=f"Missing required argument: {arg}",
            error_code=codes.MISSING_REQUIRED_ARGUMENT,
            error_type="VALIDATION_ERROR",
            phase="map",
            details={"tool": tool, "arg": arg},
        )
        self.tool = tool
        self.arg = arg


class InvalidArgumentType(MappingError):
    def __init__(self, tool: str, arg: str, expected: str):
        super().__init__(
            message=f"Invalid value for argument '{arg}': expected {expected} value",
            error_code=codes.INVALID_ARGUMENT_TYPE,
            error_type="VALIDATION_ERROR",
            phase="map",
            details={"tool": tool, "arg": arg, "expected": expected},
        )
        self.tool = tool
        self.arg = arg
        self.expected = expected


# ---------------------------
# External process
# ---------------------------

class ExecutionError(DispatchError):
    """Base for failures of an external command."""


class SpawnFailed(ExecutionError):
    def __init__(self, command: str, cause: BaseException):
        super().__init__(
            message=f"Failed to execute {command}: {cause}",
            error_code=codes.SPAWN_FAILED,
            error_type="EXECUTION_ERROR",
            phase="execute",
            details={"command": command},
            cause=cause,
        )
        self.command = command


class CommandFailed(ExecutionError):
    def __init__(self, command: str, stderr: str, exit_code: Optional[int] = None):
        super().__init__(
            message=f"Command failed: {stderr}",
            error_code=codes.COMMAND_FAILED,
            error_type="EXECUTION_ERROR",
            phase="execute",
            details={"command": command, "exit_code": exit_code},
        )
        self.command = command
        self.stderr = stderr
        self.exit_code = exit_code


class InvalidOutputFormat(ExecutionError):
    def __init__(self, command: str, parse_error: str):
        super().__init__(
            message=f"Invalid JSON output: {parse_error}",
            error_code=codes.INVALID_OUTPUT_FORMAT,
            error_type="EXECUTION_ERROR",
            phase="execute",
            details={"command": command},
        )
        self.command = command
        self.parse_error = parse_error


# ---------------------------
# Internal handlers
# ---------------------------

class HandlerError(DispatchError):
    """Base for failures of a built-in handler."""


class UnknownInternalHandler(HandlerError):
    def __init__(self, tag: str):
        super().__init__(
            message=f"Unknown internal handler: {tag}",
            error_code=codes.UNKNOWN_INTERNAL_HANDLER,
            error_type="HANDLER_ERROR",
            phase="handler",
            details={"tag": tag},
        )
        self.tag = tag


class MissingOrInvalidParameter(HandlerError):
    def __init__(self, name: str):
        super().__init__(
            message=f"Missing or invalid parameter '{name}'",
            error_code=codes.MISSING_OR_INVALID_PARAMETER,
            error_type="HANDLER_ERROR",
            phase="handler",
            details={"name": name},
        )
        self.name = name


class DirectoryUnreadable(HandlerError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(
            message=f"Cannot read directory {path}: {cause}",
            error_code=codes.DIRECTORY_UNREADABLE,
            error_type="HANDLER_ERROR",
            phase="handler",
            details={"path": path},
            cause=cause,
        )
        self.path = path


class ResultOutOfRange(HandlerError):
    def __init__(self, operation: str):
        super().__init__(
            message=f"Result of {operation} is out of range",
            error_code=codes.RESULT_OUT_OF_RANGE,
            error_type="HANDLER_ERROR",
            phase="handler",
            details={"operation": operation},
        )
        self.operation = operation
