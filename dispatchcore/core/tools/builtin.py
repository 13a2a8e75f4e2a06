# dispatchcore/core/tools/builtin.py
"""
Built-in handlers - operations that satisfy the tool contract in-process

The set is closed: InternalHandler enumerates every built-in and
_HANDLERS must cover it exactly (checked at import). Adding a built-in
means adding an enum member and its handler function.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union
import json
import math
import operator
import os

from ..errors import (
    DirectoryUnreadable,
    MissingOrInvalidParameter,
    ResultOutOfRange,
    UnknownInternalHandler,
)

Number = Union[int, float]


class InternalHandler(str, Enum):
    ADD = "add"
    MULTIPLY = "multiply"
    LIST_FILES = "list_files"

    @classmethod
    def parse(cls, tag: str) -> "InternalHandler":
        try:
            return cls(tag)
        except ValueError:
            raise UnknownInternalHandler(str(tag)) from None


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def _number(params: Mapping[str, Any], name: str) -> Number:
    value = params.get(name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MissingOrInvalidParameter(name)
    if isinstance(value, float) and not math.isfinite(value):
        raise MissingOrInvalidParameter(name)
    return value


def _arithmetic(params: Mapping[str, Any], op: Callable[[Number, Number], Number], operation: str) -> str:
    a, b = _number(params, "a"), _number(params, "b")
    try:
        result = op(a, b)
    except OverflowError:
        raise ResultOutOfRange(operation) from None
    if isinstance(result, float) and not math.isfinite(result):
        raise ResultOutOfRange(operation)
    return _dumps({"result": result, "operation": operation})


def _add(params: Mapping[str, Any]) -> str:
    return _arithmetic(params, operator.add, "addition")


def _multiply(params: Mapping[str, Any]) -> str:
    return _arithmetic(params, operator.mul, "multiplication")


def _list_files(params: Mapping[str, Any]) -> str:
    path = params.get("path")
    if not isinstance(path, str) or not path:
        path = "."

    files: List[Dict[str, Any]] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                # Links are reported as themselves; entries that vanish are skipped
                try:
                    st = entry.stat(follow_symlinks=False)
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    continue
                files.append({"name": entry.name, "is_dir": is_dir, "size": st.st_size})
    except OSError as e:
        raise DirectoryUnreadable(path, e) from e

    files.sort(key=lambda f: f["name"])
    return _dumps({"path": path, "files": files})


_HANDLERS: Dict[InternalHandler, Callable[[Mapping[str, Any]], str]] = {
    InternalHandler.ADD: _add,
    InternalHandler.MULTIPLY: _multiply,
    InternalHandler.LIST_FILES: _list_files,
}

if set(_HANDLERS) != set(InternalHandler):
    raise RuntimeError("every InternalHandler needs a handler")


def dispatch_internal(tag: Union[str, InternalHandler], params: Optional[Mapping[str, Any]]) -> str:
    """
    Run a built-in handler.

    Args:
        tag: Handler tag from the tool definition (exact match)
        params: Caller-supplied parameters

    Returns:
        Compact JSON string

    Raises:
        UnknownInternalHandler: The tag names no built-in
        MissingOrInvalidParameter: An arithmetic operand is absent, not a number,
            or not finite
        ResultOutOfRange: An arithmetic result cannot be represented in JSON
        DirectoryUnreadable: list_files could not open the directory
    """
    handler = tag if isinstance(tag, InternalHandler) else InternalHandler.parse(tag)
    return _HANDLERS[handler](params or {})


__all__ = ["InternalHandler", "dispatch_internal"]
