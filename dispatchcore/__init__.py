# dispatchcore/__init__.py
"""
dispatchcore - Dynamic command dispatch from a declarative tool catalogue

User-facing API:
- ToolCatalogue: named tool definitions, loaded from tools.yaml
- Dispatcher: execute(tool, params) -> JSON string, list() -> tools
- AuditJournal: daily JSON-lines record of every invocation

Basic usage:
    >>> from dispatchcore import ToolCatalogue, Dispatcher, AuditJournal
    >>> catalogue = ToolCatalogue()
    >>> catalogue.load_file("tools.yaml")
    >>> dispatcher = Dispatcher(catalogue, AuditJournal("./audit"))
    >>> dispatcher.execute("add", {"a": 5.5, "b": 2.5})
    '{"result":8.0,"operation":"addition"}'

Building tools in code:
    >>> from dispatchcore import define_tool, define_arg
    >>> catalogue.register(define_tool(
    ...     "file_info", "Get file information", "stat",
    ...     [define_arg("path", "string", required=True)],
    ... ))
"""

__version__ = "0.1.0"

from .core.tools import (
    ArgumentType,
    ArgumentDefinition,
    ToolDefinition,
    define_arg,
    define_tool,
    map_parameters,
    InternalHandler,
    ToolCatalogue,
    LoadOutcome,
)
from .core.executor import Dispatcher, ProcessInvoker
from .core.audit import AuditJournal, AuditEntry
from .core.errors import DispatchError
from .config import DispatchSettings

__all__ = [
    "__version__",
    "ArgumentType",
    "ArgumentDefinition",
    "ToolDefinition",
    "define_arg",
    "define_tool",
    "map_parameters",
    "InternalHandler",
    "ToolCatalogue",
    "LoadOutcome",
    "Dispatcher",
    "ProcessInvoker",
    "AuditJournal",
    "AuditEntry",
    "DispatchError",
    "DispatchSettings",
]
