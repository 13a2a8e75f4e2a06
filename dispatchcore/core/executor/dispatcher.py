# dispatchcore/core/executor/dispatcher.py
"""
Dispatcher - the single entry point for tool invocation

The dispatcher is responsible for:
1. Audit -> Resolve -> (Built-in | Map -> Spawn -> Validate) -> Result
2. Rendering every DispatchError as ``{"error": message}``

Protocol layers call execute() and list(); nothing else in this package
spawns processes or runs built-ins on their behalf.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union
import json
import logging

from ..audit import AuditJournal
from ..errors import DispatchError, ToolNotFound
from ..tools import LoadOutcome, ToolCatalogue, dispatch_internal, map_parameters
from .process import ProcessInvoker

logger = logging.getLogger(__name__)


def render_error(error: DispatchError) -> str:
    """``{"error": message}`` as a JSON string"""
    return json.dumps({"error": error.message}, ensure_ascii=False)


class Dispatcher:
    """
    Tool dispatch engine bound to one catalogue.

    Safe to call from many threads at once: the catalogue is lock-guarded,
    the invoker is stateless and the journal appends independently.

    Example:
        >>> catalogue = ToolCatalogue()
        >>> catalogue.load_file("tools.yaml")
        >>> dispatcher = Dispatcher(catalogue, AuditJournal("./audit"))
        >>> dispatcher.execute("add", {"a": 1, "b": 2})
        '{"result":3,"operation":"addition"}'
    """

    def __init__(
        self,
        catalogue: ToolCatalogue,
        journal: Optional[AuditJournal] = None,
        invoker: Optional[ProcessInvoker] = None,
    ):
        self.catalogue = catalogue
        self.journal = journal or AuditJournal(None)
        self.invoker = invoker or ProcessInvoker()

    def initialize(self, tools_file: Optional[Union[str, Path]] = None) -> LoadOutcome:
        """
        Populate the catalogue at startup.

        An explicit ``tools_file`` must load; default discovery that finds
        nothing leaves the catalogue empty and returns a diagnostic.
        """
        if tools_file is not None:
            return self.catalogue.load_file(tools_file)

        outcome = self.catalogue.load_default()
        if not outcome.ok:
            logger.warning("The dispatcher will start but no tools will be available.")
        return outcome

    def reload(self, tools_file: Optional[Union[str, Path]] = None) -> LoadOutcome:
        """Explicit full replace of the catalogue"""
        if tools_file is not None:
            return self.catalogue.load_file(tools_file, replace=True)
        return self.catalogue.load_default(replace=True)

    def invoke(self, tool_name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Run a tool and return its JSON output.

        Raises:
            DispatchError: Any resolution, mapping, execution or handler failure
        """
        self.journal.record(tool_name)

        definition = self.catalogue.resolve(tool_name)
        if definition is None:
            raise ToolNotFound(tool_name)

        params = params or {}
        if definition.internal_handler is not None:
            return dispatch_internal(definition.internal_handler, params)

        argv = map_parameters(definition, params)
        return self.invoker.invoke(definition.command, argv)

    def execute(self, tool_name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Like invoke(), but failures come back as ``{"error": message}``"""
        try:
            return self.invoke(tool_name, params)
        except DispatchError as e:
            logger.debug(f"Tool {tool_name} failed: {e}")
            return render_error(e)

    def list(self) -> List[Dict[str, str]]:
        return [
            {"name": name, "description": description}
            for name, description in self.catalogue.list()
        ]

    def list_json(self) -> str:
        tools = self.list()
        return json.dumps({"tools": tools, "total": len(tools)}, ensure_ascii=False)


__all__ = ["Dispatcher", "render_error"]
