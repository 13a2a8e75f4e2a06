# dispatchcore/core/tools/registry.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
import logging

from dispatchcore.utils.paths import TOOLS_FILE_ENV, tools_file_candidates
from dispatchcore.utils.rwlock import RWLock
from .spec import ToolDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadOutcome:
    """
    Result of a catalogue load.

    source: File that was loaded (None for in-memory documents or when no
        file was found)
    tools_loaded: Number of definitions inserted by this load
    diagnostic: Human-readable explanation when nothing could be loaded
    """
    source: Optional[Path]
    tools_loaded: int
    diagnostic: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


def _missing_tools_message(candidates: Iterable[Path]) -> str:
    locations = "\n".join(f"   - {c}" for c in candidates)
    return (
        "No tools.yaml found!\n\n"
        "To get started:\n"
        "1. Create a tools file in one of these locations:\n"
        f"   - ${TOOLS_FILE_ENV} (if set)\n"
        f"{locations}\n"
        "2. Describe your tools under a top-level 'tools' list\n"
        "3. Restart the host process"
    )


class ToolCatalogue:
    """
    Concurrency-safe registry of tool definitions keyed by name.

    Features:
    - Lookups and listings run in parallel under a shared read lock
    - Loads take the write lock and insert a fully validated batch in one
      step; a failing document leaves the catalogue untouched
    - Same-name entries are overwritten (last write wins)
    - ``replace=True`` drops everything not present in the new batch

    Example:
        >>> catalogue = ToolCatalogue()
        >>> catalogue.load_file("tools.yaml")
        >>> catalogue.resolve("file_info")
    """

    def __init__(self, tools: Iterable[ToolDefinition] = ()) -> None:
        self._tools: Dict[str, ToolDefinition] = {}
        self._lock = RWLock()
        for tool in tools:
            self._tools[tool.name] = tool

    # ---------------------------
    # Writes
    # ---------------------------

    def register(self, definition: ToolDefinition) -> None:
        """Insert or overwrite a single definition"""
        if not isinstance(definition, ToolDefinition):
            raise ValueError("definition must be a ToolDefinition")
        with self._lock.write():
            self._tools[definition.name] = definition

    def register_all(self, definitions: Iterable[ToolDefinition], *, replace: bool = False) -> int:
        """
        Insert a batch under one write lock.

        Returns:
            Number of definitions inserted
        """
        batch = list(definitions)
        with self._lock.write():
            if replace:
                self._tools.clear()
            for definition in batch:
                self._tools[definition.name] = definition
        return len(batch)

    def load(
        self,
        source: Union[str, Mapping[str, Any]],
        *,
        replace: bool = False,
    ) -> LoadOutcome:
        """
        Load a tools document (YAML text or parsed mapping).

        Raises:
            ConfigParseError: Malformed document
            UnknownArgumentType: Unrecognized argument type spelling
        """
        from dispatchcore.config.loader import parse_tools_document

        definitions = parse_tools_document(source)
        count = self.register_all(definitions, replace=replace)
        logger.info(f"Loaded {count} tool(s) from in-memory document")
        return LoadOutcome(source=None, tools_loaded=count)

    def load_file(self, path: Union[str, Path], *, replace: bool = False) -> LoadOutcome:
        """
        Load a tools file.

        Raises:
            ConfigReadError: File unreadable
            ConfigParseError: Malformed document
            UnknownArgumentType: Unrecognized argument type spelling
        """
        from dispatchcore.config.loader import read_tools_file

        path = Path(path)
        definitions = read_tools_file(path)
        count = self.register_all(definitions, replace=replace)
        logger.info(f"Loaded {count} tool(s) from: {path}")
        return LoadOutcome(source=path, tools_loaded=count)

    def load_default(
        self,
        *,
        replace: bool = False,
        env: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None,
        cwd: Optional[Path] = None,
    ) -> LoadOutcome:
        """
        Load the first existing tools file in discovery order.

        When no candidate exists the catalogue is left as is and the outcome
        carries a diagnostic instead of raising.
        """
        candidates = tools_file_candidates(env=env, home=home, cwd=cwd)
        for candidate in candidates:
            logger.debug(f"Checking for tools config at: {candidate}")
            if candidate.is_file():
                return self.load_file(candidate, replace=replace)

        message = _missing_tools_message(candidates)
        logger.warning(message)
        return LoadOutcome(source=None, tools_loaded=0, diagnostic=message)

    def clear(self) -> None:
        with self._lock.write():
            self._tools.clear()

    # ---------------------------
    # Reads
    # ---------------------------

    def resolve(self, name: str) -> Optional[ToolDefinition]:
        with self._lock.read():
            return self._tools.get(name)

    def list(self) -> List[Tuple[str, str]]:
        """(name, description) pairs sorted by name"""
        with self._lock.read():
            return sorted((name, tool.description) for name, tool in self._tools.items())

    def names(self) -> List[str]:
        with self._lock.read():
            return sorted(self._tools)

    def describe(self, name: str) -> Dict[str, Any]:
        definition = self.resolve(name)
        if definition is None:
            return {}

        result = definition.to_schema()
        result["kind"] = "internal" if definition.is_internal else "external"
        if definition.is_internal:
            result["internal_handler"] = definition.internal_handler
        else:
            result["command"] = definition.command
            result["static_flags"] = list(definition.static_flags)
        return result

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._tools)

    def __contains__(self, name: object) -> bool:
        with self._lock.read():
            return name in self._tools


__all__ = ["ToolCatalogue", "LoadOutcome"]
