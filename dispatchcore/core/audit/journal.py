# dispatchcore/core/audit/journal.py
"""
Invocation Audit Journal - append-only record of every tool invocation

Layout:
    {directory}/audit-YYYY-MM-DD.jsonl   (one file per local calendar day)

Each line is one AuditEntry. Entries are never rewritten or removed.
Auditing is advisory: failures are logged and never reach the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union
import getpass
import json
import logging
import os
import socket

from dispatchcore.utils.paths import audit_file_name

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _current_user() -> Optional[str]:
    for key in ("USER", "USERNAME"):
        value = os.environ.get(key)
        if value:
            return value
    try:
        return getpass.getuser() or None
    except (KeyError, OSError, ImportError):
        return None


def _hostname() -> Optional[str]:
    try:
        return socket.gethostname() or None
    except OSError:
        return None


@dataclass
class AuditEntry:
    """
    One invocation attempt.

    user/hostname are best-effort and omitted from the JSON line when unknown.
    """
    timestamp: str
    tool_name: str
    user: Optional[str] = None
    hostname: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "timestamp": self.timestamp,
            "tool_name": self.tool_name,
        }
        if self.user is not None:
            result["user"] = self.user
        if self.hostname is not None:
            result["hostname"] = self.hostname
        return result

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


class AuditJournal:
    """
    Date-partitioned JSONL journal.

    The day's file is opened, appended and closed on every record; there is
    no in-process lock, each entry is emitted with a single append-mode write.

    Example:
        >>> journal = AuditJournal("/var/log/dispatchcore")
        >>> journal.record("file_info")
    """

    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Args:
            directory: Journal directory; None disables auditing
            clock: Returns the current aware UTC datetime
        """
        self._clock = clock
        self.directory: Optional[Path] = None

        if directory is None:
            logger.debug("Audit journal disabled")
            return

        path = Path(directory).expanduser()
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create audit directory {path}: {e}")
            return

        self.directory = path
        logger.info(f"Audit journal enabled in directory: {path}")

    @property
    def is_enabled(self) -> bool:
        return self.directory is not None

    def file_for(self, day: date) -> Optional[Path]:
        """Journal file for a local calendar date (None when disabled)"""
        if self.directory is None:
            return None
        return self.directory / audit_file_name(day)

    def current_file(self) -> Optional[Path]:
        return self.file_for(self._clock().astimezone().date())

    def build_entry(self, tool_name: str, now: Optional[datetime] = None) -> AuditEntry:
        now = now or self._clock()
        return AuditEntry(
            timestamp=now.astimezone(timezone.utc).isoformat().replace("+00:00", "Z"),
            tool_name=tool_name,
            user=_current_user(),
            hostname=_hostname(),
        )

    def record(self, tool_name: str) -> None:
        """Append one entry for ``tool_name``; never raises"""
        if self.directory is None:
            return

        now = self._clock()
        entry = self.build_entry(tool_name, now)
        file_path = self.directory / audit_file_name(now.astimezone().date())

        line = entry.to_json() + "\n"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(file_path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            logger.error(f"Failed to write audit entry to {file_path}: {e}")


__all__ = ["AuditEntry", "AuditJournal", "utc_now"]
