# dispatchcore/config/settings.py
"""
Runtime Settings

Process-level settings with code defaults; environment variables override.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import os

from dispatchcore.utils.paths import TOOLS_FILE_ENV

AUDIT_DIR_ENV = "DISPATCHCORE_AUDIT_DIR"
LOG_LEVEL_ENV = "DISPATCHCORE_LOG_LEVEL"


def _env(env: Mapping[str, str], key: str, default: Optional[str] = None) -> Optional[str]:
    v = env.get(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


@dataclass(frozen=True)
class DispatchSettings:
    """
    tools_file: Explicit tools document; None means default discovery
    audit_dir: Audit journal directory; None disables auditing
    log_level: Root log level name for the CLI
    """

    tools_file: Optional[Path] = None
    audit_dir: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def default(cls) -> "DispatchSettings":
        return cls()

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "DispatchSettings":
        env = os.environ if env is None else env
        tools_file = _env(env, TOOLS_FILE_ENV)
        audit_dir = _env(env, AUDIT_DIR_ENV)
        return cls(
            tools_file=Path(tools_file).expanduser() if tools_file else None,
            audit_dir=Path(audit_dir).expanduser() if audit_dir else None,
            log_level=(_env(env, LOG_LEVEL_ENV, "INFO") or "INFO").upper(),
        )

    def override(
        self,
        *,
        tools_file: Optional[str] = None,
        audit_dir: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "DispatchSettings":
        """Copy with explicit (e.g. command-line) values taking precedence"""
        return DispatchSettings(
            tools_file=Path(tools_file).expanduser() if tools_file else self.tools_file,
            audit_dir=Path(audit_dir).expanduser() if audit_dir else self.audit_dir,
            log_level=log_level.upper() if log_level else self.log_level,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tools_file": str(self.tools_file) if self.tools_file else None,
            "audit_dir": str(self.audit_dir) if self.audit_dir else None,
            "log_level": self.log_level,
        }
