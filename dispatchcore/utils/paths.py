# dispatchcore/utils/paths.py
"""
Shared path utilities for dispatchcore.

Design goals:
- Deterministic and explicit: lookups never create files or directories.
- Tools file discovery precedence is fixed:
    1. $DISPATCHCORE_TOOLS_FILE
    2. ~/.config/dispatchcore/tools.yaml
    3. ./tools.yaml
- Audit files are partitioned by local calendar date.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Mapping, Optional
import logging
import os

logger = logging.getLogger(__name__)

PRODUCT_NAME = "dispatchcore"
TOOLS_FILE_ENV = "DISPATCHCORE_TOOLS_FILE"
TOOLS_FILE_NAME = "tools.yaml"


def user_config_dir(home: Optional[Path] = None) -> Path:
    """~/.config/dispatchcore (not created)"""
    base = home if home is not None else Path.home()
    return base / ".config" / PRODUCT_NAME


def tools_file_candidates(
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
    cwd: Optional[Path] = None,
) -> List[Path]:
    """
    Candidate tools files in precedence order.

    Args:
        env: Environment mapping (defaults to os.environ)
        home: Home directory override (tests)
        cwd: Working directory override (tests)
    """
    env = os.environ if env is None else env
    candidates: List[Path] = []

    from_env = (env.get(TOOLS_FILE_ENV) or "").strip()
    if from_env:
        candidates.append(Path(from_env).expanduser())

    try:
        candidates.append(user_config_dir(home) / TOOLS_FILE_NAME)
    except RuntimeError:
        # Path.home() fails when no home directory can be determined
        logger.debug("No home directory; skipping user config location")

    candidates.append((cwd if cwd is not None else Path(".")) / TOOLS_FILE_NAME)
    return candidates


def audit_file_name(day: date) -> str:
    return f"audit-{day.strftime('%Y-%m-%d')}.jsonl"


__all__ = [
    "PRODUCT_NAME",
    "TOOLS_FILE_ENV",
    "TOOLS_FILE_NAME",
    "user_config_dir",
    "tools_file_candidates",
    "audit_file_name",
]
