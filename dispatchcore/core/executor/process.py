# dispatchcore/core/executor/process.py
"""
Process Invoker - runs an external command and validates its JSON output

Contract:
- The command runs without a shell; stdin is closed
- stdout and stderr are captured in full
- Non-zero exit -> CommandFailed (stderr verbatim), never retried
- Spawn failure -> SpawnFailed
- stdout must be exactly one strict JSON value (no NaN or Infinity) ->
  re-serialized compactly with the original key order; otherwise
  InvalidOutputFormat

There is no timeout: a command that never exits blocks the calling thread.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Union
import json
import logging
import subprocess

from ..errors import CommandFailed, InvalidOutputFormat, SpawnFailed

logger = logging.getLogger(__name__)


class ProcessInvoker:
    """
    Stateless executor for external tool commands.

    One instance may be shared by any number of threads; every call spawns
    and owns its own child process.
    """

    def __init__(
        self,
        cwd: Optional[Union[str, Path]] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        """
        Args:
            cwd: Working directory for children (None = inherit)
            env: Full environment for children (None = inherit)
        """
        self.cwd = str(cwd) if cwd is not None else None
        self.env: Optional[Dict[str, str]] = dict(env) if env is not None else None

    def invoke(self, command: str, argv: Sequence[str]) -> str:
        """
        Run ``command`` with ``argv`` and return its validated JSON output.

        Raises:
            SpawnFailed: The command could not be started
            CommandFailed: The command exited non-zero
            InvalidOutputFormat: stdout is not a single JSON value
        """
        logger.debug(f"Spawning {command} with {len(argv)} argument(s)")
        try:
            completed = subprocess.run(
                [command, *argv],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=self.cwd,
                env=self.env,
                check=False,
            )
        except (OSError, ValueError) as e:
            raise SpawnFailed(command, e) from e

        stdout = completed.stdout.decode("utf-8", errors="replace")
        stderr = completed.stderr.decode("utf-8", errors="replace")

        if completed.returncode != 0:
            logger.warning(f"Command {command} exited with status {completed.returncode}")
            raise CommandFailed(command, stderr, completed.returncode)

        try:
            value = json.loads(stdout, parse_constant=_reject_constant)
            # 1e400 parses to inf; allow_nan=False rejects it here
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            raise InvalidOutputFormat(command, str(e)) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


__all__ = ["ProcessInvoker"]
