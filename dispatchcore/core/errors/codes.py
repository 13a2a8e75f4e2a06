# dispatchcore/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"

# catalogue / configuration
CONFIG_READ_ERROR: Final[str] = "CONFIG_READ_ERROR"
CONFIG_PARSE_ERROR: Final[str] = "CONFIG_PARSE_ERROR"
UNKNOWN_ARGUMENT_TYPE: Final[str] = "UNKNOWN_ARGUMENT_TYPE"
TOOL_NOT_FOUND: Final[str] = "TOOL_NOT_FOUND"

# parameter mapping
MISSING_REQUIRED_ARGUMENT: Final[str] = "MISSING_REQUIRED_ARGUMENT"
INVALID_ARGUMENT_TYPE: Final[str] = "INVALID_ARGUMENT_TYPE"

# external process
SPAWN_FAILED: Final[str] = "SPAWN_FAILED"
COMMAND_FAILED: Final[str] = "COMMAND_FAILED"
INVALID_OUTPUT_FORMAT: Final[str] = "INVALID_OUTPUT_FORMAT"

# internal handlers
UNKNOWN_INTERNAL_HANDLER: Final[str] = "UNKNOWN_INTERNAL_HANDLER"
MISSING_OR_INVALID_PARAMETER: Final[str] = "MISSING_OR_INVALID_PARAMETER"
DIRECTORY_UNREADABLE: Final[str] = "DIRECTORY_UNREADABLE"
RESULT_OUT_OF_RANGE: Final[str] = "RESULT_OUT_OF_RANGE"


# ---- semantic groups (internal helpers) ----

LOAD_CODES: Final[set[str]] = {
    CONFIG_READ_ERROR,
    CONFIG_PARSE_ERROR,
    UNKNOWN_ARGUMENT_TYPE,
}

# Raised before any process is spawned.
VALIDATION_CODES: Final[set[str]] = {
    TOOL_NOT_FOUND,
    MISSING_REQUIRED_ARGUMENT,
    INVALID_ARGUMENT_TYPE,
    UNKNOWN_INTERNAL_HANDLER,
    MISSING_OR_INVALID_PARAMETER,
}

PROCESS_CODES: Final[set[str]] = {
    SPAWN_FAILED,
    COMMAND_FAILED,
    INVALID_OUTPUT_FORMAT,
}

ALL_CODES: Final[set[str]] = (
    {UNKNOWN, DIRECTORY_UNREADABLE, RESULT_OUT_OF_RANGE} | LOAD_CODES | VALIDATION_CODES | PROCESS_CODES
)
