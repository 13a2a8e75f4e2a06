# dispatchcore/config/__init__.py
"""
Configuration: runtime settings and the YAML tools document schema.
"""

from .settings import DispatchSettings, AUDIT_DIR_ENV, LOG_LEVEL_ENV
from .loader import (
    ArgumentConfigV1,
    ToolConfigV1,
    ToolsDocumentV1,
    parse_tools_document,
    read_tools_file,
)

__all__ = [
    "DispatchSettings",
    "AUDIT_DIR_ENV",
    "LOG_LEVEL_ENV",
    "ArgumentConfigV1",
    "ToolConfigV1",
    "ToolsDocumentV1",
    "parse_tools_document",
    "read_tools_file",
]
