# dispatchcore/presets/tools.py
"""
Preset tool definitions

- builtin_tools(): catalogue entries for every built-in handler
- example_tools(): external tool examples (jq, stat)
- demo_catalogue(): both, ready to dispatch against
"""

from __future__ import annotations

from typing import List

from dispatchcore.core.tools import (
    ArgumentType,
    InternalHandler,
    ToolCatalogue,
    ToolDefinition,
    define_arg,
    define_tool,
)


def builtin_tools() -> List[ToolDefinition]:
    return [
        define_tool(
            "add",
            "Add two numbers",
            args=[
                define_arg("a", ArgumentType.NUMBER, description="First number", required=True),
                define_arg("b", ArgumentType.NUMBER, description="Second number", required=True),
            ],
            internal_handler=InternalHandler.ADD.value,
            example_output={"result": 3, "operation": "addition"},
        ),
        define_tool(
            "multiply",
            "Multiply two numbers",
            args=[
                define_arg("a", ArgumentType.NUMBER, description="First number", required=True),
                define_arg("b", ArgumentType.NUMBER, description="Second number", required=True),
            ],
            internal_handler=InternalHandler.MULTIPLY.value,
        ),
        define_tool(
            "list_files",
            "List files in a directory",
            args=[
                define_arg("path", ArgumentType.STRING, description="Directory path", default="."),
            ],
            internal_handler=InternalHandler.LIST_FILES.value,
        ),
    ]


def example_tools() -> List[ToolDefinition]:
    return [
        # A JSON formatter tool
        define_tool(
            "json_format",
            "Format JSON data",
            "jq",
            [
                define_arg("filter", ArgumentType.STRING, description="JQ filter expression", required=True),
                define_arg("compact", ArgumentType.BOOLEAN, description="Compact output", cli_flag="-c"),
            ],
        ),
        # A file info tool
        define_tool(
            "file_info",
            "Get file information",
            "stat",
            [
                define_arg("path", ArgumentType.STRING, description="File path", required=True),
                define_arg("format", ArgumentType.STRING, description="Output format", cli_flag="-f"),
            ],
        ),
    ]


def demo_catalogue() -> ToolCatalogue:
    return ToolCatalogue(builtin_tools() + example_tools())


__all__ = ["builtin_tools", "example_tools", "demo_catalogue"]
