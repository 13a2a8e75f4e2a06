# dispatchcore/presets/__init__.py
"""
Presets - ready-made tool definitions

- builtin_tools: add, multiply, list_files
- example_tools: json_format (jq), file_info (stat)
- demo_catalogue: a ToolCatalogue holding both
"""

from .tools import builtin_tools, example_tools, demo_catalogue

__all__ = [
    "builtin_tools",
    "example_tools",
    "demo_catalogue",
]
