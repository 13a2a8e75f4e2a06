# dispatchcore/config/loader.py
"""
Tools Document Loader

Parses a YAML tools document into ToolDefinition objects.

Design principle:
- The pydantic models below are the schema of the document (versioned, strict)
- Conversion to ToolDefinition happens only after the whole document validated
- Nothing here touches a catalogue; callers decide how to insert

File format:
    tools:
      - name: file_info
        description: Get file information
        command: stat
        static_flags: ["--printf", "{\\"size\\": %s}"]
        args:
          - name: path
            description: File path
            required: true
            type: string
            cli_flag: null
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional, Union
import json

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from dispatchcore.core.errors import ConfigParseError, ConfigReadError, UnknownArgumentType
from dispatchcore.core.tools.spec import (
    ArgumentDefinition,
    ArgumentType,
    ToolDefinition,
)


class ArgumentConfigV1(BaseModel):
    """One entry of a tool's ``args`` list."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    description: str = ""
    required: bool = False
    type: str = Field(description="string | number | boolean | array")
    cli_flag: Optional[str] = None
    default: Optional[str] = None

    @field_validator("default", mode="before")
    @classmethod
    def _stringify_default(cls, value: Any) -> Any:
        # YAML turns `default: 10` / `default: true` into scalars; keep text form
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, list):
            return json.dumps(value, separators=(",", ":"))
        return value


class ToolConfigV1(BaseModel):
    """One entry of the top-level ``tools`` list."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    description: str
    command: str = ""
    args: List[ArgumentConfigV1] = Field(default_factory=list)
    static_flags: List[str] = Field(default_factory=list)
    internal_handler: Optional[str] = None
    example_output: Any = None

    @model_validator(mode="after")
    def _check_tool(self) -> "ToolConfigV1":
        if self.internal_handler is None and not self.command:
            raise ValueError(f"tool '{self.name}' needs a command or an internal_handler")

        seen = set()
        for arg in self.args:
            if arg.name in seen:
                raise ValueError(f"tool '{self.name}' declares argument '{arg.name}' more than once")
            seen.add(arg.name)
        return self


class ToolsDocumentV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tools: List[ToolConfigV1]


def _convert_tool(config: ToolConfigV1, source: Optional[str]) -> ToolDefinition:
    args: List[ArgumentDefinition] = []
    for arg_config in config.args:
        try:
            arg_type = ArgumentType.parse(arg_config.type)
        except UnknownArgumentType as e:
            raise UnknownArgumentType(e.type_string, tool=config.name, arg=arg_config.name) from None

        arg = ArgumentDefinition(
            name=arg_config.name,
            type=arg_type,
            description=arg_config.description,
            required=arg_config.required,
            cli_flag=arg_config.cli_flag,
            default=arg_config.default,
        )
        try:
            arg.default_value()
        except ValueError as e:
            raise ConfigParseError(
                f"tool '{config.name}' argument '{arg.name}' has invalid default: {e}",
                path=source,
                cause=e,
            ) from e
        args.append(arg)

    return ToolDefinition(
        name=config.name,
        description=config.description,
        command=config.command,
        args=tuple(args),
        static_flags=tuple(config.static_flags),
        internal_handler=config.internal_handler,
        example_output=config.example_output,
    )


def parse_tools_document(
    data: Union[str, Mapping[str, Any], None],
    source: Optional[str] = None,
) -> List[ToolDefinition]:
    """
    Validate and convert a tools document.

    Args:
        data: YAML text or an already-parsed mapping
        source: File path, for diagnostics only

    Returns:
        Tool definitions in document order

    Raises:
        ConfigParseError: Malformed YAML or schema violation
        UnknownArgumentType: An argument type is not a recognized spelling
    """
    if isinstance(data, str):
        try:
            data = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise ConfigParseError(str(e), path=source, cause=e) from e

    if not isinstance(data, Mapping):
        raise ConfigParseError("document must be a mapping with a 'tools' list", path=source)

    try:
        document = ToolsDocumentV1.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigParseError(str(e), path=source, cause=e) from e

    return [_convert_tool(tool, source) for tool in document.tools]


def read_tools_file(path: Union[str, Path]) -> List[ToolDefinition]:
    """
    Read and parse a tools file.

    Raises:
        ConfigReadError: The file cannot be read
        ConfigParseError: Malformed YAML or schema violation
        UnknownArgumentType: An argument type is not a recognized spelling
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(str(path), e) from e

    return parse_tools_document(text, source=str(path))


__all__ = [
    "ArgumentConfigV1",
    "ToolConfigV1",
    "ToolsDocumentV1",
    "parse_tools_document",
    "read_tools_file",
]
