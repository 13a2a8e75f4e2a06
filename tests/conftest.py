import sys
from pathlib import Path

import pytest

from dispatchcore.core.tools import ArgumentType, define_arg, define_tool


# Prints its own argv as {"argv": [...]} so tests can see the mapped tokens
ECHO_ARGV = "import json, sys; print(json.dumps({'argv': sys.argv[1:]}))"


def python_tool(name, script, args=(), description="python helper"):
    """External tool that runs ``python -c script`` followed by mapped args"""
    return define_tool(
        name,
        description,
        sys.executable,
        args,
        static_flags=["-c", script],
    )


@pytest.fixture
def echo_tool():
    return python_tool(
        "echo_argv",
        ECHO_ARGV,
        [
            define_arg("name", ArgumentType.STRING, cli_flag="--name", required=True),
            define_arg("count", ArgumentType.NUMBER, cli_flag="--count"),
            define_arg("target", ArgumentType.STRING),
        ],
        description="Echo argv",
    )


@pytest.fixture
def tools_file(tmp_path):
    """Write YAML text to tmp_path/tools.yaml and return the path"""
    def _write(text: str, name: str = "tools.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_python_tool():
    return python_tool
