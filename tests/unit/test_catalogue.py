"""
Tests for ToolCatalogue: load/merge semantics, discovery, listing
"""

import pytest

from dispatchcore.core.errors import ConfigParseError, ConfigReadError, UnknownArgumentType
from dispatchcore.core.tools import ToolCatalogue, define_tool
from dispatchcore.utils.paths import TOOLS_FILE_ENV


FIRST = """
tools:
  - name: greet
    description: first greeting
    command: echo
    args:
      - name: who
        description: Who to greet
        required: true
        type: string
  - name: stay
    description: only in first load
    command: echo
    args: []
"""

SECOND = """
tools:
  - name: greet
    description: second greeting
    command: printf
    args:
      - name: who
        description: Who to greet
        required: false
        type: string
        cli_flag: --who
"""


def test_last_write_wins():
    catalogue = ToolCatalogue()
    catalogue.load(FIRST)
    catalogue.load(SECOND)

    greet = catalogue.resolve("greet")
    assert greet.description == "second greeting"
    assert greet.command == "printf"
    assert greet.args[0].cli_flag == "--who"
    assert greet.args[0].required is False
    assert ("greet", "second greeting") in catalogue.list()


def test_merge_keeps_absent_entries():
    catalogue = ToolCatalogue()
    catalogue.load(FIRST)
    catalogue.load(SECOND)
    assert "stay" in catalogue
    assert len(catalogue) == 2


def test_replace_drops_absent_entries():
    catalogue = ToolCatalogue()
    catalogue.load(FIRST)
    outcome = catalogue.load(SECOND, replace=True)

    assert outcome.tools_loaded == 1
    assert catalogue.names() == ["greet"]
    assert catalogue.resolve("stay") is None


def test_failed_load_inserts_nothing():
    catalogue = ToolCatalogue()
    catalogue.load(SECOND)

    bad = """
tools:
  - name: new_tool
    description: valid entry
    command: echo
    args: []
  - name: greet
    description: overwrite attempt
    command: echo
    args:
      - name: n
        type: integer
"""
    with pytest.raises(UnknownArgumentType) as exc:
        catalogue.load(bad)
    assert exc.value.type_string == "integer"

    assert "new_tool" not in catalogue
    assert catalogue.resolve("greet").description == "second greeting"


def test_failed_replace_keeps_previous_catalogue():
    catalogue = ToolCatalogue()
    catalogue.load(FIRST)
    with pytest.raises(ConfigParseError):
        catalogue.load("tools: [", replace=True)
    assert len(catalogue) == 2


def test_load_accepts_mapping():
    catalogue = ToolCatalogue()
    catalogue.load({"tools": [{"name": "calc", "description": "adds", "internal_handler": "add"}]})
    assert catalogue.resolve("calc").internal_handler == "add"


def test_list_sorted_by_name():
    catalogue = ToolCatalogue([
        define_tool("zeta", "last", "echo"),
        define_tool("alpha", "first", "echo"),
    ])
    assert catalogue.list() == [("alpha", "first"), ("zeta", "last")]


def test_register_overwrites():
    catalogue = ToolCatalogue()
    catalogue.register(define_tool("t", "one", "echo"))
    catalogue.register(define_tool("t", "two", "echo"))
    assert catalogue.list() == [("t", "two")]


def test_resolve_unknown_is_none():
    assert ToolCatalogue().resolve("missing") is None


def test_describe():
    catalogue = ToolCatalogue()
    catalogue.load(FIRST)
    info = catalogue.describe("greet")
    assert info["kind"] == "external"
    assert info["command"] == "echo"
    assert info["parameters"]["required"] == ["who"]
    assert catalogue.describe("missing") == {}


def test_load_file_read_error(tmp_path):
    with pytest.raises(ConfigReadError) as exc:
        ToolCatalogue().load_file(tmp_path / "absent.yaml")
    assert "Failed to read config file" in exc.value.message


def test_load_file_reports_source(tools_file):
    path = tools_file(FIRST)
    outcome = ToolCatalogue().load_file(path)
    assert outcome.ok
    assert outcome.source == path
    assert outcome.tools_loaded == 2


# ---------------------------
# Discovery
# ---------------------------

def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_discovery_prefers_env(tmp_path):
    home, cwd = tmp_path / "home", tmp_path / "cwd"
    env_file = _write(tmp_path / "custom.yaml", SECOND)
    _write(home / ".config" / "dispatchcore" / "tools.yaml", FIRST)
    _write(cwd / "tools.yaml", FIRST)

    catalogue = ToolCatalogue()
    outcome = catalogue.load_default(env={TOOLS_FILE_ENV: str(env_file)}, home=home, cwd=cwd)

    assert outcome.source == env_file
    assert catalogue.names() == ["greet"]


def test_discovery_user_config_before_cwd(tmp_path):
    home, cwd = tmp_path / "home", tmp_path / "cwd"
    user_file = _write(home / ".config" / "dispatchcore" / "tools.yaml", SECOND)
    _write(cwd / "tools.yaml", FIRST)

    outcome = ToolCatalogue().load_default(env={}, home=home, cwd=cwd)
    assert outcome.source == user_file


def test_discovery_skips_missing_env_file(tmp_path):
    home, cwd = tmp_path / "home", tmp_path / "cwd"
    cwd_file = _write(cwd / "tools.yaml", FIRST)

    outcome = ToolCatalogue().load_default(
        env={TOOLS_FILE_ENV: str(tmp_path / "missing.yaml")}, home=home, cwd=cwd
    )
    assert outcome.source == cwd_file


def test_discovery_nothing_found(tmp_path):
    catalogue = ToolCatalogue()
    outcome = catalogue.load_default(env={}, home=tmp_path / "home", cwd=tmp_path / "cwd")

    assert not outcome.ok
    assert outcome.tools_loaded == 0
    assert "No tools.yaml found" in outcome.diagnostic
    assert len(catalogue) == 0


def test_discovered_file_errors_propagate(tmp_path):
    cwd = tmp_path / "cwd"
    _write(cwd / "tools.yaml", "tools: {not: a list}")
    with pytest.raises(ConfigParseError):
        ToolCatalogue().load_default(env={}, home=tmp_path / "home", cwd=cwd)
