"""
Tests for built-in handlers (add, multiply, list_files)
"""

import json

import pytest

from dispatchcore.core.errors import (
    DirectoryUnreadable,
    MissingOrInvalidParameter,
    ResultOutOfRange,
    UnknownInternalHandler,
    codes,
)
from dispatchcore.core.tools import InternalHandler, dispatch_internal


def test_add_floats():
    assert dispatch_internal("add", {"a": 5.5, "b": 2.5}) == '{"result":8.0,"operation":"addition"}'


def test_multiply_ints():
    assert dispatch_internal("multiply", {"a": 4, "b": 7}) == '{"result":28,"operation":"multiplication"}'


def test_mixed_int_float():
    assert json.loads(dispatch_internal("multiply", {"a": 2, "b": 0.5})) == {
        "result": 1.0,
        "operation": "multiplication",
    }


def test_enum_member_accepted():
    assert json.loads(dispatch_internal(InternalHandler.ADD, {"a": 1, "b": 2}))["result"] == 3


@pytest.mark.parametrize("params, missing", [
    ({"b": 1}, "a"),
    ({"a": 1}, "b"),
    ({"a": "1", "b": 2}, "a"),
    ({"a": 1, "b": True}, "b"),
    ({"a": None, "b": 2}, "a"),
])
def test_arithmetic_rejects_bad_operands(params, missing):
    with pytest.raises(MissingOrInvalidParameter) as exc:
        dispatch_internal("add", params)
    assert exc.value.name == missing
    assert exc.value.message == f"Missing or invalid parameter '{missing}'"
    assert exc.value.error_code == codes.MISSING_OR_INVALID_PARAMETER


def test_unknown_handler():
    with pytest.raises(UnknownInternalHandler) as exc:
        dispatch_internal("subtract", {"a": 1, "b": 2})
    assert exc.value.tag == "subtract"
    assert "Unknown internal handler: subtract" in exc.value.message


def test_handler_tag_is_exact_match():
    with pytest.raises(UnknownInternalHandler):
        dispatch_internal("ADD", {"a": 1, "b": 2})


def test_list_files(tmp_path):
    (tmp_path / "b.txt").write_text("hello", encoding="utf-8")
    (tmp_path / "a_dir").mkdir()

    result = json.loads(dispatch_internal("list_files", {"path": str(tmp_path)}))

    assert result["path"] == str(tmp_path)
    assert [f["name"] for f in result["files"]] == ["a_dir", "b.txt"]
    by_name = {f["name"]: f for f in result["files"]}
    assert by_name["a_dir"]["is_dir"] is True
    assert by_name["b.txt"]["is_dir"] is False
    assert by_name["b.txt"]["size"] == 5


def test_list_files_defaults_to_cwd(tmp_path, monkeypatch):
    (tmp_path / "only.txt").write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = json.loads(dispatch_internal("list_files", {}))

    assert result["path"] == "."
    assert [f["name"] for f in result["files"]] == ["only.txt"]


def test_list_files_missing_directory(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(DirectoryUnreadable) as exc:
        dispatch_internal("list_files", {"path": str(missing)})
    assert exc.value.path == str(missing)


@pytest.mark.parametrize("handler, a, b", [
    ("add", 1e308, 1e308),
    ("multiply", 1e200, 1e200),
    ("multiply", 10 ** 400, 1.5),
])
def test_arithmetic_overflow_is_error(handler, a, b):
    with pytest.raises(ResultOutOfRange) as exc:
        dispatch_internal(handler, {"a": a, "b": b})
    assert exc.value.error_code == codes.RESULT_OUT_OF_RANGE


def test_big_integers_stay_exact():
    out = json.loads(dispatch_internal("multiply", {"a": 10 ** 30, "b": 3}))
    assert out["result"] == 3 * 10 ** 30


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_operand_rejected(value):
    with pytest.raises(MissingOrInvalidParameter) as exc:
        dispatch_internal("add", {"a": value, "b": 1})
    assert exc.value.name == "a"


def test_every_handler_tag_dispatches(tmp_path):
    for handler in InternalHandler:
        params = {"path": str(tmp_path)} if handler is InternalHandler.LIST_FILES else {"a": 1, "b": 1}
        assert json.loads(dispatch_internal(handler.value, params))


def test_list_files_does_not_follow_links(tmp_path):
    target = tmp_path / "real_dir"
    target.mkdir()
    (target / "inner.txt").write_text("x" * 100, encoding="utf-8")
    (tmp_path / "dir_link").symlink_to(target, target_is_directory=True)
    (tmp_path / "dangling").symlink_to(tmp_path / "gone")

    result = json.loads(dispatch_internal("list_files", {"path": str(tmp_path)}))

    by_name = {f["name"]: f for f in result["files"]}
    assert sorted(by_name) == ["dangling", "dir_link", "real_dir"]
    assert by_name["dir_link"]["is_dir"] is False
    assert by_name["dangling"]["is_dir"] is False
    assert by_name["real_dir"]["is_dir"] is True
