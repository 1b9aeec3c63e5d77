"""Tests for `textparser render`, run in-process through the dispatcher."""
from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from textparser.cli._dispatcher import main

TEMPLATE = "Hi, I am *(name)* and I am *(age)* years old."


@pytest.fixture
def template_file(isolated_project: Path) -> Path:
    path = isolated_project / "greeting.txt"
    path.write_text(TEMPLATE, encoding="utf-8")
    return path


def test_render_file_with_vars(template_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["render", str(template_file), "--var", "name=Ann", "--var", "age=23"])
    assert code == 0
    assert capsys.readouterr().out == "Hi, I am Ann and I am 23 years old."


def test_render_json_output(template_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["render", str(template_file), "--var", "name=Ann", "--var", "age=23", "--json"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"status": "success", "output": "Hi, I am Ann and I am 23 years old."}


def test_vars_file_is_overridden_by_var(
    template_file: Path, isolated_project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    vars_file = isolated_project / "vars.yaml"
    vars_file.write_text("name: Bob\nage: 40\n", encoding="utf-8")
    code = main(["render", str(template_file), "--vars-file", str(vars_file), "--var", "age=41"])
    assert code == 0
    assert capsys.readouterr().out == "Hi, I am Bob and I am 41 years old."


def test_var_value_may_contain_equals(isolated_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = isolated_project / "eq.txt"
    path.write_text("*(expr)*", encoding="utf-8")
    assert main(["render", str(path), "--var", "expr=a=b"]) == 0
    assert capsys.readouterr().out == "a=b"


def test_malformed_var_fails(template_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", str(template_file), "--var", "name"]) == 1
    assert "expected NAME=VALUE" in capsys.readouterr().err


def test_unbound_variable_reports_json_error(
    template_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["render", str(template_file), "--var", "name=Ann", "--json"])
    assert code == 1
    err = json.loads(capsys.readouterr().err)
    assert err["error"] == "UnboundVariableError"
    assert err["context"] == {"name": "age"}


def test_optional_default_is_used(isolated_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = isolated_project / "opt.txt"
    path.write_text('Hello *(?who defVal="world")*!', encoding="utf-8")
    assert main(["render", str(path)]) == 0
    assert capsys.readouterr().out == "Hello world!"


def test_custom_markers_from_flags(isolated_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = isolated_project / "braces.txt"
    path.write_text("Hi {{name}} *(name)*", encoding="utf-8")
    assert main(["render", str(path), "--start", "{{", "--end", "}}", "--var", "name=Ann"]) == 0
    assert capsys.readouterr().out == "Hi Ann *(name)*"


def test_markers_from_project_config(isolated_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (isolated_project / ".textparser" / "config" / "markers.yaml").write_text(
        "delimiters:\n  start: '<%'\n  end: '%>'\n", encoding="utf-8"
    )
    path = isolated_project / "t.txt"
    path.write_text("<%name%>", encoding="utf-8")
    assert main(["render", str(path), "--var", "name=Ann"]) == 0
    assert capsys.readouterr().out == "Ann"


def test_strict_flag_rejects_nested_start(
    isolated_project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = isolated_project / "nested.txt"
    path.write_text("Hi, I am *(name and I am *(age)* years old.", encoding="utf-8")
    args = ["render", str(path), "--var", "name=N", "--var", "age=1", "--json"]

    assert main(args) == 1
    assert json.loads(capsys.readouterr().err)["error"] == "UnboundVariableError"

    assert main([*args, "--strict"]) == 1
    assert json.loads(capsys.readouterr().err)["error"] == "TemplateSyntaxError"


def test_strict_from_env(
    isolated_project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("TEXTPARSER_SCAN__STRICT_SYNTAX_CHECK", "true")
    path = isolated_project / "nested.txt"
    path.write_text("*(a *(b)*", encoding="utf-8")
    assert main(["render", str(path)]) == 1
    assert "nested start marker" in capsys.readouterr().err


def test_no_strict_overrides_config(
    isolated_project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("TEXTPARSER_SCAN__STRICT_SYNTAX_CHECK", "true")
    path = isolated_project / "nested.txt"
    path.write_text("*(a *(b)*", encoding="utf-8")
    assert main(["render", str(path), "--no-strict", "--var", "a *(b=X"]) == 0
    assert capsys.readouterr().out == "X"


def test_reads_stdin(
    isolated_project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("Dear *(name)*,\n"))
    assert main(["render", "--var", "name=Ann"]) == 0
    assert capsys.readouterr().out == "Dear Ann,\n"


def test_output_file(template_file: Path, isolated_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = isolated_project / "out.txt"
    code = main(["render", str(template_file), "--var", "name=A", "--var", "age=1", "-o", str(out)])
    assert code == 0
    assert out.read_text(encoding="utf-8") == "Hi, I am A and I am 1 years old."
    assert "written to" in capsys.readouterr().out


def test_missing_template_is_io_error(isolated_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["render", str(isolated_project / "nope.txt"), "--json"])
    assert code == 1
    assert json.loads(capsys.readouterr().err)["error"] == "io_error"


def test_invalid_config_is_reported(isolated_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (isolated_project / ".textparser" / "config" / "bad.yaml").write_text(
        "delimiters:\n  start: ''\n", encoding="utf-8"
    )
    path = isolated_project / "t.txt"
    path.write_text("x", encoding="utf-8")
    assert main(["render", str(path), "--json"]) == 1
    assert json.loads(capsys.readouterr().err)["error"] == "ConfigError"
