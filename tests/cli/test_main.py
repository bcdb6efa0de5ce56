# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ctoparse CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from ctoparse.cli.main import main

# ###############
# Helpers
# ###############

_VALID = """\
namespace org.acme@1.0.0

concept Person {
  o String name
  o Integer age range=[0,150]
}
"""


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    """Run main() with *args* and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["ctoparse", *args])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0
    assert "usage: ctoparse" in capsys.readouterr().out


# -------- parse tests --------


def test_parse_prints_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """parse prints the serialized model to stdout."""
    source = _write(tmp_path / "model.cto", _VALID)
    assert _run(monkeypatch, "parse", str(source)) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["namespace"] == "org.acme@1.0.0"
    assert data["declarations"][0]["name"] == "Person"


def test_parse_negative_indent_is_compact(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """A negative --indent prints the JSON on one line."""
    source = _write(tmp_path / "model.cto", _VALID)
    assert _run(monkeypatch, "parse", str(source), "--indent", "-1") == 0
    assert capsys.readouterr().out.count("\n") == 1


def test_parse_writes_output_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """--output writes the JSON to a file and reports it."""
    source = _write(tmp_path / "model.cto", _VALID)
    output = tmp_path / "out" / "model.json"
    assert _run(monkeypatch, "parse", str(source), "-o", str(output)) == 0
    assert json.loads(output.read_text(encoding="utf-8"))["namespace"] == "org.acme@1.0.0"
    assert f"Wrote {output}" in capsys.readouterr().out


def test_parse_reports_syntax_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """A parse error is printed to stderr with the file name and location."""
    source = _write(tmp_path / "bad.cto", "namespace test@1.0.0\nconcept {}\n")
    assert _run(monkeypatch, "parse", str(source)) == 1
    err = capsys.readouterr().err
    assert err.startswith(f"Error: {source}: Line 2, column 9:")


def test_parse_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """A missing file is reported as an error."""
    assert _run(monkeypatch, "parse", str(tmp_path / "missing.cto")) == 1
    assert "cannot read" in capsys.readouterr().err


# -------- check tests --------


def test_check_clean_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """check reports success when nothing is wrong."""
    source = _write(tmp_path / "model.cto", _VALID)
    assert _run(monkeypatch, "check", str(source)) == 0
    assert "No issues found." in capsys.readouterr().out


def test_check_warnings_do_not_fail(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """Warnings are printed but the exit code stays 0."""
    source = _write(
        tmp_path / "model.cto",
        'namespace test@1.0.0\nconcept C {\n  o String s default="abc" regex=/^[0-9]+$/\n}\n',
    )
    assert _run(monkeypatch, "check", str(source)) == 0
    out = capsys.readouterr().out
    assert f"Warning: {source}: Concept 'C' property 's'" in out
    assert "No issues found." in out


def test_check_errors_fail(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """Validation errors and parse errors yield exit code 1; every file is checked."""
    inverted = _write(tmp_path / "inverted.cto", "namespace test@1.0.0\nconcept C {\n  o Integer i range=[5,1]\n}\n")
    broken = _write(tmp_path / "broken.cto", "concept C {}\n")
    assert _run(monkeypatch, "check", str(inverted), str(broken)) == 1
    err = capsys.readouterr().err
    assert f"Error: {inverted}: Concept 'C' property 'i': lower bound 5 exceeds upper bound 1" in err
    assert f"Error: {broken}:" in err


# -------- build tests --------


def test_build_with_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """build compiles every .cto file below the directory into the default build directory."""
    _write(tmp_path / "hr.cto", _VALID)
    _write(tmp_path / "nested" / "geo.cto", "namespace org.acme.geo@1.0.0\n")
    assert _run(monkeypatch, "build", str(tmp_path)) == 0
    out = capsys.readouterr().out
    assert "Building 2 model file(s)..." in out
    assert (tmp_path / ".ctoparse-build" / "hr.cto.json").exists()
    assert (tmp_path / ".ctoparse-build" / "nested" / "geo.cto.json").exists()


def test_build_honours_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """build reads build-directory, sources and indent from the config file."""
    _write(tmp_path / ".ctoparse.yaml", "build-directory: out\nsources:\n  - models/*.cto\nindent: null\n")
    _write(tmp_path / "models" / "hr.cto", _VALID)
    _write(tmp_path / "ignored" / "geo.cto", "not a model")
    assert _run(monkeypatch, "build", str(tmp_path)) == 0
    artifact = tmp_path / "out" / "models" / "hr.cto.json"
    assert "\n" not in artifact.read_text(encoding="utf-8")
    assert not (tmp_path / "out" / "ignored").exists()


def test_build_default_directory_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """build with no directory argument uses the current working directory."""
    monkeypatch.chdir(tmp_path)
    _write(tmp_path / "hr.cto", _VALID)
    assert _run(monkeypatch, "build") == 0
    assert (tmp_path / ".ctoparse-build" / "hr.cto.json").exists()


def test_build_no_sources(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """An empty project is not an error."""
    assert _run(monkeypatch, "build", str(tmp_path)) == 0
    assert "No .cto files found." in capsys.readouterr().out


def test_build_missing_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """A missing project directory is reported."""
    assert _run(monkeypatch, "build", str(tmp_path / "nope")) == 1
    assert "does not exist" in capsys.readouterr().err


def test_build_invalid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """An invalid config file aborts the build."""
    _write(tmp_path / ".ctoparse.yaml", "indent: -3\n")
    assert _run(monkeypatch, "build", str(tmp_path)) == 1
    assert "'indent' must be a non-negative integer" in capsys.readouterr().err


def test_build_parse_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """A model that fails to parse aborts the build with exit code 1."""
    _write(tmp_path / "bad.cto", "namespace test@1.0.0\nconcept {}\n")
    assert _run(monkeypatch, "build", str(tmp_path)) == 1
    assert "Parse error in" in capsys.readouterr().err
