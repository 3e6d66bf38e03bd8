from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from worksheet_config.cli import app
from worksheet_config.config import load_config

runner = CliRunner()


def test_init_writes_defaults_from_project(tmp_path: Path) -> None:
    project = tmp_path / "project.yml"
    project.write_text("name: demo\nmodules: [core]\n")
    path = tmp_path / "run.yml"

    result = runner.invoke(app, ["init", str(path), "--name", "Scratch", "--project", str(project)])

    assert result.exit_code == 0, result.output
    config = load_config(path)
    assert config.name == "Scratch"
    assert config.runtime_options == "-Djline.terminal=NONE"
    assert config.working_directory == str(tmp_path.resolve())


def test_set_updates_only_given_fields(tmp_path: Path) -> None:
    path = tmp_path / "run.yml"
    assert runner.invoke(app, ["init", str(path)]).exit_code == 0

    result = runner.invoke(
        app,
        ["set", str(path), "--options=-Xmx2g", "--script", "/work/demo.sc", "--module", "core"],
    )

    assert result.exit_code == 0, result.output
    config = load_config(path)
    assert config.runtime_options == "-Xmx2g"
    assert config.script_path == "/work/demo.sc"
    assert config.module == "core"
    assert config.working_directory == ""


def test_set_reports_invalid_config(tmp_path: Path) -> None:
    path = tmp_path / "run.yml"
    path.write_text("name: [broken\n")
    result = runner.invoke(app, ["set", str(path), "--script", "/x.sc"])
    assert result.exit_code == 4


def test_show_prints_configuration(tmp_path: Path) -> None:
    path = tmp_path / "run.yml"
    runner.invoke(app, ["init", str(path), "--name", "Scratch"])
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0
    assert "Scratch" in result.output
    assert "VM options" in result.output


def test_browse_lists_script_picker_entries(browse_tree: Path) -> None:
    result = runner.invoke(app, ["browse", str(browse_tree), "--kind", "script"])
    assert result.exit_code == 0
    lines = result.output.split()
    assert lines == ["a/", "x.sc"]


def test_browse_directory_picker_with_hidden(browse_tree: Path) -> None:
    result = runner.invoke(app, ["browse", str(browse_tree), "--kind", "directory", "--show-hidden"])
    assert result.output.split() == [".hidden/", "a/"]


def test_browse_rejects_unknown_kind(browse_tree: Path) -> None:
    result = runner.invoke(app, ["browse", str(browse_tree), "--kind", "archive"])
    assert result.exit_code == 2


@pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that stores raw bytes")
def test_browse_survives_undecodable_names(tmp_path: Path) -> None:
    Path(os.fsdecode(os.fsencode(tmp_path) + b"/bad\xff.sc")).write_text("1")
    (tmp_path / "good.sc").write_text("2")

    result = runner.invoke(app, ["browse", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert result.output.split() == ["bad\ufffd.sc", "good.sc"]
