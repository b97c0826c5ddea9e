#!/usr/bin/env python3
# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""Tests for the projectscope command line."""

import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

sys.path.insert(0, str(SRC_ROOT))

from projectscope.cli import main


def _run(capsys, tmp_path, *argv):
    code = main(["--config-dir", str(tmp_path / "config"), *argv])
    return code, capsys.readouterr()


def test_name_command(tmp_path, capsys):
    project = tmp_path / "proj"
    project.mkdir()
    (project / "build.sln").write_text("")

    code, out = _run(capsys, tmp_path, "name", str(project))

    assert code == 0
    assert out.out.strip() == "build"


def test_estimate_bytes(tmp_path, capsys):
    code, out = _run(capsys, tmp_path, "estimate", "1001")

    assert code == 0
    assert out.out.strip() == "2"


def test_estimate_file(tmp_path, capsys):
    transcript = tmp_path / "s.jsonl"
    transcript.write_bytes(b"x" * 4200)

    code, out = _run(capsys, tmp_path, "estimate", str(transcript))

    assert code == 0
    assert out.out.strip() == "5"


def test_estimate_invalid_value(tmp_path, capsys):
    code, out = _run(capsys, tmp_path, "estimate", "not-a-number")

    assert code == 1
    assert "neither a byte count nor a file" in out.err


def test_estimate_negative_value(tmp_path, capsys):
    code, out = _run(capsys, tmp_path, "estimate", "-5")

    assert code == 1
    assert "non-negative" in out.err


def test_scan_json(tmp_path, capsys):
    workspace = tmp_path / "ws" / "app"
    workspace.mkdir(parents=True)
    (workspace / "pyproject.toml").write_text('[project]\nname = "snake"\n')
    projects_base = tmp_path / "projects"
    project_dir = projects_base / str(workspace).replace("/", "-")
    project_dir.mkdir(parents=True)
    (project_dir / "a.jsonl").write_bytes(b"x" * 1500)

    code, out = _run(capsys, tmp_path, "scan", "--base", str(projects_base), "--json")

    assert code == 0
    data = json.loads(out.out)
    assert len(data) == 1
    assert data[0]["project_name"] == "snake"
    assert data[0]["estimated_messages"] == 2


def test_scan_table(tmp_path, capsys):
    workspace = tmp_path / "ws" / "app"
    workspace.mkdir(parents=True)
    (workspace / "package.json").write_text(json.dumps({"name": "widget"}))
    projects_base = tmp_path / "projects"
    (projects_base / str(workspace).replace("/", "-")).mkdir(parents=True)

    code, out = _run(capsys, tmp_path, "scan", "--base", str(projects_base))

    assert code == 0
    lines = out.out.splitlines()
    assert lines[0].startswith("PROJECT")
    assert lines[1].startswith("widget")


def test_scan_empty_base(tmp_path, capsys):
    code, out = _run(capsys, tmp_path, "scan", "--base", str(tmp_path / "none"))

    assert code == 0
    assert "No Claude projects found" in out.out


def test_no_command_prints_help(tmp_path, capsys):
    code, out = _run(capsys, tmp_path)

    assert code == 1
    assert "usage" in out.out.lower()


def test_bad_config_reported(tmp_path, capsys):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("- not a mapping\n")

    code, out = _run(capsys, tmp_path, "estimate", "1")

    assert code == 1
    assert "must contain a mapping" in out.err
