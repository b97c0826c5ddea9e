#!/usr/bin/env python3
# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""Tests for Claude project directory summaries."""

import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

sys.path.insert(0, str(SRC_ROOT))

from projectscope.sessions import ProjectSummary, scan_projects, summarize_project_dir


def _make_workspace(root: Path, name: str, package_name: str) -> Path:
    workspace = root / "workspaces" / name
    workspace.mkdir(parents=True)
    (workspace / "package.json").write_text(json.dumps({"name": package_name}))
    return workspace


def _make_project_dir(projects_base: Path, workspace: Path) -> Path:
    project_dir = projects_base / str(workspace).replace("/", "-")
    project_dir.mkdir(parents=True)
    return project_dir


def test_summarize_project_dir(tmp_path):
    workspace = _make_workspace(tmp_path, "web-app", "widget")
    project_dir = _make_project_dir(tmp_path / "projects", workspace)
    (project_dir / "sess-1.jsonl").write_bytes(b"")
    (project_dir / "sess-2.jsonl").write_bytes(b"x" * 2500)
    (project_dir / "notes.txt").write_text("ignored")

    summary = summarize_project_dir(project_dir)

    assert summary.workspace_path == str(workspace)
    assert summary.project_name == "widget"
    assert summary.session_files == 2
    assert summary.total_bytes == 2500
    assert summary.estimated_messages == 4


def test_summarize_project_dir_without_transcripts(tmp_path):
    workspace = _make_workspace(tmp_path, "empty", "quiet")
    project_dir = _make_project_dir(tmp_path / "projects", workspace)

    summary = summarize_project_dir(project_dir)

    assert summary.project_name == "quiet"
    assert summary.session_files == 0
    assert summary.estimated_messages == 0


def test_summarize_ignores_jsonl_directories(tmp_path):
    workspace = _make_workspace(tmp_path, "odd", "odd-pkg")
    project_dir = _make_project_dir(tmp_path / "projects", workspace)
    (project_dir / "not-a-file.jsonl").mkdir()

    summary = summarize_project_dir(project_dir)

    assert summary.session_files == 0


def test_scan_projects_sorted(tmp_path):
    projects_base = tmp_path / "projects"
    for name, package_name in [("zeta", "zeta-pkg"), ("alpha", "alpha-pkg")]:
        workspace = _make_workspace(tmp_path, name, package_name)
        project_dir = _make_project_dir(projects_base, workspace)
        (project_dir / "s.jsonl").write_bytes(b"{}\n")
    (projects_base / "stray.txt").write_text("not a project")

    summaries = scan_projects(projects_base)

    assert [s.project_name for s in summaries] == ["alpha-pkg", "zeta-pkg"]
    assert all(s.estimated_messages == 1 for s in summaries)


def test_scan_projects_missing_base(tmp_path):
    assert scan_projects(tmp_path / "nope") == []


def test_summary_to_dict(tmp_path):
    summary = ProjectSummary(
        project_dir=tmp_path,
        workspace_path="/work/app",
        project_name="app",
        session_files=1,
        total_bytes=10,
        estimated_messages=1,
    )

    data = summary.to_dict()

    assert data["project_dir"] == str(tmp_path)
    assert data["project_name"] == "app"
    json.dumps(data)


def test_summarize_project_dir_with_deleted_workspace(tmp_path):
    project_dir = tmp_path / "projects" / "-nonexistent-projectscope-gone-app"
    project_dir.mkdir(parents=True)
    (project_dir / "old.jsonl").write_bytes(b"x" * 10)

    summary = summarize_project_dir(project_dir)

    assert summary.workspace_path is None
    assert summary.project_name == "n/p/gone/app"
    assert summary.estimated_messages == 1
