# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""
Claude Code project directory summaries.

Claude Code keeps one directory per workspace under ~/.claude/projects, each
holding <session_id>.jsonl transcripts. A summary pairs the workspace's
project name with a size-based estimate of how many messages it holds.
"""

import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from .message_estimate import estimate_message_count_from_size
from .project_utils import (
    extract_project_name,
    recover_workspace_path_from_slug,
    slug_display_name,
)

logger = logging.getLogger(__name__)

TRANSCRIPT_GLOB = "*.jsonl"


@dataclass
class ProjectSummary:
    """Name and size statistics for one Claude project directory."""
    project_dir: Path
    workspace_path: Optional[str]
    project_name: str
    session_files: int = 0
    total_bytes: int = 0
    estimated_messages: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["project_dir"] = str(self.project_dir)
        return data


def summarize_project_dir(project_dir: Path) -> ProjectSummary:
    """
    Summarize a single Claude project directory.

    The project name is resolved from the workspace path recovered from the
    directory slug; when that workspace no longer exists the slug itself is
    abbreviated instead. Each transcript contributes its own estimate, so a
    directory of many small files counts at least one message per file.
    """
    project_dir = Path(project_dir)
    workspace_path = recover_workspace_path_from_slug(project_dir)
    if workspace_path:
        project_name = extract_project_name(workspace_path)
    else:
        project_name = slug_display_name(project_dir)

    summary = ProjectSummary(
        project_dir=project_dir,
        workspace_path=workspace_path,
        project_name=project_name,
    )

    for transcript in sorted(project_dir.glob(TRANSCRIPT_GLOB)):
        try:
            if not transcript.is_file():
                continue
            size = transcript.stat().st_size
        except OSError as e:
            logger.warning(f"Skipping transcript {transcript}: {e}")
            continue

        summary.session_files += 1
        summary.total_bytes += size
        summary.estimated_messages += estimate_message_count_from_size(size)

    logger.debug(
        f"Summarized {project_dir.name}: {summary.session_files} files, "
        f"~{summary.estimated_messages} messages"
    )
    return summary


def scan_projects(projects_base: Path) -> List[ProjectSummary]:
    """
    Summarize every project directory under ``projects_base``.

    Returns:
        Summaries sorted by directory name; empty if the base is missing.
    """
    projects_base = Path(projects_base)
    if not projects_base.is_dir():
        logger.info(f"Claude projects directory not found: {projects_base}")
        return []

    project_dirs = sorted(
        (p for p in projects_base.iterdir() if p.is_dir()),
        key=lambda p: p.name,
    )
    logger.info(f"Scanning {len(project_dirs)} project directories in {projects_base}")
    return [summarize_project_dir(project_dir) for project_dir in project_dirs]


__all__ = [
    "ProjectSummary",
    "summarize_project_dir",
    "scan_projects",
]
