# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""
projectscope: project name detection and transcript size estimates.

Resolves human-readable project names from IDE and package marker files and
estimates message counts for Claude Code session transcripts.
"""

from .message_estimate import (
    AVERAGE_MESSAGE_BYTES,
    estimate_message_count,
    estimate_message_count_from_size,
)
from .project_utils import (
    abbreviate_path,
    extract_project_name,
    recover_workspace_path_from_slug,
)
from .sessions import ProjectSummary, scan_projects, summarize_project_dir

__version__ = "0.1.0"

__all__ = [
    "AVERAGE_MESSAGE_BYTES",
    "estimate_message_count",
    "estimate_message_count_from_size",
    "abbreviate_path",
    "extract_project_name",
    "recover_workspace_path_from_slug",
    "ProjectSummary",
    "scan_projects",
    "summarize_project_dir",
]
