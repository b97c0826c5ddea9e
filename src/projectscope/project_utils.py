# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""Shared helpers for deriving human-readable project identifiers."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import List, Optional, Union

from .markers import directory_detectors, first_match

logger = logging.getLogger(__name__)

# Current directory plus three ancestors.
MAX_WALK_LEVELS = 4

UNKNOWN_PROJECT = "Unknown"

_SEPARATORS = re.compile(r"[\\/]")


def extract_project_name(project_path: Union[str, os.PathLike]) -> str:
    """
    Guess a human-readable project name for a directory.

    Walks from ``project_path`` up through at most three parents. At each
    level, .idea/.name wins; otherwise the first file marker found in the
    directory listing is used (.sln, .Rproj, .code-workspace, package.json,
    pyproject.toml). When nothing matches, the original path is abbreviated
    with ``abbreviate_path``.

    Relative paths are walked lexically and never climb into the current
    working directory: "src/app" checks "src/app" and "src" only. An empty
    path checks nothing.

    Args:
        project_path: Directory to start from.

    Returns:
        A project name. Never raises for filesystem or parse problems.
    """
    if not os.fspath(project_path):
        return UNKNOWN_PROJECT

    current = Path(project_path)

    for _ in range(MAX_WALK_LEVELS):
        name = first_match(directory_detectors(current))
        if name is not None:
            logger.debug(f"Resolved project name {name!r} at {current}")
            return name

        parent = current.parent
        # "/" is its own parent; "foo" has parent ".", which has no parts
        if parent == current or not parent.parts:
            break
        current = parent

    return abbreviate_path(project_path)


def abbreviate_path(path: Union[str, os.PathLike]) -> str:
    """
    Shorten a path prompt-style, keeping the last two segments intact.

    Both ``/`` and ``\\`` separate segments and empty segments are dropped.
    Every segment before the last two is reduced to its first character:

        /Users/alice/projects/my app  ->  U/a/projects/my app
        C:\\Users\\bob\\code\\proj       ->  C/U/b/code/proj

    Paths with two or fewer segments return the last one, or "Unknown".
    """
    parts = [part for part in _SEPARATORS.split(os.fspath(path)) if part]

    if len(parts) <= 2:
        return parts[-1] if parts else UNKNOWN_PROJECT

    abbreviated = "/".join(part[0] for part in parts[:-2])
    last_two = "/".join(parts[-2:])
    return f"{abbreviated}/{last_two}"


def slug_display_name(project_dir: Path) -> str:
    """Name for a project directory whose workspace is gone from disk."""
    return abbreviate_path(Path(project_dir).name.replace("-", "/"))


def _resolve_slug_tokens(base: Path, tokens: List[str]) -> Optional[Path]:
    # Try the shortest hyphen-joined segment first, backtracking when a
    # shorter directory leads nowhere (/a/my vs /a/my-app).
    if not tokens:
        return base
    for end in range(1, len(tokens) + 1):
        candidate = base / "-".join(tokens[:end])
        if candidate.is_dir():
            resolved = _resolve_slug_tokens(candidate, tokens[end:])
            if resolved is not None:
                return resolved
    return None


def recover_workspace_path_from_slug(project_dir: Path) -> Optional[str]:
    """
    Map a Claude project directory back to the workspace it was created for.

    Claude Code names each directory under ~/.claude/projects after the
    workspace path with separators turned into hyphens, so /Users/alice/my-app
    becomes -Users-alice-my-app. Hyphens inside real directory names make the
    slug ambiguous; every segment must resolve to an existing directory.

    Returns:
        The absolute workspace path, or None when the slug is empty or the
        workspace no longer exists.
    """
    slug = Path(project_dir).name.lstrip("-")
    if not slug:
        return None

    resolved = _resolve_slug_tokens(Path("/"), slug.split("-"))
    if resolved is None:
        logger.debug(f"No workspace directory on disk for slug {slug!r}")
        return None
    return str(resolved)


__all__ = [
    "MAX_WALK_LEVELS",
    "UNKNOWN_PROJECT",
    "extract_project_name",
    "abbreviate_path",
    "recover_workspace_path_from_slug",
    "slug_display_name",
]
