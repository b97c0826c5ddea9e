# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""
Project marker detectors.

Each detector inspects a single candidate (a directory or a file) and either
returns a project name or raises. ``first_match`` runs detectors in order and
treats any failure as "marker absent", so callers never see I/O or parse
errors from marker files.
"""

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

logger = logging.getLogger(__name__)

# A detector returns a name, or None when the candidate is not a marker.
Detector = Callable[[], Optional[str]]

# Errors that mean "this marker did not match".
MARKER_ERRORS = (
    OSError,
    UnicodeError,
    ValueError,  # json.JSONDecodeError, embedded null bytes in paths
    tomllib.TOMLDecodeError,
    RecursionError,  # pathologically nested JSON or TOML
)


def first_match(detectors: Iterable[Detector]) -> Optional[str]:
    """
    Return the first name produced by ``detectors``.

    Detectors are called lazily in order. A detector that returns None or an
    empty name, or raises one of MARKER_ERRORS, is skipped and the next one
    is tried.
    """
    for detector in detectors:
        try:
            name = detector()
        except MARKER_ERRORS as e:
            logger.debug(f"Marker candidate skipped: {e}")
            continue
        if name:
            return name
    return None


def read_idea_name(directory: Path) -> Optional[str]:
    """JetBrains projects store their display name in .idea/.name."""
    name_file = directory / ".idea" / ".name"
    if not name_file.exists():
        return None
    return name_file.read_text(encoding="utf-8").strip()


def _string_field(document, *keys: str) -> Optional[str]:
    """Walk nested mappings by ``keys``; only a str leaf counts."""
    value = document
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value if isinstance(value, str) else None


def _read_json(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_toml(path: Path):
    with open(path, "rb") as f:
        return tomllib.load(f)


def file_marker_name(path: Path) -> Optional[str]:
    """
    Detect a project name from a single file.

    Recognized markers:
        *.sln             Visual Studio solution, name is the file stem
        *.Rproj           RStudio project, name is the file stem
        *.code-workspace  VS Code workspace, JSON ``name`` field
        package.json      Node.js manifest, JSON ``name`` field
        pyproject.toml    Python project, TOML ``project.name`` field
    """
    suffix = path.suffix
    if suffix in (".sln", ".Rproj"):
        # Undecodable filenames surface as surrogate escapes; they don't match.
        path.stem.encode("utf-8")
        return path.stem
    if suffix == ".code-workspace":
        name = _string_field(_read_json(path), "name")
        if name is not None:
            return name

    if path.name == "package.json":
        return _string_field(_read_json(path), "name")
    if path.name == "pyproject.toml":
        return _string_field(_read_toml(path), "project", "name")
    return None


def iter_files(directory: Path) -> Iterator[Path]:
    """
    Yield regular files directly inside ``directory``.

    Order is whatever the filesystem enumeration yields. Entries that
    cannot be inspected are skipped.
    """
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                if entry.is_file():
                    yield Path(entry.path)
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry.path}: {e}")


def directory_detectors(directory: Path) -> Iterator[Detector]:
    """
    Yield detectors for one directory level, highest priority first.

    .idea/.name comes before any file marker. The directory is only listed
    once .idea/.name has failed to resolve.
    """
    yield lambda: read_idea_name(directory)

    try:
        files = list(iter_files(directory))
    except MARKER_ERRORS as e:
        logger.debug(f"Cannot list {directory}: {e}")
        return

    for path in files:
        yield lambda path=path: file_marker_name(path)


__all__ = [
    "Detector",
    "MARKER_ERRORS",
    "first_match",
    "read_idea_name",
    "file_marker_name",
    "iter_files",
    "directory_detectors",
]
