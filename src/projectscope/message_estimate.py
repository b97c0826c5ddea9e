# Copyright © 2025 Sierra Labs LLC
# SPDX-License-Identifier: AGPL-3.0-only
# License-Filename: LICENSE

"""
Message count estimation for transcript files.

JSONL transcript entries average roughly 800-1200 bytes, so a file's size
gives a cheap estimate of how many messages it holds without reading it.
"""

import os
from typing import Union

# Assumed average size of one serialized message.
AVERAGE_MESSAGE_BYTES = 1000


def estimate_message_count_from_size(file_size: int) -> int:
    """
    Estimate the number of messages in a file of ``file_size`` bytes.

    Rounds up and never returns less than 1, so empty and tiny files count
    as a single message.

    Raises:
        TypeError: ``file_size`` is not an integer.
        ValueError: ``file_size`` is negative.
    """
    if isinstance(file_size, bool) or not isinstance(file_size, int):
        raise TypeError(f"file_size must be an int, got {type(file_size).__name__}")
    if file_size < 0:
        raise ValueError(f"file_size must be non-negative, got {file_size}")

    return max(1, -(-file_size // AVERAGE_MESSAGE_BYTES))


def estimate_message_count(path: Union[str, os.PathLike]) -> int:
    """Estimate messages in the file at ``path``. OSError propagates."""
    return estimate_message_count_from_size(os.stat(path).st_size)


__all__ = [
    "AVERAGE_MESSAGE_BYTES",
    "estimate_message_count_from_size",
    "estimate_message_count",
]
