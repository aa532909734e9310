# SPDX-License-Identifier: MIT
"""Bounded file reads for scanning file contents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 1024 * 1024


@dataclass(frozen=True)
class Sample:
    """Leading part of a file, decoded as UTF-8."""

    path: Path
    content: str
    truncated: bool


def read_sample(path: Path, max_bytes: int = DEFAULT_MAX_BYTES) -> Optional[Sample]:
    """
    Read at most *max_bytes* from a regular file.

    Returns None when the path is not a readable regular file. Undecodable
    bytes are replaced rather than rejected.
    """
    try:
        if not path.is_file():
            logger.debug("Skipping %s: not a file", path)
            return None
        size = path.stat().st_size
        with open(path, "rb") as f:
            data = f.read(max_bytes)
    except OSError as e:
        logger.debug("Skipping %s: %s", path, e)
        return None
    return Sample(
        path=path,
        content=data.decode("utf-8", errors="replace"),
        truncated=size > len(data),
    )
