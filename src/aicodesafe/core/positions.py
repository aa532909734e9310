# SPDX-License-Identifier: MIT
"""Character offset to line/column mapping."""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import List, Optional, Sequence

from .findings import Position


def line_starts(text: str) -> List[int]:
    """Offsets at which each line of *text* begins."""
    return [0] + [m.end() for m in re.finditer("\n", text)]


def line_column(text: str, offset: int, starts: Optional[Sequence[int]] = None) -> Position:
    """
    Convert a character offset in *text* to a 1-based line/column pair.

    Lines end at ``\\n``; a ``\\r`` before it stays on the earlier line.
    Offsets outside the text are clamped, so anything past the end
    resolves to the last line. Pass *starts* from :func:`line_starts`
    when looking up many offsets in the same text.
    """
    if starts is None:
        starts = line_starts(text)
    offset = max(0, min(offset, len(text)))
    line = bisect_right(starts, offset)
    return Position(line=line, column=offset - starts[line - 1] + 1)
