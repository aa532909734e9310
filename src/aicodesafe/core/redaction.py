# SPDX-License-Identifier: MIT
"""
Redaction utilities for aicodesafe.

Builds the sanitized copy of scanned text and the masked snippets shown
in reports. Nothing here keeps state between calls.
"""

from __future__ import annotations
import re
from dataclasses import replace
from typing import List, Sequence, Tuple

from .findings import Finding
from .positions import line_column, line_starts

MAX_MASK_STARS = 12


def placeholder_name(name: str) -> str:
    """'AWS Secret Access Key' -> 'AWS_SECRET_ACCESS_KEY'."""
    return re.sub(r"\s+", "_", name).upper()


def mask_placeholder(name: str, value: str) -> str:
    """
    Build the placeholder that replaces a finding in redacted text.

    Keeps only the last 4 characters of *value*, preceded by up to 12 stars.

    Args:
        name: Detector name of the finding
        value: The matched text being replaced

    Returns:
        String like ``<REDACTED:EMAIL:************.com>``
    """
    stars = "*" * max(0, min(MAX_MASK_STARS, len(value) - 4))
    return f"<REDACTED:{placeholder_name(name)}:{stars}{value[-4:]}>"


def mask_snippet(value: str) -> str:
    """
    Short human-facing preview of a match.

    Values of 8 characters or fewer are fully starred, longer ones keep
    the first 2 and last 2 characters.
    """
    if not value:
        return ""
    if len(value) <= 8:
        return "*" * len(value)
    return value[:2] + "***" + value[-2:]


def redact_text(text: str, findings: Sequence[Finding]) -> Tuple[str, List[Finding]]:
    """
    Replace every finding span in *text* with its mask placeholder.

    Spans are processed from the highest ``end`` offset down, so offsets of
    spans still to be processed stay valid. A span lying wholly inside an
    already replaced region is left alone; one that overlaps it only gets
    its uncovered prefix replaced.

    Args:
        text: The original scanned text
        findings: Merged findings, in any order

    Returns:
        Tuple of (redacted text, findings with snippet and position filled)
        where the findings keep the order they were given in.
    """
    starts = line_starts(text)
    filled = [
        replace(f, snippet=mask_snippet(f.match), position=line_column(text, f.start, starts))
        for f in findings
    ]

    # pieces are collected back to front and joined once
    pieces = []
    covered_from = len(text)
    for f in sorted(filled, key=lambda f: (f.end, f.start), reverse=True):
        if f.start >= covered_from:
            continue
        stop = min(f.end, covered_from)
        pieces.append(text[stop:covered_from])
        pieces.append(mask_placeholder(f.name, f.match))
        covered_from = f.start
    pieces.append(text[:covered_from])

    return "".join(reversed(pieces)), filled
