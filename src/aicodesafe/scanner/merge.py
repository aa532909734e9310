# SPDX-License-Identifier: MIT
"""Combine detector outputs into one ordered finding list."""

from __future__ import annotations
from typing import Iterable, List

from aicodesafe.core.findings import Finding


def merge_findings(findings: Iterable[Finding]) -> List[Finding]:
    """
    Drop exact duplicates and order findings by start offset.

    Two findings are duplicates when start, end and name all agree; the
    first one seen is kept. Overlapping spans from different rules are
    all kept. Ties on start keep discovery order.
    """
    seen = set()
    unique = []
    for f in findings:
        if f.key in seen:
            continue
        seen.add(f.key)
        unique.append(f)
    return sorted(unique, key=lambda f: f.start)
