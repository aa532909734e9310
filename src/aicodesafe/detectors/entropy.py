# SPDX-License-Identifier: MIT
"""
Entropy heuristic for secrets that match no known pattern.

Token-like runs are scored by Shannon entropy over their characters;
random-looking ones (base64, mixed-case hex) are reported as medium.
"""

from __future__ import annotations
import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import List

from aicodesafe.core.findings import Finding, Severity

NAME = "High-Entropy Token"
SEVERITY = Severity.MEDIUM

DEFAULT_THRESHOLD = 3.8
DEFAULT_MIN_LENGTH = 20

TOKEN_ALPHABET = r"[A-Za-z0-9_\-/=+]"
MEDIA_FILENAME_RE = re.compile(r"[-_A-Za-z0-9]+\.(?:jpg|png|gif|svg|pdf)", re.IGNORECASE)


def shannon_entropy(value: str) -> float:
    """Bits per character of *value*; 0.0 for an empty string."""
    if not value:
        return 0.0
    length = len(value)
    return -sum(
        (count / length) * math.log2(count / length) for count in Counter(value).values()
    )


@dataclass(frozen=True)
class EntropyDetector:
    threshold: float = DEFAULT_THRESHOLD
    min_length: int = DEFAULT_MIN_LENGTH
    enabled: bool = True

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError("min_length must be at least 1")

    @property
    def token_re(self) -> "re.Pattern[str]":
        return re.compile(f"{TOKEN_ALPHABET}{{{self.min_length},}}")

    def candidates(self, text: str) -> List[str]:
        """Maximal token-alphabet runs long enough to be considered."""
        return self.token_re.findall(text)

    def scan(self, text: str) -> List[Finding]:
        if not self.enabled or not text:
            return []
        findings = []
        for token in self.candidates(text):
            if MEDIA_FILENAME_RE.fullmatch(token):
                continue
            if shannon_entropy(token) < self.threshold:
                continue
            # Repeated tokens all report the first occurrence; the merger
            # collapses the resulting duplicates.
            start = text.index(token)
            findings.append(
                Finding(
                    name=NAME,
                    severity=SEVERITY,
                    match=token,
                    start=start,
                    end=start + len(token),
                )
            )
        return findings
