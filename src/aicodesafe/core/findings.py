# SPDX-License-Identifier: MIT
"""Finding data structures for aicodesafe."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, Tuple


class Severity(Enum):
    """Risk tier of a finding, ordered high > medium > low."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Look up a severity by its (case-insensitive) name."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown severity {value!r}; expected one of: high, medium, low"
            ) from None


class Decision(Enum):
    """Verdict derived from the highest severity present."""

    ALLOW = "allow"
    REDACT = "redact"
    BLOCK = "block"

    @classmethod
    def from_highest(cls, severity: Optional[Severity]) -> "Decision":
        if severity is None:
            return cls.ALLOW
        if severity is Severity.HIGH:
            return cls.BLOCK
        return cls.REDACT


@dataclass(frozen=True)
class Position:
    """1-based line/column of a character offset."""

    line: int
    column: int

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True)
class Finding:
    """Represents one detected span of sensitive text."""

    name: str  # detector rule name (e.g. 'AWS Secret Access Key')
    severity: Severity
    match: str  # exact matched substring
    start: int  # half-open character range into the scanned text
    end: int
    snippet: str = ""  # masked preview, filled by the redaction pass
    position: Optional[Position] = None  # filled by the redaction pass

    def __post_init__(self):
        if not 0 <= self.start < self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end}) for {self.name}")

    @property
    def key(self) -> Tuple[int, int, str]:
        """Identity used for de-duplication."""
        return (self.start, self.end, self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert Finding to dictionary format."""
        result = {
            "name": self.name,
            "severity": self.severity.value,
            "match": self.match,
            "start": self.start,
            "end": self.end,
            "snippet": self.snippet,
        }

        if self.position:
            result["position"] = self.position.to_dict()

        return result


@dataclass(frozen=True)
class ScanResult:
    """Report returned by a single scan."""

    counts: Dict[str, int]
    findings: Tuple[Finding, ...] = field(default_factory=tuple)
    redacted_text: str = ""
    original_text: str = ""

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def highest_severity(self) -> Optional[Severity]:
        for severity in Severity:
            if self.counts.get(severity.value, 0) > 0:
                return severity
        return None

    @property
    def decision(self) -> Decision:
        return Decision.from_highest(self.highest_severity)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape printed by the CLI and consumed by hooks."""
        return {
            "decision": self.decision.value,
            "counts": dict(self.counts),
            "findings": [f.to_dict() for f in self.findings],
            "redactedText": self.redacted_text,
            "originalText": self.original_text,
        }
