# SPDX-License-Identifier: MIT
"""Public scanning API for aicodesafe.

    from aicodesafe.scanner import scan
    result = scan("my key is ...")
    result.decision, result.redacted_text
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from aicodesafe.core.findings import ScanResult, Severity
from aicodesafe.core.redaction import redact_text
from aicodesafe.detectors import DetectorRegistry, build_registry, get_detector_registry
from .merge import merge_findings

logger = logging.getLogger(__name__)


@dataclass
class Scanner:
    """
    Scanner runs all registered detectors over a text and assembles the
    report. It holds no per-scan state and may be shared between threads.
    """

    registry: DetectorRegistry = field(default_factory=get_detector_registry)

    def scan(self, text: Any) -> ScanResult:
        if not isinstance(text, str):
            if text is not None:
                logger.debug("Non-string input of type %s scanned as empty", type(text).__name__)
            text = ""

        findings = merge_findings(self.registry.scan_with_all(text))
        redacted, findings = redact_text(text, findings)

        counts = {s.value: 0 for s in Severity}
        for f in findings:
            counts[f.severity.value] += 1

        result = ScanResult(
            counts=counts,
            findings=tuple(findings),
            redacted_text=redacted,
            original_text=text,
        )
        logger.debug(
            "Scanned %d chars: decision=%s high=%d medium=%d low=%d",
            len(text),
            result.decision.value,
            counts["high"],
            counts["medium"],
            counts["low"],
        )
        return result

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "Scanner":
        return cls(registry=build_registry(config))


def scan(text: Any) -> ScanResult:
    """Scan *text* with the built-in detectors."""
    return Scanner().scan(text)


__all__ = ["Scanner", "scan"]
