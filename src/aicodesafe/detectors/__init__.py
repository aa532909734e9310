"""Detector registry for aicodesafe."""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from aicodesafe.core.findings import Finding
from .entropy import NAME as ENTROPY_NAME, EntropyDetector
from .patterns import BUILTIN_PATTERNS, PatternLibrary, PatternRule, rule_from_config

logger = logging.getLogger(__name__)


class DetectorRegistry:
    """Pattern library plus entropy heuristic, run together over a text."""

    def __init__(
        self,
        library: Optional[PatternLibrary] = None,
        entropy: Optional[EntropyDetector] = None,
    ):
        self.library = library if library is not None else PatternLibrary()
        self.entropy = entropy if entropy is not None else EntropyDetector()

    def keys(self) -> List[str]:
        """Names of every detector that can report a finding."""
        names = self.library.names()
        if self.entropy.enabled:
            names.append(ENTROPY_NAME)
        return names

    def scan_with_all(self, text: str) -> List[Finding]:
        """Run pattern rules, then the entropy heuristic, over *text*."""
        findings = self.library.scan(text)
        findings.extend(self.entropy.scan(text))
        return findings


def build_registry(config: Optional[Dict[str, Any]] = None) -> DetectorRegistry:
    """
    Create a DetectorRegistry from a loaded configuration.

    Args:
        config: Mapping as returned by ``load_scanner_config``; None means
            built-in defaults.

    Raises:
        PatternLibraryError: If a disabled name is unknown or a custom rule is invalid
    """
    if not config:
        return DetectorRegistry()

    library = PatternLibrary(BUILTIN_PATTERNS)
    custom: List[PatternRule] = [
        rule_from_config(raw, i) for i, raw in enumerate(config.get("custom_rules") or [])
    ]
    if custom:
        library = library.extended(custom)
        logger.debug("Loaded %d custom rule(s)", len(custom))

    disabled = list(config.get("disabled_detectors") or [])
    entropy_cfg = dict(config.get("entropy") or {})
    entropy_enabled = bool(entropy_cfg.get("enabled", True))
    if ENTROPY_NAME in disabled:
        disabled = [name for name in disabled if name != ENTROPY_NAME]
        entropy_enabled = False
    if disabled:
        library = library.without(disabled)
        logger.debug("Disabled detectors: %s", ", ".join(disabled))

    entropy = EntropyDetector(
        threshold=float(entropy_cfg.get("threshold", EntropyDetector.threshold)),
        min_length=int(entropy_cfg.get("min_length", EntropyDetector.min_length)),
        enabled=entropy_enabled,
    )
    return DetectorRegistry(library=library, entropy=entropy)


# Global registry instance
_registry = None


def get_detector_registry() -> DetectorRegistry:
    """Get the default (built-in rules only) registry."""
    global _registry
    if _registry is None:
        _registry = DetectorRegistry()
    return _registry


__all__ = [
    "BUILTIN_PATTERNS",
    "DetectorRegistry",
    "EntropyDetector",
    "PatternLibrary",
    "PatternRule",
    "build_registry",
    "get_detector_registry",
]
