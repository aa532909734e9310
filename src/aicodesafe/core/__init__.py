# SPDX-License-Identifier: MIT
"""Core data model, position indexing and redaction."""

from .findings import Decision, Finding, Position, ScanResult, Severity

__all__ = ["Decision", "Finding", "Position", "ScanResult", "Severity"]
