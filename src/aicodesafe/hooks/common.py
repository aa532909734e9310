# SPDX-License-Identifier: MIT
"""Shared plumbing for the hook entry points."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, TextIO

from aicodesafe.core.exceptions import AICodeSafeError, EnvelopeError
from aicodesafe.core.findings import Finding

logger = logging.getLogger(__name__)

EXIT_ALLOW = 0
EXIT_DENY = 2

LOG_FORMAT = "[aicodesafe] %(levelname)s: %(message)s"


@dataclass(frozen=True)
class HookOutcome:
    """Exit status plus the message written to stderr (empty when allowing)."""

    exit_code: int
    message: str = ""

    @classmethod
    def allow(cls) -> "HookOutcome":
        return cls(EXIT_ALLOW)

    @classmethod
    def deny(cls, message: str) -> "HookOutcome":
        return cls(EXIT_DENY, message)


def resolve_log_level(verbose: bool = False) -> int:
    """DEBUG when verbose, else AICODESAFE_LOG_LEVEL; unknown names mean WARNING."""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(os.environ.get("AICODESAFE_LOG_LEVEL", "WARNING").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; stdout belongs to command output."""
    logging.basicConfig(level=resolve_log_level(verbose), format=LOG_FORMAT, stream=sys.stderr)


def parse_envelope(raw: Optional[str]) -> Dict[str, Any]:
    """
    Parse a hook payload. An empty payload is an empty envelope.

    Raises:
        EnvelopeError: If the payload is not JSON or not a JSON object
    """
    try:
        payload = json.loads(raw or "{}")
    except json.JSONDecodeError as e:
        raise EnvelopeError(f"Cannot parse hook input as JSON: {e}") from e
    if not isinstance(payload, dict):
        raise EnvelopeError(
            f"Hook input must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def format_finding(finding: Finding) -> str:
    """One summary line; shows the snippet, never the raw match."""
    loc = f"@{finding.position.line}:{finding.position.column}" if finding.position else ""
    return f"- [{finding.severity.value.upper()}] {finding.name}{loc}: {finding.snippet}"


def format_counts(counts: Dict[str, int]) -> str:
    return f"high={counts['high']} medium={counts['medium']} low={counts['low']}"


def summarize(findings: Iterable[Finding], indent: str = "") -> str:
    return "\n".join(indent + format_finding(f) for f in findings)


def run_hook(
    handler: Callable[[Dict[str, Any]], HookOutcome],
    stdin: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Read the envelope, run *handler* and report its outcome.

    Any failure denies: the caller's intent cannot be judged safely.
    """
    stdin = stdin or sys.stdin
    stderr = stderr or sys.stderr

    try:
        payload = parse_envelope(stdin.read())
        outcome = handler(payload)
    except AICodeSafeError as e:
        outcome = HookOutcome.deny(f"[aicodesafe] {e}")
    except Exception as e:
        logger.debug("Hook failed", exc_info=True)
        outcome = HookOutcome.deny(f"[aicodesafe] unexpected error: {e}")

    if outcome.message:
        print(outcome.message, file=stderr)
    return outcome.exit_code
