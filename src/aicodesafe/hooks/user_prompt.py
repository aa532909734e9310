# SPDX-License-Identifier: MIT
"""
User-prompt hook: scan a prompt before it is submitted.

Envelope: {"prompt": str}
"""

from __future__ import annotations

from functools import partial
from typing import Any, Dict, Optional

from aicodesafe.core.findings import Decision, ScanResult
from aicodesafe.scanner import Scanner
from aicodesafe.scanner.config import load_scanner_config
from .common import HookOutcome, configure_logging, format_counts, run_hook, summarize


def build_block_message(result: ScanResult) -> str:
    blocked = result.decision is Decision.BLOCK
    if blocked:
        header = "The prompt contains HIGH severity sensitive data; submission blocked."
        suggest = "Remove or replace the high severity content and submit again."
    else:
        header = (
            "The prompt contains medium/low severity sensitive data; "
            "submission blocked and a redacted version is suggested."
        )
        suggest = "To continue, copy the redacted prompt below and submit it (or edit and retry)."

    message = (
        f"{header}\nCounts: {format_counts(result.counts)}\n\n"
        f"Findings:\n{summarize(result.findings)}\n\n{suggest}"
    )
    if not blocked:
        message += f"\n\nRedacted prompt:\n{result.redacted_text}"
    return message


def handle(payload: Dict[str, Any], config_path: Optional[str] = None) -> HookOutcome:
    cwd = payload.get("cwd") if isinstance(payload.get("cwd"), str) else None
    config = load_scanner_config(config_path, repo_root=cwd or ".")
    result = Scanner.from_config(config).scan(payload.get("prompt"))
    if result.decision is Decision.ALLOW:
        return HookOutcome.allow()
    return HookOutcome.deny(build_block_message(result))


def main(config_path: Optional[str] = None, verbose: bool = False) -> int:
    configure_logging(verbose)
    return run_hook(partial(handle, config_path=config_path))


if __name__ == "__main__":
    raise SystemExit(main())
