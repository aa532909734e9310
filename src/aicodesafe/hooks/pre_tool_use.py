# SPDX-License-Identifier: MIT
"""
Pre-tool-use hook: inspect files an agent is about to read.

Envelope: {"tool_name": str, "tool_input": {...}, "cwd": str}
"""

from __future__ import annotations

import logging
import os
from functools import partial
from pathlib import Path
from typing import Any, Dict, List, Optional

from aicodesafe.core.findings import ScanResult
from aicodesafe.scanner import Scanner
from aicodesafe.scanner.config import load_scanner_config
from aicodesafe.scanner.sampling import read_sample
from .common import HookOutcome, configure_logging, format_counts, format_finding, run_hook

logger = logging.getLogger(__name__)

PATH_KEYS = ("file_path", "path")
PATH_LIST_KEYS = ("paths", "files", "file_paths")

HINT = (
    "To continue, clean up or redact the flagged content first, or relax the "
    "policy for low/medium findings in the configuration (not recommended)."
)


def resolve_paths(cwd: Optional[str], tool_input: Any) -> List[Path]:
    """Collect file paths named in a tool input, made absolute against *cwd*."""
    if not isinstance(tool_input, dict):
        return []

    candidates: List[Any] = [tool_input.get(k) for k in PATH_KEYS]
    for key in PATH_LIST_KEYS:
        value = tool_input.get(key)
        if isinstance(value, list):
            candidates.extend(value)

    base = Path(cwd) if cwd else Path(os.getcwd())
    paths = []
    for candidate in candidates:
        if not candidate or not isinstance(candidate, str):
            continue
        path = Path(candidate).expanduser()
        if not path.is_absolute():
            path = base / path
        paths.append(Path(os.path.normpath(path)))
    return paths


def summarize_file(path: Path, result: ScanResult, limit: int) -> str:
    lines = [f"* File: {path}", f"  Counts: {format_counts(result.counts)}"]
    top = result.findings[:limit]
    lines.extend("  " + format_finding(f) for f in top)
    if len(result.findings) > len(top):
        lines.append(f"  ... {len(result.findings) - len(top)} more omitted")
    return "\n".join(lines)


def handle(payload: Dict[str, Any], config_path: Optional[str] = None) -> HookOutcome:
    """Decide whether the tool call described by *payload* may proceed."""
    cwd = payload.get("cwd") if isinstance(payload.get("cwd"), str) else None
    config = load_scanner_config(config_path, repo_root=cwd or ".")

    tool = str(payload.get("tool_name") or "")
    if tool not in config["interesting_tools"]:
        logger.debug("Tool %r not inspected", tool)
        return HookOutcome.allow()

    paths = resolve_paths(cwd, payload.get("tool_input"))
    if not paths:
        return HookOutcome.allow()

    scanner = Scanner.from_config(config)
    totals = {"high": 0, "medium": 0, "low": 0}
    reports = []
    for path in paths:
        sample = read_sample(path, max_bytes=config["max_bytes"])
        if sample is None:
            continue
        if sample.truncated:
            logger.info("Scanned first %d bytes of %s", config["max_bytes"], path)
        result = scanner.scan(sample.content)
        if not result.total:
            continue
        for severity, count in result.counts.items():
            totals[severity] += count
        reports.append(summarize_file(path, result, config["report"]["max_findings_per_file"]))

    if not reports:
        return HookOutcome.allow()

    if totals["high"] > 0:
        header = "Target file contains HIGH severity sensitive data; read blocked."
    else:
        header = "Target file contains medium/low severity sensitive data; this read was blocked."
    details = "\n".join(reports)
    return HookOutcome.deny(
        f"{header}\nTotals: {format_counts(totals)}\n\nDetails:\n{details}\n\n{HINT}"
    )


def main(config_path: Optional[str] = None, verbose: bool = False) -> int:
    configure_logging(verbose)
    return run_hook(partial(handle, config_path=config_path))


if __name__ == "__main__":
    raise SystemExit(main())
