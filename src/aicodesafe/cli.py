# SPDX-License-Identifier: MIT
"""
aicodesafe - Command Line Interface

This CLI provides:
- aicodesafe version
- aicodesafe scan [--text TEXT | --file PATH] --format {json,text}
- aicodesafe hook {pre-tool-use,user-prompt}
- aicodesafe init-config

Note:
- Hook subcommands read their JSON envelope on stdin and exit 2 to deny.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .core.exceptions import AICodeSafeError
from .hooks.common import configure_logging, format_counts, summarize

logger = logging.getLogger(__name__)


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    p = argparse.ArgumentParser(
        prog="aicodesafe", description="Scan and redact secrets and PII in text"
    )
    p.add_argument("-v", "--version", action="store_true", help="print version and exit")
    p.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    p.add_argument("--config", help="path to .aicodesafe.yml configuration")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")
    sub.add_parser("init-config", help="print a configuration template")

    sp = sub.add_parser("scan", help="scan text from --text, --file or stdin")
    source = sp.add_mutually_exclusive_group()
    source.add_argument("--text", help="text to scan")
    source.add_argument("--file", help="file to scan (read up to max_bytes)")
    sp.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="output format (default: json)",
    )

    hp = sub.add_parser("hook", help="run as an agent hook (envelope on stdin)")
    hp.add_argument("event", choices=["pre-tool-use", "user-prompt"])

    args = p.parse_args(argv)

    if args.version or args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd == "init-config":
        from .scanner.config import create_default_config_template

        print(create_default_config_template(), end="")
        return 0

    if args.cmd == "scan":
        configure_logging(args.verbose)
        return handle_scan_command(args)

    if args.cmd == "hook":
        return handle_hook_command(args)

    p.print_help()
    return 0


def handle_scan_command(args):
    """Handle the scan subcommand."""
    from .scanner import Scanner
    from .scanner.config import load_scanner_config
    from .scanner.sampling import read_sample

    try:
        config = load_scanner_config(args.config)
        scanner = Scanner.from_config(config)
    except AICodeSafeError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.text is not None:
        text = args.text
    elif args.file:
        sample = read_sample(Path(args.file), max_bytes=config["max_bytes"])
        if sample is None:
            print(f"Error: cannot read {args.file}", file=sys.stderr)
            return 1
        if sample.truncated:
            logger.warning("Scanned only the first %d bytes of %s", config["max_bytes"], args.file)
        text = sample.content
    else:
        text = sys.stdin.read()

    result = scanner.scan(text)

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_text_summary(result)
    return 0


def handle_hook_command(args):
    """Handle the hook subcommand."""
    if args.event == "pre-tool-use":
        from .hooks.pre_tool_use import main as hook_main
    else:
        from .hooks.user_prompt import main as hook_main
    return hook_main(config_path=args.config, verbose=args.verbose)


def print_text_summary(result):
    """Print a text summary of a scan result."""
    print(f"Decision: {result.decision.value}")
    print(f"Counts: {format_counts(result.counts)}")

    if result.findings:
        print("\nFindings:")
        print(summarize(result.findings, indent="  "))
        print("\nRedacted text:")
        print(result.redacted_text)


if __name__ == "__main__":
    raise SystemExit(main())
