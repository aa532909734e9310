# SPDX-License-Identifier: MIT
"""
Agent hook surfaces.

Each hook reads a JSON envelope on stdin, scans the relevant text and
signals its verdict through the exit status:
- 0: allow, nothing printed
- 2: deny, a human-readable summary on stderr
"""

from .common import EXIT_ALLOW, EXIT_DENY, HookOutcome

__all__ = ["EXIT_ALLOW", "EXIT_DENY", "HookOutcome"]
