#!/usr/bin/env python3
"""
Allow running aicodesafe as a module: python -m aicodesafe
"""

from aicodesafe.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
