#!/usr/bin/env python3
"""
Chinese Numerals — Entry Point
==============================

Prints the Chinese numeral form of every command-line argument.

Usage:
    python main.py 0 12 121 123000520     # one "<arg>: <numeral>" line each
    LOG_LEVEL=INFO python main.py 1 x     # also log a conversion summary
"""

from __future__ import annotations

import sys

from chinese_num.cli import main

if __name__ == "__main__":
    sys.exit(main())
