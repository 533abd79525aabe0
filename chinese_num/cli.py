"""
Command-line front end: spell each argument in Chinese numerals.

Usage:
    python main.py 121 123000520 020
    python -m chinese_num 121

Output, one line per argument:
    121: 一百二十一
    020: 不是一个数
"""

from __future__ import annotations

import sys

from dotenv import load_dotenv

from .config import configure_logging
from .converter import NumeralConverter


def main(argv: list[str] | None = None) -> int:
    """Convert every positional argument and print the results.

    Returns:
        Always 0; inputs that are not numbers are reported, not failed.
    """
    load_dotenv()
    configure_logging()
    args = sys.argv[1:] if argv is None else argv

    converter = NumeralConverter()
    report = converter.run(args)
    for result in report.results:
        print(converter.format_result(result))
    return 0
