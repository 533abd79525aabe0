"""
NumeralConverter: the conversion entry point used by the CLI and the API.

Flow per input:
  text → is_number? ──no──→ NOT_A_NUMBER (None / InvalidNumberError)
             │
            yes
             │
        to_chinese_num → CONVERTED

Design principles:
  - The numeral algorithm itself lives in numerals.py and stays pure.
  - Bad input is a result, not a failure; convert_strict() exists for
    callers that prefer an exception.
  - A batch keeps input order and counts both outcomes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .exceptions import InvalidNumberError
from .models import ConversionReport, ConversionResult, ConversionStatus
from .numerals import to_chinese_num

logger = logging.getLogger(__name__)

NOT_A_NUMBER_TEXT = "不是一个数"


class NumeralConverter:
    """Converts digit strings to Chinese numerals, one at a time or in bulk.

    Usage:
        converter = NumeralConverter()
        converter.convert("121")            # "一百二十一"
        report = converter.run(["10", "x"])
        for result in report.results:
            print(converter.format_result(result))
    """

    def __init__(self, not_a_number_text: str = NOT_A_NUMBER_TEXT):
        self.not_a_number_text = not_a_number_text

    def convert(self, text: str) -> str | None:
        """Return the Chinese numeral for `text`, or None if it is not a number."""
        numeral = to_chinese_num(text)
        if numeral is None:
            logger.debug("Rejected input %r: not a number", text)
        return numeral

    def convert_strict(self, text: str) -> str:
        """Like convert(), but raises InvalidNumberError instead of returning None."""
        numeral = self.convert(text)
        if numeral is None:
            raise InvalidNumberError(
                f"{text!r} is not a non-negative decimal integer",
                details={"input": text},
            )
        return numeral

    def convert_result(self, text: str) -> ConversionResult:
        numeral = self.convert(text)
        if numeral is None:
            return ConversionResult(input=text, status=ConversionStatus.NOT_A_NUMBER)
        return ConversionResult(
            input=text,
            status=ConversionStatus.CONVERTED,
            numeral=numeral,
            digit_count=len(text),
        )

    def run(self, texts: Iterable[str]) -> ConversionReport:
        """Convert every input and compile a report.

        Args:
            texts: Digit strings, e.g. command-line arguments.

        Returns:
            ConversionReport with one result per input, in order.
        """
        results = [self.convert_result(text) for text in texts]
        converted = sum(1 for r in results if r.status == ConversionStatus.CONVERTED)

        logger.info(
            "Converted %d of %d input(s), %d rejected",
            converted,
            len(results),
            len(results) - converted,
        )
        return ConversionReport(
            results=results,
            converted_count=converted,
            rejected_count=len(results) - converted,
        )

    def format_result(self, result: ConversionResult) -> str:
        """Render a result as "<input>: <numeral>" for display."""
        shown = result.numeral if result.numeral is not None else self.not_a_number_text
        return f"{result.input}: {shown}"
