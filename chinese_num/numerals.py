"""
Convert a decimal digit string to its written-out Chinese numeral form.

Supported patterns:
    "121"              → "一百二十一"
    "12"               → "十二"          (leading "一十" is spoken as "十")
    "123000520"        → "一亿二千三百万零五百二十"
    "1004000007000500" → "一千零四万亿零七百万零五百"

Units are assigned by position counted from the rightmost digit: 十/百/千
within a group of four, 万 every four digits and 亿 every eight. Names cycle,
so arbitrarily long inputs are supported ("万亿", "亿亿", ...).

Anything that is not a plain non-negative decimal integer returns None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ─── Lookup Tables ──────────────────────────────────────────────────

DIGITS = "零一二三四五六七八九"
TENS_NAMES = "个十百千"

# Ordering used to decide whether a zero digit closes a group
UNIT_RANK: dict[str, int] = {unit: rank for rank, unit in enumerate("个十百千万亿")}

ZERO = "零"
ONES_UNIT = "个"

# ASCII only: str.isdigit() would also accept "٣" or "²"
_NUMBER_RE = re.compile(r"[1-9][0-9]*")


# ─── Unit Assignment ────────────────────────────────────────────────


def digit_pos_to_name(pos: int) -> str:
    """Return the unit character for a digit at `pos` (0 = rightmost)."""
    if pos == 0:
        return ONES_UNIT
    if pos % 8 == 0:
        return "亿"
    if pos % 4 == 0:
        return "万"
    return TENS_NAMES[pos % 4]


def is_number(text: str) -> bool:
    """True if `text` is "0" or a digit string without a leading zero."""
    return text == "0" or _NUMBER_RE.fullmatch(text) is not None


# ─── Accumulator ────────────────────────────────────────────────────


@dataclass
class _Accumulator:
    """Output state carried through the most-significant-first traversal."""

    text: str = ""
    pending_zero: bool = False
    last_unit: str = ONES_UNIT

    def append(self, digit: int, unit: str) -> None:
        if digit == 0:
            if UNIT_RANK[self.last_unit] > UNIT_RANK[unit]:
                # Swallowed; a single 零 goes in before the next non-zero digit
                self.pending_zero = True
            else:
                # Group marker (万/亿) for a group whose leading digits are zero
                self.text += unit
                self.last_unit = unit
                self.pending_zero = False
            return

        if self.pending_zero:
            self.text += ZERO
            self.pending_zero = False
        self.text += DIGITS[digit] + unit
        self.last_unit = unit


# ─── Main Converter ─────────────────────────────────────────────────


def to_chinese_num(text: str) -> str | None:
    """Convert a decimal digit string to Chinese numerals.

    Args:
        text: e.g. "123000520"

    Returns:
        "一亿二千三百万零五百二十", or None if `text` is empty, contains
        anything besides ASCII digits, or has a leading zero.

    Algorithm:
        Pair each digit with the unit for its position, then walk the pairs
        from the most significant end:
        - non-zero digit → emit a pending 零 if any, then glyph + unit
        - zero digit     → emit the bare unit if it is not lower than the
                           last emitted unit (writes 万/亿 group markers),
                           otherwise remember that a 零 is pending

        Finally drop the trailing 个 and turn a leading "一十" into "十".
    """
    if text == "0":
        return ZERO
    if not is_number(text):
        return None

    pairs = [
        (int(char), digit_pos_to_name(pos))
        for pos, char in enumerate(reversed(text))
    ]

    acc = _Accumulator()
    for digit, unit in reversed(pairs):
        acc.append(digit, unit)

    result = acc.text
    if result.endswith(ONES_UNIT):
        result = result[:-1]
    if result.startswith("一十"):
        result = result[1:]
    return result


# ─── Integer Adapters ───────────────────────────────────────────────

# str(int) refuses more than sys.get_int_max_str_digits() digits (4300 by
# default), so large values are formatted in fixed-width chunks
_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def _decimal_digits(n: int) -> str:
    """Decimal string of a non-negative int of any size."""
    if n < _CHUNK:
        return str(n)
    chunks: list[str] = []
    while n >= _CHUNK:
        n, low = divmod(n, _CHUNK)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(n))
    return "".join(reversed(chunks))


def _check_int(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} expects an int, got {type(value).__name__}")


def int_to_chinese_num(n: int) -> str | None:
    """Convert an integer via its decimal string. Negative numbers give None."""
    _check_int(n, "int_to_chinese_num")
    if n < 0:
        # "-5" is not a digit string
        return None
    return to_chinese_num(_decimal_digits(n))


class ChineseInt(int):
    """Unsigned integer that can spell itself in Chinese.

    >>> ChineseInt(20).to_chinese_num()
    '二十'
    """

    def __new__(cls, value: int) -> ChineseInt:
        _check_int(value, "ChineseInt")
        if value < 0:
            raise ValueError("ChineseInt must be non-negative")
        return super().__new__(cls, value)

    def to_chinese_num(self) -> str | None:
        return int_to_chinese_num(int(self))
