"""
chinese_num — Spell decimal integers as Chinese numerals.

Architecture: digit string → validation → digit/unit pairing → zero elision → text
"""

from .converter import NumeralConverter
from .numerals import ChineseInt, int_to_chinese_num, to_chinese_num

__version__ = "1.0.0"

__all__ = [
    "ChineseInt",
    "NumeralConverter",
    "int_to_chinese_num",
    "to_chinese_num",
]
