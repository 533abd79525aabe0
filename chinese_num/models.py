"""
Pydantic models for conversion results.

The core function returns a bare Optional[str]; these models carry the
same outcome plus the input it came from, for the batch pipeline and the API.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Status ─────────────────────────────────────────────────────────


class ConversionStatus(str, Enum):
    """Outcome of converting one input."""

    CONVERTED = "CONVERTED"
    NOT_A_NUMBER = "NOT_A_NUMBER"


# ─── Results ────────────────────────────────────────────────────────


class ConversionResult(BaseModel):
    """One input and its Chinese numeral (None when it is not a number)."""

    input: str
    status: ConversionStatus
    numeral: Optional[str] = None
    digit_count: int = 0  # 0 for rejected inputs


class ConversionReport(BaseModel):
    """Results of a batch run, in input order."""

    results: list[ConversionResult] = Field(default_factory=list)
    converted_count: int = 0
    rejected_count: int = 0

    @property
    def all_converted(self) -> bool:
        return self.rejected_count == 0
