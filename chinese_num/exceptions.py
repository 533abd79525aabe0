"""
Exception hierarchy for numeral conversion.

The core converter signals bad input by returning None. These exceptions are
for callers that want a hard failure instead (see NumeralConverter.convert_strict),
with a machine-readable code the HTTP layer can pass through.
"""

from __future__ import annotations


class NumeralError(Exception):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidNumberError(NumeralError):
    """The input is empty, has non-digit characters, or has a leading zero."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NOT_A_NUMBER", message, details)
