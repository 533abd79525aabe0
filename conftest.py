"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture
def converter():
    from chinese_num.converter import NumeralConverter

    return NumeralConverter()
