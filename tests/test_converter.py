"""
Tests for NumeralConverter, the result models and the command-line front end.

Run: pytest tests/ -v
"""

from __future__ import annotations

import logging

import pytest

from chinese_num.cli import main
from chinese_num.converter import NOT_A_NUMBER_TEXT, NumeralConverter
from chinese_num.exceptions import InvalidNumberError, NumeralError
from chinese_num.models import ConversionResult, ConversionStatus


# ═══════════════════════════════════════════════════════════════════════
# SINGLE CONVERSIONS
# ═══════════════════════════════════════════════════════════════════════


class TestConvert:
    def test_convert_valid(self, converter):
        assert converter.convert("121") == "一百二十一"

    def test_convert_invalid_returns_none(self, converter):
        assert converter.convert("020") is None

    def test_rejection_is_logged_at_debug(self, converter, caplog):
        with caplog.at_level(logging.DEBUG, logger="chinese_num.converter"):
            converter.convert("abc")
        assert "not a number" in caplog.text

    def test_strict_valid(self, converter):
        assert converter.convert_strict("12") == "十二"

    def test_strict_raises_with_code(self, converter):
        with pytest.raises(InvalidNumberError) as exc_info:
            converter.convert_strict("12a")
        assert exc_info.value.code == "NOT_A_NUMBER"
        assert exc_info.value.details == {"input": "12a"}

    def test_strict_error_is_a_numeral_error(self, converter):
        with pytest.raises(NumeralError):
            converter.convert_strict("")


class TestConvertResult:
    def test_converted_result(self, converter):
        result = converter.convert_result("123000520")
        assert result.status == ConversionStatus.CONVERTED
        assert result.numeral == "一亿二千三百万零五百二十"
        assert result.digit_count == 9

    def test_rejected_result(self, converter):
        result = converter.convert_result("abc")
        assert result.status == ConversionStatus.NOT_A_NUMBER
        assert result.numeral is None
        assert result.digit_count == 0

    def test_zero_result(self, converter):
        result = converter.convert_result("0")
        assert result.numeral == "零"
        assert result.digit_count == 1


# ═══════════════════════════════════════════════════════════════════════
# BATCH RUNS
# ═══════════════════════════════════════════════════════════════════════


class TestRun:
    def test_keeps_input_order(self, converter):
        report = converter.run(["10", "x", "20"])
        assert [r.input for r in report.results] == ["10", "x", "20"]
        assert [r.numeral for r in report.results] == ["十", None, "二十"]

    def test_counts(self, converter):
        report = converter.run(["1", "", "020", "99"])
        assert report.converted_count == 2
        assert report.rejected_count == 2
        assert report.all_converted is False

    def test_all_converted(self, converter):
        assert converter.run(["1", "2"]).all_converted is True

    def test_empty_batch(self, converter):
        report = converter.run([])
        assert report.results == []
        assert report.all_converted is True

    def test_accepts_generator(self, converter):
        report = converter.run(str(n) for n in range(3))
        assert [r.numeral for r in report.results] == ["零", "一", "二"]

    def test_summary_logged(self, converter, caplog):
        with caplog.at_level(logging.INFO, logger="chinese_num.converter"):
            converter.run(["1", "x"])
        assert "Converted 1 of 2" in caplog.text


class TestFormatResult:
    def test_converted_line(self, converter):
        result = converter.convert_result("121")
        assert converter.format_result(result) == "121: 一百二十一"

    def test_not_a_number_line(self, converter):
        result = converter.convert_result("abc")
        assert converter.format_result(result) == f"abc: {NOT_A_NUMBER_TEXT}"

    def test_custom_marker(self):
        converter = NumeralConverter(not_a_number_text="not a number")
        result = ConversionResult(input="x", status=ConversionStatus.NOT_A_NUMBER)
        assert converter.format_result(result) == "x: not a number"


# ═══════════════════════════════════════════════════════════════════════
# COMMAND LINE
# ═══════════════════════════════════════════════════════════════════════


class TestCli:
    def test_prints_one_line_per_argument(self, capsys):
        exit_code = main(["121", "020", "10"])
        out = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert out == ["121: 一百二十一", "020: 不是一个数", "10: 十"]

    def test_no_arguments_prints_nothing(self, capsys):
        assert main([]) == 0
        assert capsys.readouterr().out == ""

    def test_only_invalid_arguments_still_exit_zero(self, capsys):
        assert main(["abc", ""]) == 0
        assert capsys.readouterr().out.splitlines() == ["abc: 不是一个数", ": 不是一个数"]
