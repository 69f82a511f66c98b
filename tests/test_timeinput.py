"""Tests for time input parsing."""

import pytest

from clockface.errors import ClockfaceError, TimeInputError
from clockface.timeinput import ClockTime, parse_time


class TestParseTime:
    def test_integers(self) -> None:
        assert parse_time("13 45 7") == ClockTime(13.0, 45.0, 7.0)

    def test_fractions(self) -> None:
        assert parse_time("10 30.5 0").minute == 30.5

    def test_any_whitespace(self) -> None:
        assert parse_time("  1\n2\t3\n") == ClockTime(1.0, 2.0, 3.0)

    @pytest.mark.parametrize("text", ["", "1 2", "1 2 3 4"])
    def test_wrong_count(self, text: str) -> None:
        with pytest.raises(TimeInputError, match="expected 3 numbers"):
            parse_time(text)

    def test_not_a_number(self) -> None:
        with pytest.raises(TimeInputError, match="not a number"):
            parse_time("a b c")

    def test_non_finite(self) -> None:
        with pytest.raises(TimeInputError, match="finite"):
            parse_time("nan 0 0")

    def test_error_keeps_input(self) -> None:
        with pytest.raises(TimeInputError) as excinfo:
            parse_time("x")
        assert excinfo.value.text == "x"
        assert isinstance(excinfo.value, ClockfaceError)

    def test_str(self) -> None:
        assert str(ClockTime(9.0, 5.0, 0.0)) == "9:05:00"
