"""Tests for the Hours value type."""

import pytest

from hourrs.data.hours import Hours


class TestRendering:
    @pytest.mark.parametrize("value, text", [
        (1.5, "01:30"),
        (0.0, "00:00"),
        (8.5, "08:30"),
        (10.25, "10:15"),
        (123.0, "123:00"),
    ])
    def test_str(self, value, text):
        assert str(Hours(value)) == text

    def test_truncates_instead_of_rounding(self):
        # 59.9 minutes stays 59
        assert str(Hours(1 + 59.9 / 60)) == "01:59"

    def test_negative_value_floors(self):
        assert str(Hours(-1.5)) == "-2:30"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_renders_placeholder(self, value):
        assert str(Hours(value)) == "?"

    def test_from_seconds(self):
        assert Hours.from_seconds(5400) == Hours(1.5)


class TestArithmetic:
    def test_add_and_subtract(self):
        assert Hours(1.5) + Hours(2.0) == Hours(3.5)
        assert Hours(3.5) - Hours(1.0) == Hours(2.5)

    def test_empty_sum_is_zero(self):
        assert Hours.total([]) == Hours(0.0)
        assert str(Hours.total([])) == "00:00"

    def test_builtin_sum(self):
        assert sum([Hours(1.0), Hours(0.5)]) == Hours(1.5)

    def test_total(self):
        assert Hours.total([Hours(1.0), Hours(2.25)]) == Hours(3.25)
