"""Tests for the Date value type."""

from datetime import date
from itertools import product
from unittest.mock import patch

import pytest

from kalendar.core.dates import Date


class TestEquality:
    def test_equal_when_all_fields_match(self):
        assert Date(15, 11, 2024) == Date(15, 11, 2024)

    @pytest.mark.parametrize(
        "other",
        [Date(16, 11, 2024), Date(15, 12, 2024), Date(15, 11, 2025)],
    )
    def test_not_equal_when_any_field_differs(self, other):
        assert Date(15, 11, 2024) != other

    def test_hashable(self):
        assert len({Date(1, 1, 2024), Date(1, 1, 2024), Date(2, 1, 2024)}) == 2

    def test_immutable(self):
        d = Date(1, 1, 2024)
        with pytest.raises(AttributeError):
            d.day = 2


class TestOrdering:
    def test_year_dominates(self):
        assert Date(31, 12, 2023) < Date(1, 1, 2024)

    def test_month_before_day(self):
        assert Date(30, 10, 2024) < Date(1, 11, 2024)

    def test_day_breaks_ties(self):
        assert Date(10, 11, 2024) < Date(15, 11, 2024)
        assert Date(15, 11, 2024) > Date(10, 11, 2024)

    def test_greater_is_not_less_or_equal(self):
        d = Date(15, 11, 2024)
        assert not d > d
        assert d >= d
        assert d <= d

    def test_trichotomy_and_transitivity(self):
        dates = [Date(d, m, y) for d, m, y in product((1, 15), (1, 11), (2023, 2024))]
        for a, b in product(dates, dates):
            assert [a < b, a == b, a > b].count(True) == 1
            assert (a < b) == (a.key() < b.key())
        for a, b, c in product(dates, dates, dates):
            if a < b and b < c:
                assert a < c

    def test_sorted(self):
        dates = [Date(16, 11, 2024), Date(10, 11, 2024), Date(15, 11, 2024)]
        assert sorted(dates) == [Date(10, 11, 2024), Date(15, 11, 2024), Date(16, 11, 2024)]

    def test_compare_with_other_type_unsupported(self):
        with pytest.raises(TypeError):
            Date(1, 1, 2024) < "1/1/2024"


class TestNoValidation:
    def test_out_of_range_fields_accepted(self):
        d = Date(40, 13, 2024)
        assert d.day == 40
        assert d.month == 13

    def test_parse_does_not_range_check(self):
        assert Date.parse("40/13/2024") == Date(40, 13, 2024)


class TestFormatting:
    def test_format_unpadded(self):
        assert Date(5, 3, 2024).format() == "5/3/2024"

    def test_str(self):
        assert str(Date(15, 11, 2024)) == "15/11/2024"


class TestParse:
    def test_parse(self):
        assert Date.parse("15/11/2024") == Date(15, 11, 2024)

    def test_parse_strips_whitespace(self):
        assert Date.parse(" 1/2/2025 ") == Date(1, 2, 2025)

    @pytest.mark.parametrize(
        "text",
        ["", "15/11", "15-11-2024", "a/b/c", "1/2/3/4", "1_0/2/2024", "\u0661/2/2024", "-1/2/2024"],
    )
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            Date.parse(text)

    def test_from_date(self):
        assert Date.from_date(date(2024, 11, 15)) == Date(15, 11, 2024)

    def test_today(self):
        with patch("kalendar.core.dates._date") as mock_date:
            mock_date.today.return_value = date(2024, 11, 15)
            assert Date.today() == Date(15, 11, 2024)
