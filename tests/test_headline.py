"""Tests for headline computation and its display strings."""

import math

import pytest

from points_dashboard.indicators import compute_headline, filter_range
from points_dashboard.models import Observation
from points_dashboard.ui.formatting import (
    format_change_abs,
    format_change_pct,
    format_number_de,
    format_timestamp_de,
    headline_texts,
)
from tests.conftest import ts


class TestComputeHeadline:
    def test_empty(self) -> None:
        assert compute_headline([]) is None

    def test_single_point_is_flat(self) -> None:
        headline = compute_headline([Observation(time=ts(2024, 1, 1, 10, 0), value=50.0)])

        assert headline.change_abs == 0.0
        assert headline.change_pct == 0.0
        assert headline.is_non_negative
        assert format_change_abs(headline) == "+0,00"
        assert format_change_pct(headline) == "(+0.00%)"

    def test_same_timestamp_is_flat(self) -> None:
        t = ts(2024, 1, 1, 10, 0)
        headline = compute_headline([Observation(t, 10.0), Observation(t, 5.0)])

        assert headline.change_abs == 0.0
        assert headline.last_value == 5.0
        assert headline.is_non_negative

    def test_delta(self) -> None:
        points = [
            Observation(time=ts(2024, 1, 1, 10, 0), value=100.0),
            Observation(time=ts(2024, 1, 2, 10, 0), value=105.0),
            Observation(time=ts(2024, 1, 3, 10, 0), value=110.0),
        ]
        headline = compute_headline(points)

        assert headline.change_abs == pytest.approx(10.0)
        assert headline.change_pct == pytest.approx(10.0)
        assert headline.last_time == ts(2024, 1, 3, 10, 0)
        assert format_change_abs(headline) == "+10,00"
        assert format_change_pct(headline) == "(+10.00%)"

    def test_negative_delta(self) -> None:
        points = [
            Observation(time=ts(2024, 1, 1, 10, 0), value=200.0),
            Observation(time=ts(2024, 1, 2, 10, 0), value=150.0),
        ]
        headline = compute_headline(points)

        assert not headline.is_non_negative
        assert format_change_abs(headline) == "-50,00"
        assert format_change_pct(headline) == "(-25.00%)"

    def test_zero_base_is_not_guarded(self) -> None:
        """A zero first value yields an infinite or undefined percentage."""
        rising = compute_headline([
            Observation(time=ts(2024, 1, 1, 10, 0), value=0.0),
            Observation(time=ts(2024, 1, 2, 10, 0), value=5.0),
        ])
        flat = compute_headline([
            Observation(time=ts(2024, 1, 1, 10, 0), value=0.0),
            Observation(time=ts(2024, 1, 2, 10, 0), value=0.0),
        ])

        assert rising.change_pct == math.inf
        assert math.isnan(flat.change_pct)

    def test_headline_over_filtered_range(self, daily_series) -> None:
        headline = compute_headline(filter_range(daily_series, "1D"))
        assert headline.change_abs == pytest.approx(1.0)


class TestFormatting:
    @pytest.mark.parametrize(
        "value, expected",
        [(1234.5, "1.234,50"), (0, "0,00"), (-1234567.891, "-1.234.567,89"), (12.346, "12,35")],
    )
    def test_number(self, value, expected) -> None:
        assert format_number_de(value) == expected

    def test_timestamp(self) -> None:
        assert format_timestamp_de(ts(2024, 3, 5, 9, 30)) == "05.03.2024 09:30"

    def test_headline_texts(self) -> None:
        headline = compute_headline([
            Observation(time=ts(2024, 3, 4, 9, 30), value=1000.0),
            Observation(time=ts(2024, 3, 5, 9, 30), value=1234.56),
        ])
        texts = headline_texts(headline, "Punkte")

        assert texts == {
            "last_value": "1.234,56 Punkte",
            "last_timestamp": "Stand: 05.03.2024 09:30",
            "change_abs": "+234,56",
            "change_pct": "(+23.46%)",
            "style": "pos",
        }
