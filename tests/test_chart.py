"""Tests for the chart figure and the HTML snapshot."""

import pandas as pd

from points_dashboard.models import Observation
from points_dashboard.ui.chart import build_figure, to_frame
from points_dashboard.ui.html_exporter import render_html
from tests.conftest import ts


class TestChart:
    def test_to_frame(self, daily_series) -> None:
        df = to_frame(daily_series)

        assert list(df["value"]) == [o.value for o in daily_series]
        assert df.index[0] == pd.Timestamp("2024-06-01 12:00")

    def test_to_frame_skips_years_outside_index_range(self) -> None:
        points = [
            Observation(time=ts(1500, 1, 1, 10, 0), value=1.0),
            Observation(time=ts(2024, 1, 1, 10, 0), value=2.0),
            Observation(time=ts(3000, 1, 1, 10, 0), value=3.0),
        ]
        df = to_frame(points)

        assert list(df["value"]) == [2.0]
        assert len(build_figure(points).data[0].y) == 1

    def test_to_frame_empty(self) -> None:
        assert to_frame([]).empty

    def test_build_figure(self, daily_series) -> None:
        fig = build_figure(daily_series)

        assert len(fig.data) == 1
        assert list(fig.data[0].y) == [o.value for o in daily_series]

    def test_build_figure_empty(self) -> None:
        fig = build_figure([])
        assert len(fig.data[0].y) == 0


class TestRenderHtml:
    def test_contains_headline(self) -> None:
        html = render_html([
            Observation(time=ts(2024, 1, 1, 10, 0), value=100.0),
            Observation(time=ts(2024, 1, 2, 10, 0), value=110.0),
        ])

        assert "110,00 Punkte" in html
        assert "+10,00" in html
        assert "(+10.00%)" in html
        assert "Stand: 02.01.2024 10:00" in html

    def test_empty_range(self) -> None:
        assert "Keine Daten im Zeitraum" in render_html([])
