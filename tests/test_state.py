"""Tests for the observable state and the dashboard controller."""

import logging

import pytest

from share_dashboard.csv_parser import parse_csv_text, parse_header
from share_dashboard.data_model import Tooltip


class TestDashboardState:
    """Tests for DashboardState."""

    def test_defaults(self, state):
        assert state.rows == []
        assert state.selected_year == ""
        assert state.selected_platform == ""
        assert state.active_tooltip is None

    def test_setters_notify(self, state, recorder):
        state.set_selected_year("2009")
        state.set_selected_platform("Facebook")
        state.set_tooltip(Tooltip("x", (0, 0)))
        assert recorder == ["selected_year", "selected_platform", "active_tooltip"]

    def test_unchanged_values_do_not_notify(self, state, recorder):
        state.set_selected_year("2009")
        state.set_selected_year("2009")
        state.set_tooltip(None)
        assert recorder == ["selected_year"]

    def test_set_rows_always_notifies(self, state, recorder, rows):
        state.set_rows(rows)
        state.set_rows(rows)
        assert recorder == ["rows", "rows"]

    def test_none_is_the_empty_selection(self, state, recorder):
        state.set_selected_platform(None)
        state.set_selected_year(None)
        assert recorder == []
        state.set_selected_platform("Twitter")
        state.set_selected_platform(None)
        assert state.selected_platform == ""
        assert recorder == ["selected_platform", "selected_platform"]

    def test_unsubscribe(self, state):
        seen = []
        unsubscribe = state.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        state.set_selected_year("2010")
        assert seen == []


class TestDashboardController:
    """Tests for DashboardController."""

    def test_load_selects_first_year(self, controller, rows):
        controller.load(rows)
        assert controller.year_options == ["2009", "2010"]
        assert controller.state.selected_year == "2009"
        assert controller.has_data
        assert len(controller.filtered_rows) == 2

    def test_averages_for_year(self, controller, rows):
        controller.load(rows)
        controller.select_year("2010")
        assert controller.averages['"Facebook"'] == pytest.approx(47.5)
        assert controller.averages['"Pinterest"'] == pytest.approx(5.5)

    def test_year_change_clears_platform(self, controller, rows):
        controller.load(rows)
        controller.select_platform("Twitter")
        controller.select_year("2010")
        assert controller.state.selected_platform == ""
        assert controller.line_series() is None

    def test_year_change_clears_tooltip(self, controller, rows):
        controller.load(rows)
        controller.state.set_tooltip(Tooltip("x", (0, 0)))
        controller.select_year("2010")
        assert controller.state.active_tooltip is None

    def test_year_without_rows(self, controller, rows, caplog):
        controller.load(rows)
        with caplog.at_level(logging.INFO, logger="share_dashboard"):
            controller.select_year("2015")
        assert controller.averages is None
        assert controller.filtered_rows == []
        assert controller.state.selected_year == "2015"

    def test_line_series_for_selected_platform(self, controller, rows):
        controller.load(rows)
        controller.select_year("2010")
        controller.select_platform("Pinterest")
        assert [p.value for p in controller.line_series()] == [5.0, 6.0]

    def test_line_series_skips_sentinel_month(self, controller, rows):
        controller.load(rows)
        controller.select_platform("Facebook")
        assert [p.label for p in controller.line_series()] == ["2009-04"]

    def test_unknown_platform_suppresses_chart(self, controller, rows, caplog):
        controller.load(rows)
        controller.select_platform("MySpace")
        with caplog.at_level(logging.WARNING, logger="share_dashboard"):
            assert controller.line_series() is None
        assert any("MySpace" in r.getMessage() for r in caplog.records)

    def test_load_empty(self, controller, caplog):
        with caplog.at_level(logging.WARNING, logger="share_dashboard"):
            controller.load([])
        assert controller.year_options == []
        assert not controller.has_data
        assert controller.averages is None
        assert "No dated rows" in caplog.text

    def test_reload_resets_selection(self, controller, rows):
        controller.load(rows)
        controller.select_year("2010")
        controller.select_platform("Twitter")
        controller.load(rows)
        assert controller.state.selected_year == "2009"
        assert controller.state.selected_platform == ""

    def test_header_columns_reach_averages(self, controller):
        text = '"Date","A","B"\n2009-01,5\n'
        with pytest.warns(UserWarning):
            controller.load(parse_csv_text(text), parse_header(text))
        assert controller.averages == {'"A"': 5.0, '"B"': 0.0}

    def test_date_column_from_header(self, controller):
        controller.load([], ["Month", "A"])
        assert controller.date_column == "Month"

    def test_plain_date_header(self, controller):
        controller.load(parse_csv_text("Date,A\n2012-01,3\n2012-02,5\n"))
        assert controller.date_column == "Date"
        assert controller.year_options == ["2012"]
        assert controller.averages == {"A": pytest.approx(4.0)}
