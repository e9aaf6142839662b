"""Tests for CSV parsing, record serialisation and resource loading."""

import logging

import pytest

from share_dashboard.csv_parser import (
    build_dataset_row,
    detect_date_column,
    fetch_csv_text,
    load_records,
    load_table,
    parse_calendar_month,
    parse_csv_text,
    parse_header,
    parse_share,
    serialize_record,
    unquote,
)
from share_dashboard.data_model import CalendarMonth
from share_dashboard.errors import DataSourceError


class TestParseCsvText:
    """Tests for parse_csv_text."""

    def test_one_record_per_data_line(self, rows):
        assert len(rows) == 4

    def test_header_keeps_quotes(self, rows):
        assert rows[0]['"Date"'] == "2009-03"
        assert rows[0]['"Facebook"'] == "70.00"
        assert "Date" not in rows[0]

    def test_file_order_preserved(self, rows):
        assert [r['"Date"'] for r in rows] == [
            "2009-03", "2009-04", "2010-02", "2010-01",
        ]

    def test_blank_lines_skipped(self):
        records = parse_csv_text("a,b\n1,2\n\n   \n3,4\n\n")
        assert [dict(r) for r in records] == [
            {"a": "1", "b": "2"},
            {"a": "3", "b": "4"},
        ]

    def test_crlf_line_endings(self):
        records = parse_csv_text("a,b\r\n1,2\r\n")
        assert dict(records[0]) == {"a": "1", "b": "2"}

    def test_short_line_leaves_columns_absent(self):
        records = parse_csv_text("a,b,c\n1,2\n")
        assert dict(records[0]) == {"a": "1", "b": "2"}
        assert "c" not in records[0]
        assert records[0].get("c") is None

    def test_surplus_fields_dropped(self):
        records = parse_csv_text("a,b\n1,2,3,4\n")
        assert dict(records[0]) == {"a": "1", "b": "2"}

    def test_quoted_comma_is_split(self):
        # No quoting support: the comma inside quotes starts a new field
        records = parse_csv_text('"Date","Name","Share"\n2009-01,"a,b",5\n')
        assert records[0]['"Name"'] == '"a'
        assert records[0]['"Share"'] == 'b"'

    def test_empty_text(self):
        assert parse_csv_text("") == []

    def test_header_only(self):
        assert parse_csv_text('"Date","Facebook"\n') == []

    def test_records_are_read_only(self, rows):
        with pytest.raises(TypeError):
            rows[0]['"Facebook"'] = "1.0"

    def test_parse_header(self, csv_text):
        assert parse_header(csv_text) == ['"Date"', '"Facebook"', '"Twitter"', '"Pinterest"']
        assert parse_header("") == []


class TestSerializeRecord:
    """Tests for serialize_record."""

    def test_round_trip(self, csv_text):
        lines = [line for line in csv_text.split("\n") if line]
        headers = parse_header(csv_text)
        records = parse_csv_text(csv_text)
        for line, record in zip(lines[1:], records):
            assert serialize_record(record, headers) == line

    def test_stops_at_first_absent_column(self):
        records = parse_csv_text("a,b,c\n1,2\n")
        assert serialize_record(records[0], ["a", "b", "c"]) == "1,2"


class TestCellParsing:
    """Tests for the share and date cell parsers."""

    def test_plain_number(self):
        assert parse_share("12.5") == 12.5

    def test_quoted_number(self):
        assert parse_share('"12.5"') == 12.5

    def test_whitespace(self):
        assert parse_share(" 3 ") == 3.0

    @pytest.mark.parametrize("cell", [None, "", '""', "abc", "nan", "inf", "-inf"])
    def test_unusable_cells_are_none(self, cell):
        assert parse_share(cell) is None

    def test_unquote(self):
        assert unquote('"Facebook"') == "Facebook"

    def test_calendar_month(self):
        assert parse_calendar_month("2009-07") == CalendarMonth(2009, 7)
        assert parse_calendar_month('"2010-12"') == CalendarMonth(2010, 12)

    @pytest.mark.parametrize("cell", [None, "", "2009", "2009-13", "July-2009"])
    def test_bad_calendar_month(self, cell):
        assert parse_calendar_month(cell) is None

    def test_calendar_month_ordering_and_format(self):
        assert CalendarMonth(2009, 12) < CalendarMonth(2010, 1)
        assert str(CalendarMonth(2009, 3)) == "2009-03"

    def test_invalid_month_rejected(self):
        with pytest.raises(ValueError, match="month"):
            CalendarMonth(2009, 0)


class TestDatasetRow:
    """Tests for build_dataset_row and detect_date_column."""

    def test_typed_view(self):
        record = parse_csv_text('"Date","A","B"\n2009-05,1.5,oops\n')[0]
        row = build_dataset_row(record)
        assert row.date == CalendarMonth(2009, 5)
        assert row.values == {'"A"': 1.5, '"B"': None}

    def test_detect_quoted_date(self):
        assert detect_date_column(['"Date"', '"A"']) == '"Date"'

    def test_detect_plain_date(self):
        assert detect_date_column(["A", "Date"]) == "Date"

    def test_detect_falls_back_to_first_column(self):
        assert detect_date_column(["Month", "A"]) == "Month"


class TestLoading:
    """Tests for fetch_csv_text and load_records."""

    def test_fetch_missing_file(self, tmp_path):
        with pytest.raises(DataSourceError, match="Cannot read CSV data"):
            fetch_csv_text(str(tmp_path / "missing.csv"))

    def test_data_source_error_is_value_error(self, tmp_path):
        with pytest.raises(ValueError):
            fetch_csv_text(str(tmp_path / "missing.csv"))

    def test_load_records(self, tmp_path, csv_text):
        path = tmp_path / "social_media.csv"
        path.write_text(csv_text, encoding="utf-8")
        assert len(load_records(str(path))) == 4

    def test_load_strips_bom(self, tmp_path, csv_text):
        path = tmp_path / "social_media.csv"
        path.write_text(csv_text, encoding="utf-8-sig")
        records = load_records(str(path))
        assert records[0]['"Date"'] == "2009-03"

    def test_load_table_keeps_header(self, tmp_path):
        path = tmp_path / "social_media.csv"
        path.write_text('"Date","A","B"\n2009-01,5\n', encoding="utf-8")
        headers, records = load_table(str(path))
        assert headers == ['"Date"', '"A"', '"B"']
        assert len(records) == 1

    def test_load_table_failure(self, tmp_path):
        assert load_table(str(tmp_path / "missing.csv")) == ([], [])

    def test_load_failure_logged_once(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="share_dashboard"):
            records = load_records(str(tmp_path / "missing.csv"))
        assert records == []
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "Error fetching CSV data" in errors[0].getMessage()
