"""Parsing of the raw sheet export into header-keyed rows."""
from betterme.ingestion.csv_parser import parse_csv, split_csv_line, strip_outer_quotes


def test_split_keeps_commas_inside_quotes():
    assert split_csv_line('a,"b,c",d') == ["a", "b,c", "d"]


def test_split_unescapes_doubled_quotes():
    assert split_csv_line('"a""b"') == ['a"b']


def test_split_keeps_unquoted_text_verbatim():
    assert split_csv_line(" a , b,") == [" a ", " b", ""]


def test_strip_outer_quotes_removes_one_pair_only():
    assert strip_outer_quotes('  "x"  ') == "x"
    assert strip_outer_quotes('""x""') == '"x"'
    assert strip_outer_quotes('"') == '"'
    assert strip_outer_quotes(None) == ""


def test_parse_empty_text_returns_empty_table():
    table = parse_csv("   \r\n  ")
    assert table.headers == []
    assert table.rows == []
    assert parse_csv(None).rows == []


def test_parse_header_only_has_no_rows():
    table = parse_csv("Date,Steps\n")
    assert table.headers == ["Date", "Steps"]
    assert table.rows == []


def test_parse_handles_crlf_and_blank_lines():
    table = parse_csv("Date,Steps\r\n\r\n2026-01-01,100\r\n2026-01-02,200\r\n")
    assert [row["Steps"] for row in table.rows] == ["100", "200"]


def test_parse_strips_quotes_and_whitespace_from_headers_and_cells():
    table = parse_csv('"Date", "Steps" \n"2026-01-01"," 42 "')
    assert table.headers == ["Date", "Steps"]
    assert table.rows == [{"Date": "2026-01-01", "Steps": "42"}]


def test_parse_pads_short_rows_and_ignores_extra_fields():
    table = parse_csv("A,B,C\n1\n1,2,3,4")
    assert table.rows[0] == {"A": "1", "B": "", "C": ""}
    assert table.rows[1] == {"A": "1", "B": "2", "C": "3"}


def test_parse_sample_export(sample_csv_text):
    table = parse_csv(sample_csv_text)
    assert table.headers[0] == "Timestamp"
    assert table.headers[-1] == "Notes"
    assert len(table.rows) == 6
    assert table.rows[0]["Notes"] == "Great day, all boxes ticked"
    assert table.rows[2]["Notes"] == 'Short night, "rough" evening'
