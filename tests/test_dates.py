# tests/test_dates.py

from __future__ import annotations

import pytest

from gedcom_chart.dates.normalizer import first_year, is_before, normalize_date, parse_date, same_date


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1900", "1900"),
        ("15 MAR 1900", "1900-03-15"),
        ("MAR 1900", "1900-03"),
        ("ABT 1850", "(caAD)1850"),
        ("EST 1850", "(caAD)1850"),
        ("CAL 1850", "(caAD)1850"),
        ("BEF 1850", "/1850"),
        ("AFT 3 JAN 1900", "1900-01-03/"),
        ("FROM 1900 TO 1910", "1900/1910"),
        ("FROM 1900", "1900/"),
        ("TO 1910", "/1910"),
        ("BET 1800 AND 1810", "1800/1810"),
        ("BET 1 JAN 1800 AND 2 FEB 1810", "1800-01-01/1810-02-02"),
        ("1 JAN 1750 (Julian)", "1750-01-01"),
        ("@#DJULIAN@ 1 JAN 1750", "1750-01-01"),
        ("abt 1850", "(caAD)1850"),
    ],
)
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


def test_normalize_date_passes_unknown_text_through():
    assert normalize_date("Unknown") == "Unknown"
    assert normalize_date(None) == ""


@pytest.mark.parametrize("value", ["1900-03-15", "(caAD)1850", "/1850", "1850/", "1800/1810"])
def test_normalize_date_is_idempotent(value):
    assert normalize_date(value) == value
    assert normalize_date(normalize_date(value)) == value


def test_first_year():
    assert first_year("ABT 1850") == "1850"
    assert first_year("15 MAR 1900") == "1900"
    assert first_year("BET 1800 AND 1810") == "1800"
    assert first_year("12345") is None
    assert first_year(None) is None


def test_simple_year():
    assert parse_date("1900") == {"date": "1900", "start": None, "end": None}


def test_full_date():
    assert parse_date("1 JAN 1900")["date"] == "1900-01-01"
    assert parse_date("JAN 1900")["date"] == "1900-01"


def test_qualifier_keeps_the_date():
    assert parse_date("circa 1850")["date"] == "1850"
    assert parse_date("BEF 1800")["date"] == "1800"
    assert parse_date("abt. 1 MAR 1820")["date"] == "1820-03-01"


def test_between_range():
    d = parse_date("BET 1 JAN 1800 AND 2 FEB 1810")
    assert d["date"] is None
    assert d["start"] == "1800-01-01"
    assert d["end"] == "1810-02-02"


def test_open_ranges():
    assert parse_date("FROM 1900") == {"date": None, "start": "1900", "end": None}
    assert parse_date("TO 1910") == {"date": None, "start": None, "end": "1910"}


def test_calendar_annotations_are_ignored():
    assert parse_date("1 JAN 1750 (Julian)")["date"] == "1750-01-01"
    assert parse_date("@#DJULIAN@ 1 JAN 1750")["date"] == "1750-01-01"


def test_unknown_date_string():
    assert parse_date("Unknown") == {"date": None, "start": None, "end": None}
    assert parse_date(None)["date"] is None


def test_is_before_orders_full_dates():
    assert is_before("1 JAN 1925", "1 MAY 1925") is True
    assert is_before("1 MAY 1925", "1 JAN 1925") is False
    assert is_before("1899", "1900") is True


def test_is_before_uses_coarser_precision():
    assert is_before("MAR 1900", "1900") is False
    assert is_before("1900", "MAR 1900") is False


def test_is_before_with_modifiers_and_ranges():
    assert is_before("BEF 1850", "1851") is True
    assert is_before("BET 1800 AND 1810", "1805") is True


def test_is_before_unparseable_is_false():
    assert is_before("Unknown", "1900") is False
    assert is_before("1900", None) is False


def test_same_date():
    assert same_date("2 FEB 1940", "2 FEB 1940") is True
    assert same_date("2 FEB 1940", "3 FEB 1940") is False
    assert same_date(None, None) is False
