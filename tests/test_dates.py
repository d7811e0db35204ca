# tests/test_dates.py

from __future__ import annotations

import pytest

from ftt_parser.dates import is_valid_date, parse_date


def test_simple_year():
    d = parse_date("1900")
    assert d["precision"] == "year"
    assert d["kind"] == "exact"
    assert d["date"] == "1900"


def test_month_year():
    d = parse_date("1900-01")
    assert d["precision"] == "month"
    assert d["date"] == "1900-01"


def test_full_date():
    d = parse_date("1980-05-12")
    assert d["precision"] == "day"
    assert d["kind"] == "exact"
    assert d["date"] == "1980-05-12"


def test_uncertain_and_approximate():
    assert parse_date("2020?")["qualifier"] == "uncertain"
    assert parse_date("1900~")["qualifier"] == "approximate"
    assert parse_date("1900%")["qualifier"] == "uncertain-approximate"


def test_season():
    d = parse_date("2000-21")
    assert d["kind"] == "seasonal"
    assert d["season"] == "SPRING"


def test_range():
    d = parse_date("[1900..1910]")
    assert d["kind"] == "range"
    assert d["start"] == "1900"
    assert d["end"] == "1910"


def test_open_ended_range():
    d = parse_date("[..1910]")
    assert d["start"] is None
    assert d["end"] == "1910"


def test_unknown_and_open():
    assert parse_date("?")["kind"] == "unknown"
    assert parse_date("..")["kind"] == "open"


def test_bce_year():
    assert parse_date("-0044")["date"] == "-0044"


@pytest.mark.parametrize(
    "value",
    ["19XX", "1980-XX", "1980-XX-XX", "2000-02-29", "1900-02-28", "[1900..]", "1850-12-31"],
)
def test_valid(value):
    assert is_valid_date(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "May 12, 1980",
        "1980-13",
        "1980-04-31",
        "1900-02-29",
        "2000-21-01",
        "[..]",
        "[1900..1910..1920]",
        "ABT 1900",
    ],
)
def test_invalid(value):
    assert not is_valid_date(value)


@pytest.mark.parametrize("value", ["850~", "800", "80", "-500", "[850..900]", "850-03-15"])
def test_short_years(value):
    assert is_valid_date(value)


def test_short_year_keeps_its_digits():
    d = parse_date("850~")
    assert d["date"] == "850"
    assert d["qualifier"] == "approximate"
