from datetime import timedelta

import pytest

from bytegrab.durations import parse_duration
from bytegrab.errors import ByteError


def test_bare_number_is_seconds():
    assert parse_duration("90") == timedelta(seconds=90)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1h", timedelta(hours=1)),
        ("30m", timedelta(minutes=30)),
        ("5s", timedelta(seconds=5)),
        ("2d", timedelta(days=2)),
        ("1w", timedelta(weeks=1)),
        ("3 minutes", timedelta(minutes=3)),
        ("250ms", timedelta(milliseconds=250)),
    ],
)
def test_single_units(text, expected):
    assert parse_duration(text) == expected


def test_terms_are_summed():
    assert parse_duration("1h 30m") == parse_duration("1h") + parse_duration("30m")
    assert parse_duration("1h+30m") == parse_duration("1h 30m")
    assert parse_duration("1h30m") == parse_duration("1h 30m")


def test_space_between_number_and_unit():
    assert parse_duration("5 m") == parse_duration("5m")


def test_multiplication():
    assert parse_duration("1m*3") == parse_duration("3m")


def test_units_are_case_insensitive():
    assert parse_duration("2H") == parse_duration("2h")


def test_fraction_of_unit():
    assert parse_duration("1.5h") == parse_duration("1h 30m")


@pytest.mark.parametrize("text", ["", "   ", "abc", "5 parsecs", "1h+", "h"])
def test_invalid_durations(text):
    with pytest.raises(ByteError):
        parse_duration(text)