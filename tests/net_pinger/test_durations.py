"""
Unit tests for duration parsing and formatting.

The tests follow the Arrange-Act-Assert (AAA) pattern.
"""

from datetime import timedelta

import pytest

from net_pinger.durations import format_duration, parse_duration


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(0), "0s"),
        (timedelta(microseconds=850), "850µs"),
        (timedelta(milliseconds=1), "1ms"),
        (timedelta(milliseconds=12.5), "12.5ms"),
        (timedelta(microseconds=1234), "1.234ms"),
        (timedelta(seconds=1), "1s"),
        (timedelta(seconds=1.5), "1.5s"),
        (timedelta(seconds=2, microseconds=1), "2.000001s"),
        (timedelta(seconds=90), "1m30s"),
        (timedelta(hours=1, seconds=3.5), "1h0m3.5s"),
        (timedelta(milliseconds=-5), "-5ms"),
    ],
)
def test_format_duration_should_pick_readable_unit(duration: timedelta, expected: str) -> None:
    """
    Tests formatting across units.
    """
    assert format_duration(duration) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1s", timedelta(seconds=1)),
        ("500ms", timedelta(milliseconds=500)),
        ("1.5s", timedelta(seconds=1.5)),
        ("2m", timedelta(minutes=2)),
        ("1h", timedelta(hours=1)),
        ("250us", timedelta(microseconds=250)),
        ("250µs", timedelta(microseconds=250)),
        ("3", timedelta(seconds=3)),
        ("0.25", timedelta(milliseconds=250)),
    ],
)
def test_parse_duration_should_accept_units(text: str, expected: timedelta) -> None:
    """
    Tests parsing of the supported notations.
    """
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-1s", "1d", "1 s s"])
def test_parse_duration_should_reject_invalid_text(text: str) -> None:
    """
    Tests that invalid durations raise ValueError.
    """
    with pytest.raises(ValueError):
        parse_duration(text)
