from datetime import time

import pytest

from travel_optimizer.times import (
    format_time_of_day,
    minute_of_day,
    minutes_between,
    parse_time_of_day,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("00:00", time(0, 0)),
        ("09:05", time(9, 5)),
        ("23:59", time(23, 59)),
        (" 12:30 ", time(12, 30)),
    ],
)
def test_parse_time_of_day_valid(text, expected):
    assert parse_time_of_day(text) == expected


@pytest.mark.parametrize("text", ["", "9:05", "24:00", "12:60", "12-30", "noon"])
def test_parse_time_of_day_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_time_of_day(text)


def test_format_time_of_day_pads_fields():
    assert format_time_of_day(time(7, 5)) == "07:05"


def test_minute_arithmetic():
    assert minute_of_day(time(1, 30)) == 90
    assert minutes_between(time(8, 0), time(9, 30)) == 90
    assert minutes_between(time(9, 30), time(8, 0)) == -90
