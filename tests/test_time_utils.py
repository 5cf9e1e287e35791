import time

import pytest

from amxprof.duration import Hours, Milliseconds, Minutes, Seconds
from amxprof.time_utils import TimeSpan, TimeStamp, ctime


def test_now_is_current_time():
    before = int(time.time())
    value = TimeStamp.now()
    after = int(time.time())
    assert before <= value <= after


def test_default_timestamp_is_now():
    before = int(time.time())
    stamp = TimeStamp()
    assert before <= stamp.value <= int(time.time())


def test_explicit_timestamp_value():
    assert TimeStamp(1_234_567).value == 1_234_567


def test_ctime_format_matches_local_time():
    stamp = TimeStamp(1_000_000_000)
    text = ctime(stamp)
    assert not text.endswith("\n")
    parsed = time.strptime(" ".join(text.split()), "%a %b %d %H:%M:%S %Y")
    local = time.localtime(stamp.value)
    assert parsed[:6] == local[:6]


def test_ctime_default_is_now():
    text = ctime()
    parsed = time.strptime(" ".join(text.split()), "%a %b %d %H:%M:%S %Y")
    assert abs(time.mktime(parsed) - time.time()) < 5


def test_time_span_worked_example():
    assert str(TimeSpan(Seconds(3661))) == "01:01:01"


@pytest.mark.parametrize("total", [0, 59, 60, 3599, 3600, 86399, 400000])
def test_time_span_recombines(total):
    span = TimeSpan(Seconds(total))
    assert span.hours * 3600 + span.minutes * 60 + span.seconds == total
    assert 0 <= span.minutes < 60
    assert 0 <= span.seconds < 60


def test_time_span_from_other_units():
    span = TimeSpan(Hours(2))
    assert (span.hours, span.minutes, span.seconds) == (2, 0, 0)
    span = TimeSpan(Minutes(5))
    assert (span.hours, span.minutes, span.seconds) == (0, 5, 0)


def test_time_span_truncates_fractions():
    span = TimeSpan(Milliseconds(1999))
    assert (span.hours, span.minutes, span.seconds) == (0, 0, 1)


def test_time_span_accepts_plain_seconds():
    assert str(TimeSpan(3661)) == str(TimeSpan(Seconds(3661)))


def test_time_span_pads_to_two_digits():
    text = str(TimeSpan(Seconds(5)))
    assert [len(part) for part in text.split(":")] == [2, 2, 2]
    assert text.endswith("05")