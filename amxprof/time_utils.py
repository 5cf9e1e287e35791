"""Wall-clock time stamps and hour/minute/second time spans."""

from __future__ import annotations

import time

from amxprof.duration import Duration, Hours, Minutes, Seconds


class TimeStamp:
    """A point in calendar time as whole seconds since the epoch."""

    __slots__ = ("value",)

    def __init__(self, value: int | None = None) -> None:
        self.value = TimeStamp.now() if value is None else int(value)

    @staticmethod
    def now() -> int:
        """Return the current time in whole seconds since the epoch."""
        return int(time.time())

    def __repr__(self) -> str:
        return f"TimeStamp({self.value})"


def ctime(timestamp: TimeStamp | None = None) -> str:
    """Format a time stamp in the classic ``ctime`` style, without newline."""
    if timestamp is None:
        timestamp = TimeStamp()
    return time.ctime(timestamp.value)


class TimeSpan:
    """A duration broken down into whole hours, minutes and seconds."""

    __slots__ = ("hours", "minutes", "seconds")

    def __init__(self, duration: Duration | float) -> None:
        d = Seconds(duration)

        self.hours = int(Hours(d).count)
        d = d - Hours(self.hours)

        self.minutes = int(Minutes(d).count)
        d = d - Minutes(self.minutes)

        self.seconds = int(Seconds(d).count)

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def __repr__(self) -> str:
        return f"TimeSpan({self.hours}, {self.minutes}, {self.seconds})"