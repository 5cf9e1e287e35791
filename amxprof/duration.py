"""Floating-point time durations with fixed unit ratios."""

from __future__ import annotations

import functools
from typing import ClassVar


def duration_cast(unit: type[Duration], duration: Duration) -> Duration:
    """Convert ``duration`` to an instance of ``unit``."""
    x1, y1 = unit.RATIO
    x2, y2 = duration.RATIO
    return unit(duration.count * (x2 * y1) / (y2 * x1))


@functools.total_ordering
class Duration:
    """A length of time counted in units of ``RATIO[0] / RATIO[1]`` seconds."""

    RATIO: ClassVar[tuple[int, int]] = (1, 1)

    __slots__ = ("_count",)

    def __init__(self, value: float | Duration = 0.0) -> None:
        if isinstance(value, Duration):
            value = duration_cast(type(self), value).count
        self._count = float(value)

    @property
    def count(self) -> float:
        """The number of units in this duration."""
        return self._count

    def to(self, unit: type[Duration]) -> Duration:
        """Return this duration expressed in ``unit``."""
        return duration_cast(unit, self)

    def _other_count(self, other: object) -> float | None:
        if not isinstance(other, Duration):
            return None
        return duration_cast(type(self), other).count

    def __pos__(self) -> Duration:
        return type(self)(self._count)

    def __neg__(self) -> Duration:
        return type(self)(-self._count)

    def __add__(self, other: object) -> Duration:
        count = self._other_count(other)
        if count is None:
            return NotImplemented
        return type(self)(self._count + count)

    def __sub__(self, other: object) -> Duration:
        count = self._other_count(other)
        if count is None:
            return NotImplemented
        return type(self)(self._count - count)

    def __eq__(self, other: object) -> bool:
        count = self._other_count(other)
        if count is None:
            return NotImplemented
        return self._count == count

    def __lt__(self, other: object) -> bool:
        count = self._other_count(other)
        if count is None:
            return NotImplemented
        return self._count < count

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._count!r})"


class Nanoseconds(Duration):
    RATIO = (1, 1_000_000_000)
    __slots__ = ()


class Microseconds(Duration):
    RATIO = (1, 1_000_000)
    __slots__ = ()


class Milliseconds(Duration):
    RATIO = (1, 1000)
    __slots__ = ()


class Seconds(Duration):
    RATIO = (1, 1)
    __slots__ = ()


class Minutes(Duration):
    RATIO = (60, 1)
    __slots__ = ()


class Hours(Duration):
    RATIO = (3600, 1)
    __slots__ = ()


class Days(Duration):
    RATIO = (86400, 1)
    __slots__ = ()


class Weeks(Duration):
    RATIO = (604800, 1)
    __slots__ = ()