"""Monotonic clock and nested performance counters."""

from __future__ import annotations

import os
import time

from amxprof.duration import Nanoseconds


class ProfilerError(RuntimeError):
    """Base class for errors raised by the profiler."""


class ClockError(ProfilerError):
    """Raised when the system clock cannot be read."""

    def __init__(self, prefix: str, code: int) -> None:
        super().__init__(f"{prefix}: {os.strerror(code)}")
        self.code = code


class Clock:
    """Source of monotonic time points."""

    @staticmethod
    def now() -> Nanoseconds:
        """Return the current monotonic time in nanoseconds."""
        try:
            ns = time.monotonic_ns()
        except OSError as exc:
            raise ClockError("clock_gettime", exc.errno or 0) from exc
        return Nanoseconds(ns)


class PerformanceCounter:
    """Measures total and child time of one call.

    A counter adds its total time to its ``parent`` when it stops. When a
    ``shadow`` is set (an outer call of the same function still running),
    the time is taken back out of the shadow so recursion is not counted twice.
    """

    def __init__(
        self,
        parent: PerformanceCounter | None = None,
        shadow: PerformanceCounter | None = None,
    ) -> None:
        self.started = False
        self.parent = parent
        self.shadow = shadow
        self.start_point = Nanoseconds(0)
        self.latest_total_time = Nanoseconds(0)
        self.latest_child_time = Nanoseconds(0)
        self.total_time = Nanoseconds(0)
        self.child_time = Nanoseconds(0)

    def start(self) -> None:
        """Start timing; does nothing if already started."""
        if not self.started:
            self.start_point = Clock.now()
            self.reset_times()
            self.started = True

    def stop(self) -> None:
        """Stop timing and propagate the result; does nothing if not started."""
        if not self.started:
            return
        elapsed = self.query_total_time()

        if self.shadow is not None:
            self.latest_total_time = Nanoseconds(0)
        else:
            self.latest_total_time = elapsed
        self.latest_child_time = self.child_time

        self.total_time = elapsed
        if self.parent is not None:
            self.parent.child_time = self.parent.child_time + elapsed

        if self.shadow is not None:
            self.shadow.total_time = self.shadow.total_time - self.total_time
            self.shadow.child_time = self.shadow.child_time - self.self_time()

        self.started = False

    def reset_times(self) -> None:
        """Set all accumulated times back to zero."""
        self.latest_total_time = Nanoseconds(0)
        self.latest_child_time = Nanoseconds(0)
        self.total_time = Nanoseconds(0)
        self.child_time = Nanoseconds(0)

    def query_total_time(self) -> Nanoseconds:
        """Return the time elapsed since the counter was started."""
        return Clock.now() - self.start_point

    def latest_self_time(self) -> Nanoseconds:
        """Return the self time of the most recent measurement."""
        return self.latest_total_time - self.latest_child_time

    def self_time(self) -> Nanoseconds:
        """Return total time minus time spent in children."""
        return self.total_time - self.child_time