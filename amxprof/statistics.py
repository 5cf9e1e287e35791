"""Per-function run-time statistics and their collection."""

from __future__ import annotations

from amxprof.duration import Duration, Nanoseconds
from amxprof.function import Function
from amxprof.performance_counter import PerformanceCounter


class FunctionStatistics:
    """Call count and timing figures gathered for one function."""

    def __init__(self, function: Function) -> None:
        self.function = function
        self.num_calls = 0
        self.self_time = Nanoseconds(0)
        self.total_time = Nanoseconds(0)
        self.worst_self_time = Nanoseconds(0)
        self.worst_total_time = Nanoseconds(0)

    def adjust_num_calls(self, delta: int) -> None:
        """Add ``delta`` to the call count."""
        self.num_calls += delta

    def adjust_self_time(self, delta: Duration) -> None:
        """Add ``delta`` to the accumulated self time."""
        self.self_time = self.self_time + delta

    def adjust_total_time(self, delta: Duration) -> None:
        """Add ``delta`` to the accumulated total time."""
        self.total_time = self.total_time + delta

    def __repr__(self) -> str:
        return f"FunctionStatistics({self.function!r}, calls={self.num_calls})"


class Statistics:
    """Statistics for all known functions, keyed by address."""

    def __init__(self) -> None:
        self._run_time_counter = PerformanceCounter()
        self._by_address: dict[int, FunctionStatistics] = {}
        self._run_time_counter.start()

    def add_function(self, function: Function) -> None:
        """Start keeping statistics for ``function``; known addresses are kept."""
        self._by_address.setdefault(function.address, FunctionStatistics(function))

    def get_function(self, address: int) -> Function | None:
        """Return the function at ``address``, or None if it is unknown."""
        stats = self._by_address.get(address)
        return stats.function if stats is not None else None

    def get_function_statistics(self, address: int) -> FunctionStatistics | None:
        """Return the statistics for ``address``, or None if it is unknown."""
        return self._by_address.get(address)

    def get_statistics(self) -> list[FunctionStatistics]:
        """Return the statistics of all functions ordered by address."""
        return [self._by_address[address] for address in sorted(self._by_address)]

    def get_total_run_time(self) -> Nanoseconds:
        """Return the time elapsed since these statistics were created."""
        return self._run_time_counter.query_total_time()