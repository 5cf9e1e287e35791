"""Plain-text table rendering of profiling statistics."""

from __future__ import annotations

import math

from amxprof.duration import Milliseconds, Seconds
from amxprof.statistics import Statistics
from amxprof.statistics_writer import StatisticsWriter
from amxprof.time_utils import TimeSpan, ctime

_COLUMNS = (
    ("Type", 7),
    ("Name", 32),
    ("Calls", 10),
    ("Self Time (%)", 15),
    ("Self Time (s)", 15),
    ("Avg. ST (ms)", 15),
    ("Worst ST (ms)", 15),
    ("Total Time (%)", 15),
    ("Total Time (s)", 15),
    ("Avg. TT (ms)", 15),
    ("Worst TT (ms)", 15),
)

_WIDTH_ALL = sum(width for _, width in _COLUMNS)
_LINE_WIDTH = _WIDTH_ALL + len(_COLUMNS) * 2 + 1


def _divide(a: float, b: float) -> float:
    """Divide as floating-point hardware does: x/0 gives inf or nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _row(cells: list[str]) -> str:
    parts = [
        f"| {cell:<{width}}" for cell, (_, width) in zip(cells, _COLUMNS)
    ]
    return "".join(parts) + "|\n"


class StatisticsWriterText(StatisticsWriter):
    """Renders statistics as a fixed-width text table."""

    def _hline(self) -> None:
        self._out().write("-" * _LINE_WIDTH + "\n")

    def write(self, stats: Statistics) -> None:
        out = self._out()
        out.write(f"Profile of '{self.script_name}'")

        if self.print_date:
            out.write(f" generated on {ctime()}")

        if self.print_run_time:
            out.write(f" (duration: {TimeSpan(stats.get_total_run_time())})\n")

        self._hline()
        out.write(_row([title for title, _ in _COLUMNS]))
        self._hline()

        all_fn_stats = stats.get_statistics()
        self_time_all = sum(s.self_time.count for s in all_fn_stats)
        total_time_all = sum(s.total_time.count for s in all_fn_stats)

        for fn_stats in all_fn_stats:
            self_time_percent = _divide(fn_stats.self_time.count * 100, self_time_all)
            total_time_percent = _divide(
                fn_stats.total_time.count * 100, total_time_all
            )

            self_time = Seconds(fn_stats.self_time).count
            total_time = Seconds(fn_stats.total_time).count

            avg_self_time = _divide(
                Milliseconds(fn_stats.self_time).count, fn_stats.num_calls
            )
            avg_total_time = _divide(
                Milliseconds(fn_stats.total_time).count, fn_stats.num_calls
            )

            worst_self_time = Milliseconds(fn_stats.worst_self_time).count
            worst_total_time = Milliseconds(fn_stats.worst_total_time).count

            out.write(
                _row(
                    [
                        fn_stats.function.type_string(),
                        fn_stats.function.name,
                        str(fn_stats.num_calls),
                        f"{self_time_percent:.2f}",
                        f"{self_time:.1f}",
                        f"{avg_self_time:.1f}",
                        f"{worst_self_time:.1f}",
                        f"{total_time_percent:.2f}",
                        f"{total_time:.1f}",
                        f"{avg_total_time:.1f}",
                        f"{worst_total_time:.1f}",
                    ]
                )
            )
            self._hline()