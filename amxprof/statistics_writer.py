"""Writers that render profiling statistics, including JSON output."""

from __future__ import annotations

import abc
from typing import TextIO

from amxprof.duration import Seconds
from amxprof.statistics import Statistics
from amxprof.time_utils import TimeStamp

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_string(s: str) -> str:
    """Escape ``s`` for use inside a JSON string literal."""
    return "".join(_ESCAPES.get(ch, ch) for ch in s)


def _format_double(value: float) -> str:
    return f"{value:.6g}"


class StatisticsWriter(abc.ABC):
    """Base class for writers that render statistics to a text stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        script_name: str = "",
        print_date: bool = False,
        print_run_time: bool = False,
    ) -> None:
        self.stream = stream
        self.script_name = script_name
        self.print_date = print_date
        self.print_run_time = print_run_time

    def _out(self) -> TextIO:
        if self.stream is None:
            raise ValueError("no output stream set")
        return self.stream

    @abc.abstractmethod
    def write(self, stats: Statistics) -> None:
        """Render ``stats`` to the stream."""


class StatisticsWriterJson(StatisticsWriter):
    """Renders statistics as a JSON document."""

    def write(self, stats: Statistics) -> None:
        out = self._out()
        out.write("{\n")
        out.write(f'  "script": "{escape_string(self.script_name)}",\n')

        if self.print_date:
            out.write(f'  "timestamp": {TimeStamp.now()},\n')

        if self.print_run_time:
            duration = Seconds(stats.get_total_run_time()).count
            out.write(f'  "duration": {_format_double(duration)},\n')

        out.write('  "functions": [\n')

        for fn_stats in stats.get_statistics():
            function = fn_stats.function
            out.write(
                "    {\n"
                f'      "type": "{function.type_string()}",\n'
                f'      "name": "{function.name}",\n'
                f'      "calls": {fn_stats.num_calls},\n'
                f'      "selfTime": {_format_double(fn_stats.self_time.count)},\n'
                f'      "worstSelfTime": '
                f"{_format_double(fn_stats.worst_self_time.count)},\n"
                f'      "totalTime": {_format_double(fn_stats.total_time.count)},\n'
                f'      "worstTotalTime": '
                f"{_format_double(fn_stats.worst_total_time.count)}\n"
                "    },\n"
            )

        out.write("    {}\n  ]\n}\n")