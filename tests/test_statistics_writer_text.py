import io

import pytest

from amxprof.duration import Nanoseconds
from amxprof.function import Function
from amxprof.statistics import Statistics
from amxprof.statistics_writer_text import StatisticsWriterText


def _stats():
    stats = Statistics()
    stats.add_function(Function.native(0x20, "printf"))
    stats.add_function(Function.public(0x10, "OnGameModeInit"))
    init = stats.get_function_statistics(0x10)
    init.adjust_num_calls(3)
    init.adjust_self_time(Nanoseconds(1.5e9))
    init.adjust_total_time(Nanoseconds(1.5e9))
    native = stats.get_function_statistics(0x20)
    native.adjust_num_calls(1)
    native.adjust_self_time(Nanoseconds(1.5e9))
    native.adjust_total_time(Nanoseconds(1.5e9))
    return stats


def _render(stats, **kwargs):
    out = io.StringIO()
    StatisticsWriterText(out, "gamemodes/test.amx", **kwargs).write(stats)
    return out.getvalue()


def test_title_without_date_or_run_time():
    text = _render(_stats())
    assert text.startswith("Profile of 'gamemodes/test.amx'-")


def test_title_with_run_time_ends_line():
    text = _render(_stats(), print_run_time=True)
    first_line = text.split("\n", 1)[0]
    assert first_line.startswith("Profile of 'gamemodes/test.amx' (duration: ")
    assert first_line.endswith(")")


def test_title_with_date():
    text = _render(_stats(), print_date=True, print_run_time=True)
    assert " generated on " in text.split("\n", 1)[0]


def test_lines_have_equal_width():
    text = _render(_stats(), print_run_time=True)
    lines = text.splitlines()[1:]
    widths = {len(line) for line in lines}
    assert len(widths) == 1
    assert all(set(line) == {"-"} for line in lines[0::2])


def test_header_columns():
    text = _render(_stats(), print_run_time=True)
    header = text.splitlines()[2]
    assert header.startswith("| Type   | Name")
    assert "| Self Time (%)" in header
    assert header.endswith("|")


def test_rows_ordered_by_address():
    text = _render(_stats(), print_run_time=True)
    rows = [line for line in text.splitlines() if line.startswith("| ")][1:]
    assert rows[0].startswith("| public ")
    assert "OnGameModeInit" in rows[0]
    assert rows[1].startswith("| native ")
    assert "printf" in rows[1]


def test_row_values():
    text = _render(_stats(), print_run_time=True)
    row = [line for line in text.splitlines() if "OnGameModeInit" in line][0]
    cells = [cell.strip() for cell in row.strip("|").split("|")]
    assert cells[2] == "3"
    assert cells[3] == "50.00"
    assert cells[4] == "1.5"
    assert cells[3] == cells[7]


def test_zero_time_gives_nan():
    stats = Statistics()
    stats.add_function(Function.public(0x10, "main"))
    stats.get_function_statistics(0x10).adjust_num_calls(1)
    text = _render(stats, print_run_time=True)
    row = [line for line in text.splitlines() if "main" in line][0]
    assert "nan" in row


def test_no_stream_raises():
    with pytest.raises(ValueError):
        StatisticsWriterText().write(_stats())