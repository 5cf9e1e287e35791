import io
import json
import time

import pytest

from amxprof.duration import Nanoseconds
from amxprof.function import Function
from amxprof.statistics import Statistics
from amxprof.statistics_writer import (
    StatisticsWriter,
    StatisticsWriterJson,
    escape_string,
)


@pytest.fixture
def stats():
    s = Statistics()
    s.add_function(Function.public(10, "main"))
    s.add_function(Function.native(20, "print"))
    main_stats = s.get_function_statistics(10)
    main_stats.adjust_num_calls(2)
    main_stats.adjust_self_time(Nanoseconds(100))
    main_stats.adjust_total_time(Nanoseconds(400))
    main_stats.worst_self_time = Nanoseconds(60)
    main_stats.worst_total_time = Nanoseconds(250)
    s.get_function_statistics(20).adjust_num_calls(1)
    return s


def _render(stats, **kwargs):
    buf = io.StringIO()
    StatisticsWriterJson(stream=buf, **kwargs).write(stats)
    return buf.getvalue()


def test_escape_quote():
    assert escape_string('a"b') == 'a\\"b'


@pytest.mark.parametrize("s", ['quo"te', "back\\slash", "tab\tnl\ncr\r", "\b\f", ""])
def test_escape_round_trips_through_json(s):
    assert json.loads('"' + escape_string(s) + '"') == s


def test_output_is_valid_json(stats):
    data = json.loads(_render(stats, script_name="gamemodes/test.amx"))
    assert data["script"] == "gamemodes/test.amx"
    assert [f.get("name") for f in data["functions"]] == ["main", "print", None]
    assert data["functions"][-1] == {}


def test_function_fields(stats):
    data = json.loads(_render(stats))
    main = data["functions"][0]
    assert main["type"] == "public"
    assert main["calls"] == 2
    assert main["selfTime"] == 100
    assert main["totalTime"] == 400
    assert main["worstSelfTime"] == 60
    assert main["worstTotalTime"] == 250
    assert data["functions"][1]["type"] == "native"


def test_script_name_is_escaped(stats):
    data = json.loads(_render(stats, script_name='a"b\\c'))
    assert data["script"] == 'a"b\\c'


def test_optional_fields_absent_by_default(stats):
    data = json.loads(_render(stats))
    assert "timestamp" not in data
    assert "duration" not in data


def test_timestamp_and_duration(stats):
    before = int(time.time())
    data = json.loads(_render(stats, print_date=True, print_run_time=True))
    after = int(time.time())
    assert before <= data["timestamp"] <= after
    assert data["duration"] >= 0


def test_empty_statistics():
    text = _render(Statistics())
    assert text.endswith('  "functions": [\n    {}\n  ]\n}\n')
    assert json.loads(text)["functions"] == [{}]


def test_missing_stream_raises(stats):
    with pytest.raises(ValueError):
        StatisticsWriterJson().write(stats)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        StatisticsWriter()