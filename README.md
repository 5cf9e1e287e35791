# amxprof

The core of a function-level profiler for AMX (Pawn) scripts. It is written in
pure Python and has no third-party dependencies.

## How it works

The host virtual machine reports events to an `amxprof.profiler.Profiler`:

- `exec_hook(address, name, frame, exec_)` runs `exec_` as a call of the
  public function at `address`. It returns whatever `exec_` returns.
- `callback_hook(address, name, frame, callback)` does the same for a native
  function.
- `debug_hook(frame, stack_top, callee_address, debug=None)` handles a
  debug-break event. A frame below the current one enters the ordinary
  function at `callee_address`, unless that address is 0. A frame above it
  leaves ordinary functions. The hook returns the result of `debug`, or 0 when
  no `debug` is given.

An address of 0 is not timed; the call is still run. The first call at an
address registers a `Function` with `Statistics`. Each call is pushed onto a
`CallStack` as a `FunctionCall` with its own `PerformanceCounter`. Recursive
calls are not counted twice.

When a call is left, the profiler updates that function's `FunctionStatistics`:

- `num_calls`
- `self_time` and `total_time`
- `worst_self_time` and `worst_total_time`

Times are `Nanoseconds` values. Call `enter_function` and `leave_function`
directly to drive the stack yourself.

With `Profiler(enable_call_graph=True)`, the profiler also builds a
`CallGraph` in `profiler.call_graph`. Its `sentinel` node stands for the host.

Ordinary functions are named `unknown@XXXXXXXX` (the address in hex) by
default. To name them from symbols, set `profiler.debug_info` to any object
that has an `is_loaded` attribute and a `lookup_function_exact(address)`
method.

## Reports

Writers take the output stream and options in their constructors:

- `amxprof.statistics_writer.StatisticsWriterJson` writes a JSON document.
- `amxprof.statistics_writer_text.StatisticsWriterText` writes a fixed-width
  text table.
- `amxprof.statistics_writer_html.StatisticsWriterHtml` writes an HTML page
  with a sortable table.

All three take `(stream, script_name, print_date, print_run_time)`.

`amxprof.call_graph_writer.CallGraphWriterDot` writes the call graph in
Graphviz DOT format. It takes `(stream, script_name, root_node_name)`, and the
root name defaults to `<host>`. Node colours are scaled by self time.

`amxprof.statistics_writer.escape_string` escapes text for a JSON string.

## Example

```python
import io

from amxprof.call_graph_writer import CallGraphWriterDot
from amxprof.profiler import Profiler
from amxprof.statistics_writer import StatisticsWriterJson

profiler = Profiler(enable_call_graph=True)

def run_script():
    return 0

profiler.exec_hook(0x100, "OnGameModeInit", 0x4000, run_script)

out = io.StringIO()
StatisticsWriterJson(out, "gamemodes/test.amx", False, False).write(profiler.stats)
print(out.getvalue())

dot = io.StringIO()
CallGraphWriterDot(dot, "gamemodes/test.amx", "Server").write(profiler.call_graph)
print(dot.getvalue())
```

## Helpers

- `amxprof.duration` has unit-aware floating-point durations:
  - the units `Nanoseconds`, `Microseconds`, `Milliseconds`, `Seconds`,
    `Minutes`, `Hours`, `Days` and `Weeks`;
  - `duration_cast` and `Duration.to` to convert between them.
- `amxprof.time_utils` has:
  - `TimeStamp`, with `TimeStamp.now()`;
  - `ctime()`;
  - `TimeSpan`, which prints as `HH:MM:SS`.
- `amxprof.performance_counter` has:
  - `Clock.now()`, which reads a monotonic clock;
  - `PerformanceCounter`;
  - the errors `ProfilerError` and `ClockError`.
- `amxprof.fileutils` has path helpers: `get_directory`, `get_file_name`,
  `get_base_name`, `get_file_extension`, `to_unix_path`,
  `get_modification_time`, `get_directory_files` and `same_file`.
- `amxprof.stringutils` has `split_string`, `to_lower`, `to_upper` and
  `compare_ignore_case`.

## What this package does not do

This package is a library only. It has no command-line tool.

It does not attach itself to a running virtual machine, and it does not read
AMX files, their headers or their debug symbols. The host must supply:

- the addresses, names and frames passed to the hooks;
- any debug-info object used to name functions.

It reads no configuration file. It does not decide which scripts to profile
or where to write reports; open the stream and pass it to a writer yourself.

## Running the tests

```
pip install -e .[test]
pytest
```