"""HTML page rendering of profiling statistics."""

from __future__ import annotations

import math

from amxprof.duration import Milliseconds, Seconds
from amxprof.statistics import Statistics
from amxprof.statistics_writer import StatisticsWriter
from amxprof.time_utils import TimeSpan, ctime

_PAGE_HEAD = (
    """<!DOCTYPE html>
<html>
<head>
  <title>Profile of 'gamemodes/grandlarc.amx'</title>
  <meta charset="UTF-8">

  <script type="text/javascript">
    var intComparator = function(a, b) {"""
    + " \n"
    + """      return parseInt(a) - parseInt(b);"""
    + " \n"
    + """    };
    var floatComparator = function(a, b) {"""
    + " \n"
    + """      return parseFloat(a) - parseFloat(b);"""
    + " \n"
    + """    };
    var stringComparator = function(a, b) {
      return String(a).localeCompare(b);
    };

    function sort(table, colIndex, reverseOrder) {
      var tbody = table.tBodies[0];
      var rows = Array.prototype.slice.call(tbody.getElementsByTagName('tr'));

      for (var i = 0; i < rows.length; i++) {
        var row = rows[i];
        var value = row.cells[colIndex].innerHTML;
        var comparator;
        if (/^[0-9]+/.test(value)) {
          comparator = intComparator;
        } else if (/^[0-9.]+/.test(value)) {
          comparator = floatComparator;
        } else {
          comparator = stringComparator;
        }
        var sign = reverseOrder ? -1 : 1;
        for (var j = 0; j < i; j++) {
          var otherRow = rows[j];
          var otherValue = otherRow.cells[colIndex].innerHTML;
          if (sign * comparator(value, otherValue) < 0) {
            tbody.removeChild(row);
            rows.splice(i, 1);
            tbody.insertBefore(row, otherRow);
            rows.splice(j, 0, row);
            break;
          }
        }
      }
    }

    document.addEventListener('DOMContentLoaded', function() {
      var asc = {};
      var table = document.getElementById('data');
      var headRows = table.tHead.getElementsByTagName('tr');

      for (var i = 0; i < headRows.length; i++) {
        var row = headRows[i];
        for (var j = 0; j < row.cells.length; j++) {
          var cell = row.cells[j];
          var arrow = document.createElement('span');
          arrow.className = 'sort-direction';
          cell.appendChild(arrow);
          cell.style.cursor = 'pointer';
          (function(cell, arrow) {
            var colIndex = cell.dataset.sortIndex;
            cell.addEventListener('click', function() {
              sort(table, colIndex, !!asc[colIndex]);
              for (var i = 0; i < headRows.length; i++) {
                var row = headRows[i];
                for (var j = 0; j < row.cells.length; j++) {
                  var arrows ="""
    + " \n"
    + """                    row.cells[j].getElementsByClassName('sort-direction');
                  for (var k = 0; k < arrows.length; k++) {
                    arrows[k].style.display = 'none';
                  }
                }
              }
              arrow.innerHTML = asc[colIndex] ? '&#9660;' : '&#9650;';
              arrow.style.display = 'inline';
              asc[colIndex] = !asc[colIndex];
            });
          })(cell, arrow);
        }
      }
    });
  </script>
  <style type="text/css">
    * {
      font-family: sans-serif;
    }
    table {
      margin: 30px auto;
    }
    table, th, td {
      border: 1px solid #505050;
      border-collapse: collapse;
      padding: 7px 10px;
    }
    th {
      color: white;
      background-color: #505050;
      border: 1px solid #707070;
    }
    td {
      border: 1px solid #d8d8d8;
      font-family: 'Source Code Pro', Consolas, "DejaVu Sans Mono", "Courier New", Monospace;
    }
    td.numeric {
      text-align: right;
    }
    tbody tr:nth-child(odd) {
      background-color: #f0f0f0;
    }
    tbody tr:hover {
      background-color: #c0e3eb;
    }
  </style>
</head>

<body>
  <table id="meta">
    <thead>
      <tr>
        <th colspan="2">Meta</th>
      </tr>
    </thead>
    <tbody>"""
)

_DATA_HEAD = """</tbody>
  </table>
  <table id="data" class="tablesorter">
    <thead>
      <tr>
        <th rowspan="2" data-sort-index="0">Type</th>
        <th rowspan="2" data-sort-index="1">Name</th>
        <th rowspan="2" data-sort-index="2">Calls</th>
        <th colspan="4" data-sort-index="3" class="group">Self Time</th>
        <th colspan="4" data-sort-index="7" class="group">Total Time</th>
      </tr>
      <tr>
        <th data-sort-index="3">%</th>
        <th data-sort-index="4">Overall</th>
        <th data-sort-index="5">Average</th>
        <th data-sort-index="6">Worst</th>
        <th data-sort-index="7">%</th>
        <th data-sort-index="8">Overall</th>
        <th data-sort-index="9">Average</th>
        <th data-sort-index="10">Worst</th>
      </tr>
    </thead>
    <tbody>
"""

_PAGE_TAIL = """    </tbody>
  </table>
</body>
</html>
"""


def _divide(a: float, b: float) -> float:
    """Divide as floating-point hardware does: x/0 gives inf or nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _meta_row(label: str, value: str) -> str:
    return (
        "      <tr>\n"
        f"        <td>{label}</td>\n"
        f"        <td>{value}</td>\n"
        "      </tr>\n"
    )


class StatisticsWriterHtml(StatisticsWriter):
    """Renders statistics as an HTML page with a sortable table."""

    def write(self, stats: Statistics) -> None:
        out = self._out()
        out.write(_PAGE_HEAD)

        if self.print_date:
            out.write(_meta_row("Date", ctime()))

        if self.print_run_time:
            out.write(_meta_row("Duration", str(TimeSpan(stats.get_total_run_time()))))

        out.write(_DATA_HEAD)

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

            numeric = [
                str(fn_stats.num_calls),
                f"{self_time_percent:.2f}%",
                f"{self_time:.1f}",
                f"{avg_self_time:.1f}",
                f"{worst_self_time:.1f}",
                f"{total_time_percent:.2f}%",
                f"{total_time:.1f}",
                f"{avg_total_time:.1f}",
                f"{worst_total_time:.1f}",
            ]
            out.write("    <tr>\n")
            out.write(f"      <td>{fn_stats.function.type_string()}</td>\n")
            out.write(f"      <td>{fn_stats.function.name}</td>\n")
            for cell in numeric:
                out.write(f'      <td class="numeric">{cell}</td>\n')
            out.write("    </tr>\n")

        out.write(_PAGE_TAIL)