"""Function-level profiling of AMX scripts: timing statistics, call graphs and reports."""

__version__ = "0.1.0"