[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amxprof"
version = "0.1.0"
description = "Function-level profiler core for AMX scripts: call stacks, timing statistics, call graphs and report writers"
requires-python = ">=3.10"
dependencies = []
keywords = ["profiler", "amx", "pawn", "call-graph", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["amxprof"]

[tool.pytest.ini_options]
addopts = "-ra"
