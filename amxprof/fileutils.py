"""Path manipulation and file system helpers."""

import fnmatch
import os


def _last_separator(path: str) -> int:
    return max(path.rfind("/"), path.rfind("\\"))


def get_directory(path: str) -> str:
    """Return everything before the last path separator, or ``""``."""
    sep = _last_separator(path)
    if sep < 0:
        return ""
    return path[:sep]


def get_file_name(path: str) -> str:
    """Return everything after the last path separator."""
    sep = _last_separator(path)
    if sep < 0:
        return path
    return path[sep + 1:]


def get_base_name(path: str) -> str:
    """Return the file name without its last extension."""
    base = get_file_name(path)
    period = base.rfind(".")
    if period >= 0:
        base = base[:period]
    return base


def get_file_extension(path: str) -> str:
    """Return the text after the last period in ``path``, or ``""``."""
    period = path.rfind(".")
    if period < 0:
        return ""
    return path[period + 1:]


def get_modification_time(path: str) -> int:
    """Return the modification time in whole seconds, or 0 if it is unknown."""
    try:
        return int(os.stat(path).st_mtime)
    except OSError:
        return 0


def _matches(pattern: str, name: str) -> bool:
    # A leading period must be matched by a literal period in the pattern.
    if name.startswith(".") and not pattern.startswith("."):
        return False
    return fnmatch.fnmatchcase(name.lower(), pattern)


def get_directory_files(directory: str, pattern: str) -> list[str]:
    """List the entries of ``directory`` whose names match ``pattern``.

    Matching ignores case and treats backslashes literally. Names starting
    with a period only match patterns that start with one. A directory that
    cannot be read yields an empty list.
    """
    try:
        entries = os.listdir(directory)
    except OSError:
        return []
    folded = pattern.lower()
    return sorted(name for name in [".", "..", *entries] if _matches(folded, name))


def same_file(path1: str, path2: str) -> bool:
    """Tell whether two paths refer to the same file; False if either is missing."""
    try:
        stat1 = os.stat(path1)
        stat2 = os.stat(path2)
    except OSError:
        return False
    return stat1.st_dev == stat2.st_dev and stat1.st_ino == stat2.st_ino


def to_unix_path(path: str) -> str:
    """Replace backslashes with forward slashes."""
    return path.replace("\\", "/")