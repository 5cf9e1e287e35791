"""Small string helpers: splitting, ASCII case conversion and comparison."""

import string

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def split_string(s: str, delim: str) -> list[str]:
    """Split ``s`` on the single character ``delim``.

    Empty fields between delimiters are kept, but a trailing delimiter
    does not produce a final empty field and an empty string yields no parts.
    """
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    if not s:
        return []
    parts = s.split(delim)
    if s.endswith(delim):
        parts.pop()
    return parts


def to_lower(s: str) -> str:
    """Lower-case the ASCII letters of ``s``, leaving other characters alone."""
    return s.translate(_TO_LOWER)


def to_upper(s: str) -> str:
    """Upper-case the ASCII letters of ``s``, leaving other characters alone."""
    return s.translate(_TO_UPPER)


def compare_ignore_case(s1: str, s2: str) -> int:
    """Compare two strings ignoring ASCII case.

    Returns a negative number, zero or a positive number when ``s1`` sorts
    before, equal to or after ``s2``.
    """
    a = to_lower(s1)
    b = to_lower(s2)
    return (a > b) - (a < b)