"""Descriptions of profiled script functions."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass
from typing import Protocol


class FunctionType(enum.Enum):
    """Kind of a script function."""

    NORMAL = "normal"
    PUBLIC = "public"
    NATIVE = "native"


class _DebugInfo(Protocol):
    @property
    def is_loaded(self) -> bool: ...

    def lookup_function_exact(self, address: int) -> str: ...


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Function:
    """A function identified by its code address.

    Addresses are unique across all kinds, so equality, ordering and hashing
    use the address alone.
    """

    type: FunctionType
    address: int
    name: str

    @staticmethod
    def normal(address: int, debug_info: _DebugInfo | None = None) -> Function:
        """Create an ordinary function, naming it from debug info if possible."""
        name = ""
        if address != 0 and debug_info is not None and debug_info.is_loaded:
            name = debug_info.lookup_function_exact(address) or ""
        if not name:
            name = f"unknown@{address & 0xFFFFFFFF:08x}"
        return Function(FunctionType.NORMAL, address, name)

    @staticmethod
    def public(address: int, name: str) -> Function:
        """Create a public function."""
        return Function(FunctionType.PUBLIC, address, name)

    @staticmethod
    def native(address: int, name: str) -> Function:
        """Create a native function."""
        return Function(FunctionType.NATIVE, address, name)

    def type_string(self) -> str:
        """Return the function kind as a lower-case word."""
        return self.type.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Function):
            return NotImplemented
        return self.address == other.address

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Function):
            return NotImplemented
        return self.address < other.address

    def __hash__(self) -> int:
        return hash(self.address)