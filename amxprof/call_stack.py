"""Function calls in progress and the stack that holds them."""

from __future__ import annotations

from collections.abc import Iterator

from amxprof.function import Function
from amxprof.performance_counter import PerformanceCounter


class FunctionCall:
    """One active call of a function, with its own timer.

    The timer reports to the parent call's timer. If an outer call of the
    same function is still running, that call's timer becomes the shadow,
    so recursive time is not counted twice.
    """

    __slots__ = ("function", "parent", "frame", "timer")

    def __init__(
        self,
        function: Function,
        frame: int,
        parent: FunctionCall | None = None,
    ) -> None:
        self.function = function
        self.parent = parent
        self.frame = frame
        self.timer = PerformanceCounter()

        current = parent
        while current is not None:
            if current.function is function:
                self.timer.shadow = current.timer
                break
            current = current.parent

        if parent is not None:
            self.timer.parent = parent.timer

    def __repr__(self) -> str:
        return f"FunctionCall({self.function!r}, frame={self.frame})"


class CallStack:
    """A stack of function calls whose timers run while they are on it."""

    def __init__(self) -> None:
        self._calls: list[FunctionCall] = []

    def push(self, call: FunctionCall) -> None:
        """Push ``call`` and start its timer."""
        self._calls.append(call)
        call.timer.start()

    def push_function(self, function: Function, frame: int) -> FunctionCall:
        """Push a new call of ``function`` whose parent is the current top."""
        parent = self._calls[-1] if self._calls else None
        call = FunctionCall(function, frame, parent)
        self.push(call)
        return call

    def pop(self) -> FunctionCall:
        """Remove the top call, stop its timer and return it."""
        if not self._calls:
            raise IndexError("pop from an empty call stack")
        call = self._calls.pop()
        call.timer.stop()
        return call

    def is_empty(self) -> bool:
        """Tell whether no calls are on the stack."""
        return not self._calls

    def top(self) -> FunctionCall:
        """Return the most recent call."""
        if not self._calls:
            raise IndexError("call stack is empty")
        return self._calls[-1]

    def bottom(self) -> FunctionCall:
        """Return the oldest call."""
        if not self._calls:
            raise IndexError("call stack is empty")
        return self._calls[0]

    def __len__(self) -> int:
        return len(self._calls)

    def __iter__(self) -> Iterator[FunctionCall]:
        return iter(self._calls)