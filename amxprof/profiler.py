"""Collects call counts and timings of script functions."""

from __future__ import annotations

from collections.abc import Callable

from amxprof.call_graph import CallGraph
from amxprof.call_stack import CallStack
from amxprof.function import Function, FunctionType
from amxprof.statistics import Statistics

ERR_NONE = 0


class Profiler:
    """Tracks function entry and exit reported by the virtual machine hooks.

    The host reports three kinds of events: calls of public functions
    (``exec_hook``), calls of native functions (``callback_hook``) and
    debug steps from which calls of ordinary functions are detected
    (``debug_hook``).
    """

    def __init__(self, enable_call_graph: bool = False) -> None:
        self.debug_info = None
        self.call_graph_enabled = enable_call_graph
        self.call_stack = CallStack()
        self.call_graph = CallGraph()
        self.stats = Statistics()

    def _ensure_function(self, address: int, make: Callable[[], Function]) -> None:
        if self.stats.get_function(address) is None:
            self.stats.add_function(make())

    def debug_hook(
        self,
        frame: int,
        stack_top: int,
        callee_address: int,
        debug: Callable[[], int] | None = None,
    ) -> int:
        """Handle a debug step at frame ``frame``.

        ``stack_top`` is the top of the stack, used as the previous frame when
        no call is active; ``callee_address`` is the address of the function
        whose frame ``frame`` is, or 0 if it cannot be told. The result of
        ``debug`` is returned, or 0 when there is none.
        """
        if self.call_stack.is_empty():
            prev_frame = stack_top
        else:
            prev_frame = self.call_stack.top().frame

        if frame < prev_frame:
            address = callee_address
            if address != 0:
                self._ensure_function(
                    address, lambda: Function.normal(address, self.debug_info)
                )
                self.enter_function(address, frame)
        elif frame > prev_frame and not self.call_stack.is_empty():
            if self.call_stack.top().function.type is FunctionType.NORMAL:
                self.leave_function(0, frame)

        if debug is not None:
            return debug()
        return ERR_NONE

    def callback_hook(
        self,
        address: int,
        name: str,
        frame: int,
        callback: Callable[[], int],
    ) -> int:
        """Time a native call at ``address`` made by running ``callback``."""
        if address != 0:
            self._ensure_function(address, lambda: Function.native(address, name))
            self.enter_function(address, frame)
        error = callback()
        if address != 0:
            self.leave_function(address, 0)
        return error

    def exec_hook(
        self,
        address: int,
        name: str,
        frame: int,
        exec_: Callable[[], int],
    ) -> int:
        """Time a public call at ``address`` made by running ``exec_``."""
        if address != 0:
            self._ensure_function(address, lambda: Function.public(address, name))
            self.enter_function(address, frame)
        error = exec_()
        if address != 0:
            self.leave_function(address, 0)
        return error

    def enter_function(self, address: int, frame: int) -> None:
        """Push a call of the known function at ``address``."""
        if address == 0:
            raise ValueError("cannot enter a function at address 0")
        fn_stats = self.stats.get_function_statistics(address)
        if fn_stats is None:
            raise KeyError(f"no function known at address {address:#x}")

        fn_stats.adjust_num_calls(1)
        self.call_stack.push_function(fn_stats.function, frame)
        if self.call_graph_enabled:
            self.call_graph.push_call(fn_stats)

    def leave_function(self, address: int, frame: int) -> None:
        """Pop calls until the one at ``address`` or above ``frame`` is left.

        With ``address`` 0 calls are popped until the next remaining call's
        frame is at or above ``frame``.
        """
        if self.call_stack.is_empty():
            raise IndexError("no function call to leave")
        if address != 0 and self.stats.get_function(address) is None:
            raise KeyError(f"no function known at address {address:#x}")

        while not self.call_stack.is_empty():
            call = self.call_stack.pop()
            next_call = None if self.call_stack.is_empty() else self.call_stack.top()

            fn_stats = self.stats.get_function_statistics(call.function.address)
            if fn_stats is None:
                raise KeyError(
                    f"no function known at address {call.function.address:#x}"
                )

            fn_stats.adjust_self_time(call.timer.self_time())
            fn_stats.adjust_total_time(call.timer.total_time)

            total_time = call.timer.latest_total_time
            if total_time > fn_stats.worst_total_time:
                fn_stats.worst_total_time = total_time

            self_time = call.timer.latest_self_time()
            if self_time > fn_stats.worst_self_time:
                fn_stats.worst_self_time = self_time

            if self.call_graph_enabled:
                self.call_graph.pop_call()

            if call.function.address == address or (
                frame != 0 and next_call is not None and next_call.frame >= frame
            ):
                break