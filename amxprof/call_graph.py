"""Graph of which functions call which, built while profiling."""

from __future__ import annotations

from collections.abc import Callable

from amxprof.statistics import FunctionStatistics


class CallGraphNode:
    """A function in the call graph together with the functions it calls.

    The sentinel node of a graph has no statistics; it stands for the host
    that calls into the script.
    """

    def __init__(self, graph: CallGraph, stats: FunctionStatistics | None) -> None:
        self.graph = graph
        self.stats = stats
        self._callees: dict[int, CallGraphNode] = {}

    @property
    def callees(self) -> list[CallGraphNode]:
        """The called nodes, ordered by function address."""
        return sorted(
            self._callees.values(),
            key=lambda node: node.stats.function.address if node.stats else -1,
        )

    def add_callee(self, node: CallGraphNode) -> CallGraphNode:
        """Record that this node calls ``node``; duplicates are ignored."""
        self._callees.setdefault(id(node), node)
        return node

    def __repr__(self) -> str:
        name = self.stats.function.name if self.stats is not None else "<root>"
        return f"CallGraphNode({name!r})"


Visitor = Callable[[CallGraphNode], None]


class CallGraph:
    """Call relations between functions, one node per function."""

    def __init__(self) -> None:
        self.sentinel = CallGraphNode(self, None)
        self._nodes: dict[int, CallGraphNode] = {}
        self._call_stack: list[CallGraphNode] = []

    def push_call(self, stats: FunctionStatistics) -> CallGraphNode:
        """Enter a call of the function behind ``stats`` and return its node."""
        address = stats.function.address
        node = self._nodes.get(address)
        if node is None:
            node = CallGraphNode(self, stats)
            self._nodes[address] = node
        caller = self._call_stack[-1] if self._call_stack else self.sentinel
        caller.add_callee(node)
        self._call_stack.append(node)
        return node

    def pop_call(self) -> CallGraphNode | None:
        """Leave the current call and return its node, or None if there is none."""
        if not self._call_stack:
            return None
        return self._call_stack.pop()

    def traverse(self, visitor: Visitor) -> None:
        """Call ``visitor`` on the sentinel, then on every node by address."""
        visitor(self.sentinel)
        for address in sorted(self._nodes):
            visitor(self._nodes[address])