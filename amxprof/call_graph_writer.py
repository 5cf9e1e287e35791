"""Writers that render a call graph, including Graphviz DOT output."""

from __future__ import annotations

import abc
from typing import TextIO

from amxprof.call_graph import CallGraph, CallGraphNode
from amxprof.duration import Nanoseconds
from amxprof.function import FunctionType

_EDGE_COLORS = {
    FunctionType.NORMAL: "#777777",
    FunctionType.PUBLIC: "#4B4E99",
    FunctionType.NATIVE: "#7C4B99",
}

_NODE_SHAPES = {
    FunctionType.PUBLIC: "octagon",
    FunctionType.NATIVE: "box",
    FunctionType.NORMAL: "oval",
}


def _format_double(value: float) -> str:
    return f"{value:.6g}"


class CallGraphWriter(abc.ABC):
    """Base class for writers that render a call graph to a text stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        script_name: str = "",
        root_node_name: str = "<host>",
    ) -> None:
        self.stream = stream
        self.script_name = script_name
        self.root_node_name = root_node_name

    def _out(self) -> TextIO:
        if self.stream is None:
            raise ValueError("no output stream set")
        return self.stream

    @abc.abstractmethod
    def write(self, graph: CallGraph) -> None:
        """Render ``graph`` to the stream."""


class CallGraphWriterDot(CallGraphWriter):
    """Renders a call graph in the Graphviz DOT language.

    Nodes are coloured by self time: the slowest function is red, faster
    ones shift towards blue.
    """

    def write(self, graph: CallGraph) -> None:
        out = self._out()
        out.write(
            f"digraph \"Call graph of '{self.script_name}'\" {{\n"
            '  size="10,8"; ratio=fill; rankdir=LR\n'
            "  node [style=filled];\n"
        )

        graph.traverse(self._write_edges)

        max_time = Nanoseconds(0)

        def compute_max_time(node: CallGraphNode) -> None:
            nonlocal max_time
            if node is node.graph.sentinel:
                return
            if node.stats.self_time > max_time:
                max_time = node.stats.self_time

        graph.traverse(compute_max_time)
        graph.traverse(lambda node: self._write_node_color(node, max_time))

        out.write("}\n")

    def _write_edges(self, node: CallGraphNode) -> None:
        callees = node.callees
        if not callees:
            return
        if node.stats is not None:
            caller_name = node.stats.function.name
        else:
            caller_name = self.root_node_name
        out = self._out()
        for callee in callees:
            function = callee.stats.function
            out.write(
                f'  "{caller_name}" -> "{function.name}" '
                f'[color="{_EDGE_COLORS[function.type]}"];\n'
            )

    def _write_node_color(self, node: CallGraphNode, max_time: Nanoseconds) -> None:
        out = self._out()
        if node is node.graph.sentinel:
            out.write(f'  "{self.root_node_name}" [shape=diamond];\n')
            return

        time = node.stats.self_time.count
        try:
            ratio = time / max_time.count
        except ZeroDivisionError:
            ratio = float("nan")

        hue = (1.0 - ratio) * 0.6
        saturation = ratio * 0.9 + 0.1
        brightness = 1.0

        function = node.stats.function
        out.write(
            f'  "{function.name}" [color="'
            f"{_format_double(hue)}, "
            f"{_format_double(saturation)}, "
            f'{_format_double(brightness)}"'
            f", shape={_NODE_SHAPES[function.type]}];\n"
        )