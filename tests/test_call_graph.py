import pytest

from amxprof.call_graph import CallGraph, CallGraphNode
from amxprof.function import Function
from amxprof.statistics import FunctionStatistics


def make_stats(address, name):
    return FunctionStatistics(Function.public(address, name))


@pytest.fixture
def graph():
    return CallGraph()


def test_first_call_hangs_off_sentinel(graph):
    stats = make_stats(0x10, "a")
    node = graph.push_call(stats)
    assert node.stats is stats
    assert node.graph is graph
    assert graph.sentinel.callees == [node]
    assert graph.sentinel.stats is None


def test_nested_call_is_callee_of_caller(graph):
    outer = graph.push_call(make_stats(0x10, "a"))
    inner = graph.push_call(make_stats(0x20, "b"))
    assert outer.callees == [inner]
    assert graph.sentinel.callees == [outer]


def test_same_function_reuses_node(graph):
    stats = make_stats(0x10, "a")
    first = graph.push_call(stats)
    graph.pop_call()
    second = graph.push_call(stats)
    assert first is second
    assert graph.sentinel.callees == [first]


def test_nodes_keyed_by_function_address(graph):
    first = graph.push_call(make_stats(0x10, "a"))
    graph.pop_call()
    second = graph.push_call(make_stats(0x10, "a"))
    assert first is second


def test_pop_returns_nodes_in_reverse_order(graph):
    a = graph.push_call(make_stats(0x10, "a"))
    b = graph.push_call(make_stats(0x20, "b"))
    assert graph.pop_call() is b
    assert graph.pop_call() is a
    assert graph.pop_call() is None


def test_pop_on_empty_graph_returns_none(graph):
    assert graph.pop_call() is None


def test_traverse_visits_sentinel_then_by_address(graph):
    graph.push_call(make_stats(0x30, "c"))
    graph.push_call(make_stats(0x10, "a"))
    graph.push_call(make_stats(0x20, "b"))
    visited = []
    graph.traverse(visited.append)
    assert visited[0] is graph.sentinel
    assert [node.stats.function.name for node in visited[1:]] == ["a", "b", "c"]


def test_traverse_empty_graph_visits_only_sentinel(graph):
    visited = []
    graph.traverse(visited.append)
    assert visited == [graph.sentinel]


def test_add_callee_ignores_duplicates_and_orders_by_address(graph):
    root = CallGraphNode(graph, make_stats(0x5, "root"))
    high = CallGraphNode(graph, make_stats(0x40, "high"))
    low = CallGraphNode(graph, make_stats(0x8, "low"))
    assert root.add_callee(high) is high
    root.add_callee(low)
    root.add_callee(high)
    assert root.callees == [low, high]


def test_recursive_call_adds_self_edge(graph):
    stats = make_stats(0x10, "a")
    node = graph.push_call(stats)
    graph.push_call(stats)
    assert node.callees == [node]