import random

import pytest

from omplab.graphs import bfs, bfs_levels, build_graph, dfs

EXAMPLE_EDGES = [(0, 1), (0, 2), (1, 3), (3, 4)]
TRIANGLE_EDGES = [(0, 1), (0, 2), (1, 2)]


def _random_graph(seed, n=30, e=45):
    rng = random.Random(seed)
    edges = [(rng.randrange(n), rng.randrange(n)) for _ in range(e)]
    return build_graph(n, edges)


def _reachable(graph, start):
    seen = {start}
    todo = [start]
    while todo:
        u = todo.pop()
        for v in graph[u]:
            if v not in seen:
                seen.add(v)
                todo.append(v)
    return seen


def test_build_graph_is_symmetric():
    graph = build_graph(5, EXAMPLE_EDGES)
    for u, neighbours in enumerate(graph):
        for v in neighbours:
            assert u in graph[v]
    assert sum(len(n) for n in graph) == 2 * len(EXAMPLE_EDGES)


def test_build_graph_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        build_graph(3, [(0, 3)])


def test_build_graph_rejects_negative_size():
    with pytest.raises(ValueError):
        build_graph(-1, [])


def test_bfs_worked_example():
    assert bfs(build_graph(5, EXAMPLE_EDGES), 0) == [0, 1, 2, 3, 4]


def test_dfs_worked_example():
    assert dfs(build_graph(5, EXAMPLE_EDGES), 0) == [0, 1, 3, 4, 2]


def test_triangle_examples():
    graph = build_graph(3, TRIANGLE_EDGES)
    assert bfs(graph, 0) == [0, 1, 2]
    assert dfs(graph, 0) == [0, 1, 2]


def test_bfs_levels_worked_example():
    graph = build_graph(5, EXAMPLE_EDGES)
    assert list(bfs_levels(graph, 0)) == [[0], [1, 2], [3], [4]]


@pytest.mark.parametrize("seed", range(5))
def test_levels_flatten_to_bfs(seed):
    graph = _random_graph(seed)
    flat = [v for level in bfs_levels(graph, 0) for v in level]
    assert flat == bfs(graph, 0)


def test_disconnected_component_is_not_visited():
    graph = build_graph(4, [(0, 1), (2, 3)])
    assert set(bfs(graph, 2)) == {2, 3}
    assert set(dfs(graph, 0)) == {0, 1}


def test_isolated_start():
    graph = build_graph(3, [])
    assert bfs(graph, 1) == [1]
    assert dfs(graph, 1) == [1]


@pytest.mark.parametrize("traversal", [bfs, dfs])
def test_invalid_start_raises(traversal):
    graph = build_graph(2, [(0, 1)])
    with pytest.raises(ValueError):
        traversal(graph, 2)


def test_bfs_levels_invalid_start_raises():
    with pytest.raises(ValueError):
        list(bfs_levels(build_graph(2, []), -1))