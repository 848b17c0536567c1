# omplab

Small building blocks for experimenting with classic algorithms:

- **Graphs** (`omplab.graphs`): build an undirected adjacency list and walk
  it breadth-first or depth-first.
- **Sorting** (`omplab.sorting`): bubble sort, odd-even transposition sort,
  and merge sort, the last also in a form that sorts its two halves on two
  threads.
- **Statistics** (`omplab.stats`): sum, minimum, maximum and average of a
  sequence of numbers.
- **Command line** (`omplab.cli`): the `omplab` command, which reads integers
  from standard input and runs the routines above on them.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Library use

### Graphs

```python
from omplab.graphs import build_graph, bfs, bfs_levels, dfs

graph = build_graph(5, [(0, 1), (0, 2), (1, 3), (3, 4)])

bfs(graph, 0)                # [0, 1, 2, 3, 4]
list(bfs_levels(graph, 0))   # [[0], [1, 2], [3], [4]]
dfs(graph, 0)                # [0, 1, 3, 4, 2]
```

- `build_graph(n, edges)` returns a list of `n` adjacency lists and records
  every `(u, v)` edge in both directions. It raises `ValueError` if `n` is
  negative or an edge names a vertex outside `0..n-1`.
- `bfs(graph, start)` returns the breadth-first visiting order.
- `bfs_levels(graph, start)` is a generator that yields one list per
  breadth-first level, starting with `[start]`.
- `dfs(graph, start)` returns a depth-first visiting order. A vertex is
  marked as visited when it is pushed on the stack, and the first-listed
  neighbour is explored first.

Every vertex reachable from the start appears exactly once in each
traversal; unreachable vertices do not appear. All three raise `ValueError`
if `start` is not a vertex of the graph.

### Sorting

```python
from omplab.sorting import (
    bubble_sort, odd_even_sort, merge, merge_sort, parallel_merge_sort,
)

bubble_sort([5, 2, 9, 1])            # [1, 2, 5, 9]
odd_even_sort([5, 2, 9, 1])          # [1, 2, 5, 9]
merge_sort([5, 2, 9, 1])             # [1, 2, 5, 9]
parallel_merge_sort([5, 2, 9, 1])    # [1, 2, 5, 9]
merge([1, 4, 7], [2, 3, 8])          # [1, 2, 3, 4, 7, 8]
```

Every function returns a new list and leaves its input unchanged; any
mutually comparable values can be sorted.

- `odd_even_sort(values, phases=None)` runs the given number of
  compare-exchange phases, starting at index 0 on even phases and index 1 on
  odd ones. The default, `len(values)` phases, always gives a sorted result;
  fewer phases may leave it partly sorted. A negative number of phases
  raises `ValueError`.
- `merge(left, right)` merges two sorted sequences; on equal elements the
  one from `right` comes first.
- `parallel_merge_sort(values)` splits the values in two and sorts each half
  with `merge_sort` on its own thread before merging them.

### Statistics

```python
from omplab.stats import summarize

summary = summarize([4, 8, 15, 16, 23, 42])
summary.total     # 108
summary.minimum   # 4
summary.maximum   # 42
summary.average   # 18.0
```

`summarize` returns a frozen `Summary` dataclass with the fields `total`,
`minimum`, `maximum` and `average`. It raises `ValueError` for an empty
collection.

## Command line

Installing the package provides the `omplab` command with three
subcommands. Each reads whitespace-separated integers from standard input.
When standard input is a terminal, prompts are written to standard error.

### `omplab sort`

Input: the number of elements, then the elements.

```
$ echo "5  4 2 5 1 3" | omplab sort
```

Prints the wall-clock time of bubble sort, odd-even transposition sort,
merge sort and the two-thread merge sort, followed by the array sorted by
odd-even transposition sort and by the two-thread merge sort.

### `omplab graph [--start N]`

Input: the number of vertices and of edges, then each edge as a pair of
vertices. The graph is undirected; `--start` picks the start vertex
(default `0`).

```
$ echo "5 4  0 1  0 2  1 3  3 4" | omplab graph
BFS starting from node 0: 0 1 2 3 4
DFS starting from node 0: 0 1 3 4 2
```

### `omplab stats`

Input: the number of elements, then the elements.

```
$ echo "4  3 1 4 1" | omplab stats
Sum = 9
Min = 1
Max = 4
Average = 2.25
```

If the input ends early, holds something that is not an integer, gives a
negative count, names a vertex that is out of range, or (for `stats`) holds
no elements, the command prints `omplab: error: ...` on standard error and
exits with status 1.

## What it does not do

- Input comes only from standard input; there are no options for files or
  for generating random data.
- Only `parallel_merge_sort` does any work concurrently. The graph
  traversals and odd-even transposition sort run on a single thread, and
  the reported timings are single wall-clock measurements, not benchmarks.