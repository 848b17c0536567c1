"""Command-line front end: sort timings, graph traversals and number summaries."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from typing import Any, TextIO

from omplab.graphs import bfs, build_graph, dfs
from omplab.sorting import bubble_sort, merge_sort, odd_even_sort, parallel_merge_sort
from omplab.stats import summarize


class InputError(ValueError):
    """Raised when the numbers read from the input are missing or malformed."""


class _Tokens:
    """Whitespace-separated integers read from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._words: Iterator[str] = iter(stream.read().split())

    def integer(self, what: str) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise InputError(f"input ended before {what}") from None
        try:
            return int(word)
        except ValueError:
            raise InputError(f"expected an integer for {what}, got {word!r}") from None

    def count(self, what: str) -> int:
        value = self.integer(what)
        if value < 0:
            raise InputError(f"{what} must not be negative, got {value}")
        return value

    def integers(self, n: int, what: str) -> list[int]:
        return [self.integer(what) for _ in range(n)]


def _prompt(text: str) -> None:
    if sys.stdin.isatty():
        print(text, end="", file=sys.stderr, flush=True)


def _timed(sorter: Callable[[Sequence[Any]], list[Any]], values: Sequence[Any]) -> tuple[list[Any], float]:
    started = time.perf_counter()
    result = sorter(values)
    return result, time.perf_counter() - started


def _joined(values: Sequence[Any]) -> str:
    return " ".join(str(v) for v in values)


def _run_sort(_args: argparse.Namespace) -> None:
    _prompt("Enter number of elements: ")
    tokens = _Tokens(sys.stdin)
    n = tokens.count("number of elements")
    _prompt("Enter elements: ")
    values = tokens.integers(n, "an element")

    _, bubble_seq_time = _timed(bubble_sort, values)
    bubble_par, bubble_par_time = _timed(odd_even_sort, values)
    _, merge_seq_time = _timed(merge_sort, values)
    merge_par, merge_par_time = _timed(parallel_merge_sort, values)

    print()
    print(f"Sequential Bubble Sort Time: {bubble_seq_time} sec")
    print(f"Parallel Bubble Sort Time: {bubble_par_time} sec")
    print(f"Sequential Merge Sort Time: {merge_seq_time} sec")
    print(f"Parallel Merge Sort Time: {merge_par_time} sec")
    print()
    print(f"Sorted Array (Bubble Sort): {_joined(bubble_par)}")
    print(f"Sorted Array (Merge Sort): {_joined(merge_par)}")


def _run_graph(args: argparse.Namespace) -> None:
    _prompt("Enter number of vertices and edges: ")
    tokens = _Tokens(sys.stdin)
    n = tokens.count("number of vertices")
    e = tokens.count("number of edges")
    _prompt(f"Enter {e} edges (u v):\n")
    edges = [(tokens.integer("an edge end"), tokens.integer("an edge end")) for _ in range(e)]
    try:
        graph = build_graph(n, edges)
        bfs_order = bfs(graph, args.start)
        dfs_order = dfs(graph, args.start)
    except ValueError as exc:
        raise InputError(str(exc)) from None
    print(f"BFS starting from node {args.start}: {_joined(bfs_order)}")
    print(f"DFS starting from node {args.start}: {_joined(dfs_order)}")


def _run_stats(_args: argparse.Namespace) -> None:
    _prompt("Enter number of elements: ")
    tokens = _Tokens(sys.stdin)
    n = tokens.count("number of elements")
    _prompt("Enter elements:\n")
    values = tokens.integers(n, "an element")
    try:
        summary = summarize(values)
    except ValueError as exc:
        raise InputError(str(exc)) from None
    print(f"Sum = {summary.total}")
    print(f"Min = {summary.minimum}")
    print(f"Max = {summary.maximum}")
    print(f"Average = {summary.average:g}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="omplab",
        description="Sorting timings, graph traversals and number summaries read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort_cmd = commands.add_parser("sort", help="time bubble and merge sorts on a list of integers")
    sort_cmd.set_defaults(handler=_run_sort)

    graph_cmd = commands.add_parser("graph", help="breadth- and depth-first traversal of an undirected graph")
    graph_cmd.add_argument("--start", type=int, default=0, help="vertex to start from (default 0)")
    graph_cmd.set_defaults(handler=_run_graph)

    stats_cmd = commands.add_parser("stats", help="sum, minimum, maximum and average of integers")
    stats_cmd.set_defaults(handler=_run_stats)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` on numbers read from standard input."""
    args = _parser().parse_args(argv)
    try:
        args.handler(args)
    except InputError as exc:
        print(f"omplab: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())