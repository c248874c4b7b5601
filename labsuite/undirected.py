"""Undirected graphs with union, intersection, complement and reachability."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Iterable, Iterator


class Graph:
    """Undirected graph on vertices numbered from 0."""

    def __init__(self, vertices: int = 0) -> None:
        self._adjacency: list[set[int]] = [set() for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adjacency)

    @property
    def edges(self) -> set[tuple[int, int]]:
        """Every edge once, as an ordered pair (low, high)."""
        return {
            (u, v) for u, neighbours in enumerate(self._adjacency) for v in neighbours if u <= v
        }

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} outside 0..{self.vertices - 1}")

    def _resize(self, vertices: int) -> None:
        if vertices < self.vertices:
            del self._adjacency[vertices:]
        else:
            self._adjacency.extend(set() for _ in range(vertices - self.vertices))

    def add_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)

    def remove_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._adjacency[u].discard(v)
        self._adjacency[v].discard(u)

    def union(self, other: Graph) -> Graph:
        """Graph holding the edges of either graph."""
        result = Graph(max(self.vertices, other.vertices))
        for graph in (self, other):
            for u, neighbours in enumerate(graph._adjacency):
                for v in neighbours:
                    result.add_edge(u, v)
        return result

    def intersection(self, other: Graph) -> Graph:
        """Graph holding the edges common to both graphs."""
        result = Graph(max(self.vertices, other.vertices))
        for u, (mine, theirs) in enumerate(zip(self._adjacency, other._adjacency)):
            for v in mine & theirs:
                result.add_edge(u, v)
        return result

    def complement(self) -> Graph:
        """Graph joining every pair of distinct vertices not joined here."""
        result = Graph(self.vertices)
        for u in range(self.vertices):
            for v in range(u + 1, self.vertices):
                if v not in self._adjacency[u]:
                    result.add_edge(u, v)
        return result

    __or__ = union
    __and__ = intersection
    __invert__ = complement

    def is_reachable(self, u: int, v: int) -> bool:
        self._check(u)
        self._check(v)
        if u == v:
            return True
        if not self._adjacency[u] or not self._adjacency[v]:
            return False
        seen = {u}
        queue = deque([u])
        while queue:
            current = queue.popleft()
            for nxt in self._adjacency[current]:
                if nxt == v:
                    return True
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return False

    def render(self) -> str:
        """One line per vertex listing its neighbours in ascending order."""
        return "\n".join(
            f"Vertex {u}:" + "".join(f" {v}" for v in sorted(neighbours))
            for u, neighbours in enumerate(self._adjacency)
        )


class _Exhausted(Exception):
    """Raised when the token stream runs out."""


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise _Exhausted from None


def _read_into(graph: Graph, tokens: Iterator[str]) -> None:
    vertices, edge_count = int(_take(tokens)), int(_take(tokens))
    graph._resize(vertices)
    for _ in range(edge_count):
        graph.add_edge(int(_take(tokens)), int(_take(tokens)))


def _read_graph(tokens: Iterator[str]) -> Graph:
    graph = Graph()
    _read_into(graph, tokens)
    return graph


def _run(words: Iterable[str]) -> Iterator[str]:
    tokens = iter(words)
    graph = Graph()
    try:
        command = _take(tokens)
        while command != "end":
            match command:
                case "Graph":
                    _read_into(graph, tokens)
                case "union":
                    _take(tokens)
                    graph = graph.union(_read_graph(tokens))
                case "intersection":
                    _take(tokens)
                    graph = graph.intersection(_read_graph(tokens))
                case "complement":
                    graph = graph.complement()
                case "isReachable":
                    u, v = int(_take(tokens)), int(_take(tokens))
                    yield "Yes" if graph.is_reachable(u, v) else "No"
                case "add_edge":
                    graph.add_edge(int(_take(tokens)), int(_take(tokens)))
                case "remove_edge":
                    graph.remove_edge(int(_take(tokens)), int(_take(tokens)))
                case "printGraph":
                    text = graph.render()
                    if text:
                        yield text
            command = _take(tokens)
    except _Exhausted:
        return


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Apply graph commands read from standard input.")
    parser.parse_args(argv)
    for text in _run(sys.stdin.read().split()):
        print(text)


if __name__ == "__main__":
    main()