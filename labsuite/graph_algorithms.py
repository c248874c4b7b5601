"""Queries on a directed graph of events: cycles, components, orderings and hype paths."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections import deque
from enum import Enum
from typing import Iterable, Iterator


class _Color(Enum):
    WHITE = "W"
    GRAY = "G"
    BLACK = "B"


class DependencyGraph:
    """Directed graph over events numbered from 1, each carrying a hype score."""

    def __init__(self, hype: Iterable[int], edges: Iterable[tuple[int, int]]) -> None:
        self.hype: list[int] = list(hype)
        count = len(self.hype)
        successors: list[set[int]] = [set() for _ in range(count)]
        for u, v in edges:
            if not (1 <= u <= count and 1 <= v <= count):
                raise ValueError(f"edge ({u}, {v}) names an event outside 1..{count}")
            successors[u - 1].add(v - 1)
        predecessors: list[set[int]] = [set() for _ in range(count)]
        for u, targets in enumerate(successors):
            for v in targets:
                predecessors[v].add(u)
        self._successors = [sorted(targets) for targets in successors]
        self._predecessors = [sorted(sources) for sources in predecessors]

    def __len__(self) -> int:
        return len(self.hype)

    def has_cycle(self) -> bool:
        """True if some event depends on itself through a chain of edges."""
        state = [_Color.WHITE] * len(self)
        for root in range(len(self)):
            if state[root] is not _Color.WHITE:
                continue
            state[root] = _Color.GRAY
            stack = [(root, iter(self._successors[root]))]
            while stack:
                u, pending = stack[-1]
                for v in pending:
                    if state[v] is _Color.GRAY:
                        return True
                    if state[v] is _Color.WHITE:
                        state[v] = _Color.GRAY
                        stack.append((v, iter(self._successors[v])))
                        break
                else:
                    state[u] = _Color.BLACK
                    stack.pop()
        return False

    def _finish_order(self) -> list[int]:
        """Vertices in the order their depth-first searches finish."""
        visited = [False] * len(self)
        finished: list[int] = []
        for root in range(len(self)):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, iter(self._successors[root]))]
            while stack:
                u, pending = stack[-1]
                for v in pending:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, iter(self._successors[v])))
                        break
                else:
                    finished.append(u)
                    stack.pop()
        return finished

    def _strong_components(self) -> Iterator[list[int]]:
        visited = [False] * len(self)
        for root in reversed(self._finish_order()):
            if visited[root]:
                continue
            visited[root] = True
            component: list[int] = []
            stack = [root]
            while stack:
                u = stack.pop()
                component.append(u)
                for v in self._predecessors[u]:
                    if not visited[v]:
                        visited[v] = True
                        stack.append(v)
            yield component

    def components(self) -> tuple[int, int]:
        """Number of strongly connected components and the size of the largest."""
        sizes = [len(component) for component in self._strong_components()]
        return len(sizes), max(sizes, default=0)

    def valid_order(self) -> list[int] | None:
        """Topological order preferring the lowest-numbered event, or None if cyclic."""
        in_degree = [len(sources) for sources in self._predecessors]
        ready = [u for u, degree in enumerate(in_degree) if degree == 0]
        heapq.heapify(ready)
        order: list[int] = []
        while ready:
            u = heapq.heappop(ready)
            order.append(u + 1)
            for v in self._successors[u]:
                in_degree[v] -= 1
                if in_degree[v] == 0:
                    heapq.heappush(ready, v)
        return order if len(order) == len(self) else None

    def max_hype(self) -> int:
        """Largest total hype along a path of components, never below zero."""
        component_of = [0] * len(self)
        component_hype: list[int] = []
        for index, component in enumerate(self._strong_components()):
            for u in component:
                component_of[u] = index
            component_hype.append(sum(self.hype[u] for u in component))

        links: list[list[int]] = [[] for _ in component_hype]
        in_degree = [0] * len(component_hype)
        for u, targets in enumerate(self._successors):
            source = component_of[u]
            for v in targets:
                target = component_of[v]
                if source != target and target not in links[source]:
                    links[source].append(target)
                    in_degree[target] += 1

        best = [0] * len(component_hype)
        queue: deque[int] = deque()
        for index, degree in enumerate(in_degree):
            if degree == 0:
                queue.append(index)
                best[index] = component_hype[index]

        result = 0
        while queue:
            u = queue.popleft()
            for v in links[u]:
                best[v] = max(best[v], best[u] + component_hype[v])
                in_degree[v] -= 1
                if in_degree[v] == 0:
                    queue.append(v)
            result = max(result, best[u])
        return result


def _answer(graph: DependencyGraph, query: int) -> str:
    if query == 1:
        return "YES" if graph.has_cycle() else "NO"
    if query == 2:
        count, largest = graph.components()
        return f"{count} {largest}"
    if query == 3:
        order = graph.valid_order()
        return "NO" if order is None else "".join(f"{event} " for event in order)
    return str(graph.max_hype())


def _run(numbers: Iterator[int]) -> Iterator[str]:
    def take() -> int:
        try:
            return next(numbers)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    count, edge_count = take(), take()
    hype = [take() for _ in range(count)]
    edges = [(take(), take()) for _ in range(edge_count)]
    graph = DependencyGraph(hype, edges)
    for _ in range(take()):
        yield _answer(graph, take())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Answer event graph queries read from standard input.")
    parser.parse_args(argv)
    for line in _run(int(token) for token in sys.stdin.read().split()):
        print(line)


if __name__ == "__main__":
    main()