"""Weighted graph of level nodes with shortest-path search."""

from __future__ import annotations

import heapq
import itertools
from typing import Iterable

from ghostchase.path import Node


class Graph:
    """A graph over nodes labelled 0..n-1 with a dense matrix of connection costs."""

    def __init__(self, nodes: Iterable[Node]) -> None:
        node_list = list(nodes)
        for index, node in enumerate(node_list):
            if node.label != index:
                raise ValueError(
                    f"Node with label {node.label} is not in position {index}"
                )
        self._nodes: dict[int, Node] = {node.label: node for node in node_list}
        count = len(node_list)
        self._cost: list[list[float]] = [[0.0] * count for _ in range(count)]

    def num_nodes(self) -> int:
        """Number of nodes in the graph."""
        return len(self._nodes)

    def get_node(self, label: int) -> Node:
        """The node with the given label."""
        return self._nodes[label]

    def add_weight_connection(self, from_node: int, to_node: int, weight: float) -> None:
        """Set the cost of moving from one node to another."""
        self._cost[from_node][to_node] = weight

    def neighbours(self, from_node: int) -> list[int]:
        """Labels of the nodes reachable from from_node at a positive cost."""
        return [label for label, cost in enumerate(self._cost[from_node]) if cost > 0.0]

    def dijkstra(self, start: int, goal: int) -> list[Node]:
        """Cheapest path of nodes from start to goal, both included.

        An empty list is returned when no path was recorded for the goal; as
        predecessors default to label 0, a goal reached directly from node 0
        also yields an empty list.
        """
        counter = itertools.count()
        frontier: list[tuple[float, int, int]] = [(0.0, next(counter), start)]
        came_from: dict[int, int] = {}
        cost_so_far: dict[int, float] = {start: 0.0}

        while frontier:
            _, _, current = heapq.heappop(frontier)
            if current == goal:
                break
            for nxt in self.neighbours(current):
                new_cost = cost_so_far[current] + self._cost[current][nxt]
                if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                    cost_so_far[nxt] = new_cost
                    heapq.heappush(frontier, (new_cost, next(counter), nxt))
                    came_from[nxt] = current

        if came_from.get(goal, 0) == 0:
            return []

        path: list[Node] = []
        current = goal
        while current != start:
            path.append(self.get_node(current))
            current = came_from.get(current, 0)
        path.append(self.get_node(start))
        path.reverse()
        return path