"""Graph nodes and the paths that characters follow through them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ghostchase.vector import Vec3


@dataclass(frozen=True)
class Node:
    """A labelled point on the level grid."""

    label: int
    position: Vec3 = field(default_factory=Vec3)


class Path:
    """An ordered list of nodes with a cursor on the node being approached."""

    def __init__(self, nodes: Iterable[Node]) -> None:
        self.nodes: list[Node] = list(nodes)
        self.current = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def increment_current_node(self) -> None:
        """Move to the next node, staying on the last one once reached."""
        if self.nodes and self.current < len(self.nodes) - 1:
            self.current += 1

    def current_node_position(self) -> Vec3:
        """Position of the current node, or the origin for an empty path."""
        if not self.nodes:
            return Vec3()
        return self.nodes[self.current].position