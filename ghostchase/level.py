"""The game level: a grid of tiles, the graph over them, and the ghosts placed on it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from ghostchase.body import Body
from ghostchase.character import Character
from ghostchase.graph import Graph
from ghostchase.matrix import Matrix4, orthographic, viewport_ndc
from ghostchase.path import Node, Path
from ghostchase.vector import Vec3

Colour = tuple[int, int, int, int]

WALKABLE_COLOUR: Colour = (17, 138, 178, 255)
BLOCKED_COLOUR: Colour = (0, 0, 0, 0)
JAIL_COLOUR: Colour = (128, 128, 128, 128)
BORDER_COLOUR: Colour = (255, 255, 255, 255)

JAIL_TILES: tuple[int, ...] = (0, 11, 84, 95)
"""Labels of the four corner jail tiles."""

BLOCKED_TILES: tuple[int, ...] = (
    13, 15, 16, 17, 18, 19, 20, 22,  # bottom
    37, 39, 49, 51,                  # left
    44, 46, 56, 58,                  # right
    73, 75, 76, 77, 78, 79, 80, 82,  # top
)
"""Labels of the tiles that cannot be walked on."""

SPAWN_ROUTES: tuple[tuple[int, int], ...] = ((85, 42), (95, 42))
"""Start and goal labels of the path each ghost follows."""

TOWER_POSITION = Vec3(16.0, 2.0, 0.0)


class Rect(NamedTuple):
    """An integer screen rectangle; x, y is the top-left corner."""

    x: int
    y: int
    w: int
    h: int


@dataclass
class Tile:
    """One cell of the level grid, centred on its node."""

    node: Node
    width: float
    height: float
    blocked: bool = False
    jail: bool = False

    @property
    def pos(self) -> Vec3:
        return self.node.position

    def screen_rect(self, projection: Matrix4) -> Rect:
        """The tile's extent in screen pixels under the given projection."""
        top_left = projection * Vec3(
            self.pos.x - 0.5 * self.width, self.pos.y + 0.5 * self.height, 0.0
        )
        bottom_right = projection * Vec3(
            self.pos.x + 0.5 * self.width, self.pos.y - 0.5 * self.height, 0.0
        )
        return Rect(
            int(top_left.x),
            int(top_left.y),
            int(bottom_right.x - top_left.x),
            int(bottom_right.y - top_left.y),
        )

    def fill_colour(self) -> Colour:
        """The colour the tile is filled with; jail wins over blocked."""
        if self.jail:
            return JAIL_COLOUR
        if self.blocked:
            return BLOCKED_COLOUR
        return WALKABLE_COLOUR


class Level:
    """A tiled world with a walkable graph, a tower, and the ghosts on it."""

    def __init__(
        self,
        x_axis: float = 25.0,
        y_axis: float = 15.0,
        tile_width: float = 2.1,
        tile_height: float = 1.9,
        blocked_tiles: Iterable[int] = BLOCKED_TILES,
        jail_tiles: Iterable[int] = JAIL_TILES,
    ) -> None:
        self.x_axis = x_axis
        self.y_axis = y_axis
        self.tile_width = tile_width
        self.tile_height = tile_height
        blocked = set(blocked_tiles)
        jail = set(jail_tiles)

        self.cols = math.ceil((x_axis - 0.5 * tile_width) / tile_width)
        self.rows = math.ceil((y_axis - 0.5 * tile_height) / tile_height)

        self.nodes: list[Node] = []
        self.tiles: list[list[Tile]] = []
        for i in range(self.rows):
            row: list[Tile] = []
            for j in range(self.cols):
                label = i * self.cols + j
                node = Node(
                    label, Vec3((j + 0.5) * tile_width, (i + 0.5) * tile_height, 0.0)
                )
                self.nodes.append(node)
                row.append(
                    Tile(node, tile_width, tile_height, label in blocked, label in jail)
                )
            self.tiles.append(row)

        self.graph = Graph(self.nodes)
        self._connect()

        self.tower = Body(pos=Vec3(*TOWER_POSITION), mass=0.0)
        self.characters: list[Character] = []

    def _connect(self) -> None:
        """Link each tile to its walkable orthogonal neighbours."""
        for i, row in enumerate(self.tiles):
            for j, tile in enumerate(row):
                candidates = (
                    (i, j - 1, self.tile_width),
                    (i, j + 1, self.tile_width),
                    (i + 1, j, self.tile_height),
                    (i - 1, j, self.tile_height),
                )
                for ni, nj, weight in candidates:
                    if 0 <= ni < self.rows and 0 <= nj < self.cols:
                        other = self.tiles[ni][nj]
                        if not other.blocked:
                            self.graph.add_weight_connection(
                                tile.node.label, other.node.label, weight
                            )

    def tile_at(self, label: int) -> Tile:
        """The tile whose node has the given label."""
        if not 0 <= label < self.rows * self.cols:
            raise IndexError(f"no tile with label {label}")
        row, col = divmod(label, self.cols)
        return self.tiles[row][col]

    def find_path(self, start: int, goal: int) -> list[Node]:
        """Cheapest walkable route of nodes from start to goal."""
        return self.graph.dijkstra(start, goal)

    def projection_matrix(self, width: int, height: int) -> Matrix4:
        """World-to-screen transform for a window of the given pixel size."""
        ortho = orthographic(0.0, self.x_axis, 0.0, self.y_axis, 0.0, 1.0)
        return viewport_ndc(width, height) * ortho

    def spawn_characters(self, player: Body) -> list[Character]:
        """Create the ghosts, each on the start of its route and following it."""
        characters: list[Character] = []
        for start, goal in SPAWN_ROUTES:
            route = self.find_path(start, goal)
            if not route:
                raise ValueError(f"no path from {start} to {goal}")
            character = Character(player=player)
            character.build_state_machine()
            character.set_path(Path(route))
            character.set_spawn_point(route[0])
            characters.append(character)
        self.characters = characters
        return characters