import pytest

from ghostchase.body import Body
from ghostchase.decisions import in_jail
from ghostchase.level import (
    BLOCKED_COLOUR,
    BLOCKED_TILES,
    JAIL_COLOUR,
    JAIL_TILES,
    WALKABLE_COLOUR,
    Level,
)
from ghostchase.state_machine import StateName
from ghostchase.vector import Vec3


@pytest.fixture
def level():
    return Level()


def test_grid_shape(level):
    assert len(level.tiles) == 8
    assert len(level.tiles[0]) == 12
    assert len(level.nodes) == len(level.tiles) * len(level.tiles[0])
    assert level.graph.num_nodes() == len(level.nodes)


def test_tile_flags(level):
    assert all(level.tile_at(label).jail for label in JAIL_TILES)
    assert all(level.tile_at(label).blocked for label in BLOCKED_TILES)
    assert not level.tile_at(42).blocked
    assert not level.tile_at(42).jail


def test_tile_at_out_of_range(level):
    with pytest.raises(IndexError):
        level.tile_at(len(level.nodes))
    with pytest.raises(IndexError):
        level.tile_at(-1)


def test_fill_colours(level):
    assert level.tile_at(0).fill_colour() == JAIL_COLOUR
    assert level.tile_at(13).fill_colour() == BLOCKED_COLOUR
    assert level.tile_at(42).fill_colour() == WALKABLE_COLOUR


def test_jail_tiles_match_jail_positions(level):
    for label in JAIL_TILES:
        assert in_jail(level.tile_at(label).pos)
    assert not in_jail(level.tile_at(42).pos)


def test_blocked_tiles_are_never_entered(level):
    blocked = set(BLOCKED_TILES)
    entered = [
        neighbour
        for node in level.nodes
        for neighbour in level.graph.neighbours(node.label)
        if neighbour in blocked
    ]
    assert entered == []


def test_find_path_is_connected_and_walkable(level):
    route = level.find_path(85, 42)
    assert route[0].label == 85
    assert route[-1].label == 42
    cols = len(level.tiles[0])
    for a, b in zip(route, route[1:]):
        assert abs(a.label - b.label) in (1, cols)
        assert not level.tile_at(b.label).blocked


def test_projection_maps_corners(level):
    projection = level.projection_matrix(1000, 600)
    bottom_left = projection * Vec3(0.0, 0.0, 0.0)
    top_right = projection * Vec3(level.x_axis, level.y_axis, 0.0)
    assert bottom_left.x == pytest.approx(0.0)
    assert bottom_left.y == pytest.approx(600.0)
    assert top_right.x == pytest.approx(1000.0)
    assert top_right.y == pytest.approx(0.0)


def test_adjacent_tile_rects_touch(level):
    projection = level.projection_matrix(1000, 600)
    first = level.tile_at(0).screen_rect(projection)
    second = level.tile_at(1).screen_rect(projection)
    assert first.x == 0
    assert abs(second.x - (first.x + first.w)) <= 1
    assert first.w > 0 and first.h > 0


def test_spawn_characters(level):
    player = Body(pos=Vec3(20.0, 10.0, 0.0))
    characters = level.spawn_characters(player)
    assert len(characters) == 2
    assert level.characters == characters
    assert characters[0].position() == level.tile_at(85).pos
    assert characters[1].position() == level.tile_at(95).pos
    for character in characters:
        assert character.state_machine.current_state_name() is StateName.FOLLOWAPATH
        assert character.path.nodes[-1].label == 42


def test_tower_position(level):
    assert level.tower.pos == Vec3(16.0, 2.0, 0.0)