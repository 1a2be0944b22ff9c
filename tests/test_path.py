from ghostchase.path import Node, Path
from ghostchase.vector import Vec3


def _nodes():
    return [
        Node(0, Vec3(1.0, 1.0, 0.0)),
        Node(1, Vec3(2.0, 1.0, 0.0)),
        Node(2, Vec3(3.0, 1.0, 0.0)),
    ]


def test_node_holds_label_and_position():
    n = Node(7, Vec3(1.5, 2.5, 0.0))
    assert n.label == 7
    assert n.position == Vec3(1.5, 2.5, 0.0)


def test_empty_path_position_is_origin():
    p = Path([])
    assert p.current_node_position() == Vec3()


def test_empty_path_increment_stays_at_origin():
    p = Path([])
    p.increment_current_node()
    assert p.current_node_position() == Vec3()
    assert p.current == 0


def test_path_starts_at_first_node():
    nodes = _nodes()
    p = Path(nodes)
    assert p.current_node_position() == nodes[0].position


def test_increment_moves_to_next_node():
    nodes = _nodes()
    p = Path(nodes)
    p.increment_current_node()
    assert p.current_node_position() == nodes[1].position


def test_increment_stops_at_last_node():
    nodes = _nodes()
    p = Path(nodes)
    for _ in range(10):
        p.increment_current_node()
    assert p.current_node_position() == nodes[-1].position
    assert p.current == len(nodes) - 1


def test_path_keeps_its_own_list():
    nodes = _nodes()
    p = Path(nodes)
    nodes.clear()
    assert len(p) == 3