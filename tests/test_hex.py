import pytest

from hex_tree.core import Direction, Hex
from hex_tree.core.hex import bucket_of


def default_hex():
    return Hex((1.0, 1.0), (2.0, 1.0))


def test_neighbor_order_is_canonical():
    assert list(Direction) == [
        Direction.TOP,
        Direction.RIGHT_TOP,
        Direction.RIGHT_BOT,
        Direction.BOT,
        Direction.LEFT_BOT,
        Direction.LEFT_TOP,
    ]
    h = default_hex()
    assert list(h.neighbors()) == [h.neighbor(direction) for direction in Direction]


def test_neighbor_offsets():
    h = Hex((10.0, 20.0), (4.0, 2.0))
    assert h.neighbor(Direction.TOP).center == (10.0, 22.0)
    assert h.neighbor(Direction.RIGHT_TOP).center == (13.0, 21.0)
    assert h.neighbor(Direction.RIGHT_BOT).center == (13.0, 19.0)
    assert h.neighbor(Direction.BOT).center == (10.0, 18.0)
    assert h.neighbor(Direction.LEFT_BOT).center == (7.0, 19.0)
    assert h.neighbor(Direction.LEFT_TOP).center == (7.0, 21.0)


def test_neighbors_restart_each_call():
    h = default_hex()
    first = h.neighbors()
    next(first)
    assert len(list(h.neighbors())) == 6
    assert len(set(h.neighbors())) == 6
    assert h not in set(h.neighbors())


@pytest.mark.parametrize("direction", list(Direction))
def test_neighbor_round_trip(direction):
    for size in [(2.0, 1.0), (0.1, 0.3), (19.0, 17.0), (1.7, 2.9)]:
        h = Hex((0.3, 0.7), size)
        back = h.neighbor(direction).neighbor(direction.opposite)
        assert back == h
        assert hash(back) == hash(h)


def test_long_walk_returns_to_start():
    h = Hex((0.1, 0.2), (0.3, 0.7))
    walked = h
    for _ in range(500):
        walked = walked.neighbor(Direction.RIGHT_TOP).neighbor(Direction.TOP)
    for _ in range(500):
        walked = walked.neighbor(Direction.BOT).neighbor(Direction.LEFT_BOT)
    assert walked == h
    assert walked.center == pytest.approx(h.center)


def test_equality_uses_bucket_and_size():
    size = (19.0, 17.0)
    a = Hex((38.0, 25.5), size)
    assert a == Hex((38.0 + 1e-9, 25.5 + 1e-9), size)
    assert hash(a) == hash(Hex((38.0 + 1e-9, 25.5 + 1e-9), size))
    assert a != Hex((38.0, 25.5), (19.0, 17.5))
    assert a != a.neighbor(Direction.TOP)
    assert a != (38.0, 25.5)


def test_independent_construction_matches_walk():
    size = (19.0, 17.0)
    start = Hex((9.5, 8.5), size)
    walked = start.neighbor(Direction.RIGHT_TOP).neighbor(Direction.RIGHT_TOP).neighbor(Direction.TOP)
    assert walked.center == (38.0, 42.5)
    assert walked == Hex((38.0, 42.5), size)


def test_is_adjacent():
    h = default_hex()
    for neighbor in h.neighbors():
        assert h.is_adjacent(neighbor)
        assert neighbor.is_adjacent(h)
    assert not h.is_adjacent(h)
    far = h.neighbor(Direction.TOP).neighbor(Direction.TOP)
    assert not h.is_adjacent(far)


def test_opposite_directions():
    assert Direction.TOP.opposite is Direction.BOT
    assert Direction.RIGHT_TOP.opposite is Direction.LEFT_BOT
    assert Direction.RIGHT_BOT.opposite is Direction.LEFT_TOP
    for direction in Direction:
        assert direction.opposite.opposite is direction


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Hex((0.0, 0.0), (0.0, 1.0))
    with pytest.raises(ValueError):
        Hex((0.0, 0.0), (1.0, -1.0))


def test_top():
    h = default_hex()
    assert h.neighbor(Direction.TOP).bot_left() == h.top_left()
    assert h.neighbor(Direction.TOP).bot_right() == h.top_right()


def test_top_right():
    h = default_hex()
    assert h.neighbor(Direction.RIGHT_TOP).bot_left() == h.right()
    assert h.neighbor(Direction.RIGHT_TOP).left() == h.top_right()


def test_bot_right():
    h = default_hex()
    assert h.neighbor(Direction.RIGHT_BOT).top_left() == h.right()
    assert h.neighbor(Direction.RIGHT_BOT).left() == h.bot_right()


def test_bot():
    h = default_hex()
    assert h.neighbor(Direction.BOT).top_left() == h.bot_left()
    assert h.neighbor(Direction.BOT).top_right() == h.bot_right()


def test_bot_left():
    h = default_hex()
    assert h.neighbor(Direction.LEFT_BOT).right() == h.bot_left()
    assert h.neighbor(Direction.LEFT_BOT).top_right() == h.left()


def test_top_left():
    h = default_hex()
    assert h.neighbor(Direction.LEFT_TOP).right() == h.top_left()
    assert h.neighbor(Direction.LEFT_TOP).bot_right() == h.left()


@pytest.mark.parametrize("direction", list(Direction))
def test_shared_edge_matches_neighbor(direction):
    h = default_hex()
    a, b = h.edge(direction)
    assert set(h.neighbor(direction).edge(direction.opposite)) == {a, b}


def test_vertices_counter_clockwise_from_right():
    h = default_hex()
    vertices = h.vertices()
    assert len(vertices) == 6
    assert vertices[0] == h.right()
    assert vertices[3] == h.left()
    area = 0.0
    for i, (x1, y1) in enumerate(vertices):
        x2, y2 = vertices[(i + 1) % 6]
        area += x1 * y2 - x2 * y1
    assert area > 0


def test_boundary_centers_snap_to_their_block():
    size = (0.1, 0.1)
    assert bucket_of((0.07500000000000001, -0.15000000000000002), size) == (1, -3)
    assert bucket_of((0.075 - 1e-3, -0.15 - 1e-3), size) == (0, -4)
    assert Hex((0.0, 0.0), size).neighbor(Direction.RIGHT_BOT).neighbor(Direction.BOT) == Hex(
        (0.07500000000000001, -0.15000000000000002), size
    )
