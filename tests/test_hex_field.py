import pytest

from hex_tree.core import Hex, HexField, HexFieldConfig, hex_center_by_containing_point


def default_hex_field():
    return HexField(HexFieldConfig(width=19.0, height=17.0, offset_x=9.5, offset_y=8.5))


def test_hex_center_regression_points():
    hf = default_hex_field()
    assert hf.hex_center_by_containing_point(45.0, 23.0) == (38.0, 25.5)
    assert hf.hex_center_by_containing_point(45.0, 22.0) == (38.0, 25.5)
    assert hf.hex_center_by_containing_point(45.0, 18.0) == (52.25, 17.0)
    assert hf.hex_center_by_containing_point(-23.0, -42.0) == (-19.0, -42.5)


def test_module_level_classifier():
    config = HexFieldConfig.centered(19.0, 17.0)
    assert config == default_hex_field().config
    assert hex_center_by_containing_point((45.0, 23.0), config) == (38.0, 25.5)


def test_hex_center_contains_itself():
    hf = default_hex_field()
    for center in [(38.0, 25.5), (52.25, 17.0), (-19.0, -42.5), (9.5, 8.5)]:
        assert hf.hex_center_by_containing_point(*center) == center


def test_points_near_center_resolve_to_same_hex():
    hf = default_hex_field()
    cx, cy = 38.0, 25.5
    for dx, dy in [(4.0, 0.0), (-4.0, 0.0), (0.0, 7.0), (0.0, -7.0), (3.0, 5.0), (-3.0, -5.0)]:
        assert hf.hex_center_by_containing_point(cx + dx, cy + dy) == (cx, cy)


def test_neighbor_centers_classify_to_neighbors():
    hf = default_hex_field()
    start = hf.hex_at(45.0, 23.0)
    for neighbor in start.neighbors():
        assert hf.hex_at(*neighbor.center) == neighbor
        assert hf.hex_center_by_containing_point(*neighbor.center) == pytest.approx(neighbor.center)


def test_hex_at_uses_field_size():
    hf = default_hex_field()
    assert hf.hex_size() == (19.0, 17.0)
    assert hf.unit_size() == (14.25, 8.5)
    assert hf.hex_at(45.0, 23.0) == Hex((38.0, 25.5), (19.0, 17.0))


def test_default_config():
    hf = HexField()
    assert hf.hex_size() == (1.0, 1.0)
    assert hf.hex_center_by_containing_point(0.1, 0.1) == (0.0, 0.0)


def test_invalid_field_size_raises():
    with pytest.raises(ValueError):
        HexFieldConfig(width=0.0, height=1.0)
