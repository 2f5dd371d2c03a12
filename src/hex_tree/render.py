"""Arcade-based rendering of a grown hex tree."""

from __future__ import annotations

import arcade

from hex_tree.boards import collect_border_segments
from hex_tree.boards.hex_specs import HexRenderSpec
from hex_tree.config import (
    BB_HEIGHT,
    COLOR_AMBER,
    COLOR_AQUA,
    COLOR_CHARCOAL,
    COLOR_CORAL,
    COLOR_DEEP_TEAL,
    COLOR_NEAR_BLACK,
    COLOR_SLATE_GRAY,
    COLOR_SOFT_WHITE,
    SCREEN_WIDTH,
)
from hex_tree.layout import ViewTransform


def draw_frame(window, status_text, tree, transform: ViewTransform, render_spec: HexRenderSpec, latest=None):
    window.clear(color=COLOR_CHARCOAL)
    hexes = list(tree)

    for hex_ in hexes:
        x, y = transform.to_screen(hex_.center)
        points = transform.points_to_screen(hex_.vertices())
        filled = _scaled_hex_points(points, x, y, render_spec.cell_fill_scale)
        arcade.draw_polygon_filled(filled, COLOR_DEEP_TEAL)
        arcade.draw_polygon_outline(points, COLOR_SLATE_GRAY, render_spec.grid_line_width_px)

    for parent, child in tree.edges():
        x1, y1 = transform.to_screen(parent.center)
        x2, y2 = transform.to_screen(child.center)
        arcade.draw_line(x1, y1, x2, y2, COLOR_AQUA, render_spec.link_line_width_px)

    for start, end in collect_border_segments(hexes):
        x1, y1 = transform.to_screen(start)
        x2, y2 = transform.to_screen(end)
        arcade.draw_line(x1, y1, x2, y2, COLOR_SOFT_WHITE, render_spec.border_line_width_px)

    _draw_marker(tree.root, transform, render_spec.root_marker_radius_scale, COLOR_CORAL)
    if latest is not None:
        _draw_marker(latest, transform, render_spec.latest_marker_radius_scale, COLOR_AMBER)

    draw_bottom_bar(status_text, BB_HEIGHT)


def draw_bottom_bar(status_text, bar_height):
    arcade.draw_lbwh_rectangle_filled(0, 0, SCREEN_WIDTH, bar_height, COLOR_NEAR_BLACK)
    status_text.x = (SCREEN_WIDTH - float(status_text.content_width)) / 2.0
    status_text.y = bar_height / 2.0
    status_text.draw()


def _draw_marker(hex_, transform, radius_scale, color):
    x, y = transform.to_screen(hex_.center)
    radius = max(2.0, min(hex_.width, hex_.height) * transform.scale * radius_scale)
    arcade.draw_circle_filled(x, y, radius, color)


def _scaled_hex_points(points, cx, cy, scale):
    return [(cx + (px - cx) * scale, cy + (py - cy) * scale) for px, py in points]
