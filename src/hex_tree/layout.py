"""Fit a grown hex region onto a screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hex_tree.core.hex import Hex, Point

Bounds = tuple[float, float, float, float]


@dataclass(frozen=True)
class ViewTransform:
    """Uniform scale plus translation from world to screen pixels."""

    scale: float
    offset_x_px: float
    offset_y_px: float

    def to_screen(self, point: Point) -> Point:
        return (point[0] * self.scale + self.offset_x_px, point[1] * self.scale + self.offset_y_px)

    def points_to_screen(self, points: Iterable[Point]) -> list[Point]:
        return [self.to_screen(point) for point in points]


def world_bounds(hexes: Iterable[Hex]) -> Bounds:
    """Return ``(min_x, min_y, max_x, max_y)`` over all hex corners."""

    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")
    for hex_ in hexes:
        x, y = hex_.center
        min_x = min(min_x, x - hex_.width / 2)
        max_x = max(max_x, x + hex_.width / 2)
        min_y = min(min_y, y - hex_.height / 2)
        max_y = max(max_y, y + hex_.height / 2)
    if min_x > max_x:
        raise ValueError("cannot compute bounds of an empty hex set")
    return (min_x, min_y, max_x, max_y)


def compute_best_fit_view(
    hexes: Iterable[Hex],
    screen_width_px: int,
    screen_height_px: int,
    bottom_bar_height_px: int = 0,
    margin_px: int = 0,
    max_scale: float | None = None,
) -> ViewTransform:
    """Scale and center the region inside the area above the bottom bar."""

    available_width = int(screen_width_px) - 2 * int(margin_px)
    available_height = int(screen_height_px) - int(bottom_bar_height_px) - 2 * int(margin_px)
    if available_width < 1 or available_height < 1:
        raise ValueError("screen dimensions must leave positive drawing area")

    min_x, min_y, max_x, max_y = world_bounds(hexes)
    scale = min(available_width / (max_x - min_x), available_height / (max_y - min_y))
    if max_scale is not None:
        scale = min(scale, float(max_scale))

    center_x = (min_x + max_x) / 2
    center_y = (min_y + max_y) / 2
    screen_center_x = screen_width_px / 2
    screen_center_y = bottom_bar_height_px + (screen_height_px - bottom_bar_height_px) / 2
    return ViewTransform(
        scale=scale,
        offset_x_px=screen_center_x - center_x * scale,
        offset_y_px=screen_center_y - center_y * scale,
    )


__all__ = [
    "ViewTransform",
    "world_bounds",
    "compute_best_fit_view",
]
