"""Interactive window that grows a hex tree a few cells per frame."""

from __future__ import annotations

import logging
import random

import arcade

import hex_tree.render as ui
from hex_tree.boards import HEX_RENDER_STANDARD, TREE_BOARD_SPARSE, TREE_BOARD_STANDARD
from hex_tree.config import (
    BB_HEIGHT,
    COLOR_SOFT_WHITE,
    FONT_SIZE_STATUS,
    FPS,
    HEXES_PER_FRAME,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    VIEW_MARGIN_PX,
    WINDOW_TITLE,
)
from hex_tree.core import HexField, RandHexTree
from hex_tree.layout import compute_best_fit_view

logger = logging.getLogger(__name__)

BOARD_PRESETS = (TREE_BOARD_STANDARD, TREE_BOARD_SPARSE)


class TreePreviewWindow(arcade.Window):
    def __init__(self, board_spec=TREE_BOARD_STANDARD, render_spec=HEX_RENDER_STANDARD):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, update_rate=1 / FPS)
        self.render_spec = render_spec
        self.status_text = arcade.Text(
            "",
            0,
            0,
            COLOR_SOFT_WHITE,
            FONT_SIZE_STATUS,
            anchor_x="left",
            anchor_y="center",
        )
        self.engine = None
        self.latest = None
        self.use_board(board_spec)

    def use_board(self, board_spec):
        self.board_spec = board_spec
        self.seed = board_spec.seed if board_spec.seed is not None else random.randrange(2**32)
        self.restart()

    def restart(self):
        field = HexField(self.board_spec.field_config())
        seed_hex = field.hex_at(*self.board_spec.start_point)
        self.engine = RandHexTree.with_capacity(
            seed_hex,
            self.board_spec.forbid_prob,
            random.Random(self.seed),
            self.board_spec.cell_count,
        )
        self.latest = seed_hex
        logger.info("Growing %d hexes with seed %d", self.board_spec.cell_count, self.seed)

    def on_update(self, delta_time):
        remaining = self.board_spec.cell_count - len(self.engine)
        if remaining <= 0:
            return
        grown = self.engine.add_hexes(min(remaining, HEXES_PER_FRAME))
        self.latest = grown[-1]

    def on_draw(self):
        tree = self.engine.tree
        transform = compute_best_fit_view(
            tree,
            SCREEN_WIDTH,
            SCREEN_HEIGHT,
            bottom_bar_height_px=BB_HEIGHT,
            margin_px=VIEW_MARGIN_PX,
            max_scale=2.0,
        )
        self.status_text.text = (
            f"Seed: {self.seed}   /   Hexes: {len(tree)}/{self.board_spec.cell_count}"
            f"   /   Frontier: {self.engine.frontier_size}   /   Forbidden: {len(self.engine.forbidden)}"
        )
        ui.draw_frame(self, self.status_text, tree, transform, self.render_spec, latest=self.latest)

    def on_key_press(self, symbol, modifiers):
        if symbol == arcade.key.SPACE:
            self.seed += 1
            self.restart()
        elif symbol == arcade.key.TAB:
            self.use_board(next_preset(self.board_spec))
        elif symbol == arcade.key.ESCAPE:
            self.close()


def next_preset(board_spec):
    """Return the preset after ``board_spec``, wrapping around."""

    if board_spec not in BOARD_PRESETS:
        return BOARD_PRESETS[0]
    return BOARD_PRESETS[(BOARD_PRESETS.index(board_spec) + 1) % len(BOARD_PRESETS)]


def run_preview(board_spec=TREE_BOARD_STANDARD):
    TreePreviewWindow(board_spec)
    arcade.run()


if __name__ == "__main__":
    run_preview()
