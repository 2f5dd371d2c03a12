"""Process-level helpers shared by entrypoints."""

from __future__ import annotations

import logging

from hex_tree.config import LOG_FORMAT


def configure_logging(level: int | str = logging.INFO, fmt: str = LOG_FORMAT):
    """Install a root stream handler; later calls only adjust the level."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=fmt)
    else:
        root.setLevel(level)
    return root
