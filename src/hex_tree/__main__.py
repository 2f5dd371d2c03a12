"""Module entrypoint for `python -m hex_tree`."""

from hex_tree.preview import run_preview
from hex_tree.runtime import configure_logging


if __name__ == "__main__":
    configure_logging()
    run_preview()
