"""Runtime helpers for Hex Tree."""

from .helpers import configure_logging

__all__ = ["configure_logging"]
