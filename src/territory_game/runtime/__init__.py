"""Runtime helpers for the territory game."""

from .helpers import configure_logging

__all__ = ["configure_logging"]
