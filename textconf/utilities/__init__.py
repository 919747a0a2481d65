"""Utilities - logging."""

from textconf.utilities.logging import setup_logging

__all__ = ["setup_logging"]
