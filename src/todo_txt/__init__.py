"""Plain-text todo list manager."""

__version__ = "0.1.0"
