"""Word-frequency tag cloud generator."""

__version__ = "0.1.0"
