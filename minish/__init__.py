"""A small interactive shell front end with quote-aware parsing and helpers."""

__version__ = "0.1.0"