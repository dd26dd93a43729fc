"""Typed key/value configuration loader."""

__version__ = "0.1.0"
