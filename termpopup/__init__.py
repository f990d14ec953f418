"""Popups, bordered panels and display-width text helpers for in-memory terminal cell buffers."""

__version__ = "0.1.0"
__all__ = ["canvas", "popup", "presets", "text", "theme", "widgets"]