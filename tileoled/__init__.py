"""Tile-based monochrome display toolkit: panel drivers, a text display, text and number helpers, button debouncing and menus."""

__version__ = "0.1.0"

__all__ = ["debounce", "display", "lines", "numfmt", "ssd1306", "stdio_display", "ui"]