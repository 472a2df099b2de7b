"""XPM image reading with X11 colour names, and small text, number, byte and line helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "colors",
    "linereader",
    "memory",
    "numbers",
    "output",
    "text",
    "wordtab",
    "xpm",
]