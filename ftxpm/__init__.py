"""An XPM image parser with string, character, memory, list, output and line utilities."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "colors",
    "lines",
    "linked",
    "memory",
    "output",
    "strings",
    "wordtab",
    "xpm",
]