"""Building blocks for a terminal console game and its typed, line-oriented save files."""

__version__ = "0.1.0"

__all__ = [
    "connect",
    "devices",
    "document",
    "intro",
    "log",
    "login",
    "paths",
    "prompts",
    "reader",
    "writer",
]