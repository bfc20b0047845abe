"""Printf-style formatting with character, output, string, memory and list helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "output", "strops", "memory", "lists", "formatter"]