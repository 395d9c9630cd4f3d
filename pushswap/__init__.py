"""push_swap stacks and operations, input parsing, and string, byte, list and output helpers."""

__version__ = "1.0.0"
__all__ = [
    "chars",
    "ftprintf",
    "linkedlist",
    "memory",
    "numbers",
    "output",
    "parsing",
    "stacks",
    "strings",
]