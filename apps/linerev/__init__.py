"""Reverse the first line of input.txt into output.txt."""

from .core import LineReverser, LineReverserError, read_first_line, reverse_line

__all__ = ["LineReverser", "LineReverserError", "read_first_line", "reverse_line"]
