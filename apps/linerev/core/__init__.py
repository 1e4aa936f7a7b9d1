from .config import ConfigManager
from .logger import StructuredLogger
from .reverser import LineReverser, LineReverserError, read_first_line, reverse_line

__all__ = ["ConfigManager", "StructuredLogger", "LineReverser", "LineReverserError", "read_first_line", "reverse_line"]
