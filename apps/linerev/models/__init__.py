from .config import LOG_LEVELS, Config
from .result import ReversalResult

__all__ = ["Config", "LOG_LEVELS", "ReversalResult"]
