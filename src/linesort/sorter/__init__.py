from .comparator import Comparator, dedupe_adjacent
from .engine import SorterEngine, SortResult
from .options import ConfigurationError, Mode, SortOptions

__all__ = [
    "Comparator",
    "ConfigurationError",
    "Mode",
    "SortOptions",
    "SortResult",
    "SorterEngine",
    "dedupe_adjacent",
]
