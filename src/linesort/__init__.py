from .__about__ import __title__, __version__
from .sorter import Comparator, ConfigurationError, Mode, SortOptions, SorterEngine, SortResult

__all__ = [
    "__title__",
    "__version__",
    "Comparator",
    "ConfigurationError",
    "Mode",
    "SortOptions",
    "SorterEngine",
    "SortResult",
]
