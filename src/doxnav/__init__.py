"""Navigation tree tables for generated documentation."""

from doxnav.errors import DoxnavError, MalformedDataError
from doxnav.table import NavEntry, NavTable

__version__ = "0.1.0"

__all__ = [
    "DoxnavError",
    "MalformedDataError",
    "NavEntry",
    "NavTable",
    "__version__",
]
