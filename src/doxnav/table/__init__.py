"""Navigation table model, loading and serialization."""

from doxnav.table.load import load_table, parse_table
from doxnav.table.model import NavEntry, NavTable

__all__ = ["NavEntry", "NavTable", "load_table", "parse_table"]
