"""Custom exceptions for doxnav."""


class DoxnavError(Exception):
    """Base exception for doxnav operations."""


class MalformedDataError(DoxnavError, ValueError):
    """Navigation data does not have the entry/table shape."""
