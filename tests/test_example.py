"""Example tests for the doxnav package."""

import re

from doxnav import __version__


def test_version() -> None:
    """Test that version is defined and follows semver format."""
    assert re.match(r"^\d+\.\d+\.\d+", __version__)
