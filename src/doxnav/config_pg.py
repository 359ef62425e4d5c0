"""Navigation table of the project setup guide."""

from __future__ import annotations

from functools import cache

from doxnav.table.load import parse_table
from doxnav.table.model import NavEntry

NAME = "config_pg"

# [title, target, children]; a string in the children slot names the child
# table authored in its own file.
CONFIG_PG = [
    ["Assumptions", "config_pg.html#directory_spec", None],
    ["Important notes", "config_pg.html#important_notes", None],
    ["Create project and add software components", "sdk_proj.html", None],
    ["Copy source files to project", "source_files.html", None],
    ["Configure the project", "config_project.html", None],
    ["Configure I/O pins and clock", "config_pinclock.html", [
        ["Prerequisites", "config_pinclock.html#config_pinclock_pre", None],
        ["Use the tools", "config_pinclock.html#config_pinclock_use", None],
    ]],
    ["Configure CMSIS-Drivers", "config_drivers.html", "config_drivers"],
    ["Add user code", "implement_code.html", None],
    ["printf retargeting", "printf_retargeting.html", None],
    ["Build and debug the application", "debug.html", [
        ["Linker scripts for Event Recorder", "debug.html#debug_evr", None],
        ["Build the project", "debug.html#build_prj", None],
        ["Debug the application", "debug.html#debug_prj", None],
    ]],
]  # fmt: skip


@cache
def load() -> tuple[NavEntry, ...]:
    """Return the top-level entries exactly as authored.

    Raises:
        MalformedDataError: If the literal is not a well-formed table.
    """
    return parse_table(CONFIG_PG, NAME)
