"""Serialization of navigation entries back to their authored formats."""

from __future__ import annotations

import io
import json
from collections.abc import Callable, Sequence
from typing import Any

from ruamel.yaml import YAML

from doxnav.table.model import NavEntry

NAVTREE_INDENT = 4
NESTED_INDENT = 2


def _children_literal(
    entry: NavEntry, convert: Callable[[Sequence[NavEntry]], Any]
) -> Any:
    if isinstance(entry.children, tuple):
        return convert(entry.children)
    return entry.children


def to_literal(entries: Sequence[NavEntry]) -> list[list[Any]]:
    """Convert entries to nested ``[title, target, children]`` lists."""
    return [
        [entry.title, entry.target, _children_literal(entry, to_literal)]
        for entry in entries
    ]


def to_records(entries: Sequence[NavEntry]) -> list[dict[str, Any]]:
    """Convert entries to nested ``title``/``target``/``children`` mappings."""
    return [
        {
            "title": entry.title,
            "target": entry.target,
            "children": _children_literal(entry, to_records),
        }
        for entry in entries
    ]


def _js_string(value: str | None) -> str:
    if value is None:
        return "null"
    return json.dumps(value, ensure_ascii=False)


def _navtree_lines(entries: Sequence[NavEntry], indent: int) -> list[str]:
    """Render sibling entries, one block per entry, comma separated."""
    pad = " " * indent
    blocks: list[list[str]] = []
    for entry in entries:
        head = f"{pad}[ {_js_string(entry.title)}, {_js_string(entry.target)}, "
        if entry.subentries:
            block = [head + "["]
            block.extend(_navtree_lines(entry.subentries, indent + NESTED_INDENT))
            block.append(f"{pad}] ]")
        elif isinstance(entry.children, tuple):
            block = [head + "[] ]"]
        else:
            block = [head + _js_string(entry.children) + " ]"]
        blocks.append(block)

    lines: list[str] = []
    for i, block in enumerate(blocks):
        if i < len(blocks) - 1:
            block[-1] += ","
        lines.extend(block)
    return lines


def dump_navtree_js(name: str, entries: Sequence[NavEntry]) -> str:
    """Render entries as a Doxygen navtree script.

    Args:
        name: JavaScript variable name (Doxygen uses the file stem).
        entries: Top-level entries.

    Returns:
        Script text ending with a newline.
    """
    lines = [f"var {name} =", "["]
    lines.extend(_navtree_lines(entries, NAVTREE_INDENT))
    lines.append("];")
    return "\n".join(lines) + "\n"


def dump_json(entries: Sequence[NavEntry], records: bool = True) -> str:
    """Render entries as JSON, as mappings or as Doxygen-style triples."""
    data = to_records(entries) if records else to_literal(entries)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def dump_yaml(entries: Sequence[NavEntry]) -> str:
    """Render entries as a YAML list of mappings.

    Null targets and children are written as empty values.
    """
    yaml = YAML()
    yaml.default_flow_style = False
    stream = io.StringIO()
    yaml.dump(to_records(entries), stream)
    return stream.getvalue()
