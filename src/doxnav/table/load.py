"""Table loading from Doxygen navtree scripts, JSON and YAML."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError as RuamelYAMLError

from doxnav.errors import MalformedDataError
from doxnav.table.derive import resolve_children
from doxnav.table.model import Children, NavEntry, NavTable

TABLE_SUFFIXES = (".js", ".json", ".yml", ".yaml")

_ENTRY_KEYS = frozenset({"title", "target", "children"})
_NAVTREE_RE = re.compile(r"^\s*var\s+(?P<name>[A-Za-z_$][\w$]*)\s*=\s*")
_TRAILER_RE = re.compile(r"\s*;?(?:\s*(?://[^\n]*|/\*.*?\*/))*\s*\Z", re.DOTALL)
_JSON_DECODER = json.JSONDecoder()
_LEADING_COMMENT_RE = re.compile(r"^\s*(?:/\*.*?\*/|//[^\n]*)", re.DOTALL)
_REF_RE = re.compile(r"^[\w$][\w$.-]*$")


def parse_table(raw: Any, name: str = "table") -> tuple[NavEntry, ...]:
    """Validate a raw nested literal and build navigation entries.

    Each entry is either a ``[title, target, children]`` sequence, as
    Doxygen writes it, or a mapping with a ``title`` key and optional
    ``target`` and ``children`` keys.

    Args:
        raw: Parsed literal (a list of entries).
        name: Table name used to locate errors (e.g. ``config_pg[5].children[1]``).

    Returns:
        Top-level entries in authored order.

    Raises:
        MalformedDataError: If any part of the literal has the wrong shape.
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise MalformedDataError(
            f"{name}: table must be a list of entries, got {type(raw).__name__}"
        )
    return tuple(_parse_entry(item, f"{name}[{i}]") for i, item in enumerate(raw))


def _parse_entry(item: Any, where: str) -> NavEntry:
    """Build one entry, recursing into inline children."""
    if isinstance(item, Mapping):
        unknown = set(item) - _ENTRY_KEYS
        if unknown:
            keys = ", ".join(sorted(str(key) for key in unknown))
            raise MalformedDataError(f"{where}: unknown entry keys: {keys}")
        if "title" not in item:
            raise MalformedDataError(f"{where}: entry has no title")
        title, target, children = (
            item["title"],
            item.get("target"),
            item.get("children"),
        )
    elif isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
        if len(item) != 3:
            raise MalformedDataError(
                f"{where}: entry must have 3 items [title, target, children], "
                f"got {len(item)}"
            )
        title, target, children = item
    else:
        raise MalformedDataError(
            f"{where}: entry must be a [title, target, children] list or a mapping, "
            f"got {type(item).__name__}"
        )

    if not isinstance(title, str) or not title.strip():
        raise MalformedDataError(
            f"{where}: title must be a non-empty string, got {title!r}"
        )
    if target is not None and not isinstance(target, str):
        raise MalformedDataError(
            f"{where}: target must be a string or null, got {type(target).__name__}"
        )
    return NavEntry(
        title=title, target=target, children=_parse_children(children, where)
    )


def _parse_children(children: Any, where: str) -> Children:
    if children is None:
        return None
    if isinstance(children, str):
        # Child table authored in its own file
        if not _REF_RE.match(children):
            raise MalformedDataError(
                f"{where}: invalid child table reference {children!r}"
            )
        return children
    if isinstance(children, Sequence) and not isinstance(children, bytes):
        return parse_table(children, f"{where}.children")
    raise MalformedDataError(
        f"{where}: children must be a list, a table name or null, "
        f"got {type(children).__name__}"
    )


def _strip_trailer(body: str) -> str:
    """Drop the closing ``;`` and any comments after it."""
    head, sep, tail = body.rpartition(";")
    if sep and _TRAILER_RE.match(tail):
        return head
    return body


def parse_navtree_js(text: str) -> tuple[str, Any]:
    """Split a Doxygen navtree script into its variable name and literal.

    Doxygen writes ``var config_pg = [ [ "Title", "page.html", null ], ... ];``,
    optionally surrounded by comments. The array literal is JSON; hand-edited
    literals that are not (single quotes, trailing commas) are read as a YAML
    flow sequence instead.

    Raises:
        MalformedDataError: If the script is not a single ``var`` assignment
            or its literal cannot be parsed.
    """
    while match := _LEADING_COMMENT_RE.match(text):
        text = text[match.end() :]

    match = _NAVTREE_RE.match(text)
    if match is None:
        raise MalformedDataError(
            "Navtree script must be a 'var <name> = [...];' assignment"
        )
    body = text[match.end() :]

    try:
        raw, end = _JSON_DECODER.raw_decode(body)
    except json.JSONDecodeError:
        try:
            raw = yaml.load(_strip_trailer(body), Loader=yaml.SafeLoader)
        except yaml.YAMLError as exc:
            raise MalformedDataError(f"Cannot parse navtree literal: {exc}") from exc
    else:
        if not _TRAILER_RE.match(body, end):
            raise MalformedDataError(
                "Cannot parse navtree literal: unexpected content after the array"
            )
    return match.group("name"), raw


def _read_raw(path: Path) -> tuple[str, Any]:
    """Read a table file and return its name and raw literal."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedDataError(f"Table file has encoding errors: {path}") from exc

    if path.suffix == ".js":
        return parse_navtree_js(text)

    if path.suffix == ".json":
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDataError(f"Cannot parse table file {path}: {exc}") from exc
        return path.stem, raw

    # Read with the same YAML 1.2 library that dump_yaml writes with
    try:
        raw = YAML(typ="safe", pure=True).load(text)
    except RuamelYAMLError as exc:
        raise MalformedDataError(f"Cannot parse table file {path}: {exc}") from exc
    return path.stem, raw


def _find_ref(directory: Path, ref: str) -> Path:
    for suffix in TABLE_SUFFIXES:
        candidate = directory / f"{ref}{suffix}"
        if candidate.exists():
            return candidate
    raise FileNotFoundError(f"Child table not found: {directory / ref}.js")


def load_table(path: Path, resolve: bool = False) -> NavTable:
    """Load a navigation table from a ``.js``, ``.json``, ``.yml`` or ``.yaml`` file.

    Args:
        path: Path to the table file.
        resolve: If True, replace child table references with the tables
            loaded from sibling files of the same name.

    Returns:
        Loaded NavTable.

    Raises:
        FileNotFoundError: If the file (or a referenced child table) doesn't exist.
        MalformedDataError: If the file content is not a well-formed table.
    """
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")
    if path.suffix not in TABLE_SUFFIXES:
        raise MalformedDataError(
            f"Unsupported table file type {path.suffix!r}: expected one of "
            + ", ".join(TABLE_SUFFIXES)
        )

    name, raw = _read_raw(path)
    entries = parse_table(raw, name)

    if resolve:

        def load_ref(ref: str) -> tuple[NavEntry, ...]:
            ref_path = _find_ref(path.parent, ref)
            ref_name, ref_raw = _read_raw(ref_path)
            return parse_table(ref_raw, ref_name)

        entries = resolve_children(entries, load_ref, (name,))

    return NavTable(name=name, entries=entries)
