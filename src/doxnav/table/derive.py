"""Helpers for walking and expanding navigation trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from doxnav.errors import MalformedDataError
from doxnav.table.model import NavEntry


def walk(
    entries: Sequence[NavEntry], depth: int = 1
) -> Iterator[tuple[int, NavEntry]]:
    """Yield ``(depth, entry)`` pairs in depth-first pre-order.

    Top-level entries have depth 1. Child references are not followed.
    """
    for entry in entries:
        yield depth, entry
        yield from walk(entry.subentries, depth + 1)


def max_depth(entries: Sequence[NavEntry]) -> int:
    """Return the deepest nesting level, 0 for an empty table."""
    return max((depth for depth, _ in walk(entries)), default=0)


def count_entries(entries: Sequence[NavEntry]) -> int:
    return sum(1 for _ in walk(entries))


def find_entry(entries: Sequence[NavEntry], title: str) -> NavEntry | None:
    """Find the first entry with the given title in pre-order."""
    for _, entry in walk(entries):
        if entry.title == title:
            return entry
    return None


def resolve_children(
    entries: Sequence[NavEntry],
    load_ref: Callable[[str], Sequence[NavEntry]],
    parents: tuple[str, ...] = (),
) -> tuple[NavEntry, ...]:
    """Replace child references with the tables they name.

    Args:
        entries: Entries to expand.
        load_ref: Callback returning the entries of a named child table.
        parents: Names of the tables already being expanded.

    Returns:
        New entries with every child reference replaced by inline children.

    Raises:
        MalformedDataError: If a child table refers back to one of its ancestors.
    """
    resolved: list[NavEntry] = []
    for entry in entries:
        ref = entry.child_ref
        if ref is not None:
            if ref in parents:
                chain = " -> ".join((*parents, ref))
                raise MalformedDataError(f"Cyclic child table reference: {chain}")
            children = resolve_children(load_ref(ref), load_ref, (*parents, ref))
        elif isinstance(entry.children, tuple):
            children = resolve_children(entry.children, load_ref, parents)
        else:
            children = None
        resolved.append(NavEntry(entry.title, entry.target, children))
    return tuple(resolved)
