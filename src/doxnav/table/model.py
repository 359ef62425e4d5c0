"""Navigation entry model and derived helpers."""

from __future__ import annotations

from dataclasses import dataclass

Children = tuple["NavEntry", ...] | str | None


@dataclass(frozen=True)
class NavEntry:
    """One node of a navigation tree.

    ``children`` keeps the three authored forms apart: ``None`` for a leaf,
    a tuple (possibly empty) for inline submenus, and a string naming a
    child table that is authored in its own file.
    """

    title: str
    target: str | None = None
    children: Children = None

    @property
    def page(self) -> str | None:
        """Target without its fragment anchor."""
        if self.target is None:
            return None
        return self.target.partition("#")[0]

    @property
    def anchor(self) -> str | None:
        """Fragment anchor of the target, if any."""
        if self.target is None or "#" not in self.target:
            return None
        return self.target.partition("#")[2]

    @property
    def child_ref(self) -> str | None:
        """Name of the separately authored child table, if any."""
        return self.children if isinstance(self.children, str) else None

    @property
    def subentries(self) -> tuple[NavEntry, ...]:
        """Inline children (empty for leaves and child references)."""
        return self.children if isinstance(self.children, tuple) else ()

    @property
    def is_group(self) -> bool:
        """True for pure grouping labels without a destination."""
        return self.target is None

    @property
    def is_leaf(self) -> bool:
        return not self.subentries and self.child_ref is None


@dataclass(frozen=True)
class NavTable:
    """A named top-level sequence of navigation entries."""

    name: str
    entries: tuple[NavEntry, ...]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> NavEntry:
        return self.entries[index]
