"""Tests for the navigation entry model."""

import dataclasses

import pytest

from doxnav.table import NavEntry, NavTable


def test_page_and_anchor_split_on_first_hash():
    entry = NavEntry("Prerequisites", "config_pinclock.html#config_pinclock_pre")

    assert entry.page == "config_pinclock.html"
    assert entry.anchor == "config_pinclock_pre"


def test_page_without_anchor():
    entry = NavEntry("Copy source files to project", "source_files.html")

    assert entry.page == "source_files.html"
    assert entry.anchor is None


def test_group_entry_has_no_page():
    entry = NavEntry("Guides", None, (NavEntry("Install", "install.html"),))

    assert entry.is_group
    assert entry.page is None
    assert entry.anchor is None
    assert not entry.is_leaf


def test_child_reference():
    entry = NavEntry("Configure CMSIS-Drivers", "config_drivers.html", "config_drivers")

    assert entry.child_ref == "config_drivers"
    assert entry.subentries == ()
    assert not entry.is_leaf
    assert not entry.is_group


def test_empty_children_differ_from_none():
    empty = NavEntry("Install", "install.html", ())
    leaf = NavEntry("Install", "install.html", None)

    assert empty.is_leaf and leaf.is_leaf
    assert empty != leaf


def test_entries_are_immutable():
    entry = NavEntry("Assumptions", "config_pg.html#directory_spec")

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.title = "Other"  # type: ignore[misc]


def test_table_sequence_access():
    entries = (NavEntry("A", "a.html"), NavEntry("B", "b.html"))
    table = NavTable(name="nav", entries=entries)

    assert len(table) == 2
    assert table[1].title == "B"
    assert [entry.title for entry in table] == ["A", "B"]
