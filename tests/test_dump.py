"""Tests for serialization back to the authored formats."""

import json
from pathlib import Path

from doxnav import config_pg
from doxnav.table import NavEntry, load_table
from doxnav.table.dump import (
    dump_json,
    dump_navtree_js,
    dump_yaml,
    to_literal,
    to_records,
)

FIXTURES = Path(__file__).parent / "fixtures"


def test_dump_navtree_js_matches_doxygen_layout():
    expected = (FIXTURES / "config_pg.js").read_text(encoding="utf-8")

    assert dump_navtree_js("config_pg", config_pg.load()) == expected


def test_dump_navtree_js_empty_children_and_escaping():
    entries = (NavEntry('The "main" page', None, ()),)

    assert dump_navtree_js("nav", entries) == (
        'var nav =\n[\n    [ "The \\"main\\" page", null, [] ]\n];\n'
    )


def test_dump_navtree_js_empty_table():
    assert dump_navtree_js("nav", ()) == "var nav =\n[\n];\n"


def test_navtree_js_reloads(tmp_path: Path):
    entries = (
        NavEntry("Guides", None, (NavEntry("Install", "install.html#pip", ()),)),
        NavEntry("Drivers", "drivers.html", "drivers"),
    )
    path = tmp_path / "nav.js"
    path.write_text(dump_navtree_js("nav", entries), encoding="utf-8")

    assert load_table(path).entries == entries


def test_to_literal_keeps_child_forms():
    entries = (
        NavEntry("A", "a.html", None),
        NavEntry("B", None, ()),
        NavEntry("C", "c.html", "c_children"),
    )

    assert to_literal(entries) == [
        ["A", "a.html", None],
        ["B", None, []],
        ["C", "c.html", "c_children"],
    ]


def test_to_records_nests_children():
    records = to_records(config_pg.load())

    assert records[5]["children"][0] == {
        "title": "Prerequisites",
        "target": "config_pinclock.html#config_pinclock_pre",
        "children": None,
    }


def test_dump_json_records_and_triples():
    entries = config_pg.load()

    assert json.loads(dump_json(entries)) == to_records(entries)
    assert json.loads(dump_json(entries, records=False)) == config_pg.CONFIG_PG


def test_json_reloads(tmp_path: Path):
    path = tmp_path / "config_pg.json"
    path.write_text(dump_json(config_pg.load()), encoding="utf-8")

    assert load_table(path).entries == config_pg.load()


def test_yaml_reloads(tmp_path: Path):
    entries = config_pg.load() + (NavEntry("Empty group", None, ()),)
    path = tmp_path / "config_pg.yml"
    path.write_text(dump_yaml(entries), encoding="utf-8")

    table = load_table(path)
    assert table.name == "config_pg"
    assert table.entries == entries


def test_yaml_reloads_boolean_like_titles(tmp_path: Path):
    entries = (
        NavEntry("Yes", "yes.html", None),
        NavEntry("No", None, (NavEntry("on", "on.html", ()),)),
        NavEntry("off", "off.html", "null_ref"),
    )
    path = tmp_path / "nav.yml"
    path.write_text(dump_yaml(entries), encoding="utf-8")

    assert load_table(path).entries == entries
