import json

import pytest
from pydantic import ValidationError

from src.ingest.loader import PageEntry, load_pages, records_from_entries


def test_load_json_list_derives_visible_roots(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "title": "Home"},
                {"id": 2, "parent": 1, "title": "About"},
                {"id": 3, "parent_id": 99, "title": "Orphan"},
            ]
        ),
        encoding="utf-8",
    )

    records = load_pages(path)

    assert [record.id for record in records] == [1, 2, 3]
    assert [record.parent_id for record in records] == [None, 1, 99]
    assert [record.visible_root for record in records] == [True, False, True]
    assert records[1].title == "About"


def test_load_yaml_mapping_keeps_explicit_flags(tmp_path):
    path = tmp_path / "pages.yaml"
    path.write_text(
        "pages:\n"
        "  - {id: 1, visible_root: true}\n"
        "  - {id: 2, parent: 1, visible_root: true}\n",
        encoding="utf-8",
    )

    records = load_pages(path)

    assert [record.visible_root for record in records] == [True, True]


def test_load_toml_pages_table(tmp_path):
    path = tmp_path / "pages.toml"
    path.write_text(
        "[[pages]]\nid = 1\ntitle = \"Home\"\n\n[[pages]]\nid = 2\nparent = 1\n",
        encoding="utf-8",
    )

    records = load_pages(path)

    assert [record.id for record in records] == [1, 2]
    assert records[0].visible_root and not records[1].visible_root


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_pages(tmp_path / "missing.json")


def test_load_rejects_unknown_extension_and_shape(tmp_path):
    txt = tmp_path / "pages.txt"
    txt.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_pages(txt)

    scalar = tmp_path / "pages.json"
    scalar.write_text("42", encoding="utf-8")
    with pytest.raises(ValueError):
        load_pages(scalar)


def test_load_rejects_invalid_entries(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text(json.dumps([{"id": "not-a-number"}]), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_pages(path)


def test_empty_yaml_gives_no_pages(tmp_path):
    path = tmp_path / "pages.yml"
    path.write_text("", encoding="utf-8")

    assert load_pages(path) == []


def test_records_from_entries_accepts_field_names():
    entries = [PageEntry(id=5, parent_id=None, visible_root=True, title="Root")]

    records = records_from_entries(entries)

    assert records[0].id == 5 and records[0].visible_root


def test_explicit_flags_survive_when_others_are_derived():
    entries = [
        PageEntry(id=1),
        PageEntry(id=2, parent_id=1, visible_root=True),
        PageEntry(id=3, parent_id=77, visible_root=False),
    ]

    records = records_from_entries(entries)

    assert [record.visible_root for record in records] == [True, True, False]


def test_load_broken_yaml_raises_value_error(tmp_path):
    path = tmp_path / "pages.yaml"
    path.write_text("pages: [ {id: 1", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_pages(path)
