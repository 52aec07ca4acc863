"""Tests for the JSON document stores."""

import json
from pathlib import Path

import pytest

from cinema_api.app.core import db
from cinema_api.app.core.db import (
    COLLECTIONS,
    JsonFileStore,
    MemoryStore,
    PersistenceError,
    get_database_path,
)


@pytest.fixture(params=["memory", "file"])
def any_store(request, tmp_path):
    if request.param == "memory":
        return MemoryStore()
    return JsonFileStore(tmp_path / "db.json")


def test_new_store_has_empty_collections(any_store):
    for name in COLLECTIONS:
        assert any_store.get(name) == []


def test_unknown_collection_reads_as_empty(any_store):
    assert any_store.get("tickets") == []
    assert any_store.find("tickets", id="x") is None


def test_push_appends_in_order(any_store):
    any_store.push("books", {"id": "a", "title": "First"})
    any_store.push("books", {"id": "b", "title": "Second"})

    assert [record["id"] for record in any_store.get("books")] == ["a", "b"]


def test_find_returns_first_match(any_store):
    any_store.push("books", {"id": "a", "title": "First"})
    any_store.push("books", {"id": "a", "title": "Duplicate"})

    assert any_store.find("books", id="a")["title"] == "First"
    assert any_store.find("books", id="missing") is None


def test_assign_merges_shallowly(any_store):
    any_store.push("books", {"id": "a", "title": "Old", "author": "Someone", "meta": {"x": 1}})

    merged = any_store.assign("books", {"title": "New", "meta": {"y": 2}}, id="a")

    assert merged == {"id": "a", "title": "New", "author": "Someone", "meta": {"y": 2}}
    assert any_store.find("books", id="a") == merged


def test_assign_without_match_changes_nothing(any_store):
    any_store.push("books", {"id": "a", "title": "Old"})

    assert any_store.assign("books", {"title": "New"}, id="zzz") is None
    assert any_store.get("books") == [{"id": "a", "title": "Old"}]


def test_remove_drops_every_match(any_store):
    any_store.push("books", {"id": "a"})
    any_store.push("books", {"id": "b"})
    any_store.push("books", {"id": "a"})

    removed = any_store.remove("books", id="a")

    assert len(removed) == 2
    assert any_store.get("books") == [{"id": "b"}]
    assert any_store.remove("books", id="a") == []


def test_returned_records_are_detached(any_store):
    any_store.push("books", {"id": "a", "title": "Old"})

    record = any_store.find("books", id="a")
    record["title"] = "Changed locally"

    assert any_store.find("books", id="a")["title"] == "Old"


def test_unserialisable_record_is_not_committed(any_store):
    any_store.push("books", {"id": "a"})

    with pytest.raises(PersistenceError) as excinfo:
        any_store.push("books", {"id": "b", "bad": object()})

    assert isinstance(excinfo.value.cause, TypeError)
    assert excinfo.value.__cause__ is excinfo.value.cause
    assert any_store.get("books") == [{"id": "a"}]


def test_file_store_init_creates_document(tmp_path):
    path = tmp_path / "nested" / "db.json"
    store = JsonFileStore(path)

    store.init()

    assert json.loads(path.read_text(encoding="utf-8")) == {name: [] for name in COLLECTIONS}


def test_file_store_init_keeps_existing_file(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps({"books": [{"id": "a"}]}), encoding="utf-8")

    JsonFileStore(path).init()

    assert json.loads(path.read_text(encoding="utf-8")) == {"books": [{"id": "a"}]}


def test_file_store_preserves_unknown_keys_and_unicode(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps({"books": [], "tickets": [{"id": "t1"}]}), encoding="utf-8")
    store = JsonFileStore(path)

    store.push("movies", {"id": "m1", "name": "hồi chuông lạ"})

    text = path.read_text(encoding="utf-8")
    assert "hồi chuông lạ" in text
    data = json.loads(text)
    assert data["tickets"] == [{"id": "t1"}]
    assert data["movies"] == [{"id": "m1", "name": "hồi chuông lạ"}]


def test_file_store_rejects_malformed_file(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonFileStore(path).get("books")


def test_file_store_rejects_non_object_document(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonFileStore(path).get("books")


def test_file_store_write_failure_leaves_no_temp_file(tmp_path, monkeypatch):
    path = tmp_path / "db.json"
    store = JsonFileStore(path)
    store.init()

    def broken_replace(src, dst):
        raise OSError(13, "Permission denied")

    monkeypatch.setattr(db.os, "replace", broken_replace)

    with pytest.raises(PersistenceError) as excinfo:
        store.push("books", {"id": "a"})

    assert isinstance(excinfo.value.cause, OSError)
    assert [p.name for p in tmp_path.iterdir()] == ["db.json"]
    assert json.loads(path.read_text(encoding="utf-8"))["books"] == []


def test_database_path_absolute(monkeypatch, tmp_path):
    target = str(tmp_path / "store.json")
    monkeypatch.setattr(db.settings, "database_path", target)

    assert get_database_path() == target


def test_database_path_relative_to_project_root(monkeypatch):
    monkeypatch.setattr(db.settings, "database_path", "data/db.json")

    project_root = Path(db.__file__).resolve().parents[3]

    assert get_database_path() == str(project_root / "data" / "db.json")
