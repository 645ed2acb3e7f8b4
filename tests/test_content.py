import json
import logging
import re
from pathlib import Path

import pytest

from dos_terminal.content import (
    DEFAULT_ENTRIES,
    ContentEntry,
    ContentLoadError,
    StaticContentStore,
    default_store,
    load_content,
)


def test_default_store_lists_builtin_entries_in_order() -> None:
    store = default_store()
    assert [e.id for e in store.list_all()] == ["1", "2", "3"]
    assert store.find_by_id("2") is DEFAULT_ENTRIES[1]
    assert store.find_by_id("4") is None


def test_store_length_counts_entries() -> None:
    assert len(default_store()) == 3
    assert len(StaticContentStore([])) == 0


def test_lookup_is_exact_match() -> None:
    store = StaticContentStore([ContentEntry("abc", "T", "D", "C")])
    assert store.find_by_id("abc") is not None
    assert store.find_by_id("ABC") is None


def test_duplicate_ids_are_rejected() -> None:
    entry = ContentEntry("1", "T", "D", "C")
    with pytest.raises(ContentLoadError):
        StaticContentStore([entry, entry])


def test_entry_lines_split_on_newlines() -> None:
    entry = ContentEntry("1", "T", "D", "a\n\nb")
    assert entry.lines == ["a", "", "b"]


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.mark.parametrize("wrap", [False, True])
def test_load_content_accepts_list_or_entries_object(tmp_path: Path, wrap: bool) -> None:
    entries = [
        {"id": "7", "title": "Seven", "date": "2026-03-01", "content": "x\ny", "tags": ["a"]},
        {"id": "8", "title": "Eight", "date": "2026-03-02", "content": "z"},
    ]
    path = write_json(tmp_path / "content.json", {"entries": entries} if wrap else entries)
    store = load_content(path)
    assert [e.id for e in store.list_all()] == ["7", "8"]
    assert store.find_by_id("7") == ContentEntry("7", "Seven", "2026-03-01", "x\ny", ("a",))
    assert store.find_by_id("8").tags == ()  # type: ignore[union-attr]


@pytest.mark.parametrize(
    "data,message",
    [
        ({"nope": []}, "list of entries"),
        (["oops"], "not an object"),
        ([{"id": "1", "title": "T"}], "missing field(s): date, content"),
        ([{"id": "1", "title": "T", "date": "D", "content": "C", "tags": "a"}], "invalid tags"),
        (
            [
                {"id": "1", "title": "T", "date": "D", "content": "C"},
                {"id": "1", "title": "U", "date": "D", "content": "C"},
            ],
            "Duplicate entry id",
        ),
    ],
)
def test_load_content_rejects_bad_documents(
    tmp_path: Path, data: object, message: str
) -> None:
    path = write_json(tmp_path / "content.json", data)
    with pytest.raises(ContentLoadError, match=re.escape(message)):
        load_content(path)


def test_load_content_reports_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "content.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentLoadError, match="Invalid JSON"):
        load_content(path)


def test_load_content_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ContentLoadError, match="Cannot read"):
        load_content(tmp_path / "missing.json")


def test_load_content_warns_about_unreachable_ids(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_json(
        tmp_path / "content.json",
        [{"id": "intro", "title": "T", "date": "D", "content": "C"}],
    )
    with caplog.at_level(logging.WARNING, logger="dos_terminal.content"):
        load_content(path)
    assert "'intro' is not upper-case" in caplog.text
