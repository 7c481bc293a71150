"""Tests for the single-slot session record store."""

from datetime import datetime, timezone

import pytest

from ego.errors import CorruptSessionRecord, SessionAlreadyActive
from ego.session import SessionRecord, SessionStore


def make_record(**overrides):
    data = {
        "project_path": "/work/project",
        "start_time": datetime(2026, 3, 1, 12, 30, 15, 123456, tzinfo=timezone.utc),
        "initial_line_count": 42,
        "initial_char_count": 1000,
        "file_fingerprints": {"src/main.rs": "ab" * 32},
    }
    data.update(overrides)
    return SessionRecord(**data)


class TestSessionStore:
    def test_absent_by_default(self, store):
        assert not store.exists()
        assert store.load() is None

    def test_save_then_load_preserves_fields(self, store):
        record = make_record()
        store.save(record)

        loaded = store.load()

        assert loaded == record
        assert loaded.start_time == record.start_time
        assert loaded.start_time.tzinfo is not None

    def test_save_creates_parent_directory(self, tmp_path):
        store = SessionStore(tmp_path / "a" / "b" / "session.json")
        store.save(make_record())
        assert store.exists()

    def test_refuses_to_overwrite(self, store):
        store.save(make_record())
        with pytest.raises(SessionAlreadyActive):
            store.save(make_record(initial_line_count=1))
        assert store.load().initial_line_count == 42

    def test_clear(self, store):
        store.save(make_record())
        assert store.clear() is True
        assert not store.exists()
        assert store.clear() is False

    def test_corrupt_record_is_reported(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CorruptSessionRecord):
            store.load()

    def test_invalid_utf8_record_is_corrupt(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_bytes(b"\xff\xfe garbage")

        with pytest.raises(CorruptSessionRecord, match="not valid UTF-8"):
            store.load()

    def test_directory_in_place_of_record(self, store):
        store.path.mkdir(parents=True)

        with pytest.raises(CorruptSessionRecord):
            store.load()
        with pytest.raises(CorruptSessionRecord, match="Remove it by hand"):
            store.clear()
        assert store.path.is_dir()

    def test_record_missing_fields_is_corrupt(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"project_path": "/x"}', encoding="utf-8")

        with pytest.raises(CorruptSessionRecord):
            store.load()

    def test_failed_replace_leaves_no_record_or_temp(self, store, monkeypatch):
        import ego.session.store as store_module

        def crash(src, dst):
            raise OSError("simulated crash")

        monkeypatch.setattr(store_module.os, "replace", crash)

        with pytest.raises(OSError, match="simulated crash"):
            store.save(make_record())

        assert not store.exists()
        assert list(store.path.parent.iterdir()) == []


class TestSessionRecord:
    def test_rejects_negative_counts(self):
        with pytest.raises(ValueError):
            make_record(initial_line_count=-1)

    def test_rejects_naive_start_time(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            make_record(start_time=datetime(2026, 3, 1, 12, 0))
