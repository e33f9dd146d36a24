"""Tests for FileEntry descriptors and LoadConfig."""

import dataclasses

import pytest

from lazydirtree.sync import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_TOTAL_COUNT,
    EntryKind,
    FileEntry,
    LoadConfig,
)


def make_entry(entry_id=10, kind=EntryKind.FILE, size=0, **kwargs):
    return FileEntry(id=entry_id, parent_id=0, volume_id=1, kind=kind, size=size, **kwargs)


class TestFileEntry:
    """Classification and invariants of entry descriptors."""

    def test_file_classification(self):
        entry = make_entry(kind=EntryKind.FILE, size=42)
        assert entry.is_file()
        assert not entry.is_folder()
        assert entry.kind_label == "file"

    def test_folder_classification(self):
        entry = make_entry(entry_id=12, kind=EntryKind.FOLDER)
        assert entry.is_folder()
        assert not entry.is_file()
        assert entry.kind_label == "folder"

    def test_raw_kind_codes_are_coerced(self):
        """Stores hand back 1/2; they map onto EntryKind."""
        assert make_entry(kind=1).kind is EntryKind.FILE
        assert make_entry(kind=2).kind is EntryKind.FOLDER

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            make_entry(kind=7)

    def test_folder_must_report_zero_size(self):
        with pytest.raises(ValueError, match="size 0"):
            make_entry(kind=EntryKind.FOLDER, size=5)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            make_entry(size=-1)

    def test_entries_are_immutable(self):
        entry = make_entry()
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.size = 100

    def test_entries_compare_by_value(self):
        assert make_entry(size=3) == make_entry(size=3)
        assert make_entry(size=3) != make_entry(size=4)

    def test_metadata_uses_kind_label(self):
        entry = make_entry(size=7, name="report.pdf", mtime=1700000000, modifier=3)
        metadata = entry.metadata()
        assert metadata["kind"] == "file"
        assert metadata["name"] == "report.pdf"
        assert metadata["size"] == 7
        assert metadata["mtime"] == 1700000000
        assert metadata["ctime"] is None

    def test_str_format(self):
        entry = FileEntry(id=22, parent_id=12, volume_id=1, kind=EntryKind.FOLDER, name="12-22")
        assert str(entry) == "id=22,parent=12,name=12-22,type=folder"


class TestLoadConfig:
    """Default resolution of load limits."""

    def test_none_resolves_to_defaults(self):
        limits = LoadConfig().resolved()
        assert limits.max_depth == DEFAULT_MAX_DEPTH
        assert limits.count_limit == DEFAULT_MAX_TOTAL_COUNT
        assert limits.size_limit is None

    def test_negative_values_resolve_like_none(self):
        limits = LoadConfig(max_depth=-1, count_limit=-5, size_limit=-1).resolved()
        assert limits.max_depth == DEFAULT_MAX_DEPTH
        assert limits.count_limit == DEFAULT_MAX_TOTAL_COUNT
        assert limits.size_limit is None

    def test_explicit_values_kept(self):
        limits = LoadConfig(max_depth=0, count_limit=0, size_limit=0).resolved()
        assert limits == LoadConfig(max_depth=0, count_limit=0, size_limit=0)

    def test_resolved_returns_copy(self):
        config = LoadConfig()
        config.resolved()
        assert config.max_depth is None

    def test_presets(self):
        assert LoadConfig.unbounded() == LoadConfig()
        assert LoadConfig.shallow().max_depth == 1
        assert LoadConfig.shallow(3).max_depth == 3

    def test_validate(self):
        assert LoadConfig(max_depth=2).validate() == []
        errors = LoadConfig(max_depth="2", size_limit=1.5).validate()
        assert len(errors) == 2
        assert "max_depth" in errors[0]
        assert "size_limit" in errors[1]
