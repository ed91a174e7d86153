"""Tests for the file-based day store."""

import pytest

from worklog.adapters.file_day_store import FileDayStore
from worklog.core.day import DayRecord, StructuredEntry, TextEntry
from worklog.errors import CorruptRecord, WriteFailure


@pytest.fixture
def store(tmp_path):
    return FileDayStore(tmp_path / "logs")


class TestFileDayStore:
    def test_creates_root(self, tmp_path):
        root = tmp_path / "nested" / "logs"
        FileDayStore(root)
        assert root.is_dir()

    def test_path_for(self, store):
        assert store.path_for("2025-01-15") == store.root / "2025-01-15.yml"

    def test_path_for_canonicalizes(self, store):
        assert store.path_for("2025/01/15") == store.path_for("2025-01-15")

    def test_custom_extension(self, tmp_path):
        store = FileDayStore(tmp_path, extension=".yaml")
        assert store.path_for("2025-01-15").name == "2025-01-15.yaml"

    def test_distinct_keys_get_distinct_paths(self, store):
        paths = {store.path_for(f"2025-01-{day:02d}") for day in range(1, 32)}
        assert len(paths) == 31

    def test_get_missing_returns_none(self, store):
        assert store.get("2025-01-15") is None
        assert not store.exists("2025-01-15")

    def test_get_or_create_persists_empty_record(self, store):
        record = store.get_or_create("2025-01-15")

        assert record == DayRecord(date="2025-01-15")
        assert store.exists("2025-01-15")
        assert store.path_for("2025-01-15").read_text() == "actions: []\ndate: '2025-01-15'\n"

    def test_get_or_create_is_idempotent(self, store):
        first = store.get_or_create("2025-01-15")
        content = store.path_for("2025-01-15").read_text()
        second = store.get_or_create("2025-01-15")

        assert first == second
        assert store.path_for("2025-01-15").read_text() == content

    def test_get_or_create_reads_existing(self, store):
        store.path_for("2025-01-15").write_text(
            "date: 2025-01-15\nactions:\n  - wrote code\n  - {meeting: standup}\n"
        )
        record = store.get_or_create("2025-01-15")
        assert record.actions == [TextEntry("wrote code"), StructuredEntry({"meeting": "standup"})]
        assert record.date == "2025-01-15"

    def test_hand_edited_date_does_not_leak_into_file(self, store):
        store.path_for("2025-01-15").write_text("date: '2025-01-10'\nactions:\n- copied\n")

        record = store.get_or_create("2025-01-15")
        store.save("2025-01-15", record)

        assert record.date == "2025-01-15"
        assert "date: '2025-01-15'" in store.path_for("2025-01-15").read_text()

    def test_save_sorts_todo_by_priority(self, store):
        record = DayRecord(
            date="2025-01-15",
            todo=[TextEntry("later"), TextEntry("now!!"), TextEntry("soon!")],
        )
        store.save("2025-01-15", record)

        assert record.todo == [TextEntry("now!!"), TextEntry("soon!"), TextEntry("later")]
        assert store.get("2025-01-15").todo == record.todo

    def test_save_uses_store_marker(self, tmp_path):
        store = FileDayStore(tmp_path, priority_marker="*")
        record = DayRecord(date="2025-01-15", todo=[TextEntry("a!!"), TextEntry("b*")])
        store.save("2025-01-15", record)
        assert record.todo == [TextEntry("b*"), TextEntry("a!!")]

    def test_save_is_deterministic(self, store):
        record = DayRecord(date="2025-01-15", actions=[TextEntry("a")], todo=[TextEntry("b!")])
        store.save("2025-01-15", record)
        first = store.path_for("2025-01-15").read_bytes()

        store.save("2025-01-15", store.get("2025-01-15"))
        assert store.path_for("2025-01-15").read_bytes() == first

    def test_save_restores_missing_actions(self, store):
        record = DayRecord(date="2025-01-15")
        record.actions = None
        store.save("2025-01-15", record)
        assert "actions: []" in store.path_for("2025-01-15").read_text()

    def test_write_failure(self, store):
        # A directory where the file should be makes the write fail
        store.path_for("2025-01-15").mkdir()
        with pytest.raises(WriteFailure):
            store.save("2025-01-15", DayRecord(date="2025-01-15"))


class TestCorruptFiles:
    @pytest.mark.parametrize(
        "content",
        [
            "actions: [unclosed\n",
            "",
            "- just\n- a list\n",
            "actions: not a list\n",
        ],
    )
    def test_raises_corrupt_record(self, store, content):
        store.path_for("2025-01-15").write_text(content)
        with pytest.raises(CorruptRecord):
            store.get_or_create("2025-01-15")

    def test_corrupt_file_is_not_overwritten(self, store):
        path = store.path_for("2025-01-15")
        path.write_text("actions: [unclosed\n")

        with pytest.raises(CorruptRecord):
            store.get_or_create("2025-01-15")

        assert path.read_text() == "actions: [unclosed\n"

    def test_error_names_the_file(self, store):
        path = store.path_for("2025-01-15")
        path.write_text("actions: [unclosed\n")

        with pytest.raises(CorruptRecord) as exc_info:
            store.get("2025-01-15")

        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)
