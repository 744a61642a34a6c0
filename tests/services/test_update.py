"""Tests for UpdateService — select, edit, remove, delete."""

from datetime import date

import pytest

from resolution.domain.entry import ResolutionEntry
from resolution.infrastructure.store import ResolutionStore
from resolution.services.update import UpdateService
from tests.conftest import seed


@pytest.fixture
def three(store: ResolutionStore) -> list[ResolutionEntry]:
    return seed(
        store,
        ("Learn Rust", 5, "2999-01-01"),
        ("Run", 3, None),
        ("Read", 9, "2999-06-01"),
    )


# ---------------------------------------------------------------------------
# select()
# ---------------------------------------------------------------------------


class TestSelect:
    def test_valid_position(self, store: ResolutionStore, three: list[ResolutionEntry]) -> None:
        result = UpdateService(store).select(2)
        assert result.ok
        assert result.data["position"] == 2
        assert result.data["entry"]["text"] == "Run"

    @pytest.mark.parametrize("position", [0, 4])
    def test_invalid_position(
        self, store: ResolutionStore, three: list[ResolutionEntry], position: int
    ) -> None:
        result = UpdateService(store).select(position)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_POSITION"


# ---------------------------------------------------------------------------
# edit()
# ---------------------------------------------------------------------------


class TestEdit:
    def test_overwrites_supplied_fields_only(
        self, store: ResolutionStore, three: list[ResolutionEntry]
    ) -> None:
        result = UpdateService(store).edit(1, text="Learn Rust well")
        assert result.ok
        assert result.data["fields_changed"] == ["text"]
        assert result.data["before"]["text"] == "Learn Rust"
        assert store.load_all()[0] == ResolutionEntry(
            text="Learn Rust well", priority=5, deadline="2999-01-01"
        )

    def test_other_entries_untouched(
        self, store: ResolutionStore, three: list[ResolutionEntry]
    ) -> None:
        UpdateService(store).edit(2, priority=7, deadline="2999-03-03")
        entries = store.load_all()
        assert entries[0] == three[0]
        assert entries[1] == ResolutionEntry(text="Run", priority=7, deadline="2999-03-03")
        assert entries[2] == three[2]

    def test_no_fields_reports_all_unchanged(
        self, store: ResolutionStore, three: list[ResolutionEntry]
    ) -> None:
        result = UpdateService(store).edit(3)
        assert result.ok
        assert result.data["fields_changed"] == []
        assert store.load_all() == three

    @pytest.mark.parametrize("priority", [0, 999])
    def test_priority_not_validated(
        self, store: ResolutionStore, three: list[ResolutionEntry], priority: int
    ) -> None:
        result = UpdateService(store).edit(1, priority=priority)
        assert result.ok
        assert store.load_all()[0].priority == priority

    def test_deadline_not_validated(
        self, store: ResolutionStore, three: list[ResolutionEntry]
    ) -> None:
        assert UpdateService(store).edit(2, deadline="2001-01-01").ok
        assert store.load_all()[1].deadline == "2001-01-01"

    def test_validated_edits_reject_bad_priority(
        self, store: ResolutionStore, three: list[ResolutionEntry]
    ) -> None:
        result = UpdateService(store, validate_edits=True).edit(1, priority=0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PRIORITY"
        assert store.load_all() == three

    def test_validated_edits_reject_past_deadline(
        self, store: ResolutionStore, three: list[ResolutionEntry]
    ) -> None:
        svc = UpdateService(store, validate_edits=True)
        result = svc.edit(1, deadline="2025-01-01", today=date(2025, 6, 15))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DEADLINE"

    @pytest.mark.parametrize("position", [0, 4, -1])
    def test_invalid_position(
        self, store: ResolutionStore, three: list[ResolutionEntry], position: int
    ) -> None:
        before = store.path.read_text(encoding="utf-8")
        result = UpdateService(store).edit(position, text="nope")
        assert not result.ok
        assert result.error is not None
        assert result.error.message == f"The id {position} is not valid. Please use a valid id."
        assert store.path.read_text(encoding="utf-8") == before

    def test_empty_store_has_no_valid_position(self, store: ResolutionStore) -> None:
        assert not UpdateService(store).edit(1, text="x").ok
        assert not store.exists


# ---------------------------------------------------------------------------
# remove()
# ---------------------------------------------------------------------------


class TestRemove:
    def test_position_not_set(self, store: ResolutionStore, three: list[ResolutionEntry]) -> None:
        result = UpdateService(store).remove(None, remove_priority=True)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "POSITION_NOT_SET"
        assert store.load_all() == three

    def test_remove_priority(self, store: ResolutionStore, three: list[ResolutionEntry]) -> None:
        result = UpdateService(store).remove(3, remove_priority=True)
        assert result.ok
        assert result.data["removed"] == ["priority"]
        expected = ResolutionEntry(text="Read", priority=1, deadline="2999-06-01")
        assert store.load_all()[2] == expected

    def test_remove_deadline(self, store: ResolutionStore, three: list[ResolutionEntry]) -> None:
        result = UpdateService(store).remove(1, remove_deadline=True)
        assert result.ok
        assert result.data["removed"] == ["deadline"]
        assert store.load_all()[0] == ResolutionEntry(text="Learn Rust", priority=5)

    def test_remove_both(self, store: ResolutionStore, three: list[ResolutionEntry]) -> None:
        result = UpdateService(store).remove(3, remove_priority=True, remove_deadline=True)
        assert result.data["removed"] == ["priority", "deadline"]
        assert store.load_all()[2] == ResolutionEntry(text="Read")

    def test_nothing_removed_does_not_write(
        self, store: ResolutionStore, three: list[ResolutionEntry]
    ) -> None:
        mtime = store.path.stat().st_mtime_ns
        result = UpdateService(store).remove(1)
        assert result.ok
        assert result.data["removed"] == []
        assert store.path.stat().st_mtime_ns == mtime

    def test_invalid_position(self, store: ResolutionStore, three: list[ResolutionEntry]) -> None:
        result = UpdateService(store).remove(9, remove_deadline=True)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_POSITION"


# ---------------------------------------------------------------------------
# delete()
# ---------------------------------------------------------------------------


class TestDelete:
    def test_removes_exactly_kth(
        self, store: ResolutionStore, three: list[ResolutionEntry]
    ) -> None:
        result = UpdateService(store).delete(2)
        assert result.ok
        assert result.data["entry"]["text"] == "Run"
        assert result.data["count"] == 2
        assert store.load_all() == [three[0], three[2]]

    def test_positions_shift_down(self, store: ResolutionStore) -> None:
        seed(store, ("a", 1, None), ("b", 2, None))
        UpdateService(store).delete(1)
        assert store.load_all() == [ResolutionEntry(text="b", priority=2)]
        assert UpdateService(store).select(1).data["entry"]["text"] == "b"

    def test_delete_last_leaves_empty_file(self, store: ResolutionStore) -> None:
        seed(store, ("only", 4, None))
        assert UpdateService(store).delete(1).ok
        assert store.load_all() == []

    @pytest.mark.parametrize("position", [0, 4])
    def test_invalid_position(
        self, store: ResolutionStore, three: list[ResolutionEntry], position: int
    ) -> None:
        result = UpdateService(store).delete(position)
        assert not result.ok
        assert store.load_all() == three
