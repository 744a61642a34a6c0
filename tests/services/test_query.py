"""Tests for QueryService.list — numbering, ordering, read-only."""

from resolution.infrastructure.store import ResolutionStore
from resolution.services.query import QueryService
from tests.conftest import seed


class TestList:
    def test_empty_store(self, store: ResolutionStore) -> None:
        result = QueryService(store).list(numbered=True)
        assert result.ok
        assert result.data["count"] == 0
        assert result.data["items"] == []
        assert not store.exists

    def test_insertion_order_with_positions(self, store: ResolutionStore) -> None:
        seed(store, ("a", 3, None), ("b", 9, "2999-01-01"))
        items = QueryService(store).list().data["items"]
        assert items == [
            {"position": 1, "text": "a", "priority": 3, "deadline": None},
            {"position": 2, "text": "b", "priority": 9, "deadline": "2999-01-01"},
        ]

    def test_ordered_by_priority_keeps_original_positions(self, store: ResolutionStore) -> None:
        seed(store, ("a", 3, None), ("b", 9, None))
        items = QueryService(store).list(ordered_by_priority=True).data["items"]
        assert [(i["position"], i["text"]) for i in items] == [(2, "b"), (1, "a")]

    def test_ordering_is_stable(self, store: ResolutionStore) -> None:
        seed(store, ("a", 4, None), ("b", 8, None), ("c", 4, None), ("d", 8, None))
        items = QueryService(store).list(ordered_by_priority=True).data["items"]
        assert [i["text"] for i in items] == ["b", "d", "a", "c"]

    def test_flags_echoed(self, store: ResolutionStore) -> None:
        seed(store, ("a", 1, None))
        data = QueryService(store).list(numbered=True, ordered_by_priority=True).data
        assert data["numbered"] is True
        assert data["ordered_by_priority"] is True

    def test_never_writes(self, store: ResolutionStore) -> None:
        seed(store, ("a", 3, None))
        before = store.path.read_text(encoding="utf-8")
        QueryService(store).list(ordered_by_priority=True)
        assert store.path.read_text(encoding="utf-8") == before
