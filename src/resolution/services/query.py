"""QueryService — read-only listing of resolutions."""

from __future__ import annotations

from resolution.domain.ordering import number_entries, order_by_priority
from resolution.services.base import BaseService
from resolution.services.result import ServiceResult
from resolution.services.telemetry import trace_span, traced


class QueryService(BaseService):
    """Read-only access to the resolution list.  Never writes."""

    @traced
    def list(self, *, numbered: bool = False, ordered_by_priority: bool = False) -> ServiceResult:
        """List every entry with its original 1-based position.

        With *ordered_by_priority*, entries are stably sorted by priority
        (highest first); position labels still reflect insertion order.
        """
        op = "list"
        with trace_span("store.load_all"):
            entries = self._store.load_all()

        data: dict[str, object] = {
            "count": len(entries),
            "numbered": numbered,
            "ordered_by_priority": ordered_by_priority,
            "items": [],
        }
        if not entries:
            return ServiceResult(ok=True, op=op, data=data)

        pairs = number_entries(entries)
        if ordered_by_priority:
            pairs = order_by_priority(pairs)

        data["items"] = [{"position": position, **entry.to_dict()} for position, entry in pairs]
        return ServiceResult(ok=True, op=op, data=data)
