"""BaseService — abstract foundation for all resolution services.

Every service receives a :class:`ResolutionStore` at construction time.
The store is the only component that touches the backing file; services
own the load → transform → save cycle of each operation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resolution.domain.validation import validate_position
from resolution.services.result import ServiceResult

if TYPE_CHECKING:
    from resolution.domain.entry import ResolutionEntry
    from resolution.infrastructure.store import ResolutionStore

logger = logging.getLogger(__name__)

INVALID_POSITION = "INVALID_POSITION"


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class DeleteService(BaseService):
            def delete(self, position: int) -> ServiceResult:
                entries = self._store.load_all()
                ...
                self._store.save_all(remaining)
    """

    def __init__(self, store: ResolutionStore) -> None:
        self._store = store

    @staticmethod
    def _check_position(
        op: str,
        position: int,
        entries: list[ResolutionEntry],
    ) -> ServiceResult | None:
        """Return a failed result when *position* is outside *entries*, else None."""
        vr = validate_position(position, len(entries))
        if vr.valid:
            return None
        logger.debug("Rejected position %d (count=%d) for %s", position, len(entries), op)
        return ServiceResult.failure(
            op,
            INVALID_POSITION,
            vr.message,
            position=position,
            count=len(entries),
        )
