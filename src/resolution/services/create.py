"""CreateService — validate and append a new resolution.

Pipeline: VALIDATE → APPEND → RESPOND
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resolution.domain.entry import DEFAULT_PRIORITY, ResolutionEntry
from resolution.domain.validation import (
    ValidationResult,
    validate_deadline,
    validate_priority,
    validate_text,
)
from resolution.services._helpers import today as _today
from resolution.services.base import BaseService
from resolution.services.result import ServiceResult
from resolution.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from datetime import date

logger = logging.getLogger(__name__)


def check_fields(
    *,
    text: str | None = None,
    priority: int | None = None,
    deadline: str | None = None,
    today: date | None = None,
) -> tuple[str, ValidationResult] | None:
    """Run the field checks in order, returning ``(code, result)`` for the first failure.

    Fields passed as None are skipped.
    """
    if text is not None:
        vr = validate_text(text)
        if not vr.valid:
            return "INVALID_TEXT", vr
    if priority is not None:
        vr = validate_priority(priority)
        if not vr.valid:
            return "INVALID_PRIORITY", vr
    if deadline is not None:
        vr = validate_deadline(deadline, today=today or _today())
        if not vr.valid:
            return "INVALID_DEADLINE", vr
    return None


class CreateService(BaseService):
    """Handles creation of new resolutions."""

    @traced
    def create(
        self,
        text: str,
        *,
        priority: int = DEFAULT_PRIORITY,
        deadline: str | None = None,
        today: date | None = None,
    ) -> ServiceResult:
        """Validate the fields and append a new entry to the store.

        Nothing is read or written when validation fails.
        """
        op = "create"

        failure = check_fields(text=text, priority=priority, deadline=deadline, today=today)
        if failure is not None:
            code, vr = failure
            logger.debug("Rejected create: %s", vr.message)
            return ServiceResult.failure(op, code, vr.message)

        entry = ResolutionEntry(text=text, priority=priority, deadline=deadline)
        with trace_span("store.append_one"):
            self._store.append_one(entry)

        logger.info("Created resolution %r", text)
        return ServiceResult(ok=True, op=op, data={"entry": entry.to_dict()})
