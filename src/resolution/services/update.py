"""UpdateService — edit, remove optional fields, select, and delete.

Pipeline: LOAD → VALIDATE → APPLY → SAVE → RESPOND

``edit`` and ``remove`` are paired at the CLI: ``select`` validates the
position once, and the caller passes the selected position to ``remove``
explicitly.  ``remove(None, ...)`` means no position was selected.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resolution.domain.entry import DEFAULT_PRIORITY
from resolution.services.base import BaseService
from resolution.services.create import check_fields
from resolution.services.result import ServiceResult
from resolution.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from datetime import date

    from resolution.infrastructure.store import ResolutionStore

logger = logging.getLogger(__name__)

POSITION_NOT_SET = "POSITION_NOT_SET"

_EDITABLE_FIELDS = ("text", "priority", "deadline")


class UpdateService(BaseService):
    """Handles modification and deletion of existing resolutions.

    Args:
        store: Backing store.
        validate_edits: Run the create-time field checks on ``edit`` values.
            Off by default, so ``edit`` stores values exactly as given.
    """

    def __init__(self, store: ResolutionStore, *, validate_edits: bool = False) -> None:
        super().__init__(store)
        self._validate_edits = validate_edits

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def select(self, position: int) -> ServiceResult:
        """Validate *position* against the current list without modifying it."""
        op = "select"
        with trace_span("store.load_all"):
            entries = self._store.load_all()

        failure = self._check_position(op, position, entries)
        if failure is not None:
            return failure
        return ServiceResult(
            ok=True,
            op=op,
            data={"position": position, "entry": entries[position - 1].to_dict()},
        )

    @traced
    def edit(
        self,
        position: int,
        *,
        text: str | None = None,
        priority: int | None = None,
        deadline: str | None = None,
        today: date | None = None,
    ) -> ServiceResult:
        """Overwrite the supplied fields of the entry at *position*.

        Omitted (None) fields keep their value.  The whole list is rewritten
        even when nothing changed.
        """
        op = "edit"
        with trace_span("store.load_all"):
            entries = self._store.load_all()

        failure = self._check_position(op, position, entries)
        if failure is not None:
            return failure

        if self._validate_edits:
            rejected = check_fields(text=text, priority=priority, deadline=deadline, today=today)
            if rejected is not None:
                code, vr = rejected
                return ServiceResult.failure(op, code, vr.message, position=position)

        before = entries[position - 1]
        supplied = {"text": text, "priority": priority, "deadline": deadline}
        after = before.model_copy(update={k: v for k, v in supplied.items() if v is not None})
        entries[position - 1] = after

        with trace_span("store.save_all"):
            self._store.save_all(entries)

        fields_changed = [
            name for name in _EDITABLE_FIELDS if getattr(before, name) != getattr(after, name)
        ]
        logger.info("Edited resolution %d: %s", position, fields_changed or "no changes")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "position": position,
                "before": before.to_dict(),
                "after": after.to_dict(),
                "fields_changed": fields_changed,
            },
        )

    @traced
    def remove(
        self,
        position: int | None,
        *,
        remove_priority: bool = False,
        remove_deadline: bool = False,
    ) -> ServiceResult:
        """Reset the priority to its default and/or clear the deadline.

        Nothing is written when neither flag is set.
        """
        op = "remove"
        if position is None:
            return ServiceResult.failure(
                op,
                POSITION_NOT_SET,
                "The position of the New Year's resolution is not set. "
                "Please use the position of the resolution.",
            )

        with trace_span("store.load_all"):
            entries = self._store.load_all()

        failure = self._check_position(op, position, entries)
        if failure is not None:
            return failure

        removed: list[str] = []
        if remove_priority:
            removed.append("priority")
        if remove_deadline:
            removed.append("deadline")

        if not removed:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "position": position,
                    "removed": [],
                    "entry": entries[position - 1].to_dict(),
                },
            )

        changes: dict[str, object] = {}
        if remove_priority:
            changes["priority"] = DEFAULT_PRIORITY
        if remove_deadline:
            changes["deadline"] = None
        entry = entries[position - 1].model_copy(update=changes)
        entries[position - 1] = entry

        with trace_span("store.save_all"):
            self._store.save_all(entries)

        logger.info("Removed %s from resolution %d", removed, position)
        return ServiceResult(
            ok=True,
            op=op,
            data={"position": position, "removed": removed, "entry": entry.to_dict()},
        )

    @traced
    def delete(self, position: int) -> ServiceResult:
        """Delete the entry at *position*; later entries shift down by one."""
        op = "delete"
        with trace_span("store.load_all"):
            entries = self._store.load_all()

        failure = self._check_position(op, position, entries)
        if failure is not None:
            return failure

        deleted = entries[position - 1]
        remaining = [entry for index, entry in enumerate(entries) if index != position - 1]

        with trace_span("store.save_all"):
            self._store.save_all(remaining)

        logger.info("Deleted resolution %d", position)
        return ServiceResult(
            ok=True,
            op=op,
            data={"position": position, "entry": deleted.to_dict(), "count": len(remaining)},
        )
