"""ResolutionEntry — the single record type of the resolution list.

Entries are frozen: equality compares every field, and modified copies are
produced with ``model_copy(update=...)``.  Range rules live in
:mod:`resolution.domain.validation`, not on the model, because ``edit``
stores values exactly as given.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

DEFAULT_PRIORITY = 1

# Stored in place of an absent deadline.
DEADLINE_PLACEHOLDER = "-"


class ResolutionEntry(BaseModel):
    """One New Year's resolution.

    Attributes:
        text: Free-form description.
        priority: Integer priority, 1 (lowest) to 10 (highest) when validated.
        deadline: ``YYYY-MM-DD`` string, or None when no deadline is set.
    """

    model_config = {"frozen": True}

    text: str
    priority: int = DEFAULT_PRIORITY
    deadline: str | None = None

    def to_record(self) -> list[str]:
        """Return the three stored fields: text, priority, deadline-or-placeholder."""
        deadline = self.deadline if self.deadline is not None else DEADLINE_PLACEHOLDER
        return [self.text, str(self.priority), deadline]

    @classmethod
    def from_record(cls, text: str, priority: int, deadline: str) -> ResolutionEntry:
        """Build an entry from stored fields, mapping the placeholder to None."""
        return cls(
            text=text,
            priority=priority,
            deadline=None if deadline == DEADLINE_PLACEHOLDER else deadline,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
