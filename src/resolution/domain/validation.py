"""Input validation rules for resolution fields and list positions.

Every check returns a :class:`ValidationResult`; callers short-circuit on the
first invalid result and perform no write.  Deadlines are validated once, at
write time.  A stored deadline that has since passed is never re-checked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date

PRIORITY_MIN = 1
PRIORITY_MAX = 10

# Pattern-level check only: "2025-02-30" matches and is rejected later.
DEADLINE_PATTERN: re.Pattern[str] = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")


@dataclass(frozen=True)
class ValidationResult:
    """Result of a validation check."""

    valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str) -> ValidationResult:
        return cls(valid=False, errors=[message])

    @property
    def message(self) -> str:
        return "; ".join(self.errors)


def validate_priority(
    priority: int,
    *,
    low: int = PRIORITY_MIN,
    high: int = PRIORITY_MAX,
) -> ValidationResult:
    """Accept *priority* only within ``[low, high]`` inclusive."""
    if low <= priority <= high:
        return ValidationResult.ok()
    return ValidationResult.fail(
        f"The priority {priority} is not valid. "
        f"Please use a priority between {low} and {high}."
    )


def validate_deadline(deadline: str, *, today: date | None = None) -> ValidationResult:
    """Accept a ``YYYY-MM-DD`` deadline strictly after *today*.

    Args:
        deadline: The user-supplied deadline string.
        today: Reference date; defaults to the local current date.
    """
    if DEADLINE_PATTERN.match(deadline) is None:
        return ValidationResult.fail(
            f"The deadline {deadline} is not valid. Please use the format yyyy-MM-dd."
        )

    try:
        parsed = date.fromisoformat(deadline)
    except ValueError:
        return ValidationResult.fail(
            f"The deadline {deadline} is not valid. Please use a real calendar date."
        )

    reference = today or date.today()
    if parsed <= reference:
        return ValidationResult.fail(
            f"The deadline {deadline} is not valid. Please use a date after today."
        )
    return ValidationResult.ok()


def validate_text(text: str) -> ValidationResult:
    """Reject blank resolution descriptions."""
    if text.strip():
        return ValidationResult.ok()
    return ValidationResult.fail("The text of a New Year's resolution must not be empty.")


def validate_position(position: int, count: int) -> ValidationResult:
    """Accept a 1-based *position* into a list of *count* entries."""
    if 1 <= position <= count:
        return ValidationResult.ok()
    return ValidationResult.fail(f"The id {position} is not valid. Please use a valid id.")
