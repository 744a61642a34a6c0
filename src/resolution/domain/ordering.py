"""Position numbering and priority ordering for listing."""

from __future__ import annotations

from collections.abc import Sequence

from resolution.domain.entry import ResolutionEntry


def number_entries(entries: Sequence[ResolutionEntry]) -> list[tuple[int, ResolutionEntry]]:
    """Pair each entry with its 1-based insertion-order position.

    Examples:
        >>> pairs = number_entries([ResolutionEntry(text="a"), ResolutionEntry(text="b")])
        >>> [pos for pos, _ in pairs]
        [1, 2]
    """
    return [(index + 1, entry) for index, entry in enumerate(entries)]


def order_by_priority(
    numbered: Sequence[tuple[int, ResolutionEntry]],
) -> list[tuple[int, ResolutionEntry]]:
    """Sort numbered entries by priority, highest first.

    The sort is stable, so ties keep their original relative order, and
    position labels travel with their entries.
    """
    return sorted(numbered, key=lambda pair: pair[1].priority, reverse=True)
