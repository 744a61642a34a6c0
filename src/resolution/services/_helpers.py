"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import date


def today() -> date:
    """Today's local calendar date, the reference for deadline checks."""
    return date.today()
