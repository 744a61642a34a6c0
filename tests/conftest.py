"""Shared pytest fixtures and test helpers for resolution tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from resolution.domain.entry import ResolutionEntry
from resolution.infrastructure.store import ResolutionStore
from resolution.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_ambient_state() -> Iterator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    app_level = logging.getLogger("resolution").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("resolution").setLevel(app_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Location of a not-yet-created store file inside a missing directory."""
    return tmp_path / "files" / "resolutions.csv"


@pytest.fixture
def store(store_path: Path) -> ResolutionStore:
    return ResolutionStore(store_path)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated store.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.  The store then lives at ``tmp_path / "files/resolutions.csv"``.
    """
    monkeypatch.delenv("RESOLUTION_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def seed(store: ResolutionStore, *entries: tuple[str, int, str | None]) -> list[ResolutionEntry]:
    """Write ``(text, priority, deadline)`` triples to *store*, returning the entries."""
    models = [ResolutionEntry(text=t, priority=p, deadline=d) for t, p, d in entries]
    store.save_all(models)
    return models
