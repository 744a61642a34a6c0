"""Command: create a New Year's resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from resolution.commands._base import ResCommand
from resolution.domain.entry import DEFAULT_PRIORITY

if TYPE_CHECKING:
    from resolution.commands._context import AppContext


@click.command(
    cls=ResCommand,
    examples="""\
  resolution create "Learn Rust"
  resolution create "Run a marathon" --priority 8 --deadline 2030-10-01
  resolution --json create "Read 20 books" -p 5""",
)
@click.argument("text")
@click.option(
    "-p",
    "--priority",
    type=int,
    default=DEFAULT_PRIORITY,
    show_default=True,
    help="Priority of the New Year's resolution. Must be between 1 and 10.",
)
@click.option(
    "-d",
    "--deadline",
    default=None,
    help="Sets a deadline in the yyyy-MM-dd format for the New Year's resolution.",
)
@click.pass_obj
def create(app: AppContext, text: str, priority: int, deadline: str | None) -> None:
    """Creates a New Year's resolution.

    This will create a New Year's resolution and add it to the existing ones.
    """
    from resolution.services.create import CreateService

    app.emit(CreateService(app.store).create(text, priority=priority, deadline=deadline))
