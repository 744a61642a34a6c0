"""Command: delete a New Year's resolution by position."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from resolution.commands._base import ResCommand

if TYPE_CHECKING:
    from resolution.commands._context import AppContext


@click.command(
    cls=ResCommand,
    examples="""\
  resolution delete 1
  resolution list --numbered && resolution delete 3""",
)
@click.argument("position", type=int)
@click.pass_obj
def delete(app: AppContext, position: int) -> None:
    """Deletes an existing New Year's resolution.

    This will delete an existing New Year's resolution by specifying its
    position.  Later resolutions move up by one position.
    """
    from resolution.services.update import UpdateService

    app.emit(UpdateService(app.store).delete(position))
