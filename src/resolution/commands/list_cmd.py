"""Command: list New Year's resolutions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from resolution.commands._base import ResCommand

if TYPE_CHECKING:
    from resolution.commands._context import AppContext


@click.command(
    "list",
    cls=ResCommand,
    examples="""\
  resolution list
  resolution list --numbered
  resolution list -n -o
  resolution -q list --orderedByPriority""",
)
@click.option(
    "-n",
    "--numbered",
    is_flag=True,
    help="Numbers the New Year's resolutions according to their insertion order starting from 1.",
)
@click.option(
    "-o",
    "--orderedByPriority",
    "--ordered-by-priority",
    "ordered_by_priority",
    is_flag=True,
    help="Orders the New Year's resolutions by their priority.",
)
@click.pass_obj
def list_cmd(app: AppContext, numbered: bool, ordered_by_priority: bool) -> None:
    """Shows a list of all added New Year's resolutions.

    The list can be numbered and ordered by priority.  Numbers always refer
    to insertion order, so they stay usable with edit and delete.
    """
    from resolution.services.query import QueryService

    service = QueryService(app.store)
    app.emit(service.list(numbered=numbered, ordered_by_priority=ordered_by_priority))
