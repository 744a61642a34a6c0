"""Command group: edit a resolution, or remove its optional fields.

``resolution edit POSITION [--text/--priority/--deadline]`` overwrites fields.
``resolution edit POSITION remove [--priority] [--deadline]`` clears them.

The group validates POSITION first.  When ``remove`` follows, the validated
position is handed down explicitly as an :class:`EditSelection` on the
child context object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from resolution.commands._base import ResGroup
from resolution.services.update import UpdateService

if TYPE_CHECKING:
    from resolution.commands._context import AppContext


@dataclass(frozen=True)
class EditSelection:
    """Position chosen by ``edit``, passed to its ``remove`` subcommand."""

    app: AppContext
    position: int | None


_EDIT_EXAMPLES = """\
  resolution edit 1 --text "Learn Rust properly"
  resolution edit 2 --priority 7 --deadline 2030-06-30
  resolution edit 2 remove --deadline
  resolution edit 3 remove -p -d"""


@click.group(cls=ResGroup, invoke_without_command=True, examples=_EDIT_EXAMPLES)
@click.argument("position", type=int)
@click.option("-t", "--text", default=None, help="Description of the New Year's resolution.")
@click.option(
    "-p", "--priority", type=int, default=None, help="Priority of the New Year's resolution."
)
@click.option(
    "-d", "--deadline", default=None, help="Sets a deadline for the New Year's resolution."
)
@click.pass_context
def edit(
    ctx: click.Context,
    position: int,
    text: str | None,
    priority: int | None,
    deadline: str | None,
) -> None:
    """Updates a New Year's resolution.

    This will update an existing New Year's resolution by editing
    properties as well as deleting optional ones.
    """
    app: AppContext = ctx.obj
    service = UpdateService(app.store, validate_edits=app.settings.edit.validate_fields)

    if ctx.invoked_subcommand is None:
        app.emit(service.edit(position, text=text, priority=priority, deadline=deadline))
        return

    if any(value is not None for value in (text, priority, deadline)):
        msg = f"--text/--priority/--deadline cannot be combined with '{ctx.invoked_subcommand}'."
        raise click.UsageError(msg, ctx=ctx)

    selection = service.select(position)
    if not selection.ok:
        app.emit(selection)
    ctx.obj = EditSelection(app=app, position=selection.data["position"])


@edit.command(
    examples="""\
  resolution edit 2 remove --priority
  resolution edit 2 remove --deadline
  resolution edit 2 remove -p -d""",
)
@click.option(
    "-p",
    "--priority",
    "remove_priority",
    is_flag=True,
    help="Removes the priority and sets it to 1.",
)
@click.option("-d", "--deadline", "remove_deadline", is_flag=True, help="Removes the deadline.")
@click.pass_obj
def remove(selection: EditSelection, remove_priority: bool, remove_deadline: bool) -> None:
    """Removes optional properties of a New Year's resolution.

    This will remove optional properties of an existing New Year's
    resolution instead of updating their values.
    """
    app = selection.app
    service = UpdateService(app.store)
    app.emit(
        service.remove(
            selection.position,
            remove_priority=remove_priority,
            remove_deadline=remove_deadline,
        )
    )
