"""Subcommand modules for resolution.

Provides register_commands() which uses deferred imports to keep
``resolution --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group.

    ``edit`` is a group (it owns the nested ``remove`` command); the
    other three are standalone commands.
    """
    from resolution.commands.create import create
    from resolution.commands.delete import delete
    from resolution.commands.edit import edit
    from resolution.commands.list_cmd import list_cmd

    cli.add_command(create)
    cli.add_command(edit)
    cli.add_command(delete)
    cli.add_command(list_cmd)
