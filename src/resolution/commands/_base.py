"""Command classes shared by every resolution subcommand.

A command may be declared with a block of sample invocations.  Passing
``--examples`` prints that block and stops before any argument is checked,
so ``resolution edit --examples`` works without a POSITION.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(ctx.command.examples)  # type: ignore[attr-defined]
    ctx.exit(0)


class _ExamplesMixin:
    """Keeps the ``examples`` text and registers the flag that prints it."""

    params: list[click.Parameter]
    examples: str | None

    def _register_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=_print_examples,
                help="Show usage examples.",
            )
        )


class ResCommand(_ExamplesMixin, click.Command):
    """A resolution subcommand; accepts ``examples=``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._register_examples(examples)


class ResGroup(_ExamplesMixin, click.Group):
    """A resolution command with subcommands of its own (``edit`` → ``remove``)."""

    command_class = ResCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._register_examples(examples)
