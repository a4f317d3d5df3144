"""Command routing state shared by every CLI command."""

from __future__ import annotations

from dataclasses import dataclass, field

import click
import typer
from typer.core import TyperGroup

from ..config import MountConfig
from ..constants import EXIT_FAILURE
from ..system import LinuxQueueSystem, QueueSystem
from .core.console import print_error


@dataclass
class AppState:
    """What every command runs against, stored as the click context ``obj``."""

    system: QueueSystem = field(default_factory=LinuxQueueSystem)
    mount: MountConfig = field(default_factory=MountConfig)


def _invalid_action_command(token: str) -> click.Command:
    """Build the stand-in command for an unknown action token."""

    def report(args: tuple[str, ...]) -> None:
        print_error(f'Invalid action "{token}"')
        raise typer.Exit(EXIT_FAILURE)

    return click.Command(
        name=token,
        callback=report,
        params=[click.Argument(["args"], nargs=-1, type=click.UNPROCESSED)],
        context_settings={"ignore_unknown_options": True},
        add_help_option=False,
    )


class ActionGroup(TyperGroup):
    """Group that still runs its callback before rejecting an unknown action.

    click normally fails on an unknown subcommand before the group callback
    runs. Resolving it to a reporting command instead keeps the order
    mount -> route -> report.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        token = args[0]
        if not token.startswith("-") and self.get_command(ctx, token) is None:
            return token, _invalid_action_command(token), args[1:]
        return super().resolve_command(ctx, args)


def get_state(ctx: typer.Context) -> AppState:
    """Return the AppState of the running invocation."""
    return ctx.ensure_object(AppState)
