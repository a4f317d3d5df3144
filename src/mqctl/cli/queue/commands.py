"""Queue CLI commands - thin wrappers orchestrating display and service."""

from __future__ import annotations

import typer

from ...constants import EXIT_FAILURE
from ..core.console import console, print_failure
from ..core.types import Failure
from ..dispatch import get_state
from .display import show_queue_attributes, show_queue_names
from .service import destroy_queue, inspect_queue, list_queues

QUEUE_NAME_METAVAR = "/<queue-name>"


def ls(ctx: typer.Context) -> None:
    """List all POSIX queues, one name per line."""
    state = get_state(ctx)

    result = list_queues(state.system, state.mount)
    if isinstance(result, Failure):
        print_failure(result)
        raise typer.Exit(EXIT_FAILURE)

    show_queue_names(console, result.value)


def stat(
    ctx: typer.Context,
    queue_name: str = typer.Argument(..., metavar=QUEUE_NAME_METAVAR, help="Queue name, e.g. /jobs"),
) -> None:
    """Show a queue's flags, maxmsg, msgsize and curmsgs."""
    state = get_state(ctx)

    result = inspect_queue(state.system, queue_name)
    if isinstance(result, Failure):
        print_failure(result)
        raise typer.Exit(EXIT_FAILURE)

    show_queue_attributes(console, result.value)


def unlink(
    ctx: typer.Context,
    queue_name: str = typer.Argument(..., metavar=QUEUE_NAME_METAVAR, help="Queue name, e.g. /jobs"),
) -> None:
    """Remove a queue.

    Processes that already have it open keep using it until they close it.
    """
    state = get_state(ctx)

    result = destroy_queue(state.system, queue_name)
    if isinstance(result, Failure):
        print_failure(result)
        raise typer.Exit(EXIT_FAILURE)
