"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

import click
import typer

from ..constants import EXIT_FAILURE, EXIT_SUCCESS
from .core.console import print_failure
from .core.types import Failure
from .dispatch import ActionGroup, AppState, get_state
from .mount.service import ensure_mounted

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Create Typer app
app = typer.Typer(
    name="pq",
    cls=ActionGroup,
    add_completion=False,
    epilog="Usage: $ sudo pq { ls | stat /<queue-name> | unlink /<queue-name> | umount }",
)


@app.callback()
def prepare(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every system call to stderr"),
) -> None:
    """Inspect and manage POSIX message queues.

    The message queue filesystem is mounted on /dev/mqueue before any
    command runs. Mounting and unmounting need root.
    """
    if verbose:
        enable_debug_logging()

    state = get_state(ctx)
    result = ensure_mounted(state.system, state.mount)
    if isinstance(result, Failure):
        print_failure(result)
        raise typer.Exit(EXIT_FAILURE)


def register_commands() -> None:
    """Register all commands from feature modules."""
    # Import and register queue commands
    from .queue.commands import ls, stat, unlink

    app.command(name="ls")(ls)
    app.command(name="list", hidden=True)(ls)
    app.command(name="stat")(stat)
    app.command(name="unlink")(unlink)

    # Import and register mount commands
    from .mount.commands import umount

    app.command(name="umount")(umount)
    app.command(name="unmount", hidden=True)(umount)


def setup_logging() -> None:
    """Configure logging for CLI.

    The ``mqctl`` logger stays silent unless --verbose is given, so the
    single diagnostic line per failure is all a user sees by default.
    """
    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    mqctl_logger = logging.getLogger("mqctl")
    mqctl_logger.setLevel(logging.CRITICAL)
    mqctl_logger.propagate = False
    mqctl_logger.handlers = [logging.NullHandler()]


def enable_debug_logging() -> None:
    """Send mqctl debug logging to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    mqctl_logger = logging.getLogger("mqctl")
    mqctl_logger.setLevel(logging.DEBUG)
    mqctl_logger.handlers = [handler]


# Initialize logging on module import
setup_logging()

# Register all commands
register_commands()


def main(argv: Optional[Sequence[str]] = None, state: Optional[AppState] = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        state: Backend and mount config to run against (defaults to the live system)

    Returns:
        Process exit status: 0 on success, 1 on any failure
    """
    try:
        rv = app(
            args=list(argv) if argv is not None else None,
            prog_name="pq",
            standalone_mode=False,
            obj=state,
        )
    except click.ClickException as e:
        # Usage errors: print the usage synopsis and the reason on stderr
        e.show()
        return EXIT_FAILURE
    except click.exceptions.Abort:
        return EXIT_FAILURE

    return rv if isinstance(rv, int) else EXIT_SUCCESS
