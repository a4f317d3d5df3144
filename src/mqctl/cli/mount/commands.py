"""Mount CLI commands - thin wrappers around the mount service."""

from __future__ import annotations

import typer

from ...constants import EXIT_FAILURE
from ..core.console import print_failure
from ..core.types import Failure
from ..dispatch import get_state
from .service import release_mount


def umount(ctx: typer.Context) -> None:
    """Unmount the queue filesystem and remove its mount point.

    Fails while the filesystem is busy. Running it when nothing is mounted
    succeeds.
    """
    state = get_state(ctx)

    result = release_mount(state.system, state.mount)
    if isinstance(result, Failure):
        print_failure(result)
        raise typer.Exit(EXIT_FAILURE)
