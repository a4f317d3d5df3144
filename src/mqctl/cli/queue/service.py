"""Stateless service for queue operations."""

from __future__ import annotations

import logging

from ...config import MountConfig
from ...constants import ErrorKind
from ...system import DirEntry, QueueAttributes, QueueSystem, describe_error
from ..core.types import Failure, Result, Success

logger = logging.getLogger("mqctl.queue")


def is_queue_entry(entry: DirEntry) -> bool:
    """Directories and dot entries under the mount point are not queues."""
    return not entry.is_dir and not entry.name.startswith(".")


def list_queues(system: QueueSystem, mount: MountConfig) -> Result[list[str]]:
    """Find all queues on the mounted filesystem.

    Args:
        system: Backend to read the mount point with
        mount: Mount point to enumerate

    Returns:
        Success with queue names in enumeration order (possibly empty), or
        Failure of kind ENUMERATION
    """
    try:
        entries = system.scan_dir(mount.path)
    except OSError as e:
        return Failure(
            kind=ErrorKind.ENUMERATION,
            error=f"Couldn't read from the posix queue filesystem ({describe_error(e)})",
        )

    names = [entry.name for entry in entries if is_queue_entry(entry)]
    logger.debug(f"{len(names)} queue(s) of {len(entries)} entries under {mount.path}")
    return Success(names)


def inspect_queue(system: QueueSystem, name: str) -> Result[QueueAttributes]:
    """Open a queue read-only and read its attributes.

    The handle is closed on every path out of this function.

    Args:
        system: Backend to open the queue with
        name: Queue name, e.g. "/jobs"

    Returns:
        Success with the attributes, or Failure of kind QUEUE_OPEN or
        QUEUE_ATTRIBUTE
    """
    try:
        handle = system.open_queue(name)
    except OSError as e:
        return Failure(
            kind=ErrorKind.QUEUE_OPEN,
            error=f"Couldn't open queue {name} ({describe_error(e)})",
            details={"queue": name},
        )

    try:
        attributes = system.queue_attributes(handle)
    except OSError as e:
        return Failure(
            kind=ErrorKind.QUEUE_ATTRIBUTE,
            error=f"Failed to query queue {name} for its parameters ({describe_error(e)})",
            details={"queue": name},
        )
    finally:
        _close_quietly(system, handle, name)

    return Success(attributes)


def _close_quietly(system: QueueSystem, handle: object, name: str) -> None:
    try:
        system.close_queue(handle)
    except OSError as e:
        logger.warning(f"Closing queue {name} failed: {describe_error(e)}")


def destroy_queue(system: QueueSystem, name: str) -> Result[str]:
    """Unlink a queue name. Processes holding it open keep their handles.

    Returns:
        Success with the name, or Failure of kind QUEUE_UNLINK
    """
    try:
        system.unlink_queue(name)
    except OSError as e:
        return Failure(
            kind=ErrorKind.QUEUE_UNLINK,
            error=f"Failed to unlink queue {name} ({describe_error(e)})",
            details={"queue": name},
        )

    logger.debug(f"Unlinked queue {name}")
    return Success(name)
