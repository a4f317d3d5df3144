"""Stateless service for attaching and detaching the queue filesystem.

Each system step is classified into an ``Attempt`` right where it is made:
an errno that means "already in the desired state" becomes ALREADY_DONE,
anything else becomes FAILED with the system's reason.
"""

from __future__ import annotations

import errno
import logging

from ...config import MountConfig
from ...constants import ErrorKind
from ...system import QueueSystem, describe_error
from ..core.types import Attempt, Failure, Result, Success

logger = logging.getLogger("mqctl.mount")

# Errors from umount(2) meaning nothing is attached at the target
_NOT_MOUNTED_ERRNOS = (errno.EINVAL, errno.ENOENT)


def create_mount_point(system: QueueSystem, mount: MountConfig) -> Attempt:
    """Create the mount point directory; an existing one is fine."""
    try:
        system.make_dir(mount.path, mount.mode)
    except OSError as e:
        if e.errno == errno.EEXIST:
            return Attempt.already_done(describe_error(e), e.errno)
        return Attempt.failed(describe_error(e), e.errno)
    return Attempt.succeeded()


def attach_filesystem(system: QueueSystem, mount: MountConfig) -> Attempt:
    """Mount the queue filesystem unless it is already mounted."""
    if system.is_mounted(mount.path, mount.fstype):
        return Attempt.already_done("already mounted")

    try:
        system.mount(mount.source, mount.path, mount.fstype)
    except OSError as e:
        if e.errno == errno.EBUSY:
            return Attempt.already_done(describe_error(e), e.errno)
        return Attempt.failed(describe_error(e), e.errno)
    return Attempt.succeeded()


def detach_filesystem(system: QueueSystem, mount: MountConfig) -> Attempt:
    """Unmount the queue filesystem if it is mounted."""
    try:
        system.unmount(mount.path)
    except OSError as e:
        if e.errno in _NOT_MOUNTED_ERRNOS:
            return Attempt.already_done(describe_error(e), e.errno)
        return Attempt.failed(describe_error(e), e.errno)
    return Attempt.succeeded()


def remove_mount_point(system: QueueSystem, mount: MountConfig) -> Attempt:
    """Remove the mount point directory; a missing one is fine."""
    try:
        system.remove_dir(mount.path)
    except OSError as e:
        if e.errno == errno.ENOENT:
            return Attempt.already_done(describe_error(e), e.errno)
        return Attempt.failed(describe_error(e), e.errno)
    return Attempt.succeeded()


def ensure_mounted(system: QueueSystem, mount: MountConfig) -> Result[MountConfig]:
    """Make sure the mount point exists and the queue filesystem is on it.

    Args:
        system: Backend to run the system calls on
        mount: Mount point and filesystem description

    Returns:
        Success with the mount config, or Failure of kind MOUNT
    """
    created = create_mount_point(system, mount)
    logger.debug(f"mkdir {mount.path}: {created.status.value}")
    if not created.ok:
        return Failure(
            kind=ErrorKind.MOUNT,
            error=f"Couldn't create posix filesystem mount point {mount.path} ({created.reason})",
        )

    attached = attach_filesystem(system, mount)
    logger.debug(f"mount -t {mount.fstype} {mount.source} {mount.path}: {attached.status.value}")
    if not attached.ok:
        return Failure(
            kind=ErrorKind.MOUNT,
            error=f"Couldn't mount the posix queue filesystem ({attached.reason})",
        )

    return Success(mount)


def release_mount(system: QueueSystem, mount: MountConfig) -> Result[MountConfig]:
    """Unmount the queue filesystem and remove its mount point.

    A busy filesystem is reported at either step and leaves the mount point
    in place. A filesystem that is not mounted, or a mount point that does
    not exist, counts as already released.

    Args:
        system: Backend to run the system calls on
        mount: Mount point and filesystem description

    Returns:
        Success with the mount config, or Failure of kind UNMOUNT or
        MOUNT_POINT_REMOVAL
    """
    detached = detach_filesystem(system, mount)
    logger.debug(f"umount {mount.path}: {detached.status.value}")

    if not detached.ok and detached.code == errno.EBUSY:
        return Failure(
            kind=ErrorKind.UNMOUNT,
            error=f"Couldn't unmount the posix queue filesystem ({detached.reason})",
        )

    removed = remove_mount_point(system, mount)
    logger.debug(f"rmdir {mount.path}: {removed.status.value}")
    if not removed.ok:
        reason = removed.reason
        if not detached.ok:
            reason = f"{reason}; unmount failed: {detached.reason}"
        return Failure(
            kind=ErrorKind.MOUNT_POINT_REMOVAL,
            error=f"Couldn't remove posix filesystem mount point {mount.path} ({reason})",
        )

    return Success(mount)
