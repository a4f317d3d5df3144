"""Linux implementation of the QueueSystem interface."""

from __future__ import annotations

import errno
import logging
import os
import re
from typing import Any

import posix_ipc

from ..constants import PROC_MOUNTS
from . import libc
from .base import DirEntry, QueueAttributes

logger = logging.getLogger("mqctl.system")

# posix_ipc raises its own exception types; map them back to the errno the
# kernel reported so every backend failure looks the same to callers.
_POSIX_IPC_ERRNO = (
    (posix_ipc.ExistentialError, errno.ENOENT),
    (posix_ipc.PermissionsError, errno.EACCES),
    (ValueError, errno.EINVAL),
)


def _queue_error(exc: Exception, name: str) -> OSError:
    """Translate a posix_ipc failure into an OSError."""
    if isinstance(exc, OSError):
        return exc

    for exc_type, code in _POSIX_IPC_ERRNO:
        if isinstance(exc, exc_type):
            return OSError(code, str(exc) or os.strerror(code), name)

    return OSError(errno.EIO, str(exc) or os.strerror(errno.EIO), name)


_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def _unescape_mount_field(field: str) -> str:
    """Decode the octal escapes (\\040 for space) used in /proc/mounts."""
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), field)


def parse_mount_table(text: str) -> list[tuple[str, str, str]]:
    """Parse /proc/mounts content into (source, target, fstype) tuples."""
    mounts = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 3:
            continue
        source, target, fstype = fields[:3]
        mounts.append((_unescape_mount_field(source), _unescape_mount_field(target), fstype))
    return mounts


class LinuxQueueSystem:
    """Talks to the running kernel."""

    def __init__(self, mount_table: str = PROC_MOUNTS) -> None:
        self.mount_table = mount_table

    # -- mount point --------------------------------------------------------

    def make_dir(self, path: str, mode: int) -> None:
        os.mkdir(path, mode)

    def remove_dir(self, path: str) -> None:
        os.rmdir(path)

    def is_mounted(self, path: str, fstype: str) -> bool:
        try:
            with open(self.mount_table, encoding="utf-8", errors="surrogateescape") as f:
                table = f.read()
        except OSError as e:
            # mount(2) still reports EBUSY for a live mount
            logger.debug(f"Cannot read {self.mount_table}: {e}")
            return False

        target = os.path.normpath(path)
        return any(
            mounted_at == target and mounted_type == fstype
            for _, mounted_at, mounted_type in parse_mount_table(table)
        )

    def mount(self, source: str, target: str, fstype: str) -> None:
        libc.mount(source, target, fstype)

    def unmount(self, target: str) -> None:
        libc.umount(target)

    def scan_dir(self, path: str) -> list[DirEntry]:
        with os.scandir(path) as entries:
            return [
                DirEntry(name=entry.name, is_dir=entry.is_dir(follow_symlinks=False))
                for entry in entries
            ]

    # -- queues -------------------------------------------------------------

    def open_queue(self, name: str) -> Any:
        try:
            return posix_ipc.MessageQueue(name, flags=0, read=True, write=False)
        except (posix_ipc.Error, ValueError) as e:
            raise _queue_error(e, name) from e

    def queue_attributes(self, handle: Any) -> QueueAttributes:
        try:
            return QueueAttributes(
                flags=0 if handle.block else os.O_NONBLOCK,
                max_messages=handle.max_messages,
                max_message_size=handle.max_message_size,
                current_messages=handle.current_messages,
            )
        except (posix_ipc.Error, ValueError) as e:
            raise _queue_error(e, handle.name) from e

    def close_queue(self, handle: Any) -> None:
        try:
            handle.close()
        except posix_ipc.Error as e:
            raise _queue_error(e, handle.name) from e

    def unlink_queue(self, name: str) -> None:
        try:
            posix_ipc.unlink_message_queue(name)
        except (posix_ipc.Error, ValueError) as e:
            raise _queue_error(e, name) from e
