"""Interface to the kernel objects mqctl touches.

Every call that reaches the operating system goes through a ``QueueSystem``.
Implementations report failures by raising ``OSError`` with ``errno`` set, so
callers can classify "already done" outcomes by error number alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class DirEntry:
    """One entry found under the mount point."""

    name: str
    is_dir: bool


@dataclass(frozen=True)
class QueueAttributes:
    """Snapshot of a queue's mq_attr structure."""

    flags: int
    max_messages: int
    max_message_size: int
    current_messages: int


class QueueSystem(Protocol):
    """Operations on the mount point and the POSIX queue namespace."""

    def make_dir(self, path: str, mode: int) -> None:
        """Create a directory. Raises OSError (EEXIST if present)."""
        ...

    def remove_dir(self, path: str) -> None:
        """Remove an empty directory. Raises OSError."""
        ...

    def is_mounted(self, path: str, fstype: str) -> bool:
        """Return True if a filesystem of ``fstype`` is attached at ``path``."""
        ...

    def mount(self, source: str, target: str, fstype: str) -> None:
        """Attach a filesystem. Raises OSError (EBUSY if already attached)."""
        ...

    def unmount(self, target: str) -> None:
        """Detach a filesystem. Raises OSError (EBUSY while in use)."""
        ...

    def scan_dir(self, path: str) -> list[DirEntry]:
        """Return the entries of a directory in enumeration order."""
        ...

    def open_queue(self, name: str) -> Any:
        """Open an existing queue read-only and return its handle."""
        ...

    def queue_attributes(self, handle: Any) -> QueueAttributes:
        """Read the attributes of an open queue."""
        ...

    def close_queue(self, handle: Any) -> None:
        """Release a handle returned by ``open_queue``."""
        ...

    def unlink_queue(self, name: str) -> None:
        """Remove a queue name from the namespace."""
        ...


def describe_error(exc: OSError) -> str:
    """Human readable reason for a failed system call."""
    return exc.strerror or str(exc)
