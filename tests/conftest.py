"""Shared test fixtures and configuration.

Provides an in-memory QueueSystem so CLI components can be exercised without
root, a kernel, or a real /dev/mqueue. The fake raises OSError with the same
errno values the kernel uses.
"""

from __future__ import annotations

import errno
import os
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mqctl.cli.app import setup_logging
from mqctl.cli.dispatch import AppState
from mqctl.config import MountConfig
from mqctl.system import DirEntry, QueueAttributes


def os_error(code: int) -> OSError:
    """Build an OSError the way the kernel reports it."""
    return OSError(code, os.strerror(code))


@dataclass
class FakeHandle:
    """Open queue descriptor handed out by FakeQueueSystem."""

    name: str
    closed: bool = False


class FakeQueueSystem:
    """In-memory mount point, mount table and queue namespace.

    ``errors`` maps a method name to an errno that method raises on every call.
    ``calls`` records method names in call order.
    """

    def __init__(self) -> None:
        self.directories: set[str] = set()
        self.mounts: dict[str, int] = {}
        self.queues: dict[str, QueueAttributes] = {}
        self.extra_entries: list[DirEntry] = []
        self.busy = False
        self.errors: dict[str, int] = {}
        self.calls: list[str] = []
        self.handles: list[FakeHandle] = []

    def _enter(self, method: str) -> None:
        self.calls.append(method)
        if method in self.errors:
            raise os_error(self.errors[method])

    # -- helpers for tests --------------------------------------------------

    def add_queue(
        self,
        name: str,
        max_messages: int = 10,
        max_message_size: int = 8192,
        current_messages: int = 0,
    ) -> None:
        self.queues[name] = QueueAttributes(
            flags=0,
            max_messages=max_messages,
            max_message_size=max_message_size,
            current_messages=current_messages,
        )

    def mount_count(self, path: str) -> int:
        return self.mounts.get(path, 0)

    # -- QueueSystem ----------------------------------------------------------

    def make_dir(self, path: str, mode: int) -> None:
        self._enter("make_dir")
        if path in self.directories:
            raise os_error(errno.EEXIST)
        self.directories.add(path)

    def remove_dir(self, path: str) -> None:
        self._enter("remove_dir")
        if path not in self.directories:
            raise os_error(errno.ENOENT)
        if self.mount_count(path):
            raise os_error(errno.EBUSY)
        self.directories.remove(path)

    def is_mounted(self, path: str, fstype: str) -> bool:
        self.calls.append("is_mounted")
        return self.mount_count(path) > 0

    def mount(self, source: str, target: str, fstype: str) -> None:
        self._enter("mount")
        if target not in self.directories:
            raise os_error(errno.ENOENT)
        self.mounts[target] = self.mount_count(target) + 1

    def unmount(self, target: str) -> None:
        self._enter("unmount")
        if target not in self.directories:
            raise os_error(errno.ENOENT)
        if not self.mount_count(target):
            raise os_error(errno.EINVAL)
        if self.busy:
            raise os_error(errno.EBUSY)
        self.mounts[target] -= 1
        if not self.mounts[target]:
            del self.mounts[target]

    def scan_dir(self, path: str) -> list[DirEntry]:
        self._enter("scan_dir")
        if path not in self.directories:
            raise os_error(errno.ENOENT)
        if not self.mount_count(path):
            return []
        # The filesystem shows "/jobs" as the entry "jobs"
        queues = [DirEntry(name=name.lstrip("/"), is_dir=False) for name in self.queues]
        return queues + list(self.extra_entries)

    def open_queue(self, name: str) -> FakeHandle:
        self._enter("open_queue")
        if name not in self.queues:
            raise os_error(errno.ENOENT)
        handle = FakeHandle(name)
        self.handles.append(handle)
        return handle

    def queue_attributes(self, handle: FakeHandle) -> QueueAttributes:
        self._enter("queue_attributes")
        return self.queues[handle.name]

    def close_queue(self, handle: FakeHandle) -> None:
        handle.closed = True
        self._enter("close_queue")

    def unlink_queue(self, name: str) -> None:
        self._enter("unlink_queue")
        if name not in self.queues:
            raise os_error(errno.ENOENT)
        del self.queues[name]


@pytest.fixture(autouse=True)
def quiet_logging():
    """Restore the silent mqctl logger after tests that pass --verbose."""
    yield
    setup_logging()


@pytest.fixture
def fake_system() -> FakeQueueSystem:
    """A fake system with nothing created or mounted yet."""
    return FakeQueueSystem()


@pytest.fixture
def mount_config(tmp_path: Path) -> MountConfig:
    """Mount config pointing at a path under the test's temp directory."""
    return MountConfig(path=str(tmp_path / "mqueue"))


@pytest.fixture
def mounted_system(fake_system: FakeQueueSystem, mount_config: MountConfig) -> FakeQueueSystem:
    """A fake system with the queue filesystem already mounted."""
    fake_system.directories.add(mount_config.path)
    fake_system.mounts[mount_config.path] = 1
    return fake_system


@pytest.fixture
def app_state(fake_system: FakeQueueSystem, mount_config: MountConfig) -> AppState:
    """CLI state wired to the fake system."""
    return AppState(system=fake_system, mount=mount_config)
