"""System backends - the only code that reaches the kernel."""

from .base import DirEntry, QueueAttributes, QueueSystem, describe_error
from .linux import LinuxQueueSystem

__all__ = [
    "DirEntry",
    "QueueAttributes",
    "QueueSystem",
    "LinuxQueueSystem",
    "describe_error",
]
