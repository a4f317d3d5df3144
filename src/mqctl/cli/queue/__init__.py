"""Queue feature - list, inspect and unlink POSIX queues."""

from .commands import ls, stat, unlink
from .display import show_queue_attributes, show_queue_names

__all__ = [
    "ls",
    "stat",
    "unlink",
    "show_queue_attributes",
    "show_queue_names",
]
