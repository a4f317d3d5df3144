"""mqctl - inspect and manage POSIX message queues on Linux."""

__version__ = "0.1.0"
