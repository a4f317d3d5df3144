"""CLI package - feature-based, stateless architecture.

This package provides a clean separation of concerns:
- core/: Shared types and console output
- mount/: Attaching and releasing the message queue filesystem
- queue/: Listing, inspecting and unlinking queues
- dispatch.py: Command routing and per-invocation state

Usage:
    pq ls
    pq stat /<queue-name>
    pq unlink /<queue-name>
    pq umount
"""

from .app import app, main

__all__ = ["app", "main"]
