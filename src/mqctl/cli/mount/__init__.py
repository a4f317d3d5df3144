"""Mount feature - attach and release the message queue filesystem."""

from .commands import umount
from .service import ensure_mounted, release_mount

__all__ = [
    "umount",
    "ensure_mounted",
    "release_mount",
]
