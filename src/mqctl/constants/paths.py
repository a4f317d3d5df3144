"""Path-related constants for mqctl.

This module contains the fixed locations the tool works with:
- Message queue filesystem mount point
- Filesystem type and mount source passed to mount(2)
- Kernel mount table used to detect an existing mount

MODIFICATION GUIDE:
------------------
- MQUEUE_MOUNT_POINT is the conventional Linux location (see mq_overview(7))
- MQUEUE_MOUNT_MODE only applies when the directory is first created; once the
  filesystem is attached the kernel sets the sticky 1777 mode on its root
"""

from typing import Final

# =============================================================================
# MESSAGE QUEUE FILESYSTEM
# =============================================================================

MQUEUE_MOUNT_POINT: Final[str] = "/dev/mqueue"
"""Directory the message queue filesystem is attached to."""

MQUEUE_FSTYPE: Final[str] = "mqueue"
"""Filesystem type name registered by the kernel."""

MQUEUE_SOURCE: Final[str] = "none"
"""Mount source. Virtual filesystems have no backing device."""

MQUEUE_MOUNT_MODE: Final[int] = 0o644
"""Mode used when creating the mount point directory."""

# =============================================================================
# KERNEL TABLES
# =============================================================================

PROC_MOUNTS: Final[str] = "/proc/self/mounts"
"""Mount table of the calling process' mount namespace."""
