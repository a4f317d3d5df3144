"""Status enums and exit codes for mqctl.

This module contains:
- Outcome of a single idempotent system step (mkdir, mount, umount, rmdir)
- Error kinds reported by the CLI components
- Process exit codes

The attempt state machine for one system step:
  attempt -> SUCCEEDED
          -> ALREADY_DONE   (kernel reported the desired state already holds)
          -> FAILED         (anything else, carries the system reason)
"""

from enum import Enum
from typing import Final


# =============================================================================
# SYSTEM STEP OUTCOME
# =============================================================================

class AttemptStatus(str, Enum):
    """Outcome of one idempotent system call."""

    SUCCEEDED = "succeeded"
    """The call did what was asked."""

    ALREADY_DONE = "already_done"
    """The call failed only because the target was already in the desired state."""

    FAILED = "failed"
    """The call failed for any other reason."""


# =============================================================================
# ERROR KINDS
# =============================================================================

class ErrorKind(str, Enum):
    """Kind of failure a CLI component can report."""

    USAGE = "usage"
    MOUNT = "mount"
    ENUMERATION = "enumeration"
    QUEUE_OPEN = "queue_open"
    QUEUE_ATTRIBUTE = "queue_attribute"
    QUEUE_UNLINK = "queue_unlink"
    UNMOUNT = "unmount"
    MOUNT_POINT_REMOVAL = "mount_point_removal"
    INVALID_ACTION = "invalid_action"


# =============================================================================
# EXIT CODES
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
"""Every failure maps to the same status, whatever its kind."""
