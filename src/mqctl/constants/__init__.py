"""Global constants package for mqctl.

PACKAGE STRUCTURE:
-----------------
- paths.py    : Mount point, filesystem type, kernel tables
- status.py   : Attempt outcomes, error kinds, exit codes

USAGE EXAMPLES:
--------------
    from mqctl.constants import MQUEUE_MOUNT_POINT, ErrorKind
"""

from .paths import (
    MQUEUE_FSTYPE,
    MQUEUE_MOUNT_MODE,
    MQUEUE_MOUNT_POINT,
    MQUEUE_SOURCE,
    PROC_MOUNTS,
)
from .status import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    AttemptStatus,
    ErrorKind,
)

__all__ = [
    # Paths
    "MQUEUE_MOUNT_POINT",
    "MQUEUE_FSTYPE",
    "MQUEUE_SOURCE",
    "MQUEUE_MOUNT_MODE",
    "PROC_MOUNTS",
    # Status
    "AttemptStatus",
    "ErrorKind",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
]
