"""Mount configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .constants import (
    MQUEUE_FSTYPE,
    MQUEUE_MOUNT_MODE,
    MQUEUE_MOUNT_POINT,
    MQUEUE_SOURCE,
)


class MountConfig(BaseModel):
    """Where and how the message queue filesystem is attached.

    The defaults are the only values the CLI uses. The model exists so the
    mount point is handed explicitly to every component, and tests can point
    it somewhere harmless.
    """

    model_config = ConfigDict(frozen=True)

    path: str = MQUEUE_MOUNT_POINT
    fstype: str = MQUEUE_FSTYPE
    source: str = MQUEUE_SOURCE
    mode: int = MQUEUE_MOUNT_MODE
