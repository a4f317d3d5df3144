"""Core types for CLI - immutable data structures and Result type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from ...constants import AttemptStatus, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result containing a value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Failed result with its kind and a one-line diagnostic."""

    kind: ErrorKind
    error: str
    details: dict[str, Any] | None = None


# Result type - either Success[T] or Failure
Result = Union[Success[T], Failure]


@dataclass(frozen=True)
class Attempt:
    """Classified outcome of one idempotent system call."""

    status: AttemptStatus
    reason: str | None = None
    code: int | None = None

    @property
    def ok(self) -> bool:
        """True when the target ended up in the desired state."""
        return self.status is not AttemptStatus.FAILED

    @classmethod
    def succeeded(cls) -> "Attempt":
        return cls(AttemptStatus.SUCCEEDED)

    @classmethod
    def already_done(cls, reason: str | None = None, code: int | None = None) -> "Attempt":
        return cls(AttemptStatus.ALREADY_DONE, reason, code)

    @classmethod
    def failed(cls, reason: str, code: int | None = None) -> "Attempt":
        return cls(AttemptStatus.FAILED, reason, code)
