"""Core utilities for CLI - shared types and console output."""

from .console import console, err_console, print_error, print_failure
from .types import Attempt, Failure, Result, Success

__all__ = [
    # Types
    "Attempt",
    "Result",
    "Success",
    "Failure",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_failure",
]
