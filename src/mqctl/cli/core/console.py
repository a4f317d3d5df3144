"""Rich console singletons for CLI output.

Data goes to ``console`` (stdout); diagnostics go to ``err_console`` (stderr).
Both use soft wrapping so every message stays on a single line, and neither
rewrites :shortcode: text, so queue names print exactly as named.
"""

from rich.console import Console
from rich.markup import escape

from .types import Failure

# Global console instances - used across all CLI modules
console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print_error(message: str, target: Console | None = None) -> None:
    """Print an error message as one ``Error: ...`` line.

    Args:
        message: Error message, printed verbatim
        target: Console to print on (defaults to stderr)
    """
    (target or err_console).print(f"[red]Error: {escape(message)}[/red]")


def print_failure(failure: Failure, target: Console | None = None) -> None:
    """Print the diagnostic carried by a Failure."""
    print_error(failure.error, target)
