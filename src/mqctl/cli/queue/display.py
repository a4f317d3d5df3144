"""Display functions for queue commands - plain lines, scriptable output."""

from __future__ import annotations

from rich.console import Console

from ...system import QueueAttributes

NO_QUEUES_PLACEHOLDER = "(No posix queues)"


def show_queue_names(console: Console, names: list[str]) -> None:
    """Print one queue name per line, or a placeholder when there are none."""
    if not names:
        console.print(NO_QUEUES_PLACEHOLDER, markup=False, emoji=False)
        return

    for name in names:
        console.print(name, markup=False, emoji=False)


def format_queue_attributes(attributes: QueueAttributes) -> list[str]:
    """Render attributes as fixed-order ``key value`` lines."""
    fields = [
        ("flags", attributes.flags),
        ("maxmsg", attributes.max_messages),
        ("msgsize", attributes.max_message_size),
        ("curmsgs", attributes.current_messages),
    ]
    return [f"{key:<8}{value}" for key, value in fields]


def show_queue_attributes(console: Console, attributes: QueueAttributes) -> None:
    """Print the four-line attribute report."""
    for line in format_queue_attributes(attributes):
        console.print(line, markup=False, emoji=False)
