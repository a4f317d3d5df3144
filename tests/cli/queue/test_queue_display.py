"""Unit tests for queue display functions."""

from __future__ import annotations

import sys
from io import StringIO
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent / "src"))

from rich.console import Console

from mqctl.cli.queue.display import (
    NO_QUEUES_PLACEHOLDER,
    format_queue_attributes,
    show_queue_attributes,
    show_queue_names,
)
from mqctl.system import QueueAttributes


@pytest.fixture
def mock_console() -> Console:
    """Create a Console that captures output without ANSI codes."""
    return Console(file=StringIO(), force_terminal=False, no_color=True, width=120)


def output_lines(console: Console) -> list[str]:
    return console.file.getvalue().splitlines()


class TestShowQueueNames:
    """Tests for show_queue_names."""

    def test_one_name_per_line_in_given_order(self, mock_console: Console):
        show_queue_names(mock_console, ["zeta", "alpha", "mid"])
        assert output_lines(mock_console) == ["zeta", "alpha", "mid"]

    def test_empty_prints_placeholder(self, mock_console: Console):
        show_queue_names(mock_console, [])
        assert output_lines(mock_console) == [NO_QUEUES_PLACEHOLDER]

    def test_markup_in_names_is_printed_verbatim(self, mock_console: Console):
        """Test that queue names that look like rich markup are not interpreted."""
        show_queue_names(mock_console, ["[bold]q[/bold]"])
        assert output_lines(mock_console) == ["[bold]q[/bold]"]

    def test_emoji_shortcodes_in_names_are_printed_verbatim(self, mock_console: Console):
        show_queue_names(mock_console, ["build:rocket:"])
        assert output_lines(mock_console) == ["build:rocket:"]


class TestQueueAttributes:
    """Tests for the four-line attribute report."""

    def test_fixed_order_and_padding(self):
        attributes = QueueAttributes(flags=0, max_messages=10, max_message_size=8192, current_messages=0)
        assert format_queue_attributes(attributes) == [
            "flags   0",
            "maxmsg  10",
            "msgsize 8192",
            "curmsgs 0",
        ]

    def test_show_prints_four_lines(self, mock_console: Console):
        attributes = QueueAttributes(flags=2048, max_messages=5, max_message_size=128, current_messages=3)
        show_queue_attributes(mock_console, attributes)

        lines = output_lines(mock_console)
        assert len(lines) == 4
        assert [line.split() for line in lines] == [
            ["flags", "2048"],
            ["maxmsg", "5"],
            ["msgsize", "128"],
            ["curmsgs", "3"],
        ]
