"""
Operator-facing console output for the demo.

The Presenter renders narration with Rich and owns the single
synchronization point of a run: waiting for the operator to press ENTER.
Console and input stream are injected so tests can capture output and
feed input lines.
"""

import sys
from typing import TextIO

from rich.console import Console
from rich.text import Text

from mydiff_demo.exceptions import InputClosedError
from mydiff_demo.types import DEFAULT_WAIT_PROMPT

LOGO = r"""
                   _ _  __  __
                  | (_)/ _|/ _|
 _ __ ___  _   _  __| |_| |_| |_
| '_ ` _ \| | | |/ _` | |  _|  _|
| | | | | | |_| | (_| | | | | |
|_| |_| |_|\__, |\__,_|_|_| |_|
            __/ |
           |___/
"""

HIGHLIGHT_STYLE = ("black", "on green", "bold")
NARRATE_STYLE = ("green",)
PROMPT_STYLE = ("cyan",)


def styled(text: str, *attributes: str) -> Text:
    """
    Wrap plain text with terminal styling.

    Args:
        text: Text to style, never interpreted as markup
        attributes: Rich style names (e.g., "green", "bold", "on green")

    Returns:
        Rich Text carrying the combined style
    """
    return Text(text, style=" ".join(attributes))


class Presenter:
    """Renders demo narration and waits for operator acknowledgment."""

    def __init__(
        self,
        console: Console | None = None,
        input_stream: TextIO | None = None,
    ):
        """
        Initialize presenter.

        Args:
            console: Rich console to write to (default: stdout console)
            input_stream: Stream read by pause() (default: sys.stdin)
        """
        self.console = console or Console(highlight=False)
        self.input_stream = input_stream

    def banner(self) -> None:
        """Print the mydiff logo."""
        self.console.print(styled(LOGO, "bold"))

    def announce_section(self, title: str) -> None:
        """Print a highlighted section title surrounded by blank lines."""
        self.console.print()
        self.console.print(styled(f" {title} ", *HIGHLIGHT_STYLE))
        self.console.print()

    def narrate(self, message: str) -> None:
        """Print a status line spoken by the demo."""
        self.console.print(styled(f"> {message}", *NARRATE_STYLE))

    def prompt(self, message: str) -> None:
        """Print a line addressed to the operator."""
        self.console.print(styled(message, *PROMPT_STYLE))

    def echo(self, text: str) -> None:
        """Print raw text such as fixture contents or tool output."""
        self.console.print(Text(text), end="" if text.endswith("\n") else "\n", soft_wrap=True)

    def error(self, message: str) -> None:
        """Print a fatal diagnostic."""
        self.console.print(styled(message, "bold", "red"))

    def pause(self, message: str = DEFAULT_WAIT_PROMPT) -> None:
        """
        Block until the operator enters a line.

        The line content is ignored. There is no timeout.

        Args:
            message: Prompt shown before waiting

        Raises:
            InputClosedError: If the input stream is at end of file
        """
        self.console.print()
        self.prompt(message)
        self.console.file.flush()

        stream = self.input_stream if self.input_stream is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise InputClosedError(message)
