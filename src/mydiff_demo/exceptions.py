"""
Exception classes for demo execution.

This module defines the fatal conditions that end a demo run:
- FixtureNotFoundError: A required SQL fixture file cannot be read
- InputClosedError: Operator input stream closed during a wait

Failures of the external tools themselves are not exceptions here; their
output is shown to the operator as part of the narration.
"""

from pathlib import Path


class DemoError(Exception):
    """Base class for errors that abort a demo run."""


class FixtureNotFoundError(DemoError):
    """
    Raised when a SQL fixture file cannot be read.

    Fixtures are local assets shipped with the demo, so a missing file
    is never transient and the run stops immediately.

    Attributes:
        path: Path of the fixture that was requested
    """

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"SQL fixture not found: {path}"
        if reason:
            message = f"Cannot read SQL fixture {path}: {reason}"
        super().__init__(message)


class InputClosedError(DemoError):
    """
    Raised when the operator input stream reaches end of file during a wait.

    Attributes:
        prompt: The prompt that was waiting for acknowledgment
    """

    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"Input closed while waiting for: {prompt!r}")
