"""Shared fixtures for mydiff demo tests."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from mydiff_demo.config import DemoSettings
from mydiff_demo.presenter import Presenter
from mydiff_demo.runner import CommandRunner
from mydiff_demo.types import DsnSchemaMode, ProcessResult

SQL_DIR = Path(__file__).parent.parent / "sql"


class RecordingPresenter(Presenter):
    """Presenter writing to a buffer, fed from a list of input lines."""

    def __init__(self, inputs: list[str] | None = None):
        self.buffer = io.StringIO()
        self.input = io.StringIO("".join(f"{line}\n" for line in inputs or []))
        super().__init__(
            console=Console(file=self.buffer, width=200, highlight=False),
            input_stream=self.input,
        )
        self.events: list[tuple[str, str]] = []

    def announce_section(self, title: str) -> None:
        self.events.append(("section", title))
        super().announce_section(title)

    def narrate(self, message: str) -> None:
        self.events.append(("narrate", message))
        super().narrate(message)

    def pause(self, message: str = "Press ENTER to continue") -> None:
        self.events.append(("pause", message))
        super().pause(message)

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


class RecordingRunner(CommandRunner):
    """CommandRunner that records invocations instead of spawning processes."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.processes: list[tuple[list[str], bytes | None]] = []
        self.containers: list[list[str]] = []

    def run_process(self, command, input=None):
        self.processes.append((command, input))
        return ProcessResult(output="", exit_status=0)

    def run_container(self, argv):
        self.containers.append(argv)
        return ProcessResult(output=f"ran {' '.join(argv[5:])}\n", exit_status=0)


@pytest.fixture
def sql_dir():
    """The repository's fixture directory."""
    return SQL_DIR


@pytest.fixture
def settings(sql_dir):
    """Default endpoints with the repository's fixture directory."""
    return DemoSettings(
        server1="127.0.0.1:33060",
        server2="127.0.0.1:33062",
        schema_name="acme_inc",
        sql_dir=sql_dir,
    )


@pytest.fixture
def make_presenter():
    """Factory for a RecordingPresenter fed with the given input lines."""
    return RecordingPresenter


@pytest.fixture
def make_runner():
    """Factory for a RecordingRunner."""
    return RecordingRunner


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def runner(settings, presenter):
    return RecordingRunner(settings, presenter, schema_mode=DsnSchemaMode.OMIT)
