"""
Shared types for the mydiff demo.

This module defines:
- Endpoint: host:port pair of a database server
- DsnSchemaMode: Whether server DSNs carry the schema name
- DiffInvocation: One execution request for the diff tool
- ProcessResult: Output and exit status of an external process
- Say, LoadFixture, RunDiff, Wait: Declarative step actions
- Section: Narrated action step with a title and ordered actions
- DemoScript: Ordered list of steps making up one demo
- SequenceState: Linear step progression state

Scripts are pure data. Endpoints are referenced by role ("server1" or
"server2") and bound to configured hosts only when a step runs.
"""

import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union

ServerRole = Literal["server1", "server2"]

DEFAULT_WAIT_PROMPT = "Press ENTER to continue"


@dataclass(frozen=True)
class Endpoint:
    """
    A reachable database server.

    Attributes:
        host: Hostname or IP address
        port: Port, kept as the string the operator configured
    """

    host: str
    port: str

    @classmethod
    def parse(cls, value: str) -> "Endpoint":
        """
        Parse a "host:port" string.

        Args:
            value: Endpoint in host:port form (e.g., "127.0.0.1:33060")

        Returns:
            Endpoint with host and port split on the last colon

        Raises:
            ValueError: If host or port is missing or port is not numeric
        """
        host, sep, port = value.rpartition(":")
        if not sep or not host or not port:
            raise ValueError(f"Endpoint must be host:port, got {value!r}")
        if not port.isdigit():
            raise ValueError(f"Endpoint port must be numeric, got {port!r}")
        return cls(host=host, port=port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


class DsnSchemaMode(Enum):
    """
    How the schema name appears in the server DSNs passed to mydiff.

    The schema is always passed as the trailing positional argument;
    this only controls the path part of each --serverN DSN.
    """

    OMIT = "omit"  # root@tcp(host:port)/
    EMBED = "embed"  # root@tcp(host:port)/schema


@dataclass(frozen=True)
class DiffInvocation:
    """
    A single execution request for the mydiff tool.

    Attributes:
        source: Endpoint passed as --server1
        target: Endpoint passed as --server2
        schema: Schema name under comparison
        options: Verbatim option string (e.g., "-d compact -r")
        user: User embedded in both DSNs
        schema_mode: Whether each DSN embeds the schema name
    """

    source: Endpoint
    target: Endpoint
    schema: str
    options: str = ""
    user: str = "root"
    schema_mode: DsnSchemaMode = DsnSchemaMode.OMIT

    def dsn(self, endpoint: Endpoint) -> str:
        """Build the driver style DSN for one endpoint."""
        path = self.schema if self.schema_mode is DsnSchemaMode.EMBED else ""
        return f"{self.user}@tcp({endpoint})/{path}"

    def argv(self, tool: str = "mydiff") -> list[str]:
        """
        Build the argument vector for the tool.

        Options are split with shell rules so quoted values survive.
        """
        return [
            tool,
            "--server1",
            self.dsn(self.source),
            "--server2",
            self.dsn(self.target),
            *shlex.split(self.options),
            self.schema,
        ]

    def command(self, tool: str = "mydiff") -> str:
        """Render the invocation as shown to the operator."""
        parts = [
            tool,
            f'--server1 "{self.dsn(self.source)}"',
            f'--server2 "{self.dsn(self.target)}"',
        ]
        if self.options:
            parts.append(self.options)
        parts.append(self.schema)
        return " ".join(parts)


@dataclass(frozen=True)
class ProcessResult:
    """
    Result of an external process.

    Attributes:
        output: Captured text output (stdout followed by stderr)
        exit_status: Process return code
    """

    output: str
    exit_status: int

    @property
    def ok(self) -> bool:
        return self.exit_status == 0


@dataclass(frozen=True)
class Say:
    """Narrate a status line."""

    message: str


@dataclass(frozen=True)
class LoadFixture:
    """Load a SQL fixture file into one of the two servers."""

    file: str
    server: ServerRole


@dataclass(frozen=True)
class RunDiff:
    """Run mydiff from server1 to server2 with the given options."""

    options: str = ""


@dataclass(frozen=True)
class Wait:
    """Block until the operator presses ENTER."""

    prompt: str = DEFAULT_WAIT_PROMPT


Action = Union[Say, LoadFixture, RunDiff, Wait]


@dataclass(frozen=True)
class Section:
    """
    Narrated action step.

    Attributes:
        title: Highlighted section title; may use {server1}, {server2}, {schema}
        actions: Actions executed in order after the title is shown
    """

    title: str
    actions: tuple[Action, ...] = ()


DemoStep = Union[Section, Wait, Say]


@dataclass(frozen=True)
class DemoScript:
    """
    Ordered list of demo steps.

    Attributes:
        name: Registry name used on the command line
        description: One line summary for listings
        steps: Steps executed strictly in order
        schema_mode: DSN composition used by every diff in this script
    """

    name: str
    description: str
    steps: tuple[DemoStep, ...]
    schema_mode: DsnSchemaMode = DsnSchemaMode.OMIT

    def diff_options(self) -> list[str]:
        """Option strings of every RunDiff in the script, in order."""
        options = []
        for step in self.steps:
            actions = step.actions if isinstance(step, Section) else (step,)
            options.extend(a.options for a in actions if isinstance(a, RunDiff))
        return options


@dataclass
class SequenceState:
    """
    Tracks the current step of a running script.

    The index only moves forward; a step is never revisited.
    """

    steps: tuple[DemoStep, ...]
    current: int = 0
    executed: list[int] = field(default_factory=list)

    def get_current(self) -> DemoStep:
        return self.steps[self.current]

    def advance(self) -> None:
        """Mark the current step as done and move to the next one."""
        self.executed.append(self.current)
        self.current += 1

    def is_complete(self) -> bool:
        return self.current >= len(self.steps)

    def get_progress(self) -> str:
        """
        Get progress string like "[3/7]".

        Returns:
            Progress indicator showing current position
        """
        return f"[{min(self.current + 1, len(self.steps))}/{len(self.steps)}]"
