"""
External command runner for fixture loads and containerized diffs.

Two kinds of invocations:
- load_fixture: pipe a SQL file into the mysql client for one endpoint
- run_diff: build the diff tool image and run mydiff in it with host
  networking so it can reach both endpoints

Both are synchronous and never retried. Exit statuses are reported back in
ProcessResult but do not stop the demo; whatever the tools print is shown
to the operator.
"""

import logging
import subprocess
from pathlib import Path

from python_on_whales import docker
from python_on_whales.client_config import ClientNotFoundError
from python_on_whales.exceptions import DockerException

from mydiff_demo.config import DemoSettings
from mydiff_demo.exceptions import FixtureNotFoundError
from mydiff_demo.presenter import Presenter
from mydiff_demo.types import DiffInvocation, DsnSchemaMode, Endpoint, ProcessResult

logger = logging.getLogger(__name__)


class CommandRunner:
    """Composes and executes the demo's external process invocations.

    The runner holds no state between calls; every invocation is built,
    executed and discarded.
    """

    def __init__(
        self,
        settings: DemoSettings,
        presenter: Presenter,
        schema_mode: DsnSchemaMode = DsnSchemaMode.OMIT,
    ):
        """Initialize runner.

        Args:
            settings: Demo configuration (client, paths, image build)
            presenter: Presenter used to narrate each invocation
            schema_mode: DSN composition for every diff this runner issues
        """
        self.settings = settings
        self.presenter = presenter
        self.schema_mode = schema_mode

    def run_process(self, command: list[str], input: bytes | None = None) -> ProcessResult:
        """Run a process to completion and capture its output.

        Args:
            command: Argument vector (never passed through a shell)
            input: Bytes fed to the process's standard input

        Returns:
            ProcessResult with stdout followed by stderr and the return code.
            A command that cannot be started yields exit status 127, as a
            shell would report it.
        """
        logger.debug(f"Running {command}")
        try:
            proc = subprocess.run(command, input=input, capture_output=True)
        except OSError as e:
            logger.warning(f"Cannot start {command[0]}: {e}")
            return ProcessResult(output=f"{e}\n", exit_status=127)
        output = (proc.stdout or b"") + (proc.stderr or b"")
        return ProcessResult(
            output=output.decode("utf-8", errors="replace"),
            exit_status=proc.returncode,
        )

    def fixture_path(self, file: str) -> Path:
        return self.settings.sql_dir / file

    def read_fixture(self, file: str) -> bytes:
        """Read a fixture file's exact bytes.

        Raises:
            FixtureNotFoundError: If the file is missing or unreadable
        """
        path = self.fixture_path(file)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise FixtureNotFoundError(path) from None
        except OSError as e:
            raise FixtureNotFoundError(path, e.strerror or str(e)) from e

    def mysql_command(self, endpoint: Endpoint) -> list[str]:
        """Build the database client invocation for an endpoint."""
        return [
            self.settings.mysql_client,
            "-u", self.settings.db_user,
            "-h", endpoint.host,
            "-P", endpoint.port,
        ]

    def load_fixture(self, file: str, endpoint: Endpoint) -> ProcessResult:
        """Load a SQL fixture into one server.

        The fixture text is echoed before the client runs. The client's
        exit status is logged but not acted upon.

        Args:
            file: Fixture file name inside the sql directory
            endpoint: Server to load into

        Returns:
            ProcessResult of the client invocation

        Raises:
            FixtureNotFoundError: If the fixture cannot be read
        """
        contents = self.read_fixture(file)
        command = self.mysql_command(endpoint)

        self.presenter.narrate(
            f"Loading sql: {' '.join(command)} < {self.fixture_path(file)}"
        )
        self.presenter.echo(contents.decode("utf-8", errors="replace"))

        result = self.run_process(command, input=contents)
        if not result.ok:
            logger.warning(
                f"Loading {file} into {endpoint} exited with {result.exit_status}"
            )
        if result.output:
            self.presenter.echo(result.output)
        self.presenter.console.print()
        return result

    def diff_invocation(
        self, source: Endpoint, target: Endpoint, options: str = ""
    ) -> DiffInvocation:
        """Compose a diff invocation for the configured schema."""
        return DiffInvocation(
            source=source,
            target=target,
            schema=self.settings.schema_name,
            options=options,
            user=self.settings.db_user,
            schema_mode=self.schema_mode,
        )

    def run_container(self, argv: list[str]) -> ProcessResult:
        """Build the tool image and run argv inside it.

        The image is rebuilt before every run; docker's layer cache makes
        repeated builds cheap. Build or run failures are returned as
        output rather than raised.
        """
        try:
            image = docker.build(
                self.settings.build_context,
                file=self.settings.dockerfile,
                load=True,
                progress=False,
            )
            output = docker.run(
                image,
                argv,
                networks=["host"],
                remove=True,
                interactive=True,
                tty=self.settings.container_tty,
            )
        except DockerException as e:
            logger.warning(f"Diff container exited with {e.return_code}")
            return ProcessResult(
                output=(e.stdout or "") + (e.stderr or ""),
                exit_status=e.return_code,
            )
        except ClientNotFoundError as e:
            logger.warning(f"Docker client not available: {e}")
            return ProcessResult(output=f"{e}\n", exit_status=127)
        return ProcessResult(output=output or "", exit_status=0)

    def run_diff(self, source: Endpoint, target: Endpoint, options: str = "") -> str:
        """Run mydiff between two endpoints and display its output.

        Args:
            source: Endpoint passed as --server1
            target: Endpoint passed as --server2
            options: Verbatim mydiff options (e.g., "-d compact -r")

        Returns:
            Captured output of the containerized tool
        """
        invocation = self.diff_invocation(source, target, options)

        self.presenter.narrate(f"Running mydiff: {invocation.command()}")
        self.presenter.console.print()

        result = self.run_container(invocation.argv(self.settings.tool_path))
        self.presenter.echo(result.output)
        return result.output
