"""
Step sequencer for demo scripts.

Executes a DemoScript strictly in order on the calling thread:
1. Section: announce the title, then run its actions in order
2. Wait: block until the operator acknowledges
3. Say: narrate a single line

There is no branching, retrying or skipping. An exception raised by any
step propagates immediately and the remaining steps never run.
"""

import logging

from mydiff_demo.config import DemoSettings
from mydiff_demo.presenter import Presenter
from mydiff_demo.runner import CommandRunner
from mydiff_demo.types import (
    Action,
    DemoScript,
    DemoStep,
    Endpoint,
    LoadFixture,
    RunDiff,
    Say,
    Section,
    SequenceState,
    Wait,
)

logger = logging.getLogger(__name__)


class StepSequencer:
    """
    Runs demo steps one after another.

    The sequencer binds the script's server roles and narration
    placeholders to the configured endpoints and schema.
    """

    def __init__(
        self,
        presenter: Presenter,
        runner: CommandRunner,
        settings: DemoSettings,
    ):
        self.presenter = presenter
        self.runner = runner
        self.settings = settings
        self.state: SequenceState | None = None

    @property
    def executed(self) -> list[int]:
        """Indexes of completed steps of the last run, in execution order."""
        return self.state.executed if self.state else []

    def _render(self, text: str) -> str:
        """Fill {server1}, {server2} and {schema}; other braces are left as is."""
        placeholders = {
            "{server1}": self.settings.server1,
            "{server2}": self.settings.server2,
            "{schema}": self.settings.schema_name,
        }
        for placeholder, value in placeholders.items():
            text = text.replace(placeholder, value)
        return text

    def _run_action(self, action: Action) -> None:
        if isinstance(action, Say):
            self.presenter.narrate(self._render(action.message))
        elif isinstance(action, Wait):
            self.presenter.pause(self._render(action.prompt))
        elif isinstance(action, LoadFixture):
            self.runner.load_fixture(action.file, self.settings.endpoint(action.server))
        elif isinstance(action, RunDiff):
            source, target = self.settings.endpoints()
            self.runner.run_diff(source, target, action.options)
        else:
            raise TypeError(f"Unknown demo action: {action!r}")

    def _run_step(self, step: DemoStep) -> None:
        if isinstance(step, Section):
            self.presenter.announce_section(self._render(step.title))
            for action in step.actions:
                self._run_action(action)
        else:
            self._run_action(step)

    def run(self, script: DemoScript) -> None:
        """
        Execute every step of a script in order.

        Args:
            script: Script to run

        Raises:
            Any exception raised by a step; later steps are not executed
        """
        if self.runner.schema_mode is not script.schema_mode:
            logger.debug(
                f"Switching DSN schema mode to {script.schema_mode.value} for {script.name}"
            )
            self.runner.schema_mode = script.schema_mode

        self.state = SequenceState(steps=script.steps)
        while not self.state.is_complete():
            logger.debug(f"{script.name} step {self.state.get_progress()}")
            self._run_step(self.state.get_current())
            self.state.advance()

    def describe(self, script: DemoScript) -> list[str]:
        """
        Render the plan of a script without executing anything.

        Returns:
            One line per step or action, with composed commands
        """
        source, target = self.settings.endpoints()
        invocation_mode = self.runner.schema_mode
        self.runner.schema_mode = script.schema_mode
        try:
            lines = []
            for index, step in enumerate(script.steps, start=1):
                if not isinstance(step, Section):
                    lines.append(f"[{index}] {self._describe_action(step, source, target)}")
                    continue
                lines.append(f"[{index}] {self._render(step.title)}")
                for action in step.actions:
                    lines.append(f"    {self._describe_action(action, source, target)}")
            return lines
        finally:
            self.runner.schema_mode = invocation_mode

    def _describe_action(self, action: Action, source: Endpoint, target: Endpoint) -> str:
        if isinstance(action, Say):
            return f"say: {self._render(action.message)}"
        if isinstance(action, Wait):
            return f"wait: {self._render(action.prompt)}"
        if isinstance(action, LoadFixture):
            endpoint = self.settings.endpoint(action.server)
            command = " ".join(self.runner.mysql_command(endpoint))
            return f"load: {command} < {self.runner.fixture_path(action.file)}"
        if isinstance(action, RunDiff):
            invocation = self.runner.diff_invocation(source, target, action.options)
            return f"diff: {invocation.command()}"
        raise TypeError(f"Unknown demo action: {action!r}")
