"""
mydiff demo

Interactive, narrated walkthrough of the mydiff schema diff tool against
two live MySQL servers. This package provides:

- Presenter: Styled console narration and operator pauses
- CommandRunner: Fixture loads and containerized mydiff invocations
- StepSequencer: Strictly ordered execution of demo scripts
- Demo scripts: Declarative step lists (walkthrough, employees)
"""

__version__ = "0.1.0"

from mydiff_demo.config import DemoSettings
from mydiff_demo.exceptions import DemoError, FixtureNotFoundError, InputClosedError
from mydiff_demo.presenter import Presenter, styled
from mydiff_demo.runner import CommandRunner
from mydiff_demo.scripts import EMPLOYEES, SCRIPTS, WALKTHROUGH, get_script
from mydiff_demo.sequencer import StepSequencer
from mydiff_demo.types import (
    DemoScript,
    DiffInvocation,
    DsnSchemaMode,
    Endpoint,
    LoadFixture,
    ProcessResult,
    RunDiff,
    Say,
    Section,
    Wait,
)

__all__ = [
    "__version__",
    # Configuration
    "DemoSettings",
    # Components
    "Presenter",
    "styled",
    "CommandRunner",
    "StepSequencer",
    # Data types
    "Endpoint",
    "DsnSchemaMode",
    "DiffInvocation",
    "ProcessResult",
    "DemoScript",
    "Section",
    "Say",
    "LoadFixture",
    "RunDiff",
    "Wait",
    # Scripts
    "WALKTHROUGH",
    "EMPLOYEES",
    "SCRIPTS",
    "get_script",
    # Errors
    "DemoError",
    "FixtureNotFoundError",
    "InputClosedError",
]
