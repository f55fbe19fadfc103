"""
Demo scripts as declarative step lists.

Two walkthroughs ship with the demo:
- walkthrough: full tour of mydiff's output formats, reversal and
  migrations table support (DSNs without schema)
- employees: short tour on a single employees table (DSNs with schema)

Titles and messages may use {server1}, {server2} and {schema}; they are
filled from configuration when the step runs.
"""

from mydiff_demo.types import (
    DemoScript,
    DsnSchemaMode,
    LoadFixture,
    RunDiff,
    Say,
    Section,
    Wait,
)

CLOSING = "And that's all. Have questions? drop an email to: hola+mydiff@mff.io"


WALKTHROUGH = DemoScript(
    name="walkthrough",
    description="Full tour: SQL and compact output, reverse diffs, migrations tables",
    schema_mode=DsnSchemaMode.OMIT,
    steps=(
        Section(
            "Welcome to mydiff's interactive demo. The following are the command "
            "options available, they will be used along the demo:",
            (RunDiff("-h"),),
        ),
        Wait(),
        Section(
            "Let's start by loading two really simple schemas in different "
            "servers ({server1}, {server2})",
            (
                LoadFixture("demo1_server1.sql", "server1"),
                LoadFixture("demo1_server2.sql", "server2"),
            ),
        ),
        Wait("Ready? Press ENTER to continue"),
        Section(
            "We run now the diff outputting the results in SQL:",
            (RunDiff("-d sql"),),
        ),
        Wait(),
        Section(
            "We can also compute the diff reversely (i.e. from server2 to server1):",
            (RunDiff("-d sql -r"),),
        ),
        Wait(),
        Section(
            "We might be interested in a more concise, human-readable format "
            "(-d compact) does it:",
            (RunDiff("-d compact"),),
        ),
        Wait(),
        Section(
            "Like before, this can be reversed, and results are consistent",
            (RunDiff("-d compact -r"),),
        ),
        Wait(),
        Section(
            "Let's try now with two different schemas, some tables missing here "
            "and there and different collations",
            (
                LoadFixture("demo2_server1.sql", "server1"),
                LoadFixture("demo2_server2.sql", "server2"),
            ),
        ),
        Wait(),
        Section(
            "We apply compact formatting to the diff and include differences in "
            "the schema migrations table",
            (RunDiff("-d compact --diff-migrations"),),
        ),
        Wait(),
        Section(
            "schema_migrations.version is very specific to rails, so we can specify "
            "other table and column containing the applied migrations",
            (
                LoadFixture("demo3_server1.sql", "server1"),
                LoadFixture("demo3_server2.sql", "server2"),
                Wait("Press ENTER to run diff"),
                RunDiff("-d compact --diff-migrations --diff-migrations-column my_migrations.val"),
            ),
        ),
        Say(CLOSING),
    ),
)


EMPLOYEES = DemoScript(
    name="employees",
    description="Short tour on a single employees table, schema embedded in DSNs",
    schema_mode=DsnSchemaMode.EMBED,
    steps=(
        Section(
            "Two versions of the employees table live in {schema} on {server1} and {server2}",
            (
                LoadFixture("employees_server1.sql", "server1"),
                LoadFixture("employees_server2.sql", "server2"),
            ),
        ),
        Wait(),
        Section(
            "The SQL diff contains the statements turning server1's table into server2's:",
            (RunDiff("-d sql"),),
        ),
        Wait(),
        Section(
            "The compact format summarizes the same changes:",
            (RunDiff("-d compact"),),
        ),
        Wait(),
        Section(
            "And reversed, from server2 back to server1:",
            (RunDiff("-d compact -r"),),
        ),
        Say(CLOSING),
    ),
)


SCRIPTS: dict[str, DemoScript] = {
    script.name: script for script in (WALKTHROUGH, EMPLOYEES)
}


def get_script(name: str) -> DemoScript:
    """
    Look up a script by name.

    Raises:
        KeyError: If no script has that name
    """
    try:
        return SCRIPTS[name]
    except KeyError:
        raise KeyError(
            f"Unknown demo script: {name}. Available: {', '.join(SCRIPTS)}"
        ) from None
