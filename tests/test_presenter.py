"""Tests for Presenter output and operator pauses."""

import io

import pytest
from rich.console import Console

from mydiff_demo.exceptions import InputClosedError
from mydiff_demo.presenter import LOGO, Presenter, styled


def make_presenter(stdin: str = "") -> tuple[Presenter, io.StringIO, io.StringIO]:
    out = io.StringIO()
    stream = io.StringIO(stdin)
    presenter = Presenter(console=Console(file=out, width=200), input_stream=stream)
    return presenter, out, stream


def test_styled_combines_attributes():
    text = styled(" title ", "black", "on green", "bold")

    assert text.plain == " title "
    assert str(text.style) == "black on green bold"


def test_styled_does_not_interpret_markup():
    assert styled("[red]x[/red]", "green").plain == "[red]x[/red]"


def test_announce_section_surrounded_by_blank_lines():
    presenter, out, _ = make_presenter()

    presenter.announce_section("Loading schemas")

    lines = out.getvalue().split("\n")
    assert lines[0] == ""
    assert lines[1].strip() == "Loading schemas"
    assert lines[2:] == ["", ""]


def test_narrate_prefix():
    presenter, out, _ = make_presenter()

    presenter.narrate("Running mydiff")

    assert out.getvalue() == "> Running mydiff\n"


def test_prompt_plain_line():
    presenter, out, _ = make_presenter()

    presenter.prompt("Ready?")

    assert out.getvalue() == "Ready?\n"


def test_echo_keeps_brackets_and_single_newline():
    presenter, out, _ = make_presenter()

    presenter.echo("CREATE TABLE [x];\n")

    assert out.getvalue() == "CREATE TABLE [x];\n"


def test_banner_prints_logo():
    presenter, out, _ = make_presenter()

    presenter.banner()

    assert "|___/" in out.getvalue()
    assert LOGO.strip().splitlines()[0] in out.getvalue()


class TestPause:
    """Tests for the wait-for-input gate."""

    def test_consumes_exactly_one_line(self):
        presenter, out, stream = make_presenter("anything at all\nsecond\n")

        presenter.pause()

        assert "Press ENTER to continue" in out.getvalue()
        assert stream.read() == "second\n"

    def test_custom_message(self):
        presenter, out, _ = make_presenter("\n")

        presenter.pause("Press ENTER to run diff")

        assert out.getvalue() == "\nPress ENTER to run diff\n"

    def test_closed_input_raises(self):
        presenter, _, _ = make_presenter("")

        with pytest.raises(InputClosedError) as exc_info:
            presenter.pause("Ready?")

        assert exc_info.value.prompt == "Ready?"

    def test_defaults_to_stdin(self, monkeypatch):
        presenter = Presenter(console=Console(file=io.StringIO()))
        monkeypatch.setattr("sys.stdin", io.StringIO("\n"))

        presenter.pause()
