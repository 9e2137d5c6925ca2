import click
import pytest
import typer

from zerosetup.cli import factories
from zerosetup.cli.handlers import DefaultsPromptHandler, TyperPromptHandler
from zerosetup.spec import CANCELLED, Answered

OPTIONS = [("none", "No trailing commas", ""), ("all", "All trailing commas", "")]


def test_defaults_handler_takes_defaults():
    handler = DefaultsPromptHandler()

    assert handler.confirm("Go?") == Answered(True)
    assert handler.confirm("Overwrite?", default=False) == Answered(False)
    assert handler.select("Pick", OPTIONS, default="all") == Answered("all")
    assert handler.select("Pick", OPTIONS) == Answered("none")
    assert handler.select("Pick", []) is CANCELLED
    assert handler.text("Name?") is CANCELLED


def test_typer_handler_maps_abort_to_cancelled(monkeypatch):
    def abort(*args, **kwargs):
        raise click.Abort()

    monkeypatch.setattr(typer, "confirm", abort)
    monkeypatch.setattr(typer, "prompt", abort)
    handler = TyperPromptHandler()

    assert handler.confirm("Go?") is CANCELLED
    assert handler.select("Pick", OPTIONS, default="none") is CANCELLED
    assert handler.text("Name?") is CANCELLED


def test_typer_handler_reprompts_until_valid(monkeypatch):
    answers = iter(["../bad", "good"])
    monkeypatch.setattr(typer, "prompt", lambda *args, **kwargs: next(answers))
    handler = TyperPromptHandler()

    outcome = handler.text("Name?", validator=lambda v: "bad" if ".." in v else None)

    assert outcome == Answered("good")


def test_typer_handler_answers(monkeypatch):
    monkeypatch.setattr(typer, "confirm", lambda *args, **kwargs: False)
    monkeypatch.setattr(typer, "prompt", lambda *args, **kwargs: "all")
    handler = TyperPromptHandler()

    assert handler.confirm("Go?") == Answered(False)
    assert handler.select("Pick", OPTIONS) == Answered("all")


class _Stdin:
    def __init__(self, tty):
        self._tty = tty

    def isatty(self):
        return self._tty


@pytest.mark.parametrize(
    "tty, assume_yes, expected",
    [
        (True, False, TyperPromptHandler),
        (True, True, DefaultsPromptHandler),
        (False, False, DefaultsPromptHandler),
    ],
)
def test_prompt_handler_selection(monkeypatch, tty, assume_yes, expected):
    monkeypatch.setattr(factories.sys, "stdin", _Stdin(tty))

    assert isinstance(factories.make_prompt_handler(assume_yes), expected)
