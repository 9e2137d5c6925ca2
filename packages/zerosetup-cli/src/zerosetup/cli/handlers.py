from typing import Callable, Optional, Sequence

import click
import typer

from zerosetup.spec import CANCELLED, Answered, PromptOutcome
from zerosetup.spec.interaction import SelectOption


class TyperPromptHandler:
    """Interactive prompts on the terminal. Ctrl-C or EOF yields CANCELLED."""

    def confirm(self, message: str, default: bool = True) -> PromptOutcome[bool]:
        try:
            return Answered(typer.confirm(message, default=default))
        except click.Abort:
            return CANCELLED

    def select(
        self,
        message: str,
        options: Sequence[SelectOption],
        default: Optional[str] = None,
    ) -> PromptOutcome[str]:
        values = [value for value, _, _ in options]
        typer.secho(message, bold=True)
        for value, label, hint in options:
            marker = ">" if value == default else " "
            suffix = f"  ({hint})" if hint else ""
            typer.echo(f"  {marker} {value:<8} {label}{suffix}")

        try:
            choice = typer.prompt(
                "Choice",
                type=click.Choice(values),
                default=default or values[0],
                show_choices=True,
            )
        except click.Abort:
            return CANCELLED
        return Answered(choice)

    def text(
        self,
        message: str,
        validator: Optional[Callable[[str], Optional[str]]] = None,
        placeholder: Optional[str] = None,
    ) -> PromptOutcome[str]:
        label = f"{message} (e.g. {placeholder})" if placeholder else message
        while True:
            try:
                value = typer.prompt(label)
            except click.Abort:
                return CANCELLED
            error = validator(value) if validator else None
            if not error:
                return Answered(value)
            typer.secho(error, fg=typer.colors.RED)


class DefaultsPromptHandler:
    """Non-interactive mode: every question takes its default answer."""

    def confirm(self, message: str, default: bool = True) -> PromptOutcome[bool]:
        return Answered(default)

    def select(
        self,
        message: str,
        options: Sequence[SelectOption],
        default: Optional[str] = None,
    ) -> PromptOutcome[str]:
        if default is not None:
            return Answered(default)
        if options:
            return Answered(options[0][0])
        return CANCELLED

    def text(
        self,
        message: str,
        validator: Optional[Callable[[str], Optional[str]]] = None,
        placeholder: Optional[str] = None,
    ) -> PromptOutcome[str]:
        # Free text has no sensible default.
        return CANCELLED
