import traceback
from typing import Optional

import typer

from zerosetup.common import bus
from zerosetup.config import TEMPLATES
from zerosetup.spec import Abort, CreateOptions, PackageManager
from zerosetup.cli.factories import make_app, make_prompt_handler


def _check_template(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in TEMPLATES:
        raise typer.BadParameter(
            f"Invalid template: {value}. Available: {', '.join(TEMPLATES)}"
        )
    return value


def create_command(
    project_name: Optional[str] = typer.Argument(
        None, help=bus.resolve("cli.argument.project_name.help")
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        "-t",
        callback=_check_template,
        help=bus.resolve("cli.option.template.help", templates=", ".join(TEMPLATES)),
    ),
    skip_install: bool = typer.Option(
        False, "--skip-install", help=bus.resolve("cli.option.skip_install.help")
    ),
    skip_git: bool = typer.Option(
        False, "--skip-git", help=bus.resolve("cli.option.skip_git.help")
    ),
    pm: Optional[PackageManager] = typer.Option(
        None, "--pm", help=bus.resolve("cli.option.pm.help")
    ),
):
    handler = make_prompt_handler()
    app_instance = make_app(handler)

    options = CreateOptions(
        template=template,
        skip_install=skip_install,
        skip_git=skip_git,
        package_manager=pm,
    )

    try:
        outcome = app_instance.run_create(project_name, options)
    except Exception as e:
        bus.error("error.unexpected", error=str(e))
        bus.debug("error.traceback", traceback=traceback.format_exc())
        raise typer.Exit(code=1)

    if isinstance(outcome, Abort):
        bus.error("create.run.failed", reason=outcome.reason)
        raise typer.Exit(code=1)
