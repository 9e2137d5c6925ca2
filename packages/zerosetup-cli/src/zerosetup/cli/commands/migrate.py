import traceback

import typer

from zerosetup.common import bus
from zerosetup.spec import MigrateOptions
from zerosetup.cli.factories import make_app, make_prompt_handler


def migrate_command(
    skip_install: bool = typer.Option(
        False, "--skip-install", help=bus.resolve("cli.option.skip_install_biome.help")
    ),
    skip_cleanup: bool = typer.Option(
        False, "--skip-cleanup", help=bus.resolve("cli.option.skip_cleanup.help")
    ),
    skip_git: bool = typer.Option(
        False, "--skip-git", help=bus.resolve("cli.option.skip_git_commit.help")
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help=bus.resolve("cli.option.dry_run.help")
    ),
    yes: bool = typer.Option(
        False, "-y", "--yes", help=bus.resolve("cli.option.yes.help")
    ),
):
    handler = make_prompt_handler(assume_yes=yes)
    app_instance = make_app(handler)

    options = MigrateOptions(
        skip_install=skip_install,
        skip_cleanup=skip_cleanup,
        skip_git=skip_git,
        dry_run=dry_run,
    )

    try:
        report = app_instance.run_migrate(options)
    except Exception as e:
        bus.error("error.unexpected", error=str(e))
        bus.debug("error.traceback", traceback=traceback.format_exc())
        raise typer.Exit(code=1)

    if not report.success:
        raise typer.Exit(code=1)
