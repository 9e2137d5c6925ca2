import logging
from typing import Optional

import typer

from zerosetup.common import bus
from zerosetup.config import VERSION
from .factories import get_runtime_config
from .rendering import CliRenderer

# Import commands
from .commands.create import create_command
from .commands.migrate import migrate_command

app = typer.Typer(
    name="zero-setup-biome",
    help=bus.resolve("cli.app.description"),
    no_args_is_help=True,
)


def _version_callback(value: bool):
    if value:
        typer.echo(VERSION)
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=bus.resolve("cli.option.verbose.help")
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help=bus.resolve("cli.option.version.help"),
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    verbose = verbose or get_runtime_config().debug
    bus.set_renderer(CliRenderer(verbose=verbose))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
app.command(name="create", help=bus.resolve("cli.command.create.help"))(create_command)
app.command(name="migrate", help=bus.resolve("cli.command.migrate.help"))(migrate_command)


if __name__ == "__main__":
    app()
