from typing import Dict, NamedTuple, Optional

import typer
from zerosetup.common.messaging import protocols


class LevelStyle(NamedTuple):
    prefix: str
    color: Optional[str]
    err: bool = False


LEVEL_STYLES: Dict[str, LevelStyle] = {
    "info": LevelStyle("", None),
    "success": LevelStyle("✓ ", typer.colors.GREEN),
    "warning": LevelStyle("⚠ ", typer.colors.YELLOW),
    "error": LevelStyle("✖ ", typer.colors.RED, err=True),
    "debug": LevelStyle("", typer.colors.BRIGHT_BLACK),
}


class CliRenderer(protocols.Renderer):
    """Terminal output for the bus: a status symbol and color per level."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str) -> None:
        if level == "debug" and not self.verbose:
            return

        style = LEVEL_STYLES.get(level, LEVEL_STYLES["info"])
        typer.secho(f"{style.prefix}{message}", fg=style.color, err=style.err)
