import logging
import os
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from android_reverser.cli.locate import check, locate

app = typer.Typer(
    name="android-reverser",
    help="Android reverser CLI: locate R files and package sources in decompiled code.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("locate")(locate)
app.command("check")(check)


_LOG_LEVEL_ENV = "ANDROID_REVERSER_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


@app.callback()
def configure_logging(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    requested = os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LOG_LEVEL)
    level = requested.strip().upper()
    known = level in logging.getLevelNamesMapping()
    if verbose:
        level = "DEBUG"
    elif not known:
        level = _DEFAULT_LOG_LEVEL

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    if not known:
        logger.warning("Unknown %s %r, using %s", _LOG_LEVEL_ENV, requested, _DEFAULT_LOG_LEVEL)


def main() -> None:
    app()
