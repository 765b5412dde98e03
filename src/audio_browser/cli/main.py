"""Command-line interface for the audio browser.

This is the main entry point that delegates to command modules.
"""

from pathlib import Path
from typing import Any, Optional

import click

from ..config import Config
from ..utils.logging_config import configure_third_party_loggers, setup_logging
from .commands import BrowserApp, browse_command, ls_command, pins, volumes_command


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set logging level (default: AUDIO_BROWSER_LOG_LEVEL or INFO)",
)
@click.option("--log-file", type=click.Path(), help="Log to file")
@click.option(
    "--storage-root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the mounted volumes (default: /storage)",
)
@click.option("--no-persist", is_flag=True, help="Keep favorites in memory only")
@click.pass_context
def cli(
    ctx: Any,
    log_level: Optional[str],
    log_file: Optional[str],
    storage_root: Optional[Path],
    no_persist: bool,
) -> None:
    """Audio Browser.

    Find and browse audio files across the device's storage volumes.
    """
    config = Config()
    setup_logging(
        log_level=log_level or config.log_level,
        log_file=Path(log_file) if log_file else None,
    )
    configure_third_party_loggers()

    app = BrowserApp(config, persist=not no_persist)
    if storage_root is not None:
        app.set_storage_root(storage_root)
    ctx.obj = app
    ctx.call_on_close(app.close)


cli.add_command(volumes_command)
cli.add_command(ls_command)
cli.add_command(browse_command)
cli.add_command(pins)


if __name__ == "__main__":
    cli()
