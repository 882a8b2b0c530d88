"""CLI de remind (Typer).

Capa fina: traduce argumentos + settings a un `ReminderConfig` y delega el
flujo completo en `core.services.reminder.run_reminder`.
"""

from __future__ import annotations

from importlib import metadata

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.terminal_notifier import TerminalNotifier
from cli.ui_components import print_error
from core.config import AppSettings
from core.domain.models import ReminderConfig
from core.logger import logger, setup_logging
from core.services.duration_parser import ParseError, parse_duration
from core.services.reminder import run_reminder

app = typer.Typer(
    name="remind",
    help="Simple remind tool.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

_console = Console()
_err_console = Console(stderr=True)


def _app_version() -> str:
    try:
        return metadata.version("remind")
    except metadata.PackageNotFoundError:
        return "0.0.0+dev"


def version_callback(value: bool) -> None:
    if value:
        _console.print(f"remind {_app_version()}", highlight=False)
        raise typer.Exit()


@app.command()
def remind(
    delta: str = typer.Argument(
        ...,
        metavar="DELTA",
        help="Time to wait before the reminder triggers (ex: 2h30m)",
        show_default=False,
    ),
    message: str | None = typer.Argument(
        None,
        metavar="[MESSAGE]",
        help='Optional reminder message (ex: "Go for a walk")',
        show_default=False,
    ),
    once: bool = typer.Option(False, "--once", "-o", help="Run reminder only once"),
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Reject trailing digits without a unit (ex: 2h30)",
        show_default=False,
    ),
    interval: float | None = typer.Option(
        None,
        "--interval",
        "-i",
        min=0.001,
        help="Seconds between repeated alerts [default: 30]",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logs on stderr"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Wait DELTA, then remind with MESSAGE repeatedly (every 30 seconds by default) or once."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_err_console, f"Invalid configuration: {exc}")
        raise typer.Exit(1) from exc

    setup_logging("DEBUG" if verbose else settings.log_level)

    use_strict = settings.strict_parsing if strict is None else strict
    try:
        duration = parse_duration(delta, strict=use_strict)
    except ParseError as exc:
        raise typer.BadParameter(exc.message, param_hint="'DELTA'") from exc
    logger.debug("Parsed {!r} as {}", delta, duration.describe())

    config = ReminderConfig(
        delta=duration,
        once=once,
        message=message if message is not None else settings.default_message,
        repeat_interval_seconds=interval if interval is not None else settings.repeat_interval_seconds,
        clear_screen=settings.clear_screen,
    )

    try:
        run_reminder(config, TerminalNotifier(_console))
    except KeyboardInterrupt:
        logger.debug("Interrupted by user")
        raise typer.Exit(130)
    except OSError as exc:
        print_error(_err_console, f"Could not write the reminder: {exc}")
        raise typer.Exit(1) from exc


def run() -> None:
    app()


if __name__ == "__main__":
    run()
