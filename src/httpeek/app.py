"""Typer application and CLI entry point for httpeek.

This module wires the root callback (global flags, output and settings
initialisation) to the two request commands, ``get`` and ``post``.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler, invokes the Typer app,
and writes a crash log for anything unexpected.

See Also:
    :mod:`httpeek.dispatcher`: The pipeline each command runs.
    :mod:`httpeek.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from httpeek import __version__
from httpeek.exit_codes import EXIT_CANCELLED, EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="httpeek",
    help="Send an HTTP request and print the highlighted response.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"httpeek {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    user_agent: Optional[str] = typer.Option(
        None, "--user-agent", help="Override the User-Agent header."
    ),
    insecure: bool = typer.Option(
        False, "--insecure", help="Do not verify TLS certificates."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~httpeek.output.OutputManager` from CLI
    flags and stores the flags that shape the client in ``ctx.obj`` so the
    commands can resolve settings from them.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        no_color: Disable all colour output.
        verbose: Enable debug-level diagnostic output.
        user_agent: User-Agent override (highest precedence).
        insecure: Disable TLS certificate verification.
    """
    from httpeek.output import OutputManager, set_output

    output = OutputManager(no_color=no_color, verbose=verbose)
    set_output(output)

    ctx.ensure_object(dict)
    ctx.obj["user_agent"] = user_agent
    ctx.obj["insecure"] = insecure


@app.command("get")
def get_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Absolute URL to request, e.g. https://httpbin.org/get."),
) -> None:
    """Send a GET request and print the response."""
    from httpeek.dispatcher import GetCommand

    _run(ctx, GetCommand(url=url))


@app.command("post")
def post_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Absolute URL to post to."),
    fields: Optional[list[str]] = typer.Argument(
        None,
        metavar="KEY=VALUE...",
        help="Body fields, sent as a JSON object of strings. Repeated keys keep the last value.",
    ),
) -> None:
    """Send a POST request with a JSON body and print the response."""
    from httpeek.dispatcher import PostCommand

    _run(ctx, PostCommand(url=url, fields=fields or []))


def _run(ctx: typer.Context, command: Any) -> None:  # noqa: ANN401
    """Resolve settings and run *command* through the dispatcher.

    Raises:
        typer.Exit: With the error's exit code on any
            :class:`~httpeek.exceptions.HttpeekError`.
    """
    from httpeek.config import resolve_config
    from httpeek.dispatcher import Dispatcher
    from httpeek.exceptions import HttpeekError
    from httpeek.output import debug, error

    obj = ctx.obj or {}
    try:
        config = resolve_config(
            cli_user_agent=obj.get("user_agent"),
            cli_insecure=obj.get("insecure", False),
        )
        debug(f"Client headers: {config.default_headers}")
        Dispatcher(config, transport=obj.get("transport")).run(command)
    except HttpeekError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_CANCELLED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path.

    Args:
        exc: The unhandled exception to log.

    Returns:
        Absolute path to the written crash log file.
    """
    from httpeek.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``httpeek`` console script.

    Unexpected exceptions produce a crash log and a generic failure exit;
    expected failures are already handled inside the commands.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_CANCELLED)
    except Exception as exc:
        from httpeek.output import error

        log_path = _write_crash_log(exc)
        error(f"Unexpected error. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)
