"""Terminal output for httpeek, split between two streams.

* **stdout** carries the rendered response and nothing else, so
  ``httpeek get ... > out.txt`` captures exactly what the server sent.
* **stderr** carries errors and ``--verbose`` debug traces.

Colour is turned off by ``--no-color``, by a ``NO_COLOR`` variable of any
value, or by ``TERM=dumb``. Rich additionally drops escape codes when stdout
is not a terminal.

A single :class:`OutputManager` is built in
:func:`~httpeek.app.main_callback` and installed with :func:`set_output`;
:func:`error` and :func:`debug` are shortcuts to it.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape


class OutputManager:
    """Holds the stdout console used for responses and the stderr console used for diagnostics.

    Args:
        no_color: Disable all colour and styling.
        verbose: Show :meth:`debug` messages.
    """

    def __init__(self, no_color: bool = False, verbose: bool = False) -> None:
        self._plain = no_color or _should_disable_color()
        self._verbose = verbose

        # Never wrap or crop: response lines must reach the terminal whole.
        self._stdout = Console(
            file=sys.stdout,
            color_system=None if self._plain else "auto",
            no_color=self._plain,
            highlight=False,
            soft_wrap=True,
        )
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._plain,
            stderr=True,
            highlight=False,
        )

    @property
    def console(self) -> Console:
        """The stdout console the response is rendered into."""
        return self._stdout

    def error(self, message: str) -> None:
        """Report *message* on stderr as ``Error: <message>``. Always shown."""
        if self._plain:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def debug(self, message: str) -> None:
        """Report *message* on stderr as ``[debug] <message>`` when verbose."""
        if not self._verbose:
            return
        if self._plain:
            print(f"[debug] {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[dim]\\[debug] {escape(message)}[/dim]")


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set (even empty) or ``TERM`` is ``dumb``."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Process-wide instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one if needed."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the process-wide manager."""
    global _output
    _output = output


def reset_output() -> None:
    """Forget the installed manager. Tests call this between cases."""
    global _output
    _output = None


def error(message: str) -> None:
    """Shortcut for ``get_output().error(message)``."""
    get_output().error(message)


def debug(message: str) -> None:
    """Shortcut for ``get_output().debug(message)``."""
    get_output().debug(message)
