"""Rendering of a full response: status line, headers, body."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from httpeek.models import ResponseEnvelope
from httpeek.render.body import select_renderer

STATUS_STYLE = "bold blue"
HEADER_NAME_STYLE = "green"


class ResponseRenderer:
    """Writes a :class:`~httpeek.models.ResponseEnvelope` to a console.

    The output has three segments separated by blank lines::

        HTTP/1.1 200 OK

        content-type: application/json
        content-length: 17

        {"hello": "world"}

    Args:
        console: Destination console, normally the stdout console of the
            global :class:`~httpeek.output.OutputManager`.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def render(self, envelope: ResponseEnvelope) -> None:
        """Render *envelope*. Never fails on an unrecognised content type."""
        self._render_status(envelope)
        self._render_headers(envelope)
        self._render_body(envelope)

    def _render_status(self, envelope: ResponseEnvelope) -> None:
        self._console.print(Text(envelope.status_line, style=STATUS_STYLE))
        self._console.line()

    def _render_headers(self, envelope: ResponseEnvelope) -> None:
        for name, value in envelope.headers:
            self._console.print(Text.assemble((name, HEADER_NAME_STYLE), ": ", value))
        self._console.line()

    def _render_body(self, envelope: ResponseEnvelope) -> None:
        renderer = select_renderer(envelope.content_type)
        renderer.render(envelope.body_text, self._console)
