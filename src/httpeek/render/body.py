"""Body renderers, one per supported media type.

Every renderer implements ``render(body, console)`` and writes the body
followed by exactly one line ending, so the output always ends on a fresh
line. Highlighting only adds escape codes; the characters written are the
body's own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style
from rich.syntax import Syntax

from httpeek.models import MediaType

THEME = "solarized-light"
"""Pygments style used for highlighting. A light theme, fixed."""

# Token colours only; the terminal keeps its own background.
_TRANSPARENT = Style(bgcolor="default")


class BodyRenderer(ABC):
    """Writes a response body to a console."""

    @abstractmethod
    def render(self, body: str, console: Console) -> None:
        """Write *body* to *console*."""


class PlainRenderer(BodyRenderer):
    """Writes the body verbatim with no markup, wrapping, or highlighting."""

    def render(self, body: str, console: Console) -> None:
        # Bypass Rich text processing, which would strip control characters
        # such as carriage returns and expand tabs.
        console.file.write(body + _line_end(body))
        console.file.flush()


class SyntaxRenderer(BodyRenderer):
    """Highlights the body with a Pygments lexer and the :data:`THEME` colours.

    Tokens are styled one by one and written straight to the console file,
    so carriage returns, tabs and long lines reach the terminal untouched.
    Falls back to :class:`PlainRenderer` when the console has no colour
    system (piped output, ``--no-color``), since there is nothing to add.
    """

    lexer: ClassVar[str]

    def render(self, body: str, console: Console) -> None:
        if console.color_system is None:
            PlainRenderer().render(body, console)
            return

        color_system = COLOR_SYSTEMS[console.color_system]
        theme = Syntax.get_theme(THEME)
        # get_tokens() would normalise line endings and expand tabs.
        chunks = [
            (theme.get_style_for_token(token_type) + _TRANSPARENT).render(
                value, color_system=color_system
            )
            for _, token_type, value in self._get_lexer().get_tokens_unprocessed(body)
        ]
        console.file.write("".join(chunks) + _line_end(body))
        console.file.flush()

    def _get_lexer(self) -> Lexer:
        return get_lexer_by_name(self.lexer)


class JsonRenderer(SyntaxRenderer):
    """Highlights ``application/json`` bodies."""

    lexer = "json"


class HtmlRenderer(SyntaxRenderer):
    """Highlights ``text/html`` bodies."""

    lexer = "html"


_RENDERERS: dict[str, BodyRenderer] = {
    "application/json": JsonRenderer(),
    "text/html": HtmlRenderer(),
}
_PLAIN = PlainRenderer()


def select_renderer(media_type: Optional[MediaType]) -> BodyRenderer:
    """Pick the body renderer for *media_type*.

    Unknown and missing media types get :class:`PlainRenderer`; that is a
    fallback, not an error.
    """
    if media_type is None:
        return _PLAIN
    return _RENDERERS.get(media_type.essence, _PLAIN)


def _line_end(body: str) -> str:
    return "" if body.endswith("\n") else "\n"
