"""Terminal rendering of HTTP responses.

:class:`ResponseRenderer` writes the status line, the headers and the body
of a :class:`~httpeek.models.ResponseEnvelope` to a Rich console. The body
is handed to one of a closed set of renderers picked by
:func:`select_renderer` from the resolved media type:

* ``application/json`` -- :class:`JsonRenderer`
* ``text/html`` -- :class:`HtmlRenderer`
* anything else -- :class:`PlainRenderer`
"""

from httpeek.render.body import (
    BodyRenderer,
    HtmlRenderer,
    JsonRenderer,
    PlainRenderer,
    select_renderer,
)
from httpeek.render.response import ResponseRenderer

__all__ = [
    "BodyRenderer",
    "HtmlRenderer",
    "JsonRenderer",
    "PlainRenderer",
    "ResponseRenderer",
    "select_renderer",
]
