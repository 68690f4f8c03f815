"""Response bridge -- maps :class:`httpx.Response` to :class:`~httpeek.models.ResponseEnvelope`.

This module sits between the transport and the renderer. It copies what the
renderer needs out of the live response (status, ordered headers, decoded
body) and classifies the body's media type from the ``Content-Type`` header.

See Also:
    :mod:`httpeek.render` -- consumes the envelope built here.
"""

from __future__ import annotations

from typing import Iterable, Optional

import httpx

from httpeek.models import MediaType, ResponseEnvelope


def resolve_content_type(headers: Iterable[tuple[str, str]]) -> Optional[MediaType]:
    """Classify the body from the first ``Content-Type`` header.

    Args:
        headers: ``(name, value)`` pairs in received order. Names are
            matched case-insensitively.

    Returns:
        The parsed :class:`~httpeek.models.MediaType`, or ``None`` when the
        header is missing or unparseable. Neither case is an error: the
        body is then rendered as plain text.
    """
    for name, value in headers:
        if name.lower() == "content-type":
            return MediaType.parse(value)
    return None


def build_envelope(response: httpx.Response) -> ResponseEnvelope:
    """Build a :class:`~httpeek.models.ResponseEnvelope` from *response*.

    The body is read and decoded with the charset httpx detects. No status
    code is treated as a failure.

    Args:
        response: A response whose body has not been consumed elsewhere.

    Returns:
        The read-only envelope.
    """
    headers = response.headers.multi_items()
    return ResponseEnvelope(
        protocol_version=response.http_version,
        status_code=response.status_code,
        status_text=response.reason_phrase,
        headers=headers,
        content_type=resolve_content_type(headers),
        body_text=response.text,
    )
