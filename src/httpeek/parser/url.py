"""Absolute URL validation.

URLs are checked with :class:`httpx.URL`, the same parser the transport
uses, so anything accepted here is something the client can send.
"""

from __future__ import annotations

import httpx

from httpeek.exceptions import InvalidURLError
from httpeek.models import ValidatedURL


def validate_url(value: str) -> ValidatedURL:
    """Confirm *value* is an absolute URL with a scheme and a host.

    Relative paths (``/post``) and bare host names (``example.com``) are
    rejected.

    Args:
        value: The URL argument as typed by the user.

    Returns:
        The unchanged string, wrapped as a :class:`~httpeek.models.ValidatedURL`.

    Raises:
        InvalidURLError: If the URL cannot be parsed or is not absolute.
    """
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(value, str(exc)) from exc

    if not url.scheme:
        raise InvalidURLError(value, "missing scheme (e.g. https://)")
    if not url.host:
        raise InvalidURLError(value, "missing host")
    return ValidatedURL(value)
