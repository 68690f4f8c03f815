"""Assembly of validated arguments into a :class:`~httpeek.models.RequestDescriptor`."""

from __future__ import annotations

from typing import Iterable

from httpeek.models import HTTPMethod, KeyValuePair, RequestDescriptor, ValidatedURL


def build_request(
    method: HTTPMethod,
    url: ValidatedURL,
    pairs: Iterable[KeyValuePair] = (),
) -> RequestDescriptor:
    """Build the descriptor for one request.

    For ``GET`` the body is absent and *pairs* is ignored. For ``POST`` the
    pairs are folded into a mapping in order, so a repeated key keeps its
    last value. Values are never type-converted.

    Args:
        method: ``GET`` or ``POST``.
        url: An already-validated absolute URL.
        pairs: Body fields, in command-line order.

    Returns:
        The immutable :class:`~httpeek.models.RequestDescriptor`.
    """
    if method == HTTPMethod.GET:
        return RequestDescriptor(method=method, url=url)

    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return RequestDescriptor(method=method, url=url, body=body)
