"""HTTP client module for httpeek.

Provides the request builder, the blocking executor, and the bridge that
turns an :class:`httpx.Response` into a :class:`~httpeek.models.ResponseEnvelope`.

Example::

    from httpeek.client import HttpClient, build_request

    descriptor = build_request(HTTPMethod.GET, validate_url("https://httpbin.org/get"))
    with HttpClient(config) as client:
        envelope = client.execute(descriptor)
"""

from httpeek.client.builder import build_request
from httpeek.client.response import build_envelope, resolve_content_type
from httpeek.client.sync_client import HttpClient

__all__ = ["HttpClient", "build_envelope", "build_request", "resolve_content_type"]
