"""Synchronous HTTP client that executes exactly one request per call.

This module provides :class:`HttpClient`, the blocking executor used by the
``get`` and ``post`` commands. It wraps :class:`httpx.Client` and layers on:

- **Fixed client headers** -- ``X-Powered-By`` and ``User-Agent`` from
  :class:`~httpeek.models.ClientConfig` are attached to every request.
- **JSON bodies** -- ``POST`` sends the exact text of
  :meth:`~httpeek.models.RequestDescriptor.json_body` with
  ``Content-Type: application/json``.
- **Error mapping** -- transport failures become
  :class:`~httpeek.exceptions.TransportError`. HTTP error statuses do not.

There are no retries and no timeout overrides; the httpx defaults apply.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from httpeek.client.response import build_envelope
from httpeek.exceptions import TransportError
from httpeek.models import ClientConfig, HTTPMethod, RequestDescriptor, ResponseEnvelope
from httpeek.output import OutputManager, get_output


class HttpClient:
    """Blocking HTTP client for a single invocation.

    Must be used as a context manager so that the underlying connection
    pool is opened and closed around the request.

    Args:
        config: Process-wide settings, including the fixed header set.
        output: Where debug traces go. Defaults to the global manager.
        transport: Optional httpx transport. Tests pass an
            :class:`httpx.MockTransport` here; ``None`` uses the network.

    Example::

        with HttpClient(config) as client:
            envelope = client.execute(descriptor)
    """

    def __init__(
        self,
        config: ClientConfig,
        output: Optional[OutputManager] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._output = output or get_output()
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> HttpClient:
        self._client = httpx.Client(
            headers=self._config.default_headers,
            verify=self._config.verify_ssl,
            follow_redirects=self._config.follow_redirects,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def execute(self, descriptor: RequestDescriptor) -> ResponseEnvelope:
        """Send *descriptor* and return the response as an envelope.

        Performs exactly one network round trip (plus redirects when
        ``follow_redirects`` is enabled).

        Args:
            descriptor: The request to send.

        Returns:
            The :class:`~httpeek.models.ResponseEnvelope`, for any status code.

        Raises:
            TransportError: On connection, DNS, TLS or protocol failures.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        kwargs: dict[str, Any] = {
            "method": descriptor.method.value,
            "url": descriptor.url,
        }
        if descriptor.method == HTTPMethod.POST:
            kwargs["content"] = descriptor.json_body()
            kwargs["headers"] = {"Content-Type": "application/json"}

        self._output.debug(f"{descriptor.method.value} {descriptor.url}")

        try:
            response = self._client.request(**kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"Request to {descriptor.url} failed: {_describe(exc)}") from exc

        self._output.debug(f"Received {response.status_code} {response.reason_phrase}")
        return build_envelope(response)


def _describe(exc: Exception) -> str:
    """Return a short description of a transport exception."""
    message = str(exc)
    return message or type(exc).__name__
