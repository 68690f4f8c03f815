"""The request pipeline behind the ``get`` and ``post`` commands.

:class:`Dispatcher` runs one invocation through a fixed sequence::

    validate arguments -> build request -> execute -> resolve content type -> render

The first error aborts the pipeline. Validation happens before any network
activity, and nothing is rendered when the request fails.
"""

from __future__ import annotations

from typing import Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field

from httpeek.client import HttpClient, build_request
from httpeek.models import ClientConfig, HTTPMethod, RequestDescriptor
from httpeek.output import OutputManager, get_output
from httpeek.parser import parse_kv_pairs, validate_url
from httpeek.render import ResponseRenderer


class GetCommand(BaseModel):
    """Raw arguments of ``httpeek get <url>``."""

    model_config = ConfigDict(frozen=True)

    url: str


class PostCommand(BaseModel):
    """Raw arguments of ``httpeek post <url> <key=value>...``."""

    model_config = ConfigDict(frozen=True)

    url: str
    fields: list[str] = Field(default_factory=list)


Command = Union[GetCommand, PostCommand]


class Dispatcher:
    """Runs a single command from raw arguments to rendered output.

    Args:
        config: Process-wide client settings.
        output: Output manager to render into. Defaults to the global one.
        transport: Optional httpx transport forwarded to
            :class:`~httpeek.client.HttpClient`.
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

    def run(self, command: Command) -> None:
        """Execute *command*.

        Raises:
            InvalidURLError: If the URL is not absolute.
            MalformedPairError: If a ``post`` field is not ``key=value``.
            TransportError: If the request could not be completed.
        """
        descriptor = self.prepare(command)

        with HttpClient(self._config, self._output, transport=self._transport) as client:
            envelope = client.execute(descriptor)

        media = envelope.content_type.essence if envelope.content_type else "none"
        self._output.debug(f"Rendering body as {media}")
        ResponseRenderer(self._output.console).render(envelope)

    def prepare(self, command: Command) -> RequestDescriptor:
        """Validate the raw arguments of *command* and build the request."""
        url = validate_url(command.url)
        if isinstance(command, PostCommand):
            pairs = parse_kv_pairs(command.fields)
            return build_request(HTTPMethod.POST, url, pairs)
        return build_request(HTTPMethod.GET, url)
