"""Canonical Pydantic models shared across all httpeek modules.

Every other module imports its data shapes from here. The models fall into
three groups:

**Request side** -- built from command-line arguments:
    :class:`KeyValuePair`, :class:`HTTPMethod`, :class:`ValidatedURL`, and
    :class:`RequestDescriptor`.

**Response side** -- built once from the transport response:
    :class:`MediaType` and :class:`ResponseEnvelope`.

**Configuration** -- constructed once at startup:
    :class:`ClientConfig`.

All models are frozen. Nothing here outlives a single invocation.
"""

from __future__ import annotations

import enum
import json
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from httpeek import __version__


# --- Request side ---


class KeyValuePair(BaseModel):
    """A single ``key=value`` body field parsed from the command line.

    ``key`` is never empty; ``value`` may be.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    value: str = ""


class HTTPMethod(str, enum.Enum):
    """HTTP methods supported by the ``get`` and ``post`` subcommands."""

    GET = "GET"
    POST = "POST"


class ValidatedURL(str):
    """A string known to parse as an absolute URL (scheme and host present).

    Only :func:`httpeek.parser.url.validate_url` should construct these.
    """

    __slots__ = ()


class RequestDescriptor(BaseModel):
    """Everything needed to send one request.

    ``body`` is present if and only if ``method`` is ``POST``.
    """

    model_config = ConfigDict(frozen=True)

    method: HTTPMethod
    url: str
    body: Optional[dict[str, str]] = None

    @model_validator(mode="after")
    def check_body_matches_method(self) -> RequestDescriptor:
        if self.method == HTTPMethod.POST and self.body is None:
            raise ValueError("POST requests require a body")
        if self.method == HTTPMethod.GET and self.body is not None:
            raise ValueError("GET requests cannot carry a body")
        return self

    def json_body(self) -> Optional[str]:
        """Return the JSON text sent on the wire, or ``None`` for GET."""
        if self.body is None:
            return None
        return json.dumps(self.body, ensure_ascii=False)


# --- Response side ---

# RFC 9110 token characters.
_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MEDIA_TYPE_RE = re.compile(rf"^\s*({_TOKEN})/({_TOKEN})\s*$")
_PARAM_RE = re.compile(rf"^\s*({_TOKEN})\s*=\s*(\"(?:[^\"\\]|\\.)*\"|{_TOKEN})\s*$")


class MediaType(BaseModel):
    """A ``type/subtype`` pair with optional parameters, e.g. ``application/json``.

    ``type`` and ``subtype`` are stored lower-cased so comparisons against
    :attr:`essence` are case-insensitive.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    subtype: str
    parameters: dict[str, str] = Field(default_factory=dict)

    @property
    def essence(self) -> str:
        """The ``type/subtype`` string without parameters."""
        return f"{self.type}/{self.subtype}"

    @classmethod
    def parse(cls, value: str) -> Optional[MediaType]:
        """Parse a ``Content-Type`` header value.

        Returns ``None`` when the value is not a well-formed media type.
        Malformed parameters make the whole value unparseable.

        Example::

            >>> MediaType.parse("application/json; charset=utf-8").essence
            'application/json'
        """
        head, *raw_params = value.split(";")
        match = _MEDIA_TYPE_RE.match(head)
        if match is None:
            return None

        parameters: dict[str, str] = {}
        for raw in raw_params:
            if not raw.strip():
                continue
            param = _PARAM_RE.match(raw)
            if param is None:
                return None
            name, param_value = param.groups()
            if param_value.startswith('"'):
                param_value = re.sub(r"\\(.)", r"\1", param_value[1:-1])
            parameters[name.lower()] = param_value

        return cls(
            type=match.group(1).lower(),
            subtype=match.group(2).lower(),
            parameters=parameters,
        )


class ResponseEnvelope(BaseModel):
    """A read-only view of one HTTP response, ready to render.

    ``headers`` keeps the order in which the server sent them, including
    repeated names such as ``set-cookie``.
    """

    model_config = ConfigDict(frozen=True)

    protocol_version: str
    status_code: int
    status_text: str = ""
    headers: list[tuple[str, str]] = Field(default_factory=list)
    content_type: Optional[MediaType] = None
    body_text: str = ""

    @property
    def status_line(self) -> str:
        """``"<protocol_version> <status_code> <status_text>"``, without trailing space."""
        return f"{self.protocol_version} {self.status_code} {self.status_text}".rstrip()


# --- Configuration ---

DEFAULT_POWERED_BY = "httpeek"
DEFAULT_USER_AGENT = f"httpeek/{__version__}"


class ClientConfig(BaseModel):
    """Process-wide client settings, resolved once at startup.

    Built by :func:`httpeek.config.resolve_config` and passed explicitly to
    the :class:`~httpeek.client.HttpClient`.
    """

    model_config = ConfigDict(frozen=True)

    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")
    powered_by: str = Field(default=DEFAULT_POWERED_BY, description="X-Powered-By header value")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    follow_redirects: bool = Field(default=True, description="Follow 3xx redirects")

    @property
    def default_headers(self) -> dict[str, str]:
        """The fixed headers attached to every outbound request."""
        return {
            "X-Powered-By": self.powered_by,
            "User-Agent": self.user_agent,
        }
