"""Shared test fixtures for httpeek.

Provides reusable fixtures for building mock transports, rendering into
in-memory consoles, managing output state, and running CLI commands.
These fixtures are automatically discovered by pytest and available to
all test modules without explicit imports.
"""

from __future__ import annotations

import json
from io import StringIO
from typing import Callable

import httpx
import pytest
from rich.console import Console

from httpeek.models import ClientConfig
from httpeek.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale
    ("I/O operation on closed file").  Resetting forces a fresh manager
    to be created on next use.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear HTTPEEK_* and colour variables that might leak into tests."""
    for var in [
        "HTTPEEK_USER_AGENT",
        "HTTPEEK_POWERED_BY",
        "HTTPEEK_VERIFY_SSL",
        "NO_COLOR",
        "FORCE_COLOR",
    ]:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Config and output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client_config() -> ClientConfig:
    """Default client settings."""
    return ClientConfig()


@pytest.fixture
def plain_console() -> Console:
    """A colourless console writing to an in-memory buffer."""
    return Console(
        file=StringIO(),
        color_system=None,
        no_color=True,
        highlight=False,
        soft_wrap=True,
    )


@pytest.fixture
def color_console() -> Console:
    """A truecolor terminal console writing to an in-memory buffer."""
    return Console(
        file=StringIO(),
        force_terminal=True,
        color_system="truecolor",
        highlight=False,
        soft_wrap=True,
    )


# ---------------------------------------------------------------------------
# Transport fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by :func:`echo_transport`, in order."""
    return []


@pytest.fixture
def echo_transport(recorded_requests: list[httpx.Request]) -> httpx.MockTransport:
    """A mock transport that echoes the request back as JSON.

    The response body contains the method, URL, request headers and the
    decoded JSON body (if any), similar to httpbin.org/anything.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        body = json.loads(request.content) if request.content else None
        return httpx.Response(
            200,
            json={
                "method": request.method,
                "url": str(request.url),
                "headers": dict(request.headers),
                "json": body,
            },
        )

    return httpx.MockTransport(handler)


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """Factory for a transport that always returns the same response."""

    def _make(
        status_code: int = 200,
        content: bytes = b"",
        headers: list[tuple[str, str]] | None = None,
    ) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, headers=headers or [], content=content)

        return httpx.MockTransport(handler)

    return _make


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
