"""Exception hierarchy for httpeek.

All exceptions inherit from :class:`HttpeekError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`httpeek.exit_codes`.
The ``get`` and ``post`` commands catch ``HttpeekError``, print the message
to stderr and exit with that code.

Subclass hierarchy::

    HttpeekError (exit 1)
    +-- InvalidUsageError       (exit 2)
    |   +-- InvalidURLError
    |   +-- MalformedPairError
    +-- TransportError          (exit 6)
    +-- ConfigError             (exit 1)

HTTP responses with 4xx/5xx status codes are *not* errors: they are
rendered like any other response.
"""

from httpeek.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)


class HttpeekError(Exception):
    """Base exception for all httpeek errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(HttpeekError):
    """Raised for invalid CLI arguments, before any network activity."""

    exit_code = EXIT_INVALID_USAGE


class InvalidURLError(InvalidUsageError):
    """Raised when a URL argument is not an absolute URL with scheme and host."""

    def __init__(self, url: str, reason: str | None = None):
        message = f"Invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url


class MalformedPairError(InvalidUsageError):
    """Raised when a body field is not of the form ``key=value``."""

    def __init__(self, token: str, reason: str = "expected key=value"):
        super().__init__(f"Failed to parse {token!r}: {reason}")
        self.token = token


class TransportError(HttpeekError):
    """Raised on network-level failures (DNS, connection refused, TLS, malformed response)."""

    exit_code = EXIT_CONNECTION_ERROR


class ConfigError(HttpeekError):
    """Raised when a setting from the environment or a flag is invalid."""

    exit_code = EXIT_GENERIC_FAILURE
