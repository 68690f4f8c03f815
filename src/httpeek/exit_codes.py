"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~httpeek.exceptions.HttpeekError` subclass. Shell
scripts can inspect the exit code to tell a bad invocation apart from a
network failure without parsing stderr.

Example::

    $ httpeek get http://localhost:1
    $ echo $?
    6   # EXIT_CONNECTION_ERROR -- nothing was listening
"""

EXIT_SUCCESS = 0
"""The request was sent and the response rendered (whatever its status code)."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with an invalid URL or a malformed body field."""

EXIT_CONNECTION_ERROR = 6
"""A transport-level error occurred (DNS failure, connection refused, TLS, bad framing)."""

EXIT_CANCELLED = 130
"""The invocation was interrupted with Ctrl-C."""
