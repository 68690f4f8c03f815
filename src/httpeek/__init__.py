"""httpeek -- a small command-line HTTP client with highlighted responses.

The ``httpeek`` command sends exactly one ``GET`` or ``POST`` request and
renders the response (status line, headers, body) to the terminal. JSON and
HTML bodies are syntax-highlighted; everything else is printed verbatim.

Typical usage::

    httpeek get https://httpbin.org/get
    httpeek post https://httpbin.org/post name=bob

Modules:
    app: Typer application and CLI entry point.
    dispatcher: The validate -> build -> execute -> render pipeline.
    models: Pydantic models shared across the package.
    config: Settings resolution (CLI flags, environment, defaults).
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
