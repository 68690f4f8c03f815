"""Settings resolution and data directory layout.

httpeek reads no configuration files. Settings come from, in order of
precedence:

1. CLI flags (``--user-agent``, ``--insecure``)
2. Environment variables (``HTTPEEK_USER_AGENT``, ``HTTPEEK_POWERED_BY``,
   ``HTTPEEK_VERIFY_SSL``)
3. Defaults declared on :class:`~httpeek.models.ClientConfig`

:func:`resolve_config` produces the immutable
:class:`~httpeek.models.ClientConfig` once at startup.

The only thing ever written to disk is a crash log, under the directory
returned by :func:`get_data_dir`.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from httpeek.exceptions import ConfigError
from httpeek.models import ClientConfig

_APP_NAME = "httpeek"

ENV_USER_AGENT = "HTTPEEK_USER_AGENT"
ENV_POWERED_BY = "HTTPEEK_POWERED_BY"
ENV_VERIFY_SSL = "HTTPEEK_VERIFY_SSL"

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/httpeek/`` (default ``~/.local/share/httpeek/``).
    On macOS/Windows: ``~/.httpeek/``.

    Returns:
        Absolute path to the data directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Settings ---


def _env_bool(name: str) -> Optional[bool]:
    """Read a boolean environment variable, or ``None`` when unset or empty."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return None
    if raw in _FALSE_VALUES:
        return False
    if raw in _TRUE_VALUES:
        return True
    raise ConfigError(f"{name} must be one of: 1, 0, true, false, yes, no (got {raw!r})")


def resolve_config(
    cli_user_agent: Optional[str] = None,
    cli_insecure: bool = False,
) -> ClientConfig:
    """Resolve client settings with full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_user_agent``, ``cli_insecure``)
        2. Environment variables (``HTTPEEK_*``)
        3. Defaults

    Returns:
        The immutable :class:`~httpeek.models.ClientConfig`.

    Raises:
        ConfigError: If an environment variable holds an invalid value.
    """
    values: dict[str, Any] = {}

    # 2. Environment variables
    env_user_agent = os.environ.get(ENV_USER_AGENT)
    if env_user_agent:
        values["user_agent"] = env_user_agent
    env_powered_by = os.environ.get(ENV_POWERED_BY)
    if env_powered_by:
        values["powered_by"] = env_powered_by
    env_verify = _env_bool(ENV_VERIFY_SSL)
    if env_verify is not None:
        values["verify_ssl"] = env_verify

    # 1. CLI flags (highest precedence)
    if cli_user_agent is not None:
        values["user_agent"] = cli_user_agent
    if cli_insecure:
        values["verify_ssl"] = False

    try:
        return ClientConfig(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
