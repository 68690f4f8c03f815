"""Parsing of ``key=value`` body fields.

Only the first ``=`` separates key from value, so values may themselves
contain ``=`` (``token=a=b`` yields ``("token", "a=b")``). A trailing ``=``
yields an empty value. Tokens without ``=`` or with an empty key are
rejected.
"""

from __future__ import annotations

from typing import Iterable

from httpeek.exceptions import MalformedPairError
from httpeek.models import KeyValuePair


def parse_kv_pair(token: str) -> KeyValuePair:
    """Parse a single ``key=value`` token.

    Args:
        token: One body argument from the command line.

    Returns:
        The parsed :class:`~httpeek.models.KeyValuePair`.

    Raises:
        MalformedPairError: If *token* has no ``=`` or its key is empty.
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise MalformedPairError(token)
    if not key:
        raise MalformedPairError(token, reason="key must not be empty")
    return KeyValuePair(key=key, value=value)


def parse_kv_pairs(tokens: Iterable[str]) -> list[KeyValuePair]:
    """Parse every token in order, failing on the first malformed one."""
    return [parse_kv_pair(token) for token in tokens]
