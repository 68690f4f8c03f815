"""Tests for key=value body field parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from httpeek.exceptions import InvalidUsageError, MalformedPairError
from httpeek.exit_codes import EXIT_INVALID_USAGE
from httpeek.models import KeyValuePair
from httpeek.parser import parse_kv_pair, parse_kv_pairs


class TestParseKvPair:
    def test_simple_pair(self) -> None:
        assert parse_kv_pair("a=1") == KeyValuePair(key="a", value="1")

    def test_empty_value(self) -> None:
        assert parse_kv_pair("b=") == KeyValuePair(key="b", value="")

    def test_value_keeps_further_separators(self) -> None:
        pair = parse_kv_pair("token=abc==")
        assert pair.key == "token"
        assert pair.value == "abc=="

    def test_value_may_contain_spaces(self) -> None:
        assert parse_kv_pair("greeting=hello world").value == "hello world"

    @pytest.mark.parametrize("token", ["a", "", "no-separator", "a:1"])
    def test_missing_separator_rejected(self, token: str) -> None:
        with pytest.raises(MalformedPairError) as exc_info:
            parse_kv_pair(token)
        assert exc_info.value.token == token

    @pytest.mark.parametrize("token", ["=", "=value"])
    def test_empty_key_rejected(self, token: str) -> None:
        with pytest.raises(MalformedPairError, match="key must not be empty"):
            parse_kv_pair(token)

    def test_error_is_usage_error(self) -> None:
        with pytest.raises(InvalidUsageError) as exc_info:
            parse_kv_pair("a")
        assert exc_info.value.exit_code == EXIT_INVALID_USAGE
        assert "'a'" in str(exc_info.value)


class TestParseKvPairs:
    def test_preserves_order(self) -> None:
        pairs = parse_kv_pairs(["b=2", "a=1", "b=3"])
        assert [(p.key, p.value) for p in pairs] == [("b", "2"), ("a", "1"), ("b", "3")]

    def test_empty_sequence(self) -> None:
        assert parse_kv_pairs([]) == []

    def test_first_malformed_token_reported(self) -> None:
        with pytest.raises(MalformedPairError) as exc_info:
            parse_kv_pairs(["a=1", "oops", "also-bad"])
        assert exc_info.value.token == "oops"


class TestKeyValuePairModel:
    def test_is_frozen(self) -> None:
        pair = KeyValuePair(key="a", value="1")
        with pytest.raises(ValidationError):
            pair.key = "b"

    def test_empty_key_invalid(self) -> None:
        with pytest.raises(ValidationError):
            KeyValuePair(key="", value="1")
