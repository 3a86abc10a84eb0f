"""Testes para leitura dos query params do callback."""

from __future__ import annotations

import pytest

from api.connectors.wecom import CallbackQuery, MissingQueryParamError


def test_from_params_reads_all_fields() -> None:
    query = CallbackQuery.from_params(
        {"msg_signature": "abc", "timestamp": "1409659589", "nonce": "263014780", "x": "y"}
    )

    assert query == CallbackQuery(msg_signature="abc", timestamp="1409659589", nonce="263014780")


def test_missing_single_param() -> None:
    with pytest.raises(MissingQueryParamError, match="^missing_nonce$"):
        CallbackQuery.from_params({"msg_signature": "abc", "timestamp": "1"})


def test_empty_value_counts_as_missing() -> None:
    with pytest.raises(MissingQueryParamError, match="^missing_timestamp$"):
        CallbackQuery.from_params({"msg_signature": "abc", "timestamp": "", "nonce": "n"})


def test_missing_params_are_sorted() -> None:
    with pytest.raises(MissingQueryParamError, match="^missing_msg_signature_nonce$"):
        CallbackQuery.from_params({"timestamp": "1"})


def test_missing_query_is_value_error() -> None:
    assert issubclass(MissingQueryParamError, ValueError)
