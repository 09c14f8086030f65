"""Unit tests for QueryConfig and the error hierarchy."""

from __future__ import annotations

import pydantic
import pytest

from sqlbuilder import (
    ConfigurationError,
    EmptyTablesError,
    EmptyValuesError,
    Query,
    QueryConfig,
    SQLBuilderError,
    StaleStatementError,
    UnsupportedDialectError,
)


# ---------------------------------------------------------------------------
# QueryConfig
# ---------------------------------------------------------------------------


def test_config_normalizes_dialect():
    config = QueryConfig(tables=["users"], dialect="PostgreSQL")
    assert config.dialect == "pg"


def test_config_wraps_single_table():
    config = QueryConfig.model_validate({"tables": "users", "dialect": "mysql"})
    assert config.tables == ["users"]


def test_config_rejects_unknown_dialect():
    with pytest.raises(pydantic.ValidationError) as exc_info:
        QueryConfig(tables=["users"], dialect="sqlite")
    assert "Unsupported driver" in str(exc_info.value)


def test_config_requires_dialect():
    with pytest.raises(pydantic.ValidationError):
        QueryConfig(tables=["users"])  # type: ignore[call-arg]


def test_config_forbids_extra_keys():
    with pytest.raises(pydantic.ValidationError):
        QueryConfig.model_validate({"tables": ["t"], "dialect": "pg", "schema": "x"})


def test_config_json_round_trip():
    config = QueryConfig(tables=["a", "b"], dialect="postgres")
    restored = QueryConfig.model_validate_json(config.model_dump_json())
    assert restored == config


def test_query_from_config():
    q = Query.from_config(QueryConfig(tables=["a", "b"], dialect="mysql"))
    assert q.tables == ("a", "b")
    assert q.select().sql == "SELECT * FROM a,b"


def test_query_from_config_without_tables_fails_at_build_time():
    q = Query.from_config(QueryConfig(dialect="pg"))
    with pytest.raises(EmptyTablesError):
        q.delete()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def test_configuration_errors_share_a_base():
    for exc in (
        EmptyTablesError(),
        EmptyValuesError("INSERT"),
        UnsupportedDialectError("x", ["pg"]),
    ):
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, SQLBuilderError)


def test_stale_statement_error_is_not_a_configuration_error():
    exc = StaleStatementError(1, 2)
    assert isinstance(exc, SQLBuilderError)
    assert not isinstance(exc, ConfigurationError)


def test_to_error_response():
    response = UnsupportedDialectError("oracle", ["mysql", "pg"]).to_error_response()
    assert response["error"] == "UNSUPPORTED_DIALECT"
    assert response["details"] == {"driver": "oracle", "supported": ["mysql", "pg"]}
    assert "oracle" in response["message"]
