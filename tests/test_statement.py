"""Unit tests for Statement views and CompiledStatement snapshots."""

from __future__ import annotations

import dataclasses

import pytest

from sqlbuilder import CompiledStatement, StaleStatementError


def test_statement_reads_current_query_state(pg):
    stmt = pg.select()
    pg.raw(" WHERE a=?", 1)
    assert stmt.sql == "SELECT * FROM t WHERE a=$1"
    assert stmt.args == [1]
    assert str(stmt) == stmt.sql


def test_statement_unpacks_to_sql_and_args(pg):
    sql, args = pg.insert(["a"], 1)
    assert sql == "INSERT INTO t(a)VALUES($1)"
    assert args == [1]


def test_statement_goes_stale_after_rebuild(pg):
    first = pg.select()
    pg.delete()
    assert first.is_stale
    with pytest.raises(StaleStatementError) as exc_info:
        _ = first.sql
    assert exc_info.value.current_generation > exc_info.value.built_generation
    with pytest.raises(StaleStatementError):
        _ = first.args
    with pytest.raises(StaleStatementError):
        first.compile()


def test_statement_goes_stale_after_reset(pg):
    stmt = pg.delete()
    pg.reset()
    with pytest.raises(StaleStatementError):
        _ = stmt.query
    assert repr(stmt) == "<Statement (stale)>"


def test_statement_goes_stale_after_set_tables(pg):
    stmt = pg.delete()
    pg.set_tables("other")
    assert stmt.is_stale


def test_statement_survives_dialect_change(pg):
    stmt = pg.update({"a": 1})
    pg.set_dialect("mysql")
    assert not stmt.is_stale
    assert stmt.sql == "UPDATE t SET a=$1"


def test_statement_method_returns_view_over_current_state(pg):
    pg.raw("SELECT ?", 1)
    stmt = pg.statement()
    assert stmt.sql == "SELECT $1"
    assert stmt.args == [1]


def test_statement_args_are_a_copy(pg):
    stmt = pg.insert(["a"], 1)
    stmt.args.append(2)
    assert stmt.args == [1]


def test_compile_detaches_from_query(pg):
    compiled = pg.insert(["a", "b"], 1, 2).compile()
    pg.delete()
    assert compiled == CompiledStatement(
        sql="INSERT INTO t(a,b)VALUES($1,$2)", args=(1, 2), dialect="pg"
    )
    sql, args = compiled
    assert sql == compiled.sql
    assert args == [1, 2]
    assert str(compiled) == compiled.sql


def test_compiled_statement_is_frozen(my):
    compiled = my.delete().compile()
    assert compiled.dialect == "mysql"
    with pytest.raises(dataclasses.FrozenInstanceError):
        compiled.sql = "DROP TABLE t"  # type: ignore[misc]


def test_compile_reports_statement_dialect_not_pending_one(pg):
    stmt = pg.select()
    pg.set_dialect("mysql")
    assert stmt.compile().dialect == "pg"
