"""Unit tests for the dialect classes and DialectFactory."""

from __future__ import annotations

import pytest

from sqlbuilder import (
    Dialect,
    DialectFactory,
    MySQLDialect,
    PostgresDialect,
    Query,
    UnsupportedDialectError,
)


class _OracleDialect(Dialect):
    rewrites_markers = True

    @property
    def name(self) -> str:
        return "oracle"

    def placeholder(self, position: int) -> str:
        return f":{position}"


@pytest.fixture
def oracle():
    DialectFactory.register_class(_OracleDialect, "oracle", "ora")
    yield
    DialectFactory.unregister("oracle")


def test_postgres_placeholder():
    d = PostgresDialect()
    assert [d.placeholder(i) for i in (1, 2, 10)] == ["$1", "$2", "$10"]
    assert d.rewrites_markers


def test_mysql_placeholder():
    d = MySQLDialect()
    assert [d.placeholder(i) for i in (1, 2, 10)] == ["?", "?", "?"]
    assert not d.rewrites_markers


def test_dialect_equality_by_name():
    assert PostgresDialect() == PostgresDialect()
    assert PostgresDialect() != MySQLDialect()
    assert len({PostgresDialect(), PostgresDialect()}) == 1


@pytest.mark.parametrize(
    "driver, canonical",
    [
        ("pg", "pg"),
        ("Postgres", "pg"),
        ("POSTGRESQL", "pg"),
        ("mysql", "mysql"),
        ("MySql", "mysql"),
    ],
)
def test_canonical_name(driver, canonical):
    assert DialectFactory.canonical_name(driver) == canonical


def test_create_passes_instances_through():
    d = MySQLDialect()
    assert DialectFactory.create(d) is d


@pytest.mark.parametrize("driver", ["sqlite", "", "pgsql", "oracle"])
def test_create_unknown_raises(driver):
    with pytest.raises(UnsupportedDialectError) as exc_info:
        DialectFactory.create(driver)
    assert "pg" in exc_info.value.details["supported"]


def test_registered_drivers():
    assert {"pg", "postgres", "postgresql", "mysql"} <= set(
        DialectFactory.registered_drivers()
    )


def test_custom_dialect_registration(oracle):
    q = Query("t", dialect="ORA")
    q.insert(["a", "b"], 1, 2)
    q.raw(" RETURNING id INTO ?", "out")
    assert q.sql == "INSERT INTO t(a,b)VALUES(:1,:2) RETURNING id INTO :3"
    assert q.args == [1, 2, "out"]


def test_unregister_removes_aliases(oracle):
    DialectFactory.unregister("ora")
    with pytest.raises(UnsupportedDialectError):
        DialectFactory.create("oracle")


def test_unregister_unknown_is_a_noop():
    DialectFactory.unregister("nope")
    assert DialectFactory.canonical_name("pg") == "pg"


def test_register_decorator():
    @DialectFactory.register("qmark2")
    class _Qmark(MySQLDialect):
        pass

    try:
        assert isinstance(DialectFactory.create("QMARK2"), _Qmark)
    finally:
        DialectFactory.unregister("qmark2")
