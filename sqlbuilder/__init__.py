"""sqlbuilder – a minimal parametrized SQL statement assembler.

Public API
----------
``Query``
    Mutable builder: target tables, placeholder dialect, and the
    ``select`` / ``insert`` / ``update`` / ``delete`` / ``raw`` operations.

``Statement``
    Read-only view returned by the factories; ``sql`` and ``args`` are ready
    for a driver's parametrized ``execute``.

Example::

    from sqlbuilder import Query

    q = Query("users", dialect="pg")
    stmt = q.insert(["name", "email"], "ada", "ada@example.com")
    stmt.sql    # 'INSERT INTO users(name,email)VALUES($1,$2)'
    stmt.args   # ['ada', 'ada@example.com']

Extensibility
-------------
Further placeholder styles can be registered via::

    from sqlbuilder.dialect.registry import DialectFactory

    @DialectFactory.register("oracle")
    class OracleDialect(Dialect):
        ...
"""

from __future__ import annotations

from sqlbuilder.dialect.base import Dialect
from sqlbuilder.dialect.mysql import MySQLDialect
from sqlbuilder.dialect.postgres import PostgresDialect
from sqlbuilder.dialect.registry import DialectFactory
from sqlbuilder.errors import (
    ConfigurationError,
    EmptyTablesError,
    EmptyValuesError,
    InsertShapeError,
    PlaceholderMismatchError,
    SQLBuilderError,
    StaleStatementError,
    UnsupportedDataError,
    UnsupportedDialectError,
)
from sqlbuilder.query.builder import Query
from sqlbuilder.query.config import QueryConfig
from sqlbuilder.query.statement import CompiledStatement, Statement
from sqlbuilder.query.values import Row, Scalar

# ---------------------------------------------------------------------------
# Register built-in dialects with DialectFactory
# ---------------------------------------------------------------------------

DialectFactory.register_class(PostgresDialect, "pg", "postgres", "postgresql")
DialectFactory.register_class(MySQLDialect, "mysql")

__all__ = [
    # Builder
    "Query",
    "QueryConfig",
    "Statement",
    "CompiledStatement",
    "Row",
    "Scalar",
    # Dialects
    "Dialect",
    "DialectFactory",
    "PostgresDialect",
    "MySQLDialect",
    # Errors
    "SQLBuilderError",
    "ConfigurationError",
    "UnsupportedDialectError",
    "EmptyTablesError",
    "EmptyValuesError",
    "InsertShapeError",
    "UnsupportedDataError",
    "PlaceholderMismatchError",
    "StaleStatementError",
]
