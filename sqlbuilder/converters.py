"""Adapters for building a ``Query`` from SQLAlchemy objects.

Applications that already describe their schema with SQLAlchemy Core can
reuse those ``Table`` objects and their engine instead of repeating table
names and driver flags.

Install the optional dependency before using this module::

    pip install "sqlbuilder[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from sqlbuilder.converters import column_names, query_from_sqlalchemy

    engine = create_engine("postgresql+psycopg://user:pw@host/db")
    q = query_from_sqlalchemy(users_table, engine)
    q.insert(column_names(users_table), [1, "ada"], [2, "grace"])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlbuilder.dialect.registry import DialectFactory
from sqlbuilder.errors import UnsupportedDialectError
from sqlbuilder.query.builder import Query

if TYPE_CHECKING:
    from sqlalchemy import Table

# SQLAlchemy backend names that differ from a registered driver name.
_BACKEND_ALIASES: dict[str, str] = {
    "mariadb": "mysql",
}


def dialect_name_from_sqlalchemy(bind: Any) -> str:
    """Return the sqlbuilder driver name for a SQLAlchemy backend.

    Args:
        bind: An ``Engine``, ``Connection``, SQLAlchemy ``Dialect`` instance,
            or a backend name such as ``"postgresql"``.

    Returns:
        Canonical driver name (``'pg'`` or ``'mysql'``).

    Raises:
        UnsupportedDialectError: If the backend has no placeholder dialect
            (e.g. ``sqlite``).
    """
    if isinstance(bind, str):
        backend = bind
    else:
        # Engine and Connection expose .dialect; a Dialect exposes .name.
        dialect = getattr(bind, "dialect", bind)
        backend = getattr(dialect, "name", None)
        if not isinstance(backend, str):
            raise TypeError(
                f"Expected a SQLAlchemy Engine, Connection, Dialect or backend name, "
                f"got {type(bind).__name__}."
            )

    # "postgresql+psycopg" style URLs name the driver after the backend.
    backend = backend.split("+", 1)[0].lower()
    try:
        return DialectFactory.canonical_name(_BACKEND_ALIASES.get(backend, backend))
    except UnsupportedDialectError as exc:
        raise UnsupportedDialectError(
            backend, DialectFactory.registered_drivers() + sorted(_BACKEND_ALIASES)
        ) from exc


def table_names(*tables: Table | str) -> list[str]:
    """Return the names of ``tables``, schema-qualified where a schema is set.

    Strings are passed through unchanged.
    """
    names: list[str] = []
    for table in tables:
        if isinstance(table, str):
            names.append(table)
        else:
            names.append(_require_table(table).fullname)
    return names


def column_names(table: Table, *, exclude: tuple[str, ...] = ()) -> list[str]:
    """Return ``table``'s column names in declaration order.

    Args:
        table: A SQLAlchemy ``Table``.
        exclude: Column names to leave out (e.g. a server-generated ``id``).
    """
    return [col.name for col in _require_table(table).columns if col.name not in exclude]


def query_from_sqlalchemy(tables: Table | str | list[Table | str], bind: Any) -> Query:
    """Create a :class:`~sqlbuilder.query.builder.Query` for SQLAlchemy tables.

    Args:
        tables: One table or a list of tables (``Table`` objects or names).
        bind: Anything accepted by :func:`dialect_name_from_sqlalchemy`.

    Returns:
        A fresh ``Query`` using the backend's placeholder dialect.
    """
    if not isinstance(tables, list):
        tables = [tables]
    return Query(table_names(*tables), dialect_name_from_sqlalchemy(bind))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _require_table(table: Any) -> Table:
    try:
        from sqlalchemy import Table as _Table
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for sqlbuilder.converters. "
            'Install it with: pip install "sqlbuilder[sqlalchemy]"'
        ) from exc

    if not isinstance(table, _Table):
        raise TypeError(f"Expected a SQLAlchemy Table, got {type(table).__name__}.")
    return table
