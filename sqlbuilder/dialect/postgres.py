"""PostgreSQL placeholder dialect."""

from __future__ import annotations

from sqlbuilder.dialect.base import Dialect


class PostgresDialect(Dialect):
    """Positional placeholders: ``$1``, ``$2``, ...

    Compatible with ``asyncpg``, ``psycopg.RawCursor`` and the PostgreSQL
    extended query protocol.  Raw-fragment ``?`` markers are renumbered.
    """

    rewrites_markers = True

    @property
    def name(self) -> str:
        return "pg"

    def placeholder(self, position: int) -> str:
        return f"${position}"
