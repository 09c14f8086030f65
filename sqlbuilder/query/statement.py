"""Read-only views over a built ``Query``.

``Statement`` is what the factory methods return.  It borrows its query and
is only valid until that query is reset or rebuilt; reading it afterwards
raises :class:`~sqlbuilder.errors.StaleStatementError` instead of silently
returning another statement's text.  ``CompiledStatement`` is a detached,
immutable copy for callers that need to keep the result around.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlbuilder.errors import StaleStatementError

if TYPE_CHECKING:
    from sqlbuilder.query.builder import Query


@dataclass(frozen=True)
class CompiledStatement:
    """A finished statement, detached from the builder that produced it.

    Attributes:
        sql: SQL text with dialect-specific placeholders.
        args: Bind arguments in placeholder order.
        dialect: Canonical driver name (``'pg'`` or ``'mysql'``).
    """

    sql: str
    args: tuple[Any, ...]
    dialect: str

    def __str__(self) -> str:
        return self.sql

    def __iter__(self) -> Iterator[Any]:
        """Unpack as ``(sql, args)`` for ``cursor.execute(*compiled)``."""
        yield self.sql
        yield list(self.args)


class Statement:
    """Read-only view bound to one :class:`~sqlbuilder.query.builder.Query`.

    Args:
        query: The owning query.
    """

    __slots__ = ("_query", "_generation")

    def __init__(self, query: Query) -> None:
        self._query = query
        self._generation = query.generation

    @property
    def query(self) -> Query:
        """The owning query, for appending raw fragments (``WHERE ...``)."""
        self._check()
        return self._query

    @property
    def sql(self) -> str:
        self._check()
        return self._query.sql

    @property
    def args(self) -> list[Any]:
        self._check()
        return self._query.args

    @property
    def is_stale(self) -> bool:
        return self._generation != self._query.generation

    def compile(self) -> CompiledStatement:
        """Return a detached :class:`CompiledStatement` snapshot."""
        self._check()
        return CompiledStatement(
            sql=self._query.sql,
            args=tuple(self._query.args),
            dialect=self._query.active_dialect.name,
        )

    def _check(self) -> None:
        if self.is_stale:
            raise StaleStatementError(self._generation, self._query.generation)

    def __str__(self) -> str:
        return self.sql

    def __iter__(self) -> Iterator[Any]:
        """Unpack as ``(sql, args)`` for ``cursor.execute(*statement)``."""
        yield self.sql
        yield self.args

    def __repr__(self) -> str:
        if self.is_stale:
            return "<Statement (stale)>"
        return f"<Statement sql={self._query.sql!r} args={self._query.args!r}>"
