"""The mutable statement builder.

``Query`` owns a text buffer, the ordered argument list, the target tables
and the placeholder dialect.  Statement factories (:meth:`Query.select`,
:meth:`Query.insert`, :meth:`Query.update`, :meth:`Query.delete`) reset the
buffer, write a statement skeleton and return a
:class:`~sqlbuilder.query.statement.Statement` view::

    q = Query("users", dialect="pg")
    q.select("id", "name")
    q.raw(" WHERE id=?", 7)
    cursor.execute(q.sql, q.args)   # SELECT id,name FROM users WHERE id=$1, [7]

Argument bookkeeping
--------------------
Placeholders are only ever written by :meth:`Query.add_arg`, which appends
the value and writes the placeholder for the new argument count in one step,
and by the positional path of :meth:`Query.raw`, which goes through
``add_arg`` for every marker it rewrites.  The argument list is never handed
out mutably.

A ``Query`` is not thread-safe; use one per statement-construction unit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

from sqlbuilder.dialect.base import Dialect
from sqlbuilder.dialect.registry import DialectFactory
from sqlbuilder.errors import (
    EmptyTablesError,
    EmptyValuesError,
    PlaceholderMismatchError,
    UnsupportedDataError,
)
from sqlbuilder.query.config import QueryConfig
from sqlbuilder.query.statement import Statement
from sqlbuilder.query.values import check_rows, resolve_rows, unwrap

logger = logging.getLogger(__name__)

_MARKER = "?"


class Query:
    """Builds parametrized SQL statements against one or more tables.

    Args:
        tables: A table name or an ordered sequence of table names.
        dialect: Driver name (``'pg'``, ``'postgres'``, ``'postgresql'`` or
            ``'mysql'``, case-insensitive) or a
            :class:`~sqlbuilder.dialect.base.Dialect` instance.

    Raises:
        UnsupportedDialectError: If ``dialect`` is not registered.
    """

    def __init__(self, tables: str | Sequence[str], dialect: str | Dialect) -> None:
        self._dialect = DialectFactory.create(dialect)
        self._active = self._dialect
        self._tables = _table_list(tables)
        self._parts: list[str] = []
        self._args: list[Any] = []
        self._generation = 0

    @classmethod
    def from_config(cls, config: QueryConfig) -> Query:
        """Create a query from a validated :class:`QueryConfig`."""
        return cls(config.tables, config.dialect)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def sql(self) -> str:
        return "".join(self._parts)

    @property
    def args(self) -> list[Any]:
        """A copy of the bind arguments, in placeholder order."""
        return list(self._args)

    @property
    def tables(self) -> tuple[str, ...]:
        return tuple(self._tables)

    @property
    def table(self) -> str:
        """The first configured table (``''`` when there are none)."""
        return self._tables[0] if self._tables else ""

    @property
    def dialect(self) -> Dialect:
        """The configured dialect; applies from the next statement on."""
        return self._dialect

    @property
    def active_dialect(self) -> Dialect:
        """The dialect the statement currently being built is written in."""
        return self._active

    @property
    def generation(self) -> int:
        """Incremented on every reset; stale ``Statement`` views compare against it."""
        return self._generation

    def set_tables(self, *tables: str) -> None:
        """Replace the target tables and reset the query.

        Accepts ``set_tables("a", "b")`` or ``set_tables(["a", "b"])``.
        """
        if len(tables) == 1 and not isinstance(tables[0], str):
            tables = tuple(tables[0])
        self.reset()
        self._tables = _table_list(tables)

    def set_dialect(self, dialect: str | Dialect) -> None:
        """Change the placeholder dialect.

        The query is not reset.  A statement that already holds text keeps
        its dialect; the new one takes effect at the next reset.

        Raises:
            UnsupportedDialectError: If ``dialect`` is not registered.
        """
        self._dialect = DialectFactory.create(dialect)
        if not self._parts and not self._args:
            self._active = self._dialect
        logger.debug("Query dialect set to %s", self._dialect.name)

    def reset(self) -> None:
        """Discard the text and arguments; tables and dialect are kept."""
        self._parts = []
        self._args = []
        self._active = self._dialect
        self._generation += 1

    def statement(self) -> Statement:
        """Return a :class:`Statement` view over the current text and args."""
        return Statement(self)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def add_arg(self, value: Any) -> None:
        """Bind ``value`` and write its placeholder."""
        self._args.append(unwrap(value))
        self._parts.append(self._active.placeholder(len(self._args)))

    def add_columns(self, *columns: str) -> None:
        """Write ``columns`` comma-joined, verbatim."""
        self._parts.append(",".join(columns))

    def add_tables(self) -> None:
        """Write the configured tables comma-joined.

        Raises:
            EmptyTablesError: If no tables are configured.
        """
        if not self._tables:
            raise EmptyTablesError()
        self._parts.append(",".join(self._tables))

    def raw(self, template: str, *args: Any) -> Query:
        """Append a SQL fragment, binding ``args`` to its ``?`` markers.

        Under a positional dialect every ``?`` is rewritten to ``$n`` while
        arguments remain; markers past the last argument are left as ``?``.
        Under the unnumbered dialect the fragment is written unchanged and
        ``args`` are appended as given.

        Returns:
            The query, for chaining.

        Raises:
            PlaceholderMismatchError: Positional dialect only, if more
                arguments are supplied than the fragment has markers.
        """
        if not self._active.rewrites_markers:
            self._parts.append(template)
            self._args.extend(unwrap(arg) for arg in args)
            return self

        markers = template.count(_MARKER)
        if len(args) > markers:
            raise PlaceholderMismatchError(markers, len(args))

        pieces = template.split(_MARKER, len(args))
        self._parts.append(pieces[0])
        for arg, piece in zip(args, pieces[1:]):
            self.add_arg(arg)
            self._parts.append(piece)
        return self

    def raw_char(self, char: str) -> Query:
        """Append a single character without any argument bookkeeping."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"raw_char expects a single character, got {char!r}")
        self._parts.append(char)
        return self

    # ------------------------------------------------------------------
    # Statement factories
    # ------------------------------------------------------------------

    def select(self, *columns: str) -> Statement:
        """``SELECT <columns> FROM <tables>``; no columns selects ``*``."""
        with self._build("SELECT"):
            self._parts.append("SELECT ")
            if columns:
                self.add_columns(*columns)
            else:
                self._parts.append("*")
            self._parts.append(" FROM ")
            self.add_tables()
        return self.statement()

    def insert(self, columns: str | Sequence[str], *values: Any) -> Statement:
        """``INSERT INTO <tables>(<columns>)VALUES(...)``.

        ``values`` is either one row of scalars::

            q.insert(["a", "b"], 1, 2)              # VALUES($1,$2)

        or several rows, each a ``list``, ``tuple`` or
        :class:`~sqlbuilder.query.values.Row`::

            q.insert(["a", "b"], [1, 2], [3, 4])    # VALUES($1,$2),($3,$4)

        The first value decides the shape for all of them.

        Raises:
            EmptyValuesError: If no values (or an empty row) are given.
            InsertShapeError: If row and scalar values are mixed.
        """
        return self._insert(columns, resolve_rows, values)

    def insert_rows(
        self, columns: str | Sequence[str], rows: Iterable[Sequence[Any]]
    ) -> Statement:
        """Bulk INSERT where every element of ``rows`` is a row, whatever its type."""
        return self._insert(columns, check_rows, rows)

    def update(self, data: str | Mapping[str, Any], *args: Any) -> Statement:
        """``UPDATE <tables> SET <assignments>``.

        Args:
            data: Either a raw assignment template with ``?`` markers bound
                to ``args`` (``"a=?,b=b+?"``), or a mapping of column name to
                value rendered as ``col=<placeholder>`` in iteration order.
            *args: Arguments for a template ``data``.

        Raises:
            UnsupportedDataError: If ``data`` is neither a str nor a mapping,
                or ``args`` accompany a mapping.
            EmptyValuesError: If the mapping is empty.
        """
        with self._build("UPDATE"):
            if isinstance(data, str):
                self._update_prefix()
                self.raw(data, *args)
            else:
                self._update_assignments(data, args)
        return self.statement()

    def delete(self) -> Statement:
        """``DELETE FROM <tables>``."""
        with self._build("DELETE"):
            self._parts.append("DELETE FROM ")
            self.add_tables()
        return self.statement()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _insert(
        self,
        columns: str | Sequence[str],
        to_rows: Callable[[Any], list[Sequence[Any]]],
        values: Any,
    ) -> Statement:
        with self._build("INSERT"):
            rows = to_rows(values)
            if isinstance(columns, str):
                columns = [columns]
            self._parts.append("INSERT INTO ")
            self.add_tables()
            self._parts.append("(")
            self.add_columns(*columns)
            self._parts.append(")VALUES")
            for i, row in enumerate(rows):
                if i:
                    self._parts.append(",")
                self._parts.append("(")
                for j, value in enumerate(row):
                    if j:
                        self._parts.append(",")
                    self.add_arg(value)
                self._parts.append(")")
        return self.statement()

    def _update_assignments(self, data: Any, args: tuple[Any, ...]) -> None:
        if not isinstance(data, Mapping):
            raise UnsupportedDataError(type(data).__name__)
        if args:
            raise UnsupportedDataError(
                type(data).__name__,
                "UPDATE args are only accepted with a str template.",
            )
        if not data:
            raise EmptyValuesError("UPDATE")

        self._update_prefix()
        for i, (column, value) in enumerate(data.items()):
            if i:
                self._parts.append(",")
            self._parts.append(f"{column}=")
            self.add_arg(value)

    def _update_prefix(self) -> None:
        self._parts.append("UPDATE ")
        self.add_tables()
        self._parts.append(" SET ")

    @contextmanager
    def _build(self, kind: str) -> Iterator[None]:
        """Reset, run the body, and reset again if the body raises."""
        self.reset()
        try:
            yield
        except Exception:
            self.reset()
            raise
        logger.debug(
            "Built %s statement (%s, %d args): %s",
            kind,
            self._active.name,
            len(self._args),
            self.sql,
        )

    def __str__(self) -> str:
        return self.sql

    def __repr__(self) -> str:
        return (
            f"Query(tables={list(self._tables)!r}, dialect={self._dialect.name!r}, "
            f"sql={self.sql!r}, args={self._args!r})"
        )


def _table_list(tables: str | Iterable[str]) -> list[str]:
    if isinstance(tables, str):
        return [tables]
    return list(tables)
