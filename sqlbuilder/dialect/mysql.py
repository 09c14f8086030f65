"""MySQL placeholder dialect."""

from __future__ import annotations

from sqlbuilder.dialect.base import Dialect


class MySQLDialect(Dialect):
    """Unnumbered placeholders: every bind parameter is ``?``.

    Ordering is purely positional in the argument list, which is what
    ``mysql-connector-python`` prepared cursors and Python's ``sqlite3``
    (qmark style) expect.  Raw fragments pass through untouched.
    """

    @property
    def name(self) -> str:
        return "mysql"

    def placeholder(self, position: int) -> str:
        return "?"
