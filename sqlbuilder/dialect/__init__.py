"""sqlbuilder dialect layer: placeholder spelling per driver."""
from sqlbuilder.dialect.base import Dialect
from sqlbuilder.dialect.mysql import MySQLDialect
from sqlbuilder.dialect.postgres import PostgresDialect
from sqlbuilder.dialect.registry import DialectFactory

__all__ = [
    "Dialect",
    "DialectFactory",
    "MySQLDialect",
    "PostgresDialect",
]
