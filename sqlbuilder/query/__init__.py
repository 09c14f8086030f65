"""sqlbuilder query layer: the builder, its statement views and configuration."""
from sqlbuilder.query.builder import Query
from sqlbuilder.query.config import QueryConfig
from sqlbuilder.query.statement import CompiledStatement, Statement
from sqlbuilder.query.values import Row, Scalar

__all__ = [
    "CompiledStatement",
    "Query",
    "QueryConfig",
    "Row",
    "Scalar",
    "Statement",
]
