"""Pydantic model for ``Query`` configuration.

``QueryConfig`` lets the target tables and driver be loaded from plain data
(settings files, environment-derived dicts) and validated up front::

    from sqlbuilder import Query, QueryConfig

    config = QueryConfig.model_validate({"tables": ["users"], "dialect": "PostgreSQL"})
    config.dialect            # 'pg'
    query = Query.from_config(config)
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sqlbuilder.dialect.registry import DialectFactory
from sqlbuilder.errors import UnsupportedDialectError


class QueryConfig(BaseModel):
    """Tables and driver a ``Query`` is built against.

    Attributes:
        tables: Ordered table names; a single string is accepted and wrapped.
            An empty list is allowed here and rejected at build time.
        dialect: Driver name, normalized to its canonical form
            (``'pg'`` or ``'mysql'``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tables: list[str] = Field(default_factory=list)
    dialect: str

    @field_validator("tables", mode="before")
    @classmethod
    def _wrap_single_table(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("dialect")
    @classmethod
    def _normalize_dialect(cls, value: str) -> str:
        try:
            return DialectFactory.canonical_name(value)
        except UnsupportedDialectError as exc:
            raise ValueError(str(exc)) from exc
