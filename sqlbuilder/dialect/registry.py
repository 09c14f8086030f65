"""Dialect registry (Open/Closed Principle).

``DialectFactory`` maps driver names, and their aliases, to
:class:`~sqlbuilder.dialect.base.Dialect` implementations.  The built-in
``pg`` and ``mysql`` dialects are registered by ``sqlbuilder/__init__.py``;
further placeholder styles can be plugged in without touching ``Query``.

Usage::

    from sqlbuilder.dialect.registry import DialectFactory

    @DialectFactory.register("oracle")
    class OracleDialect(Dialect):
        ...

    dialect = DialectFactory.create("Oracle")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from sqlbuilder.dialect.base import Dialect
from sqlbuilder.errors import UnsupportedDialectError


class DialectFactory:
    """Registry mapping lower-cased driver names to :class:`Dialect` classes.

    Lookups are case-insensitive.  A dialect class may be registered under
    several aliases (``pg``, ``postgres`` and ``postgresql`` all resolve to
    the positional dialect).
    """

    _dialects: ClassVar[dict[str, type[Dialect]]] = {}

    @classmethod
    def register(
        cls, name: str, *aliases: str
    ) -> Callable[[type[Dialect]], type[Dialect]]:
        """Decorator that registers a dialect class under ``name`` and ``aliases``.

        Args:
            name: Canonical driver name (e.g. ``"pg"``).
            *aliases: Additional driver names resolving to the same class.

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[Dialect]) -> type[Dialect]:
            cls.register_class(dialect_cls, name, *aliases)
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, dialect_cls: type[Dialect], name: str, *aliases: str) -> None:
        """Register a dialect class without using the decorator form."""
        for key in (name, *aliases):
            cls._dialects[key.lower()] = dialect_cls

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove ``name`` and every alias pointing at the same class."""
        dialect_cls = cls._dialects.get(name.lower())
        if dialect_cls is None:
            return
        for key in [k for k, v in cls._dialects.items() if v is dialect_cls]:
            del cls._dialects[key]

    @classmethod
    def create(cls, driver: str | Dialect) -> Dialect:
        """Instantiate the dialect registered for ``driver``.

        Args:
            driver: Driver name (case-insensitive) or an existing
                :class:`Dialect` instance, which is returned unchanged.

        Returns:
            A :class:`Dialect` instance.

        Raises:
            UnsupportedDialectError: If no dialect is registered for ``driver``.
        """
        if isinstance(driver, Dialect):
            return driver
        dialect_cls = cls._dialects.get(str(driver).lower())
        if dialect_cls is None:
            raise UnsupportedDialectError(str(driver), cls.registered_drivers())
        return dialect_cls()

    @classmethod
    def canonical_name(cls, driver: str | Dialect) -> str:
        """Return the canonical name for ``driver`` (e.g. ``'postgres'`` -> ``'pg'``)."""
        return cls.create(driver).name

    @classmethod
    def registered_drivers(cls) -> list[str]:
        """Return the sorted list of registered driver names and aliases."""
        return sorted(cls._dialects)
