"""Dialect abstraction: the placeholder strategy used by ``Query``.

A dialect only decides how a bind-parameter placeholder is spelled.  Quoting,
type mapping and every other backend difference is out of scope; identifiers
reach the builder pre-escaped.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class Dialect(ABC):
    """Abstract base for placeholder dialects.

    Subclasses implement :meth:`placeholder`; ``Query`` calls it once per
    bound argument with the 1-based position of that argument.
    """

    #: ``True`` when raw-fragment ``?`` markers must be rewritten.
    rewrites_markers: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the canonical driver name (``'pg'`` or ``'mysql'``)."""

    @abstractmethod
    def placeholder(self, position: int) -> str:
        """Return the placeholder text for the argument at ``position``.

        Args:
            position: 1-based index of the argument in the statement.

        Returns:
            Dialect-specific placeholder string.
        """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dialect):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
