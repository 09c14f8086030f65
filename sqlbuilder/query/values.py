"""INSERT value shapes: single row of scalars vs. many rows.

``Query.insert`` accepts either shape through one variadic argument and
infers which one it got from the first value.  :class:`Row` lets callers say
so explicitly when a scalar would otherwise look like a row (e.g. a Postgres
array column bound from a ``list``).
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from sqlbuilder.errors import EmptyValuesError, InsertShapeError


class Row(tuple):
    """An explicit bulk-insert row.

    ``Row(1, "a")`` always counts as a row, whatever the first INSERT value
    looks like.
    """

    def __new__(cls, *values: Any) -> Row:
        return super().__new__(cls, values)

    def __repr__(self) -> str:
        return f"Row{tuple.__repr__(self)}"


class Scalar:
    """Wrap a value so it is bound as one argument.

    Needed for ``list``/``tuple`` INSERT values; ``add_arg``, ``raw`` and
    ``update`` unwrap it as well.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Scalar({self.value!r})"


def is_row(value: Any) -> bool:
    """Return ``True`` if ``value`` is treated as a bulk-insert row.

    Rows are :class:`Row`, ``list`` and ``tuple`` instances (the variable- and
    fixed-length sequence types).  Strings, bytes, mappings and everything
    else are scalars.
    """
    return isinstance(value, (list, tuple))


def unwrap(value: Any) -> Any:
    """Return the bound value behind an optional :class:`Scalar` wrapper."""
    if isinstance(value, Scalar):
        return value.value
    return value


def resolve_rows(values: Sequence[Any]) -> list[Sequence[Any]]:
    """Normalize INSERT ``values`` to a list of rows.

    The shape of ``values[0]`` decides how every value is read:

    * row-shaped first value: each value is one row;
    * scalar first value: ``values`` itself is the single row.

    Args:
        values: The variadic values passed to ``Query.insert``.

    Returns:
        A non-empty list of non-empty rows.

    Raises:
        EmptyValuesError: If ``values`` or any row is empty.
        InsertShapeError: If a later value's shape differs from the first.
    """
    if not values:
        raise EmptyValuesError("INSERT")

    if not is_row(values[0]):
        for i, value in enumerate(values):
            if is_row(value):
                raise InsertShapeError(i, "scalar")
        return [list(values)]

    for i, value in enumerate(values):
        if not is_row(value):
            raise InsertShapeError(i, "row")
    return check_rows(values)


def check_rows(rows: Iterable[Sequence[Any]]) -> list[Sequence[Any]]:
    """Materialize ``rows`` and reject an empty batch or an empty row."""
    rows = list(rows)
    if not rows:
        raise EmptyValuesError("INSERT")
    for i, row in enumerate(rows):
        if len(row) == 0:
            raise EmptyValuesError("INSERT", f"INSERT row at position {i} is empty.")
    return rows
