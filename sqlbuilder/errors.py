"""Custom exception hierarchy for sqlbuilder.

All public errors inherit from SQLBuilderError so callers can catch the base
class for any sqlbuilder-specific failure.  Every error is caller misuse and
is raised before the offending statement is handed back; none of them is ever
represented in emitted SQL.
"""
from __future__ import annotations

from typing import Any


class SQLBuilderError(Exception):
    """Base exception for all sqlbuilder errors."""


class ConfigurationError(SQLBuilderError):
    """Raised when a query is built from an invalid configuration or input.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. ``EMPTY_TABLES``).
        details: Extra structured context.
    """

    def __init__(
        self,
        message: str,
        code: str = "CONFIGURATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for logging or APIs."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class UnsupportedDialectError(ConfigurationError):
    """Raised when a driver name does not map to a registered dialect."""

    def __init__(self, driver: str, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported driver: '{driver}'. Supported drivers: {supported}.",
            code="UNSUPPORTED_DIALECT",
            details={"driver": driver, "supported": supported},
        )
        self.driver = driver


class EmptyTablesError(ConfigurationError):
    """Raised when a statement is built against zero tables."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot build a statement without at least one table.",
            code="EMPTY_TABLES",
        )


class EmptyValuesError(ConfigurationError):
    """Raised when a statement has nothing to bind (INSERT/UPDATE)."""

    def __init__(self, statement: str, message: str | None = None) -> None:
        super().__init__(
            message or f"{statement} requires at least one value.",
            code="EMPTY_VALUES",
            details={"statement": statement},
        )
        self.statement = statement


class InsertShapeError(ConfigurationError):
    """Raised when bulk and flat INSERT values are mixed in a single call."""

    def __init__(self, index: int, expected: str) -> None:
        super().__init__(
            f"INSERT value at position {index} is not a {expected}; "
            "all values must share the shape of the first one.",
            code="INSERT_SHAPE",
            details={"index": index, "expected": expected},
        )
        self.index = index


class UnsupportedDataError(ConfigurationError):
    """Raised when UPDATE receives data it cannot turn into assignments."""

    def __init__(self, data_type: str, message: str | None = None) -> None:
        super().__init__(
            message
            or f"UPDATE data must be a str or a mapping, got {data_type}.",
            code="UNSUPPORTED_DATA",
            details={"data_type": data_type},
        )
        self.data_type = data_type


class PlaceholderMismatchError(ConfigurationError):
    """Raised when a raw fragment receives more arguments than it has markers."""

    def __init__(self, markers: int, arg_count: int) -> None:
        super().__init__(
            f"Raw fragment has {markers} '?' marker(s) but {arg_count} argument(s) "
            "were supplied.",
            code="PLACEHOLDER_MISMATCH",
            details={"markers": markers, "arg_count": arg_count},
        )
        self.markers = markers
        self.arg_count = arg_count


class StaleStatementError(SQLBuilderError):
    """Raised when a Statement is read after its Query has been rebuilt.

    Args:
        built_generation: Query generation the statement was built at.
        current_generation: The query's generation at access time.
    """

    def __init__(self, built_generation: int, current_generation: int) -> None:
        super().__init__(
            "Statement is stale: its query has been reset or rebuilt "
            f"(built at generation {built_generation}, "
            f"query is now at generation {current_generation}). "
            "Call Statement.compile() to keep a detached copy."
        )
        self.built_generation = built_generation
        self.current_generation = current_generation
