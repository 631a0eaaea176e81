"""
Error hierarchy for dialect resolution.
"""

from __future__ import annotations

from typing import Any


class DialectError(RuntimeError):
    """Base error for dialect resolution failures."""


class ConfigurationError(DialectError):
    """Raised when neither an explicit dialect nor connection metadata is available."""


class UnknownStrategyError(DialectError):
    """
    Raised when a dialect reference cannot be resolved to a concrete type.
    """

    def __init__(self, reference: Any, message: str | None = None) -> None:
        self.reference = reference
        super().__init__(message or f"Unable to resolve dialect reference [{reference}]")


class ConstructionError(DialectError):
    """
    Raised when a resolved dialect type fails to instantiate.

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, type_name: str, cause: BaseException | None = None) -> None:
        self.type_name = type_name
        self.cause = cause
        message = f"Could not instantiate named dialect class [{type_name}]"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ResolutionError(DialectError):
    """
    Raised when no dialect could be produced for the observed database.
    """

    def __init__(
        self,
        message: str,
        *,
        database_name: str | None = None,
        major_version: int | None = None,
        minor_version: int | None = None,
    ) -> None:
        self.database_name = database_name
        self.major_version = major_version
        self.minor_version = minor_version
        super().__init__(message)


__all__ = [
    "DialectError",
    "ConfigurationError",
    "UnknownStrategyError",
    "ConstructionError",
    "ResolutionError",
]
