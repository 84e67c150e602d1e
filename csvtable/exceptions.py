"""Central application exception hierarchy.

This module defines the base application exception ``AppError`` and a set of
specialized subclasses used throughout the codebase to represent common
failure modes (DOM validation of table markup, configuration, input data and
output writing). Using a centralized hierarchy makes error handling and
testing consistent.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'DOM_VALIDATION_ERROR'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and may be retried.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.
    transient : bool
        True if the error is transient.

    Examples
    --------
    >>> e = AppError('DOM_VALIDATION_ERROR', 'bad id', context={'id': 'te st'})
    >>> e.code
    'DOM_VALIDATION_ERROR'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class DOMValidationError(AppError):
    """Raised when an HTML id or attribute name is not valid markup."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "DOM_VALIDATION_ERROR", message, context=context, transient=False
        )


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "CONFIGURATION_ERROR", message, context=context, transient=False
        )


class DataValidationError(AppError):
    """Raised for CSV input that cannot be read into records."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "DATA_VALIDATION_ERROR", message, context=context, transient=False
        )


class OutputWriteError(AppError):
    """Raised when rendered HTML cannot be written to its destination."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "OUTPUT_WRITE_ERROR", message, context=context, transient=True
        )
