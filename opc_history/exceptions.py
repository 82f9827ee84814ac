"""Exception classes for the OPC history models."""

from typing import Any


class HistoryModelError(Exception):
    """Base exception for the history model layer."""

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class WireDecodeError(HistoryModelError):
    """Raised when a wire payload cannot be decoded into a model."""

    def __init__(
        self,
        message: str = "Malformed wire payload",
        model: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize WireDecodeError.

        Args:
            message: Error message
            model: Name of the model that was being decoded
            errors: Structured per-field errors from the decoder
            details: Additional error details
        """
        error_details = details or {}
        if model:
            error_details["model"] = model
        error_details["errors"] = errors or []
        super().__init__(
            message=message,
            error_code="DECODE_ERROR",
            details=error_details,
        )
        self.model = model
        self.errors = error_details["errors"]


class UnknownModelError(HistoryModelError):
    """Raised when no wire schema is registered for a model."""

    def __init__(
        self,
        message: str = "No wire schema registered",
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize UnknownModelError.

        Args:
            message: Error message
            model: Name of the unregistered model
            details: Additional error details
        """
        error_details = details or {}
        if model:
            error_details["model"] = model
        super().__init__(
            message=message,
            error_code="UNKNOWN_MODEL",
            details=error_details,
        )
