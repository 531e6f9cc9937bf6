"""CineVault Error Handling Module

This module defines the error handling system for CineVault, providing
structured error classes with context information for every layer of the
TMDb client.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved
- Remote failures stay inside TmdbResult; only TmdbError and
  PreconditionError are raised across the client facade
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from cinevault.shared.constants import TMDBConfig

if TYPE_CHECKING:
    from cinevault.shared.models.status import TmdbStatusResponse

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Default keys to mask in safe_dict
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ("session_id",)


class ErrorCode(str, Enum):
    """Error codes for CineVault.

    This enum serves as the single source of truth for all error codes
    used throughout the client.
    """

    # Network and transport errors
    NETWORK_ERROR = "NETWORK_ERROR"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"
    API_TIMEOUT = "API_TIMEOUT"
    API_SERVER_ERROR = "API_SERVER_ERROR"
    API_AUTHENTICATION_FAILED = "API_AUTHENTICATION_FAILED"
    API_RATE_LIMIT = "API_RATE_LIMIT"

    # TMDb specific errors
    TMDB_API_REQUEST_FAILED = "TMDB_API_REQUEST_FAILED"
    TMDB_API_MEDIA_NOT_FOUND = "TMDB_API_MEDIA_NOT_FOUND"

    # File errors (image downloads)
    FILE_WRITE_ERROR = "FILE_WRITE_ERROR"

    # Parsing errors
    DESERIALIZATION_ERROR = "DESERIALIZATION_ERROR"

    # Precondition errors
    PRECONDITION_FAILED = "PRECONDITION_FAILED"
    NOT_INITIALIZED = "NOT_INITIALIZED"
    UNSUPPORTED_VALUE = "UNSUPPORTED_VALUE"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"

    # Concurrency errors
    CONCURRENCY_ERROR = "CONCURRENCY_ERROR"

    # Generic
    APPLICATION_ERROR = "APPLICATION_ERROR"
    INFRASTRUCTURE_ERROR = "INFRASTRUCTURE_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContextModel:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so that contexts serialize safely into log records.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        session_id: Optional TMDb session id (masked in safe_dict)
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    session_id: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict with sensitive fields masked.

        Args:
            mask_keys: Fields to exclude from output. Defaults to SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary with masked sensitive fields and guaranteed additional_data key.

        Example:
            >>> context = ErrorContextModel(session_id="abc", operation="get_account")
            >>> context.safe_dict()
            {'operation': 'get_account', 'additional_data': {}}
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.file_path is not None and "file_path" not in mask_keys:
            data["file_path"] = self.file_path
        if self.operation is not None and "operation" not in mask_keys:
            data["operation"] = self.operation
        if self.session_id is not None and "session_id" not in mask_keys:
            data["session_id"] = self.session_id

        if self.additional_data is not None and "additional_data" not in mask_keys:
            data["additional_data"] = self.additional_data
        else:
            data["additional_data"] = {}

        return data


ErrorContext = ErrorContextModel


class CineVaultError(Exception):
    """Base exception class for all CineVault errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        """Initialize CineVaultError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error with code, message,
            masked context, and original_error (if present)
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(CineVaultError):
    """Domain-specific errors.

    Raised when the remote API reports a failure or when a TMDb
    response violates the expected shape.
    """


class InfrastructureError(CineVaultError):
    """Infrastructure-related errors (network, file system)."""


class ApplicationError(CineVaultError):
    """Application-level errors (configuration, caller misuse)."""


class DataProcessingError(CineVaultError):
    """Data processing errors (JSON decoding, model validation)."""


class TransportError(InfrastructureError):
    """Error reported by a transport for a failed HTTP exchange.

    Attributes:
        status_code: HTTP status of the response, None when no response
            was received (connection failure, timeout)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        return data


class DeserializationError(DataProcessingError):
    """Malformed JSON or an unexpected response shape.

    Attributes:
        model_name: Name of the target model
        validation_errors: Field-level validation errors, if any
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
        model_name: str | None = None,
        validation_errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.model_name = model_name
        self.validation_errors = validation_errors or []


class TmdbError(DomainError):
    """Raised when a failed TmdbResult is unwrapped.

    Carries both the original error and the status payload the API sent
    back, when one could be parsed.

    Attributes:
        error: The error captured in the result
        api_error: Parsed TMDb status payload or None
    """

    def __init__(
        self,
        message: str,
        error: BaseException | None = None,
        api_error: TmdbStatusResponse | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        code = ErrorCode.TMDB_API_REQUEST_FAILED
        if (
            api_error is not None
            and api_error.status_code == TMDBConfig.STATUS_RESOURCE_NOT_FOUND
        ):
            code = ErrorCode.TMDB_API_MEDIA_NOT_FOUND
        super().__init__(code, message, context, error)
        self.error = error
        self.api_error = api_error

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["api_error"] = (
            self.api_error.model_dump(exclude={"etag"}) if self.api_error else None
        )
        return data


class PreconditionError(ApplicationError):
    """Caller misuse, always raised regardless of the error policy."""


class NotInitializedError(PreconditionError):
    """Cached client state was read before it was populated."""


def create_precondition_error(
    message: str,
    operation: str | None = None,
    field: str | None = None,
) -> PreconditionError:
    """Create a precondition error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"field": field} if field else None
    )
    context = ErrorContext(operation=operation, additional_data=additional_data)
    return PreconditionError(ErrorCode.PRECONDITION_FAILED, message, context)


def create_unsupported_value_error(
    value: Enum | object,
    operation: str | None = None,
) -> PreconditionError:
    """Create an error for an enum value with no configured wire mapping."""
    context = ErrorContext(
        operation=operation,
        additional_data={"value": str(value)},
    )
    return PreconditionError(
        ErrorCode.UNSUPPORTED_VALUE,
        f"No wire value configured for {value!r}",
        context,
    )


def create_not_initialized_error(name: str) -> NotInitializedError:
    """Create an error for reading unset cached client state."""
    context = ErrorContext(
        operation=f"read_{name}",
        additional_data={"field": name},
    )
    return NotInitializedError(
        ErrorCode.NOT_INITIALIZED,
        f"'{name}' is not initialized; call the operation that sets it first",
        context,
    )


def create_transport_error(
    message: str,
    url: str | None = None,
    status_code: int | None = None,
    code: ErrorCode = ErrorCode.API_REQUEST_FAILED,
    original_error: BaseException | None = None,
) -> TransportError:
    """Create a transport error with context."""
    additional_data: dict[str, PrimitiveContextValue] = {}
    if url is not None:
        additional_data["url"] = url
    if status_code is not None:
        additional_data["status_code"] = status_code
    context = ErrorContext(
        operation="http_request",
        additional_data=additional_data or None,
    )
    return TransportError(
        code,
        message,
        context,
        original_error,
        status_code=status_code,
    )


def create_deserialization_error(
    message: str,
    model_name: str,
    validation_errors: list[dict[str, Any]] | None = None,
    operation: str | None = None,
    original_error: BaseException | None = None,
) -> DeserializationError:
    """Create a deserialization error with context.

    Args:
        message: Error message
        model_name: Target model name
        validation_errors: Pydantic validation error details
        operation: Operation being performed
        original_error: Original exception

    Returns:
        DeserializationError instance
    """
    additional_data: dict[str, PrimitiveContextValue] = {
        "model_name": model_name,
        "validation_error_count": len(validation_errors) if validation_errors else 0,
    }
    context = ErrorContext(
        operation=operation or "deserialize",
        additional_data=additional_data,
    )
    return DeserializationError(
        code=ErrorCode.DESERIALIZATION_ERROR,
        message=message,
        context=context,
        original_error=original_error,
        model_name=model_name,
        validation_errors=validation_errors,
    )


def create_config_error(
    message: str,
    config_key: str | None = None,
    operation: str | None = None,
    original_error: BaseException | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ApplicationError(
        ErrorCode.CONFIG_ERROR,
        message,
        context,
        original_error,
    )
