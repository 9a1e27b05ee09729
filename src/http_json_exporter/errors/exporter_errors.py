# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter Error Classes.

Error Hierarchy:
    ExporterError (base exporter error)
    ├── ExporterConfigurationError
    ├── FetchError
    │   ├── FetchTimeoutError
    │   ├── FetchConnectionError
    │   ├── FetchBadStatusError
    │   └── FetchReadError
    ├── JsonParseError
    └── FlattenInvariantError

FetchError and JsonParseError describe a scrape cycle that failed for
reasons outside the process (endpoint down, slow, or serving garbage). The
collector recovers from them and reports ``up == 0``.

FlattenInvariantError means the decoded JSON tree contained something a JSON
decoder can never produce. It is a programming error and is never recovered.

All errors:
    - Use EnumExporterErrorCode for classification
    - Support error chaining with ``raise ... from e``
    - Accept ModelExporterErrorContext for bundled context parameters
    - Accept extra keyword context (status_code, timeout_seconds, ...)
"""

from typing import Optional
from uuid import UUID

from http_json_exporter.enums import EnumExporterErrorCode, EnumFetchFailureKind
from http_json_exporter.errors.model_exporter_error_context import (
    ModelExporterErrorContext,
)


class ExporterError(Exception):
    """Base error class for the exporter.

    Structured Fields (via ModelExporterErrorContext):
        operation: Operation being performed
        target_name: Target resource/endpoint name
        correlation_id: Scrape cycle correlation ID

    Example:
        >>> context = ModelExporterErrorContext(operation="fetch")
        >>> raise ExporterError("Operation failed", context=context, retry_count=0)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumExporterErrorCode] = None,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize ExporterError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled context (operation, target_name, correlation_id)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumExporterErrorCode.OPERATION_FAILED
        self.correlation_id: Optional[UUID] = None

        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message


class ExporterConfigurationError(ExporterError):
    """Raised when exporter configuration is missing or invalid.

    Example:
        >>> raise ExporterConfigurationError(
        ...     "Invalid value for HTTP_JSON_EXPORTER_TIMEOUT: expected numeric value",
        ...     context=ModelExporterErrorContext(operation="parse_env"),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumExporterErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class FetchError(ExporterError):
    """Raised when the single GET of a scrape cycle fails.

    Subclasses fix ``failure_kind``; the base class is not raised directly.
    """

    failure_kind: EnumFetchFailureKind = EnumFetchFailureKind.READ_FAILED

    def __init__(
        self,
        message: str,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumExporterErrorCode.FETCH_FAILED,
            context=context,
            failure_kind=self.failure_kind,
            **extra_context,
        )


class FetchTimeoutError(FetchError):
    """Raised when connect, read, or the whole fetch exceeds the deadline.

    Example:
        >>> raise FetchTimeoutError(
        ...     "HTTP GET timed out after 5.0s",
        ...     context=context,
        ...     timeout_seconds=5.0,
        ... )
    """

    failure_kind = EnumFetchFailureKind.TIMEOUT


class FetchConnectionError(FetchError):
    """Raised when no response could be obtained from the scrape endpoint."""

    failure_kind = EnumFetchFailureKind.CONNECT_FAILED


class FetchBadStatusError(FetchError):
    """Raised when the endpoint answers with a status outside [200, 300).

    Example:
        >>> raise FetchBadStatusError(
        ...     "Unexpected HTTP status 503",
        ...     context=context,
        ...     status_code=503,
        ... )
    """

    failure_kind = EnumFetchFailureKind.BAD_STATUS

    def __init__(
        self,
        message: str,
        status_code: int,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.status_code = status_code
        super().__init__(
            message=message,
            context=context,
            status_code=status_code,
            **extra_context,
        )


class FetchReadError(FetchError):
    """Raised when the response body cannot be read completely.

    Also covers bodies that exceed the configured response size limit.
    """

    failure_kind = EnumFetchFailureKind.READ_FAILED


class JsonParseError(ExporterError):
    """Raised when the fetched body is not a valid JSON document."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumExporterErrorCode.PARSE_FAILED,
            context=context,
            **extra_context,
        )


class FlattenInvariantError(ExporterError):
    """Raised when the flattener meets a value no JSON decoder produces.

    Seeing this error means the decoded tree was built or mutated by
    something other than the JSON decoder. It is never mapped to ``up == 0``.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumExporterErrorCode.INTERNAL_ERROR,
            context=context,
            **extra_context,
        )


__all__ = [
    "ExporterConfigurationError",
    "ExporterError",
    "FetchBadStatusError",
    "FetchConnectionError",
    "FetchError",
    "FetchReadError",
    "FetchTimeoutError",
    "FlattenInvariantError",
    "JsonParseError",
]
