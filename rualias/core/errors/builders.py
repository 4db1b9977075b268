"""Domain-Specific Error Builders

Ergonomic constructors for the failures a declension lookup can meet.
Each builder returns an Err wrapping an AppError with the matching code.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Network Errors (E1xxx)
# =============================================================================

def network_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E1000_NETWORK_GENERIC,
    url: str | None = None,
    status_code: int | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create network/remote provider error."""
    meta = {"url": url, "status_code": status_code, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def timeout_error(
    operation: str, timeout_seconds: float, origin: str = ""
) -> Err[AppError]:
    return network_error(
        f"Operation '{operation}' timed out after {timeout_seconds}s",
        code=ErrorCode.E1002_TIMEOUT,
        origin=origin,
        operation=operation,
        timeout_seconds=timeout_seconds,
    )


def rate_limited(service: str, url: str | None = None, origin: str = "") -> Err[AppError]:
    return network_error(
        f"Rate limited by '{service}'",
        code=ErrorCode.E1013_RATE_LIMITED,
        url=url,
        status_code=429,
        origin=origin,
        service=service,
    )


def word_not_recognized(
    service: str, word: str, url: str | None = None, origin: str = ""
) -> Err[AppError]:
    return network_error(
        f"'{service}' does not recognize '{word}'",
        code=ErrorCode.E1014_WORD_NOT_RECOGNIZED,
        url=url,
        status_code=496,
        origin=origin,
        service=service,
        word=word,
    )


def http_status_error(
    service: str, status_code: int, url: str | None = None, origin: str = ""
) -> Err[AppError]:
    code = (
        ErrorCode.E1021_HTTP_SERVER_ERROR
        if status_code >= 500
        else ErrorCode.E1020_HTTP_CLIENT_ERROR
    )
    return network_error(
        f"'{service}' answered HTTP {status_code}",
        code=code,
        url=url,
        status_code=status_code,
        origin=origin,
        service=service,
    )


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def malformed_response(
    service: str, reason: str, origin: str = "", cause: Exception | None = None
) -> Err[AppError]:
    return validation_error(
        f"Malformed response from '{service}': {reason}",
        code=ErrorCode.E2021_MALFORMED_RESPONSE,
        origin=origin,
        cause=cause,
        service=service,
    )


def unsupported_input(word: str, reason: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Cannot decline '{word}' offline: {reason}",
        code=ErrorCode.E2030_UNSUPPORTED_INPUT,
        field="word",
        value=word,
        origin=origin,
    )

