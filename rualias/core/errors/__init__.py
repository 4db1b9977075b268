"""Monadic Error Handling

Result[T, E] for success/failure, AppError with a typed ErrorCode, and
builders for every failure a declension lookup can meet.

Usage:
    from rualias.core.errors import Ok, Err, Result, AppError, rate_limited

    def interpret(status: int) -> Result[dict, AppError]:
        if status == 429:
            return rate_limited("morpher", origin="provider")
        return Ok({})

    match interpret(429):
        case Ok(data):
            ...
        case Err(error):
            log.warning(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    from_exception,
)

from .builders import (
    # Network (E1xxx)
    network_error,
    timeout_error,
    rate_limited,
    word_not_recognized,
    http_status_error,
    # Validation (E2xxx)
    validation_error,
    malformed_response,
    unsupported_input,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "from_exception",
    "network_error",
    "timeout_error",
    "rate_limited",
    "word_not_recognized",
    "http_status_error",
    "validation_error",
    "malformed_response",
    "unsupported_input",
]
