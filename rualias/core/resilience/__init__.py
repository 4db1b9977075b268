"""Resilience Patterns

Fault tolerance for remote declension lookups:
- Bounded retry with a fixed pause between attempts
- Per-attempt timeouts
"""
from .retry import (
    CombinedPolicy,
    RetryAttempt,
    RetryConfig,
    RetryPolicy,
    RetryResult,
    TimeoutPolicy,
)

__all__ = [
    "CombinedPolicy",
    "RetryAttempt",
    "RetryConfig",
    "RetryPolicy",
    "RetryResult",
    "TimeoutPolicy",
]
