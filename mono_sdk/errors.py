"""
Mono SDK — Errors

Every failure the SDK raises derives from MonoError.  The executor raises
EncodingError, RequestBuildError and TransportError; the BVN workflow turns
those into failed results.  ContractViolation always propagates: it means
the API answered with a payload that breaks its documented shape.
"""

from __future__ import annotations

from typing import Any, Optional


class MonoError(Exception):
    """Base class for all SDK errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EncodingError(MonoError):
    """Request body could not be serialized to JSON."""


class RequestBuildError(MonoError):
    """HTTP request could not be constructed (bad URL or method)."""


class TransportError(MonoError):
    """Network-level failure: DNS, refused connection, timeout."""


class ContractViolation(MonoError, ValueError):
    """Response payload does not match the shape the API promises."""

    def __init__(self, message: str, *, payload: Optional[Any] = None):
        super().__init__(message)
        self.payload = payload


class InvalidMethodError(ContractViolation):
    """Unknown BVN verification method wire string."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid method type: {value!r}", payload=value)
        self.value = value
