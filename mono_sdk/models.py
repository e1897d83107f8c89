"""
Mono SDK — Data Models

Typed views over Mono's loosely-typed JSON.  Envelope and payload parsing is
strict: a field that is present with the wrong type raises ContractViolation
instead of being coerced.  Absent (or null) fields fall back to empty values.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    field_serializer,
    field_validator,
)

from mono_sdk.config import SUCCESS_STATUS
from mono_sdk.errors import ContractViolation, InvalidMethodError, MonoError


# ---------------------------------------------------------------------------
# Verification channels
# ---------------------------------------------------------------------------

class VerificationMethod(str, Enum):
    """
    Channel used to deliver the BVN one-time password.

    See step 2 of https://docs.mono.co/docs/bvn-lookup-integration-guide
    """
    EMAIL = "email"
    PHONE = "phone"
    PHONE_1 = "phone_1"
    ALTERNATE_PHONE = "alternate_phone"

    def to_wire(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, value: Any) -> VerificationMethod:
        """Map a wire string back to its channel. Raises InvalidMethodError."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise InvalidMethodError(value) from None

    def __str__(self) -> str:
        return self.value


class BvnVerificationMethod(BaseModel):
    """One channel offered by the API, with a masked hint (e.g. ``j***@x.com``)."""
    model_config = ConfigDict(frozen=True)

    method: StrictStr
    hint: StrictStr

    @property
    def channel(self) -> VerificationMethod:
        return VerificationMethod.from_wire(self.method)


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------

def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class ResponseEnvelope(BaseModel):
    """``{"status": str?, "message": str, "data": object?}``"""
    model_config = ConfigDict(frozen=True)

    status: StrictStr = ""
    message: StrictStr = ""
    data: Optional[dict[str, Any]] = None

    @field_validator("status", "message", mode="before")
    @classmethod
    def _null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def success(self) -> bool:
        return self.status == SUCCESS_STATUS

    @classmethod
    def parse(cls, raw: Any) -> ResponseEnvelope:
        """Validate a decoded response body. Raises ContractViolation."""
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ContractViolation(
                f"Response envelope must be an object, got {type(raw).__name__}",
                payload=raw,
            )
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise ContractViolation(
                f"Malformed response envelope: {_describe(exc)}", payload=raw
            ) from exc


class SessionData(BaseModel):
    """``data`` of the initiate / verify responses."""

    session_id: StrictStr = ""
    methods: list[BvnVerificationMethod] = Field(default_factory=list)

    @field_validator("session_id", mode="before")
    @classmethod
    def _null_session(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("methods", mode="before")
    @classmethod
    def _null_methods(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def parse(cls, data: Optional[dict[str, Any]]) -> SessionData:
        """Validate an envelope's ``data``. Raises ContractViolation."""
        if data is None:
            return cls()
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ContractViolation(
                f"Malformed session data: {_describe(exc)}", payload=data
            ) from exc


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class Outcome(str, Enum):
    OK = "ok"
    REMOTE_FAILURE = "remote_failure"          # API answered, status != successful
    TRANSPORT_FAILURE = "transport_failure"    # request never got an answer
    INVALID_REQUEST = "invalid_request"        # rejected locally, nothing sent


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


class VerificationResult(BaseModel):
    """
    Result of one BVN workflow step. Check ``success`` before using data.

    Read-only all the way down: ``methods`` is a tuple and ``data`` a
    read-only mapping (nested objects and arrays included).  ``details``
    hands out a mutable copy.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    outcome: Outcome
    status: str = ""
    message: str = ""
    methods: tuple[BvnVerificationMethod, ...] = ()
    session_id: str = ""
    data: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    error: Optional[MonoError] = Field(default=None, exclude=True)

    @field_validator("data", mode="after")
    @classmethod
    def _read_only_data(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(v)

    @field_serializer("data")
    def _plain_data(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return _thaw(v)

    @property
    def success(self) -> bool:
        return self.outcome == Outcome.OK

    @property
    def details(self) -> dict[str, Any]:
        """Verified personal details (fetch_details); free-form, no schema."""
        return _thaw(self.data)

    def method(self, channel: Union[VerificationMethod, str]) -> Optional[BvnVerificationMethod]:
        """First offered method for ``channel`` (enum or wire string), or None."""
        wire = VerificationMethod.from_wire(channel).to_wire()
        for m in self.methods:
            if m.method == wire:
                return m
        return None

    @classmethod
    def from_envelope(
        cls,
        envelope: ResponseEnvelope,
        *,
        methods: Optional[list[BvnVerificationMethod]] = None,
        session_id: str = "",
    ) -> VerificationResult:
        return cls(
            outcome=Outcome.OK if envelope.success else Outcome.REMOTE_FAILURE,
            status=envelope.status,
            message=envelope.message,
            methods=tuple(methods or ()),
            session_id=session_id,
            data=envelope.data or {},
        )

    @classmethod
    def transport_failure(cls, error: MonoError) -> VerificationResult:
        return cls(outcome=Outcome.TRANSPORT_FAILURE, message=error.message, error=error)

    @classmethod
    def invalid_request(cls, message: str) -> VerificationResult:
        return cls(outcome=Outcome.INVALID_REQUEST, message=message)
