"""
Mono SDK
Client library for the Mono BVN lookup API.
"""

from mono_sdk.bvn import ALTERNATE_PHONE_REQUIRED_MESSAGE, BvnLookup
from mono_sdk.client import MonoClient
from mono_sdk.errors import (
    ContractViolation,
    EncodingError,
    InvalidMethodError,
    MonoError,
    RequestBuildError,
    TransportError,
)
from mono_sdk.lookup import Lookup
from mono_sdk.models import (
    BvnVerificationMethod,
    Outcome,
    ResponseEnvelope,
    VerificationMethod,
    VerificationResult,
)
from mono_sdk.request import RequestSpec, execute

__all__ = [
    "ALTERNATE_PHONE_REQUIRED_MESSAGE",
    "BvnLookup",
    "BvnVerificationMethod",
    "ContractViolation",
    "EncodingError",
    "InvalidMethodError",
    "Lookup",
    "MonoClient",
    "MonoError",
    "Outcome",
    "RequestBuildError",
    "RequestSpec",
    "ResponseEnvelope",
    "TransportError",
    "VerificationMethod",
    "VerificationResult",
    "execute",
]
