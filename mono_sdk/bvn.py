"""
Mono SDK — BVN Lookup
Docs: https://docs.mono.co/docs/bvn-lookup-integration-guide

Three-step BVN verification:

    1. initiate(bvn)                       -> session_id + offered methods
    2. verify(method, session_id)          -> OTP sent over the chosen channel
    3. fetch_details(otp, session_id)      -> verified personal details

The session id is returned by step 1 and must be passed back by the caller
on steps 2 and 3.  BvnLookup keeps no per-session state, so one instance can
serve concurrent verifications.

None of the steps raise for transport or remote failures; inspect
``result.success`` / ``result.outcome``.  A ContractViolation is raised when
the API answers with a payload that breaks its documented shape.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import httpx

from mono_sdk.config import BASE_URL, SESSION_HEADER, endpoint
from mono_sdk.errors import EncodingError, RequestBuildError, TransportError
from mono_sdk.models import (
    ResponseEnvelope,
    SessionData,
    VerificationMethod,
    VerificationResult,
)
from mono_sdk.request import RequestSpec, execute

log = logging.getLogger(__name__)

INITIATE_PATH = "lookup/bvn/initiate"
VERIFY_PATH = "lookup/bvn/verify"
DETAILS_PATH = "lookup/bvn/details"

ALTERNATE_PHONE_REQUIRED_MESSAGE = (
    "phone_number is required when verifying with the alternate_phone method"
)


class BvnLookup:
    """BVN lookup endpoints, authenticated with one secret key."""

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            api_key: Mono secret key, sent as the ``mono-sec-key`` header
            base_url: API root (default https://api.withmono.com/v2/)
            client: Shared httpx client; one is opened per call when None
        """
        self.api_key = api_key
        self.base_url = base_url
        self._client = client

    # -----------------------------------------------------------------------
    # Workflow steps
    # -----------------------------------------------------------------------

    def initiate(self, bvn: str) -> VerificationResult:
        """
        Start a lookup for ``bvn``.

        On success the result carries the session id and the verification
        methods the BVN holder can receive an OTP on.
        """
        try:
            raw = self._post(INITIATE_PATH, {"bvn": bvn})
        except (EncodingError, RequestBuildError, TransportError) as exc:
            return VerificationResult.transport_failure(exc)

        envelope = ResponseEnvelope.parse(raw)
        session = SessionData.parse(envelope.data)
        result = VerificationResult.from_envelope(
            envelope,
            methods=session.methods,
            session_id=session.session_id,
        )
        self._log_outcome("initiate", result)
        return result

    def verify(
        self,
        method: Union[VerificationMethod, str],
        session_id: str,
        phone_number: Optional[str] = None,
    ) -> VerificationResult:
        """
        Choose the channel the OTP is sent to.

        Args:
            method: A VerificationMethod or its wire string
            session_id: Session id returned by initiate()
            phone_number: Required for VerificationMethod.ALTERNATE_PHONE

        Raises:
            InvalidMethodError: ``method`` is not a known channel
        """
        method = VerificationMethod.from_wire(method)

        body: dict[str, Any] = {"method": method.to_wire()}
        if method == VerificationMethod.ALTERNATE_PHONE:
            if not isinstance(phone_number, str) or not phone_number:
                return VerificationResult.invalid_request(ALTERNATE_PHONE_REQUIRED_MESSAGE)
            body["phone_number"] = phone_number

        try:
            raw = self._post(VERIFY_PATH, body, session_id=session_id)
        except (EncodingError, RequestBuildError, TransportError) as exc:
            return VerificationResult.transport_failure(exc)

        envelope = ResponseEnvelope.parse(raw)
        session = SessionData.parse(envelope.data)
        result = VerificationResult.from_envelope(
            envelope,
            methods=session.methods,
            session_id=session_id if envelope.success else "",
        )
        self._log_outcome("verify", result)
        return result

    def fetch_details(self, otp: str, session_id: str) -> VerificationResult:
        """Exchange the OTP for the BVN holder's details (``result.details``)."""
        try:
            raw = self._post(DETAILS_PATH, {"otp": otp}, session_id=session_id)
        except (EncodingError, RequestBuildError, TransportError) as exc:
            return VerificationResult.transport_failure(exc)

        envelope = ResponseEnvelope.parse(raw)
        result = VerificationResult.from_envelope(
            envelope,
            session_id=session_id if envelope.success else "",
        )
        self._log_outcome("fetch_details", result)
        return result

    # -----------------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------------

    def _post(
        self,
        path: str,
        body: dict[str, Any],
        session_id: Optional[str] = None,
    ) -> dict[str, Any]:
        headers = {SESSION_HEADER: session_id} if session_id is not None else {}
        spec = RequestSpec(
            url=endpoint(self.base_url, path),
            method="POST",
            api_key=self.api_key,
            body=body,
            headers=headers,
        )
        return execute(spec, dict, client=self._client)

    @staticmethod
    def _log_outcome(step: str, result: VerificationResult):
        if result.success:
            log.debug(f"BVN {step} succeeded")
        else:
            log.info(f"BVN {step} rejected (status={result.status!r}): {result.message}")
