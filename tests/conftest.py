"""Pytest fixtures for the Mono SDK: fake transports and an in-process fake Mono API."""

import json
from typing import Any, Callable, Optional
from uuid import uuid4

import httpx
import pytest
from fastapi import FastAPI, Header
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from mono_sdk.bvn import BvnLookup

API_KEY = "test_sk_123"
KNOWN_BVN = "22222222222"
VALID_OTP = "123456"


# =============================================================================
# Mock transports for httpx
# =============================================================================


class RecordingTransport(httpx.BaseTransport):
    """Records every request and replays queued responses (or calls a handler)."""

    def __init__(self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.handler = handler
        self.responses: list[httpx.Response] = []
        self.requests: list[httpx.Request] = []

    def add_response(
        self,
        status_code: int = 200,
        json_data: Any = None,
        content: bytes = b"",
        headers: Optional[dict] = None,
    ):
        """Queue a response to be returned by the next request."""
        if json_data is not None:
            content = json.dumps(json_data).encode()
            headers = headers or {}
            headers["content-type"] = "application/json"
        self.responses.append(
            httpx.Response(status_code=status_code, content=content, headers=headers or {})
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(500, content=b'{"message": "No mock response queued"}')


class ConnectErrorTransport(httpx.BaseTransport):
    """Transport that always fails to connect."""

    def __init__(self):
        self.calls = 0

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        raise httpx.ConnectError("Connection refused", request=request)


class TimeoutTransport(httpx.BaseTransport):
    """Transport that always times out."""

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("Mock timeout", request=request)


# =============================================================================
# Fake Mono API
# =============================================================================


def _failed(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "failed", "message": message})


def build_fake_mono() -> FastAPI:
    """Minimal stand-in for the three BVN lookup endpoints."""
    app = FastAPI(title="Fake Mono API")
    sessions: dict[str, dict[str, Any]] = {}

    @app.post("/v2/lookup/bvn/initiate")
    def initiate(body: dict[str, Any], mono_sec_key: str = Header(default="")):
        if mono_sec_key != API_KEY:
            return _failed(401, "Invalid secret key")
        if body.get("bvn") != KNOWN_BVN:
            return _failed(400, "BVN not found")
        session_id = uuid4().hex
        sessions[session_id] = {"method": None}
        return {
            "status": "successful",
            "message": "BVN lookup initiated successfully",
            "data": {
                "session_id": session_id,
                "methods": [
                    {"method": "email", "hint": "j***@example.com"},
                    {"method": "phone", "hint": "0803***1234"},
                ],
            },
        }

    @app.post("/v2/lookup/bvn/verify")
    def verify(
        body: dict[str, Any],
        mono_sec_key: str = Header(default=""),
        x_session_id: str = Header(default=""),
    ):
        if mono_sec_key != API_KEY:
            return _failed(401, "Invalid secret key")
        session = sessions.get(x_session_id)
        if session is None:
            return _failed(400, "Invalid session")
        method = body.get("method")
        if method == "alternate_phone" and not body.get("phone_number"):
            return _failed(400, "phone_number is required")
        session["method"] = method
        session["phone_number"] = body.get("phone_number")
        return {"status": "successful", "message": "OTP sent", "data": None}

    @app.post("/v2/lookup/bvn/details")
    def details(
        body: dict[str, Any],
        mono_sec_key: str = Header(default=""),
        x_session_id: str = Header(default=""),
    ):
        if mono_sec_key != API_KEY:
            return _failed(401, "Invalid secret key")
        session = sessions.get(x_session_id)
        if session is None or session["method"] is None:
            return _failed(400, "Invalid session")
        if body.get("otp") != VALID_OTP:
            return _failed(400, "Invalid OTP")
        return {
            "status": "successful",
            "message": "BVN details retrieved",
            "data": {
                "first_name": "JOHN",
                "last_name": "DOE",
                "dob": "1990-01-01",
                "bvn": KNOWN_BVN,
                "otp_channel": session["method"],
            },
        }

    return app


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def http_client(transport):
    with httpx.Client(transport=transport) as client:
        yield client


@pytest.fixture
def bvn_lookup(http_client) -> BvnLookup:
    return BvnLookup(API_KEY, client=http_client)


@pytest.fixture
def fake_mono_client():
    with TestClient(build_fake_mono()) as client:
        yield client
