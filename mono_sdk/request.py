"""
Mono SDK — Request Executor

One reusable HTTP call primitive.  A RequestSpec describes the call; execute()
encodes the body, attaches the auth headers, sends it and decodes the JSON
response into whatever shape the caller asks for.

The response status code is never inspected: Mono reports failure inside the
JSON envelope, so interpreting the body is left to the caller.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from mono_sdk.config import AUTH_HEADER
from mono_sdk.errors import EncodingError, RequestBuildError, TransportError

log = logging.getLogger(__name__)

R = TypeVar("R")


# ---------------------------------------------------------------------------
# Request description
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RequestSpec:
    """
    One outbound call.  ``headers`` may be given as a mapping or as
    ``(name, value)`` pairs; it is stored as a sorted tuple of pairs so the
    spec hashes whenever ``body`` does.
    """
    url: str
    method: str
    api_key: str
    body: Any = None                        # None means no request body
    headers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "headers", tuple(sorted(dict(self.headers).items())))


# ---------------------------------------------------------------------------
# Executor
# ---------------------------------------------------------------------------

def execute(
    spec: RequestSpec,
    response_type: type[R] = dict,  # type: ignore[assignment]
    *,
    client: Optional[httpx.Client] = None,
) -> R:
    """
    Send the request described by ``spec`` and decode the response.

    Args:
        spec: What to send.
        response_type: Decode target for the JSON body (any type pydantic can
            validate: ``dict``, ``dict[str, Any]``, a BaseModel, ...).
        client: Shared httpx client.  A short-lived one is opened when omitted.

    Returns:
        The decoded body.  If the body is not valid JSON for
        ``response_type`` the failure is logged and the zero value of
        ``response_type`` is returned instead (``{}`` for ``dict``).

    Raises:
        EncodingError: ``spec.body`` is not JSON-serializable.
        RequestBuildError: the request could not be built.
        TransportError: the request could not be delivered.
    """
    content = encode_body(spec.body)

    if client is None:
        with httpx.Client() as own_client:
            return _send(own_client, spec, content, response_type)
    return _send(client, spec, content, response_type)


def encode_body(body: Any) -> Optional[bytes]:
    """Serialize a request body to JSON bytes, or None when there is no body."""
    if body is None:
        return None
    try:
        return json.dumps(
            body, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Request body is not JSON-serializable: {exc}") from exc


def build_headers(spec: RequestSpec) -> httpx.Headers:
    """Defaults first, caller headers second, so callers win on collision."""
    headers = httpx.Headers({
        "Content-Type": "application/json",
        AUTH_HEADER: spec.api_key,
    })
    for name, value in spec.headers:
        headers[name] = value
    return headers


def _send(
    client: httpx.Client,
    spec: RequestSpec,
    content: Optional[bytes],
    response_type: type[R],
) -> R:
    try:
        request = client.build_request(
            spec.method,
            spec.url,
            content=content,
            headers=build_headers(spec),
        )
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise RequestBuildError(f"Cannot build {spec.method} {spec.url}: {exc}") from exc

    log.debug(f"{request.method} {request.url}")

    try:
        response = client.send(request)
    except httpx.RequestError as exc:
        log.warning(f"{request.method} {request.url} failed: {exc!r}")
        raise TransportError(str(exc) or exc.__class__.__name__) from exc

    log.debug(f"{request.method} {request.url} -> HTTP {response.status_code}")
    return decode_body(response.content, response_type)


def decode_body(content: bytes, response_type: type[R]) -> R:
    """
    Decode a JSON body into ``response_type``.

    Decode failures are swallowed: the zero value is returned and a warning
    logged.  Callers that need to tell "empty" from "undecodable" must look
    at the raw response themselves.
    """
    try:
        return TypeAdapter(response_type).validate_json(content)
    except ValidationError as exc:
        log.warning(
            f"Response body could not be decoded as {_type_name(response_type)}; "
            f"returning empty payload ({exc.error_count()} error(s))"
        )
        return zero_value(response_type)


def zero_value(response_type: Any) -> Any:
    """``response_type()`` when it can be built without arguments, else None."""
    try:
        return response_type()
    except (TypeError, ValidationError):
        return None


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", repr(response_type))
