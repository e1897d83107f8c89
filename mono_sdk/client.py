"""
Mono SDK — Client
Thin synchronous wrapper over the Mono v2 API.
"""

from __future__ import annotations

from typing import Optional, TypeVar

import httpx

from mono_sdk import config
from mono_sdk.lookup import Lookup
from mono_sdk.request import RequestSpec, execute

R = TypeVar("R")


class MonoClient:
    """
    Entry point for the Mono API.

    Owns one httpx.Client shared by every call.  Holds no per-call state, so
    a single instance can be used from several threads.

        with MonoClient(api_key="live_sk_...") as mono:
            started = mono.lookup.bvn.initiate("22222222222")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            api_key: Mono secret key (falls back to $MONO_SEC_KEY)
            base_url: API root (falls back to $MONO_BASE_URL)
            http_client: Pre-configured httpx client; not closed by close()
            timeout: Timeout in seconds for the client created here
                (httpx defaults when None; ignored with http_client)
        """
        self.api_key = api_key or config.MONO_SEC_KEY
        if not self.api_key:
            raise ValueError("No Mono API key: pass api_key or set MONO_SEC_KEY.")
        self.base_url = base_url or config.BASE_URL

        self._owns_client = http_client is None
        if http_client is not None:
            self._client = http_client
        elif timeout is not None:
            self._client = httpx.Client(timeout=timeout)
        else:
            self._client = httpx.Client()

        self.lookup = Lookup(self.api_key, base_url=self.base_url, client=self._client)

    def url(self, path: str) -> str:
        """Absolute URL for an API path, e.g. ``url("lookup/nin")``."""
        return config.endpoint(self.base_url, path)

    def request(self, spec: RequestSpec, response_type: type[R] = dict) -> R:  # type: ignore[assignment]
        """Raw call primitive for endpoints the SDK does not wrap yet."""
        return execute(spec, response_type, client=self._client)

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> MonoClient:
        return self

    def __exit__(self, *exc_info):
        self.close()
