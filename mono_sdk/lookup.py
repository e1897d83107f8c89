"""
Mono SDK — Lookup

Namespace for Mono's lookup products.  Only BVN is implemented; further
products plug in as attributes next to ``bvn`` and reuse request.execute().
"""

from __future__ import annotations

from typing import Optional

import httpx

from mono_sdk.bvn import BvnLookup
from mono_sdk.config import BASE_URL


class Lookup:
    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        client: Optional[httpx.Client] = None,
    ):
        self.bvn = BvnLookup(api_key, base_url=base_url, client=client)
