"""
kgen.auth.resolver

Reverse DNS boundary used by the request authorizer.

Responsibilities:
- Resolve an IP address to its pointer-record hostnames (async, aiodns).
- Surface resolver failures as an explicit `ReverseLookupError`.
"""

from __future__ import annotations

from typing import Protocol

import aiodns


class ReverseLookupError(Exception):
    pass


class ReverseResolver(Protocol):
    async def lookup_addr(self, ip: str) -> list[str]: ...


class AiodnsReverseResolver:
    """
    PTR lookups through c-ares.

    Hostnames are returned in resolver order with the trailing root dot removed.
    """

    def __init__(self) -> None:
        self._resolver: aiodns.DNSResolver | None = None

    def _get_resolver(self) -> aiodns.DNSResolver:
        # DNSResolver binds to the running loop, so it is built on first use.
        if self._resolver is None:
            self._resolver = aiodns.DNSResolver()
        return self._resolver

    async def lookup_addr(self, ip: str) -> list[str]:
        try:
            result = await self._get_resolver().gethostbyaddr(ip)
        # pycares raises ValueError for addresses it cannot encode as a PTR query.
        except (aiodns.error.DNSError, ValueError) as e:
            raise ReverseLookupError(f"reverse lookup for {ip} failed: {e}") from e

        names: list[str] = []
        for name in [result.name, *result.aliases]:
            name = name.rstrip(".")
            if name and name not in names:
                names.append(name)
        return names


# --- Module Notes -----------------------------------------------------------
# No caching and no retries here; every request triggers a fresh lookup.
