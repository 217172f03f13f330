"""
kgen.auth.authorizer

Client authorization check for join-command requests.

Responsibilities:
- Determine the caller's source IP (transport peer or trusted proxy header).
- Resolve it to hostnames via reverse DNS.
- Allow the request only if a hostname matches the configured pattern.
"""

from __future__ import annotations

import ipaddress
import re

from starlette.requests import HTTPConnection

from kgen.auth.models import PEER, SourceIdentity
from kgen.auth.resolver import ReverseLookupError, ReverseResolver
from kgen.errors import InvalidHeaderIP, MalformedPeerAddress, MissingHeader, NoMatchingHost
from kgen.observability.logging import get_logger
from kgen.settings import Settings

log = get_logger(__name__)


def _is_ip(value: str) -> bool:
    try:
        addr = ipaddress.ip_address(value)
    except ValueError:
        return False
    # Zone ids (fe80::1%eth0) are not routable source addresses and c-ares rejects them.
    return not getattr(addr, "scope_id", None)


class RequestAuthorizer:
    """
    Stateless per request; safe to share across concurrent requests.

    Resolver failures are downgraded to "no hostnames", which then fails the
    pattern check. The pattern is searched, not fully matched, so anchor it
    (`^...$`) to constrain the whole hostname.
    """

    def __init__(self, *, settings: Settings, resolver: ReverseResolver) -> None:
        self._use_header = settings.use_header
        self._header = settings.header
        self._pattern_text = settings.match
        # Already validated by Settings; compiled once here.
        self._pattern = re.compile(settings.match)
        self._resolver = resolver

    def source_ip(self, conn: HTTPConnection) -> SourceIdentity:
        if not self._use_header:
            client = conn.client
            if client is None or client.port is None or not _is_ip(client.host):
                peer = f"{client.host}:{client.port}" if client is not None else None
                log.debug("malformed_peer_address", peer=peer)
                raise MalformedPeerAddress(peer)
            return SourceIdentity(ip=client.host, via=PEER)

        # Only meaningful behind a proxy that sets the header; takes precedence over the peer.
        forwarded = conn.headers.get(self._header, "")
        if not forwarded:
            raise MissingHeader(self._header)
        if not _is_ip(forwarded):
            raise InvalidHeaderIP(self._header, forwarded)
        return SourceIdentity(ip=forwarded, via=self._header)

    async def hostnames(self, ip: str) -> tuple[str, ...]:
        try:
            names = await self._resolver.lookup_addr(ip)
        except ReverseLookupError as e:
            log.warning("reverse_lookup_failed", ip=ip, error=str(e))
            return ()
        return tuple(names)

    def first_match(self, hostnames: tuple[str, ...]) -> str | None:
        for name in hostnames:
            if self._pattern.search(name):
                return name
        return None

    async def authorize(self, conn: HTTPConnection) -> SourceIdentity:
        identity = self.source_ip(conn)
        names = await self.hostnames(identity.ip)
        matched = self.first_match(names)
        log.debug("reverse_lookup", ip=identity.ip, hostnames=list(names), matched=matched)
        if matched is None:
            raise NoMatchingHost(identity.ip, self._pattern_text)

        log.info("client_authorized", ip=identity.ip, via=identity.via, hostname=matched)
        return SourceIdentity(ip=identity.ip, via=identity.via, hostnames=names, matched=matched)


# --- Module Notes -----------------------------------------------------------
# Header names are matched case-insensitively (Starlette `Headers`).
