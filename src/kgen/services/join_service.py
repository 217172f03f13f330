"""
kgen.services.join_service

Join-command service.

Responsibilities:
- Obtain a base join command from the token issuer.
- Decorate it for control-plane joins when a certificate key is configured.
"""

from __future__ import annotations

from kgen.errors import IssuerFailure
from kgen.issuer.base import TokenIssuer, TokenIssuerError
from kgen.observability.logging import get_logger

log = get_logger(__name__)


def control_plane_suffix(cert_key: str) -> bytes:
    return f" --control-plane --certificate-key {cert_key}".encode()


class JoinService:
    def __init__(self, *, issuer: TokenIssuer, cert_key: str = "") -> None:
        self._issuer = issuer
        self._cert_key = cert_key

    @property
    def control_plane_enabled(self) -> bool:
        return bool(self._cert_key)

    async def join_command(self, *, control_plane: bool) -> bytes:
        try:
            base = await self._issuer.issue_join_command()
        except TokenIssuerError as e:
            raise IssuerFailure(str(e)) from e

        if not control_plane:
            return base
        if not self.control_plane_enabled:
            # Without a certificate key the service only hands out worker joins.
            log.warning("control_plane_join_unavailable", reason="no certificate key configured")
            return base
        return base.rstrip(b"\n") + control_plane_suffix(self._cert_key)


# --- Module Notes -----------------------------------------------------------
# The command text is a credential; callers must not log the returned bytes.
