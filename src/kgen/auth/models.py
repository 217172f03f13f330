"""
kgen.auth.models

Auth domain models.

Responsibilities:
- Define the resolved caller identity produced by the request authorizer.
"""

from __future__ import annotations

from dataclasses import dataclass

PEER = "peer"


@dataclass(frozen=True, slots=True)
class SourceIdentity:
    """
    Caller network identity for a single request.
    """

    ip: str
    # Either `PEER` or the name of the header the IP was read from.
    via: str = PEER
    hostnames: tuple[str, ...] = ()
    matched: str | None = None

    @property
    def from_header(self) -> bool:
        return self.via != PEER


# --- Module Notes -----------------------------------------------------------
# Identities live for one request only; nothing caches or persists them.
