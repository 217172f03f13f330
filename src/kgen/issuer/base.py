"""
kgen.issuer.base

Token issuer boundary: the protocol the join service depends on and its error type.
"""

from __future__ import annotations

from typing import Protocol


class TokenIssuerError(Exception):
    pass


class TokenIssuer(Protocol):
    async def issue_join_command(self) -> bytes:
        """Return a complete join command line, exactly as the backend printed it."""
        ...


# --- Module Notes -----------------------------------------------------------
# Implementations report every failure as TokenIssuerError; its text reaches the caller.
