"""
kgen.errors

Request-boundary error taxonomy.

Every error here is turned into a plain-text HTTP 400 by the app-level
exception handler; none of them terminate the process.
"""

from __future__ import annotations


class JoinRequestError(Exception):
    status_code: int = 400


class DenialReason(JoinRequestError):
    """Caller failed the client authorization check."""


class MalformedPeerAddress(DenialReason):
    def __init__(self, peer: object) -> None:
        super().__init__(f'userip: "{peer}" is not IP:port')
        self.peer = peer


class MissingHeader(DenialReason):
    def __init__(self, header: str) -> None:
        super().__init__(f"Missing header {header}")
        self.header = header


class InvalidHeaderIP(DenialReason):
    def __init__(self, header: str, value: str) -> None:
        super().__init__(f"Invalid IP from http header {header}: {value}")
        self.header = header
        self.value = value


class NoMatchingHost(DenialReason):
    def __init__(self, source_ip: str, pattern: str) -> None:
        super().__init__(
            f"Host FQDN found for {source_ip} didn't match validation condition ({pattern})."
        )
        self.source_ip = source_ip
        self.pattern = pattern


class IssuerFailure(JoinRequestError):
    """Token issuer error; the message is forwarded unchanged."""


# --- Module Notes -----------------------------------------------------------
# Status codes are deliberately flat (400 for all); callers only get the text.
