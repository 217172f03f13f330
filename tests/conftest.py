"""
tests.conftest

Shared test doubles for the resolver and token issuer boundaries.
"""

from __future__ import annotations

import pytest

from kgen.auth.resolver import ReverseLookupError
from kgen.issuer.base import TokenIssuerError


class FakeResolver:
    def __init__(self, table: dict[str, list[str]] | None = None) -> None:
        self.table = dict(table or {})
        self.error: str | None = None
        self.calls: list[str] = []

    async def lookup_addr(self, ip: str) -> list[str]:
        self.calls.append(ip)
        if self.error is not None:
            raise ReverseLookupError(self.error)
        return list(self.table.get(ip, []))


class FakeIssuer:
    def __init__(self, output: bytes = b"join cmd A\n") -> None:
        self.output = output
        self.error: str | None = None
        self.calls = 0

    async def issue_join_command(self) -> bytes:
        self.calls += 1
        if self.error is not None:
            raise TokenIssuerError(self.error)
        return self.output


_ENV_VARS = (
    "KGEN_SERVICE_NAME",
    "KGEN_LOG_LEVEL",
    "KGEN_USE_HEADER",
    "KGEN_HEADER",
    "KGEN_MATCH",
    "KGEN_ADDR",
    "KGEN_CERT",
    "KGEN_KUBEADM_BIN",
    "KGEN_KUBECONFIG",
    "KGEN_KUBEADM_CONFIG",
    "KGEN_DRY_RUN",
    "KUBECONFIG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    # Settings() reads the process environment; tests start from defaults.
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver({"10.0.0.5": ["node-1.cluster.example.com"]})


@pytest.fixture
def issuer() -> FakeIssuer:
    return FakeIssuer()
