"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve its probe.

Responsibilities:
- Ensure the FastAPI app starts with default collaborators and answers /healthz.
"""

from __future__ import annotations

import httpx
import pytest

from kgen.api.app import create_app
from kgen.auth.resolver import AiodnsReverseResolver
from kgen.issuer.kubeadm import KubeadmTokenIssuer
from kgen.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoint() -> None:
    app = create_app(settings=Settings())

    # httpx 0.28 ASGITransport does not manage lifespan automatically; do it explicitly.
    await app.router.startup()
    try:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"
            assert r.headers["x-request-id"]
    finally:
        await app.router.shutdown()


def test_default_collaborators_are_wired() -> None:
    app = create_app(settings=Settings(cert="abc123"))

    assert isinstance(app.state.authorizer._resolver, AiodnsReverseResolver)
    assert isinstance(app.state.join_service._issuer, KubeadmTokenIssuer)
    assert app.state.join_service.control_plane_enabled


# --- Module Notes -----------------------------------------------------------
# No test here talks to a real DNS server or kubeadm.
