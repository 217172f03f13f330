"""
kgen.api.routers.health

Liveness endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness only: no DNS or kubeadm call, so probes never mint tokens.
    return {"status": "ok"}
