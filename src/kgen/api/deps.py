"""
kgen.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns (authorizer, join service).
"""

from __future__ import annotations

from fastapi import Request

from kgen.auth.authorizer import RequestAuthorizer
from kgen.services.join_service import JoinService


def authorizer_from_app(request: Request) -> RequestAuthorizer:
    # Built once in `kgen.api.app.create_app`.
    return request.app.state.authorizer  # type: ignore[attr-defined]


def join_service_from_app(request: Request) -> JoinService:
    return request.app.state.join_service  # type: ignore[attr-defined]


# --- Module Notes -----------------------------------------------------------
# Tests replace collaborators by passing them to `create_app`, not by
# overriding these dependencies.
