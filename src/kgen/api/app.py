"""
kgen.api.app

FastAPI app factory for the join-command service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Construct the authorizer, resolver, issuer and join service once per process.
- Convert request-boundary errors into plain-text 400 responses.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from kgen import __version__
from kgen.api.routers.health import router as health_router
from kgen.api.routers.join import router as join_router
from kgen.auth.authorizer import RequestAuthorizer
from kgen.auth.resolver import AiodnsReverseResolver, ReverseResolver
from kgen.errors import DenialReason, JoinRequestError
from kgen.issuer.base import TokenIssuer
from kgen.issuer.kubeadm import KubeadmTokenIssuer
from kgen.observability.logging import configure_logging, get_logger
from kgen.observability.middleware import RequestContextMiddleware
from kgen.services.join_service import JoinService
from kgen.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    resolver: ReverseResolver | None = None,
    issuer: TokenIssuer | None = None,
) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="kgen",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Read-only after this point; shared by every request.
    app.state.settings = settings
    app.state.authorizer = RequestAuthorizer(
        settings=settings,
        resolver=resolver or AiodnsReverseResolver(),
    )
    app.state.join_service = JoinService(
        issuer=issuer or KubeadmTokenIssuer.from_settings(settings),
        cert_key=settings.cert,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(join_router)

    @app.exception_handler(JoinRequestError)
    async def _join_request_error(_: Request, exc: JoinRequestError) -> PlainTextResponse:
        kind = "join_denied" if isinstance(exc, DenialReason) else "join_failed"
        log.warning(kind, reason=type(exc).__name__, detail=str(exc))
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    @app.on_event("startup")
    async def _startup() -> None:
        log.info(
            "startup",
            addr=settings.addr,
            use_header=settings.use_header,
            header=settings.header if settings.use_header else None,
            match=settings.match,
            control_plane=bool(settings.cert),
        )

    return app


# --- Module Notes -----------------------------------------------------------
# The API docs are disabled: the only consumers are node bootstrap scripts.
