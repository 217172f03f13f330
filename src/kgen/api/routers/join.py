"""
kgen.api.routers.join

Join-command endpoint.

Responsibilities:
- Authorize the caller before anything is issued.
- Map `NEWMASTER` to a control-plane or worker join.
- Return the command bytes unchanged, without a content type.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from starlette.datastructures import QueryParams

from kgen.api.deps import authorizer_from_app, join_service_from_app
from kgen.auth.authorizer import RequestAuthorizer
from kgen.observability.logging import get_logger
from kgen.services.join_service import JoinService

router = APIRouter(tags=["join"])

log = get_logger(__name__)


def wants_control_plane(query: QueryParams) -> bool:
    # Only the first NEWMASTER value counts; the key itself is case-sensitive.
    values = query.getlist("NEWMASTER")
    return bool(values) and values[0].upper() == "TRUE"


@router.get("/join", response_class=Response)
async def join_command(
    request: Request,
    authorizer: RequestAuthorizer = Depends(authorizer_from_app),
    service: JoinService = Depends(join_service_from_app),
) -> Response:
    # Denials and issuer failures raise `JoinRequestError`; see the handler in `api.app`.
    identity = await authorizer.authorize(request)
    control_plane = wants_control_plane(request.query_params)
    command = await service.join_command(control_plane=control_plane)
    log.info(
        "join_command_issued",
        ip=identity.ip,
        hostname=identity.matched,
        control_plane=control_plane and service.control_plane_enabled,
    )
    return Response(content=command)


# --- Module Notes -----------------------------------------------------------
# The issued command is a credential; only the caller identity is logged.
