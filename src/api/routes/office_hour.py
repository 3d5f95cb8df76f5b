"""Office hours routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.dependencies import (
    AuthorizationGateDep,
    BrontoBoardManagerDep,
    BrontoBoardQueriesDep,
    SessionTokenDep,
)
from schemas.brontoboard import ChangeOfficeHourRequest
from schemas.requesting import RequestResponse
from utils.requesting import handle_request, to_json_response

router = APIRouter(prefix="/api/office-hours", tags=["OfficeHours"])


@router.get("/{office_hour_id}", response_model=RequestResponse, summary="Get office hours")
def get_office_hour(
    office_hour_id: str,
    queries: BrontoBoardQueriesDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/office-hours/{office_hour_id}",
        lambda: queries.get_office_hour_by_id(session, office_hour_id),
    )
    return to_json_response(response)


@router.patch(
    "/{office_hour_id}",
    response_model=RequestResponse,
    summary="Reschedule office hours",
)
def change_office_hour(
    office_hour_id: str,
    req: ChangeOfficeHourRequest,
    manager: BrontoBoardManagerDep,
    gate: AuthorizationGateDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/office-hours/{office_hour_id}",
        lambda: manager.change_office_hour(
            gate.resolve_user(session), office_hour_id, req.start_time, req.duration
        ),
        req.model_dump(),
    )
    return to_json_response(response)
