"""Class routes.

Endpoints for a single class and the assignments and office hours under it.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.dependencies import (
    AuthorizationGateDep,
    BrontoBoardManagerDep,
    BrontoBoardQueriesDep,
    SessionTokenDep,
)
from schemas.brontoboard import AddAssignmentRequest, AddOfficeHourRequest
from schemas.requesting import RequestResponse
from utils.requesting import handle_request, to_json_response

router = APIRouter(prefix="/api/classes", tags=["Class"])


@router.get("/{class_id}", response_model=RequestResponse, summary="Get a class")
def get_class(
    class_id: str,
    queries: BrontoBoardQueriesDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/classes/{class_id}",
        lambda: queries.get_class_by_id(session, class_id),
    )
    return to_json_response(response)


@router.post(
    "/{class_id}/assignments",
    response_model=RequestResponse,
    summary="Add an assignment to a class",
)
def add_assignment(
    class_id: str,
    req: AddAssignmentRequest,
    manager: BrontoBoardManagerDep,
    gate: AuthorizationGateDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/classes/{class_id}/assignments",
        lambda: manager.add_assignment(
            gate.resolve_user(session), class_id, req.name, req.due_date
        ),
        req.model_dump(),
    )
    return to_json_response(response)


@router.get(
    "/{class_id}/assignments",
    response_model=RequestResponse,
    summary="List the assignments of a class",
)
def list_assignments(
    class_id: str,
    queries: BrontoBoardQueriesDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/classes/{class_id}/assignments",
        lambda: queries.list_assignments_for_class(session, class_id),
    )
    return to_json_response(response)


@router.post(
    "/{class_id}/office-hours",
    response_model=RequestResponse,
    summary="Add office hours to a class",
)
def add_office_hour(
    class_id: str,
    req: AddOfficeHourRequest,
    manager: BrontoBoardManagerDep,
    gate: AuthorizationGateDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/classes/{class_id}/office-hours",
        lambda: manager.add_office_hour(
            gate.resolve_user(session), class_id, req.start_time, req.duration
        ),
        req.model_dump(),
    )
    return to_json_response(response)


@router.get(
    "/{class_id}/office-hours",
    response_model=RequestResponse,
    summary="List the office hours of a class",
)
def list_office_hours(
    class_id: str,
    queries: BrontoBoardQueriesDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/classes/{class_id}/office-hours",
        lambda: queries.list_office_hours_for_class(session, class_id),
    )
    return to_json_response(response)
