"""Assignment routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.dependencies import (
    AuthorizationGateDep,
    BrontoBoardManagerDep,
    BrontoBoardQueriesDep,
    SessionTokenDep,
)
from schemas.brontoboard import ChangeAssignmentRequest
from schemas.requesting import RequestResponse
from utils.requesting import handle_request, to_json_response

router = APIRouter(prefix="/api/assignments", tags=["Assignment"])


@router.get("/{assignment_id}", response_model=RequestResponse, summary="Get an assignment")
def get_assignment(
    assignment_id: str,
    queries: BrontoBoardQueriesDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/assignments/{assignment_id}",
        lambda: queries.get_assignment_by_id(session, assignment_id),
    )
    return to_json_response(response)


@router.patch(
    "/{assignment_id}",
    response_model=RequestResponse,
    summary="Change an assignment's due date",
)
def change_assignment(
    assignment_id: str,
    req: ChangeAssignmentRequest,
    manager: BrontoBoardManagerDep,
    gate: AuthorizationGateDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/assignments/{assignment_id}",
        lambda: manager.change_assignment(
            gate.resolve_user(session), assignment_id, req.due_date
        ),
        req.model_dump(),
    )
    return to_json_response(response)


@router.delete("/{assignment_id}", response_model=RequestResponse, summary="Remove an assignment")
def remove_assignment(
    assignment_id: str,
    manager: BrontoBoardManagerDep,
    gate: AuthorizationGateDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/assignments/{assignment_id}",
        lambda: manager.remove_assignment(gate.resolve_user(session), assignment_id),
    )
    return to_json_response(response)
