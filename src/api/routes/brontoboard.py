"""BrontoBoard routes.

This module handles HTTP endpoints for BrontoBoards and the classes on them.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.dependencies import (
    AuthorizationGateDep,
    BrontoBoardManagerDep,
    BrontoBoardQueriesDep,
    SessionTokenDep,
)
from schemas.brontoboard import CreateClassRequest, InitializeBrontoBoardRequest
from schemas.requesting import RequestResponse
from utils.requesting import handle_request, to_json_response

router = APIRouter(prefix="/api/brontoboards", tags=["BrontoBoard"])


@router.post("", response_model=RequestResponse, summary="Initialize a BrontoBoard")
def initialize_brontoboard(
    req: InitializeBrontoBoardRequest,
    manager: BrontoBoardManagerDep,
    gate: AuthorizationGateDep,
    session: SessionTokenDep,
) -> JSONResponse:
    """Create a BrontoBoard owned by the caller.

    Only a valid session is required; there is no existing entity to check
    ownership against.
    """
    response = handle_request(
        "/brontoboards",
        lambda: manager.initialize_board(gate.resolve_user(session), req.calendar),
        req.model_dump(),
    )
    return to_json_response(response)


@router.get("", response_model=RequestResponse, summary="List the caller's BrontoBoards")
def list_brontoboards(
    queries: BrontoBoardQueriesDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        "/brontoboards",
        lambda: queries.list_boards_for_user(session),
    )
    return to_json_response(response)


@router.get("/{brontoboard_id}", response_model=RequestResponse, summary="Get a BrontoBoard")
def get_brontoboard(
    brontoboard_id: str,
    queries: BrontoBoardQueriesDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/brontoboards/{brontoboard_id}",
        lambda: queries.get_board_by_id(session, brontoboard_id),
    )
    return to_json_response(response)


@router.post(
    "/{brontoboard_id}/classes",
    response_model=RequestResponse,
    summary="Create a class on a BrontoBoard",
)
def create_class(
    brontoboard_id: str,
    req: CreateClassRequest,
    manager: BrontoBoardManagerDep,
    gate: AuthorizationGateDep,
    session: SessionTokenDep,
) -> JSONResponse:
    response = handle_request(
        f"/brontoboards/{brontoboard_id}/classes",
        lambda: manager.create_class(
            gate.resolve_user(session), brontoboard_id, req.name, req.overview
        ),
        req.model_dump(),
    )
    return to_json_response(response)


@router.get(
    "/{brontoboard_id}/classes",
    response_model=RequestResponse,
    summary="List the classes on a BrontoBoard",
)
def list_classes(
    brontoboard_id: str,
    queries: BrontoBoardQueriesDep,
    session: SessionTokenDep,
) -> JSONResponse:
    """List classes; an empty board yields an empty list."""
    response = handle_request(
        f"/brontoboards/{brontoboard_id}/classes",
        lambda: queries.list_classes_for_board(session, brontoboard_id),
    )
    return to_json_response(response)
