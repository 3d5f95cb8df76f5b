"""Request/response correlation.

Every inbound call is wrapped in a ``PendingRequest`` and answered exactly
once, with either a result or an error. ``handle_request`` is the only place
where exceptions raised by the managers are turned into responses.
"""

import logging
import secrets
from typing import Any, Callable, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.exceptions import BrontoBoardError
from schemas.requesting import ErrorInfo, RequestResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_KIND = "InternalError"

# Error kind -> HTTP status
STATUS_CODES: Dict[str, int] = {
    "SessionInvalid": 401,
    "AuthenticationFailed": 401,
    "Unauthorized": 403,
    "NotFound": 404,
    "UserAlreadyExists": 409,
    "ValidationError": 400,
    "InternalInconsistency": 500,
    "StoreFailure": 500,
    INTERNAL_ERROR_KIND: 500,
}


class ResponseAlreadySentError(RuntimeError):
    """Raised when a request is answered a second time."""

    def __init__(self, request_id: str):
        self.request_id = request_id
        super().__init__(f"Request {request_id} has already been answered")


class PendingRequest:
    """One inbound request awaiting its single response."""

    def __init__(self, path: str, inputs: Optional[Dict[str, Any]] = None):
        self.request_id = secrets.token_hex(8)
        self.path = path
        self.inputs = inputs or {}
        self.response: Optional[RequestResponse] = None

    @property
    def answered(self) -> bool:
        return self.response is not None

    def respond(self, result: Any) -> RequestResponse:
        """Answer with a successful result.

        A handler that returns nothing is answered with ``{"success": True}``.
        """
        if result is None:
            result = {"success": True}
        return self._send(RequestResponse(request=self.request_id, result=result))

    def fail(self, error: BrontoBoardError) -> RequestResponse:
        return self._send(
            RequestResponse(
                request=self.request_id,
                error=ErrorInfo(
                    kind=error.kind,
                    message=error.message,
                    field=getattr(error, "field", None),
                ),
            )
        )

    def fail_internal(self) -> RequestResponse:
        return self._send(
            RequestResponse(
                request=self.request_id,
                error=ErrorInfo(
                    kind=INTERNAL_ERROR_KIND,
                    message="An unexpected error occurred.",
                ),
            )
        )

    def _send(self, response: RequestResponse) -> RequestResponse:
        if self.response is not None:
            raise ResponseAlreadySentError(self.request_id)
        self.response = response
        return response


def handle_request(
    path: str,
    handler: Callable[[], Any],
    inputs: Optional[Dict[str, Any]] = None,
) -> RequestResponse:
    """Run one request through ``handler`` and produce its response.

    Args:
        path: Route path, used for logging.
        handler: Zero-argument callable performing the operation.
        inputs: Request fields, kept on the PendingRequest.

    Returns:
        The one RequestResponse for this request.
    """
    request = PendingRequest(path, inputs)
    logger.debug("Request %s: %s", request.request_id, path)
    try:
        result = handler()
    except BrontoBoardError as e:
        if e.kind in ("InternalInconsistency", "StoreFailure"):
            logger.error("Request %s (%s) failed: %s", request.request_id, path, e)
        else:
            logger.info("Request %s (%s) rejected: %s", request.request_id, path, e.kind)
        return request.fail(e)
    except Exception:
        logger.exception("Request %s (%s) raised an unexpected error", request.request_id, path)
        return request.fail_internal()
    return request.respond(result)


def to_json_response(response: RequestResponse) -> JSONResponse:
    """Render a RequestResponse with the HTTP status for its outcome."""
    status_code = 200 if response.ok else STATUS_CODES.get(response.error.kind, 500)
    content = {"request": response.request}
    if response.ok:
        content["result"] = jsonable_encoder(response.result)
    else:
        content["error"] = jsonable_encoder(response.error, exclude_none=True)
    return JSONResponse(content=content, status_code=status_code)
