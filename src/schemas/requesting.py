"""Response envelope shared by every BrontoBoard endpoint."""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class ErrorInfo(BaseModel):
    kind: str = Field(description="Machine-readable error kind, e.g. 'NotFound'.")
    message: str
    field: Optional[str] = Field(
        default=None,
        description="Offending input field, set for validation errors only.",
    )


class RequestResponse(BaseModel):
    """The single response produced for one request.

    Exactly one of ``result`` and ``error`` is set. An empty list is a valid
    ``result``.
    """

    request: str
    result: Optional[Any] = None
    error: Optional[ErrorInfo] = None

    @model_validator(mode="after")
    def check_exactly_one_outcome(self) -> "RequestResponse":
        if (self.result is None) == (self.error is None):
            raise ValueError("A response carries exactly one of result or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
