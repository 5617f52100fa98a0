# This project was developed with assistance from AI tools.
"""Error envelope returned by every failing request."""

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """One offending input field."""

    field: str = Field(description="Dotted location of the field, e.g. body.amount.")
    message: str
    type: str = ""


class ErrorResponse(BaseModel):
    error: str = Field(description="Human-readable message.")
    code: str = Field(description="Machine-readable error code, e.g. token_expired.")
    status: int = Field(description="HTTP status code.")
    request_id: str = Field(
        default="",
        description="Correlation ID for tracing this request in logs.",
    )
    fields: list[FieldError] | None = Field(
        default=None,
        description="Field-level detail for validation failures.",
    )
