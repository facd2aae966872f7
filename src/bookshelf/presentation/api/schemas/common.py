"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that speaks camelCase JSON and accepts snake_case too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldErrorResponse(BaseModel):
    """One failed field of a request body."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    errors: list[FieldErrorResponse] | None = Field(
        None,
        description="Per-field problems (validation errors only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Book not found", "code": "BOOK_NOT_FOUND"},
        },
    )


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
