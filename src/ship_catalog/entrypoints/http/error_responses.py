"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "speed",
                "message": "speed must be between 0.01 and 0.99",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Ship with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Field validation error:
            {
                "detail": "name must be between 1 and 50 characters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "name",
                        "message": "name must be between 1 and 50 characters",
                        "code": "INVALID_LENGTH"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Ship with identifier '42' not found", "code": "NOT_FOUND"},
                {"detail": "Ship id must be a number", "code": "BAD_REQUEST"},
                {
                    "detail": "crewSize must be between 1 and 9999",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "crewSize",
                            "message": "crewSize must be between 1 and 9999",
                            "code": "OUT_OF_RANGE",
                        },
                    ],
                },
            ]
        }
    )
