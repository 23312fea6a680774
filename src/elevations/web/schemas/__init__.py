"""Pydantic schemas for the REST API."""

from elevations.web.schemas.requests import (
    CodeRequest,
    ConfigValidateRequest,
    MatchRequest,
    SaveElevationRequest,
)
from elevations.web.schemas.responses import (
    BomListSchema,
    BomSchema,
    CodeResponseSchema,
    ElevationListSchema,
    ElevationSchema,
    ErrorResponseSchema,
    MatchResultSchema,
    OptionsSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "CodeRequest",
    "ConfigValidateRequest",
    "MatchRequest",
    "SaveElevationRequest",
    # Responses
    "BomListSchema",
    "BomSchema",
    "CodeResponseSchema",
    "ElevationListSchema",
    "ElevationSchema",
    "ErrorResponseSchema",
    "MatchResultSchema",
    "OptionsSchema",
    "ValidationResultSchema",
]
