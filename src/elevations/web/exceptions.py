"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from elevations.application.config import ConfigError, UnknownBomError
from elevations.domain.services import DraftValidation


class ElevationSaveError(Exception):
    """Raised when a save request fails the save gate."""

    def __init__(self, validation: DraftValidation) -> None:
        self.validation = validation
        super().__init__(validation.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(UnknownBomError)
    async def unknown_bom_handler(
        request: Request, exc: UnknownBomError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "unknown_bom",
                "details": {"bom_type": exc.bom_type.value, "bom_id": exc.bom_id},
            },
        )

    @app.exception_handler(ElevationSaveError)
    async def save_error_handler(
        request: Request, exc: ElevationSaveError
    ) -> JSONResponse:
        validation = exc.validation
        return JSONResponse(
            status_code=422,
            content={
                "error": validation.message,
                "error_type": validation.reason.value,
                "details": {
                    "missing_fields": list(validation.missing_fields),
                    "missing_selections": list(validation.missing_selections),
                },
            },
        )
