import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from backoffice.common.exceptions import (
    MissingParameterError,
    InvalidDateError,
    DataAccessError,
)

logger = logging.getLogger(__name__)


def exception_handler(app: FastAPI) -> None:
    """
    Registers global exception handlers for the FastAPI application.
    Translates domain exceptions into HTTP responses.
    """

    @app.exception_handler(MissingParameterError)
    async def missing_parameter_handler(request: Request, exc: MissingParameterError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exc.message},
        )

    @app.exception_handler(InvalidDateError)
    async def invalid_date_handler(request: Request, exc: InvalidDateError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exc.message},
        )

    @app.exception_handler(DataAccessError)
    async def data_access_error_handler(request: Request, exc: DataAccessError):
        logger.error(f"{request.method} {request.url.path}: {exc.message} ({exc.detail})")
        # Outside production the cause is returned for diagnostics; in
        # production only its type, so connection details stay server-side.
        if request.app.state.settings.ENV == "production" and exc.cause is not None:
            error = type(exc.cause).__name__
        else:
            error = exc.detail
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": exc.message, "error": error},
        )
