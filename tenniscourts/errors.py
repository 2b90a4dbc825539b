import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TennisCourtsError(Exception):
    """Base class for errors surfaced to API callers with a readable message."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TennisCourtsError):
    status_code = 404


class ValidationError(TennisCourtsError):
    status_code = 400


class ConflictError(TennisCourtsError):
    status_code = 409


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(TennisCourtsError)
    async def tennis_courts_error_handler(request: Request, exc: TennisCourtsError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(content={"detail": exc.message}, status_code=exc.status_code)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(content={"detail": "Internal server error"}, status_code=500)
