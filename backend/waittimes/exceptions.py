"""Domain error taxonomy and the FastAPI handlers that render it."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class WaitTimesError(Exception):
    """Base class for every error the core raises."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WaitTimesError):
    """Malformed or missing input at submission intake."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(WaitTimesError):
    """A moderation action targets a submission that does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreUnavailableError(WaitTimesError):
    """The database call failed. Not retried here."""


class NotificationError(WaitTimesError):
    """The reviewer email could not be delivered."""


async def _domain_error_handler(request: Request, exc: WaitTimesError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    else:
        logger.info("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request body on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Strip non-serializable context (e.g. raised exceptions) from pydantic errors."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WaitTimesError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
