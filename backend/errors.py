"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal server error"}


class RelayError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(RelayError):
    def __init__(self, problems: list[str]):
        super().__init__("Invalid configuration: " + "; ".join(problems))
        self.problems = problems


class UpstreamError(RelayError):
    """A fetch from the Content API failed. Always terminal for the request."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)

    def wrap(self, context: str) -> "UpstreamError":
        """Same error class with ``context`` prefixed to the message."""
        wrapped = type(self)(f"{context}: {self}")
        wrapped.__cause__ = self
        return wrapped


class UpstreamRequestError(UpstreamError):
    pass


class UpstreamStatusError(UpstreamError):
    pass


class UpstreamReadError(UpstreamError):
    pass


class UpstreamDecodeError(UpstreamError):
    pass


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app.

    Callers only ever see an opaque 500; the cause is logged server-side.
    """

    @app.exception_handler(UpstreamError)
    async def handle_upstream_error(request: Request, exc: UpstreamError):
        logger.error("%s %s failed (%s): %s", request.method, request.url.path, type(exc).__name__, exc)
        return JSONResponse(INTERNAL_ERROR_BODY, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s: %s", request.url.path, exc)
        return JSONResponse(INTERNAL_ERROR_BODY, status_code=500)
