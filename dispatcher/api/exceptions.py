from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypedDict, cast

from fastapi.responses import ORJSONResponse

if TYPE_CHECKING:
    from fastapi import Request, Response

logger = logging.getLogger(__name__)


async def api_error_exception_handler(_: Request, exc: Exception) -> Response:
    exc = cast(APIError, exc)
    return ORJSONResponse(exc.as_dict(), status_code=exc.status_code)


async def dependency_unavailable_exception_handler(
    request: Request, exc: Exception
) -> Response:
    logger.error(
        "Dependency unavailable while handling %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return await api_error_exception_handler(request, DependencyUnavailable())


class APIErrorDict(TypedDict):
    code: str
    code_verbose: str
    message: str


class APIError(Exception):
    status_code = 500
    code = "SERVER_ERROR"
    code_verbose = "A server error occurred"
    default_message = "Something has gone wrong on the server"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message

    def __repr__(self):
        return f"{self.__class__.__name__}(message={self.message!r})"

    def as_dict(self) -> APIErrorDict:
        return {
            "code": self.code,
            "code_verbose": self.code_verbose,
            "message": self.message,
        }


class DependencyUnavailable(APIError):
    status_code = 500
    code = "DEPENDENCY_UNAVAILABLE"
    code_verbose = "Dependency unavailable"
    default_message = "Could not complete request"


class MissingToken(APIError):
    status_code = 403
    code = "MISSING_TOKEN"
    code_verbose = "Missing token"
    default_message = "X-Customer-Token header is not set"


class InvalidToken(APIError):
    status_code = 403
    code = "INVALID_TOKEN"
    code_verbose = "Invalid token"
    default_message = "Unauthorized X-Customer-Token"
