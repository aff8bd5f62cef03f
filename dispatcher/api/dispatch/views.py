from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import Response

from dispatcher.api.deps import UseCasesDeps
from dispatcher.app.infrastructure import DependencyUnavailable
from dispatcher.app.scripts.domain import DispatchRequest, Script

from . import exceptions

logger = logging.getLogger(__name__)

router = APIRouter()

METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{name}", methods=METHODS, response_model=None)
@router.api_route("/{name}/{path:path}", methods=METHODS, response_model=None)
async def dispatch(
    name: str,
    request: Request,
    usecases: UseCasesDeps,
) -> Response:
    """
    Forwards a request to a script with a given name and returns the script
    response.
    """
    if not Script.is_valid_name(name):
        raise exceptions.ScriptNotFound()

    dispatch_request = DispatchRequest(
        method=request.method,
        path=request.path_params.get("path", ""),
        query=request.url.query,
        headers=request.headers.items(),
        body=await request.body(),
    )

    try:
        result = await usecases.dispatch.dispatch(name, dispatch_request)
    except Script.NotFound as exc:
        raise exceptions.ScriptNotFound() from exc
    except DependencyUnavailable as exc:
        logger.exception("Could not connect to script %s", name)
        raise exceptions.ScriptUnavailable() from exc

    response = Response(content=result.body, status_code=result.status_code)
    for key, value in result.headers:
        response.headers.append(key, value)
    return response
