from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse, Response
from pydantic import ValidationError

from dispatcher.api.deps import CurrentCustomerDeps, UseCasesDeps
from dispatcher.app.scripts.domain import Script
from dispatcher.config import config

from . import exceptions
from .schemas import PutScriptRequest, ScriptSchema

router = APIRouter()


@router.get("")
async def list_scripts(
    customer: CurrentCustomerDeps,
    usecases: UseCasesDeps,
) -> list[ScriptSchema]:
    """Lists scripts owned by the current customer."""
    scripts = await usecases.script.list_owned(customer)
    return [ScriptSchema.from_entity(script) for script in scripts]


@router.put(
    "/{name}",
    status_code=201,
    response_model=None,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": PutScriptRequest.model_json_schema()},
            },
            "required": True,
        },
    },
)
async def put_script(
    name: str,
    request: Request,
    customer: CurrentCustomerDeps,
    usecases: UseCasesDeps,
) -> Response:
    """
    Uploads a script under a given name.

    The name is claimed by the current customer on the first upload. Further uploads
    from the same customer update the script, uploads from other customers are
    rejected. If the namespace registry rejects the script, its response is
    returned as is, since it explains what is wrong with the script.
    """
    if not Script.is_valid_name(name):
        raise exceptions.InvalidScriptName()

    try:
        payload = PutScriptRequest.model_validate_json(await request.body())
    except ValidationError as exc:
        raise exceptions.MalformedScriptPayload() from exc

    content = payload.script.encode()
    if len(content) > config.features.upload_script_max_size:
        raise exceptions.ScriptTooLarge()

    try:
        await usecases.script.publish(
            name,
            customer,
            content,
            cpu_ms=payload.cpu_ms,
            memory=payload.memory,
            outbound=payload.dispatch_config.outbound,
        )
    except Script.NameReserved as exc:
        raise exceptions.ScriptNameReserved() from exc
    except Script.UploadRejected as exc:
        return ORJSONResponse(exc.body, status_code=400)

    return ORJSONResponse("Success", status_code=201)
