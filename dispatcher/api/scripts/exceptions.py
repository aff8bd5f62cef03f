from __future__ import annotations

from dispatcher.api.exceptions import APIError


class MalformedScriptPayload(APIError):
    status_code = 400
    code = "MALFORMED_SCRIPT_PAYLOAD"
    code_verbose = "Malformed script payload"
    default_message = (
        "Expected json: { script: string, dispatch_config?: "
        "{ limits?: { cpuMs?: number, memory?: number }, outbound?: string }}"
    )


class ScriptNameReserved(APIError):
    status_code = 409
    code = "SCRIPT_NAME_RESERVED"
    code_verbose = "Script name reserved"
    default_message = "Script name already reserved"


class ScriptTooLarge(APIError):
    status_code = 413
    code = "SCRIPT_TOO_LARGE"
    code_verbose = "Script is too large"
    default_message = "Uploaded script exceeds the maximum allowed size"


class InvalidScriptName(APIError):
    status_code = 400
    code = "INVALID_SCRIPT_NAME"
    code_verbose = "Invalid script name"
    default_message = (
        "Script name may only contain lowercase letters, digits, '-' and '_', "
        "and be at most 63 characters long"
    )
