from __future__ import annotations

from dispatcher.api.exceptions import APIError


class ScriptNotFound(APIError):
    status_code = 404
    code = "SCRIPT_NOT_FOUND"
    code_verbose = "Script not found"
    default_message = "Script does not exist"


class ScriptUnavailable(APIError):
    status_code = 500
    code = "SCRIPT_UNAVAILABLE"
    code_verbose = "Script unavailable"
    default_message = "Could not connect to script"
