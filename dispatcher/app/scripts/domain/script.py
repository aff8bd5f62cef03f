from __future__ import annotations

import re
from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel

__all__ = ["Script"]

# script names accepted by the registry
_NAME_RE = re.compile(r"[a-z0-9_-]{1,63}")


class ScriptNameReserved(Exception):
    pass


class ScriptNotFound(Exception):
    pass


class ScriptUploadRejected(Exception):
    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__(status_code, body)
        self.status_code = status_code
        self.body = body


class Script(BaseModel):
    """A script as it is stored in the namespace registry."""

    NameReserved: ClassVar[type[ScriptNameReserved]] = ScriptNameReserved
    NotFound: ClassVar[type[ScriptNotFound]] = ScriptNotFound
    UploadRejected: ClassVar[type[ScriptUploadRejected]] = ScriptUploadRejected

    id: str
    created_on: datetime | None = None
    modified_on: datetime | None = None
    tags: list[str] = []

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return _NAME_RE.fullmatch(name) is not None
