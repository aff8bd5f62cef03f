from __future__ import annotations

import enum
from typing import Literal

from pydantic import BaseModel

__all__ = [
    "PublishResult",
    "PublishStep",
]


class PublishStep(str, enum.Enum):
    resource_policy = "resource_policy"
    outbound_policy = "outbound_policy"
    ownership_tags = "ownership_tags"


class PublishResult(BaseModel):
    """
    Outcome of a publish.

    A script is published once its content is uploaded. Steps that run after the
    upload are not rolled back on failure, they are listed in `failed_steps`
    instead.
    """

    status: Literal["published"] = "published"
    script_name: str
    failed_steps: list[PublishStep] = []

    @property
    def complete(self) -> bool:
        return not self.failed_steps
