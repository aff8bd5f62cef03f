from __future__ import annotations

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from dispatcher.app.scripts.domain import Script


class DispatchLimitsSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cpu_ms: PositiveInt | None = Field(None, alias="cpuMs")
    memory: PositiveInt | None = None


class DispatchConfigSchema(BaseModel):
    limits: DispatchLimitsSchema | None = None
    outbound: str | None = None


class PutScriptRequest(BaseModel):
    script: str
    dispatch_config: DispatchConfigSchema = DispatchConfigSchema()

    @property
    def cpu_ms(self) -> int | None:
        limits = self.dispatch_config.limits
        return limits.cpu_ms if limits else None

    @property
    def memory(self) -> int | None:
        limits = self.dispatch_config.limits
        return limits.memory if limits else None


class ScriptSchema(BaseModel):
    id: str
    created_on: datetime | None
    modified_on: datetime | None
    tags: list[str]

    @classmethod
    def from_entity(cls, script: Script) -> Self:
        return cls(
            id=script.id,
            created_on=script.created_on,
            modified_on=script.modified_on,
            tags=script.tags,
        )
