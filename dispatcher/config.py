from __future__ import annotations

import enum
import re
from datetime import timedelta
from typing import Annotated, Literal, Self, TypeAlias

from pydantic import AnyHttpUrl, BaseModel, RedisDsn, model_validator
from pydantic.functional_validators import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BytesSizeMultipliers(int, enum.Enum):
    gb = 2**30
    mb = 2**20
    kb = 2**10
    b = 1


def _parse_bytes_size(value):
    if not isinstance(value, str):
        return value

    value = value.strip().lower()
    if value.isnumeric():
        return int(value)
    if match := re.match(r'^(\d+(?:\.[\d]+)?)([gmk]?b)$', value):
        size, unit = match.groups()
        multiplier = BytesSizeMultipliers[unit]
        return int(float(size) * multiplier)
    raise ValueError('string in a valid format required (e.g. "1KB", "1.5GB")')


def _parse_timedelta_from_str(value):
    if not isinstance(value, str):
        return value

    msg = 'string in a valid format required (e.g. "1d6h30m15s", "2h30m", "15m")'
    value = value.strip().lower()
    pattern = (
        r"((?P<days>\d+)d)?"
        r"((?P<hours>\d+)h)?"
        r"((?P<minutes>\d+)m)?"
        r"((?P<seconds>\d+)s)?"
    )
    match = re.fullmatch(pattern, value)
    if not match:
        raise ValueError(msg)

    items = match.groupdict().items()
    kwargs = {key: int(value) for key, value in items if value}
    if not kwargs:
        raise ValueError(msg)

    return timedelta(**kwargs)


BytesSize = Annotated[int, BeforeValidator(_parse_bytes_size)]
TTL = Annotated[timedelta, BeforeValidator(_parse_timedelta_from_str)]


class CacheConfig(BaseModel):
    backend_dsn: Literal["mem://"] | RedisDsn = "mem://"


class CORSConfig(BaseModel):
    allowed_origins: list[str] = []
    allowed_methods: list[str] = ["*"]
    allowed_headers: list[str] = ["*"]


class SQLAlchemyConfig(BaseModel):
    dsn: str = "sqlite+aiosqlite:///./dispatcher.sqlite3"
    timeout: float = 5.0
    echo: bool = False

    def with_dsn(self, dsn: str) -> Self:
        return self.model_copy(update={"dsn": dsn})


class DispatchFabricClientConfig(BaseModel):
    url: AnyHttpUrl = "http://localhost:8787"  # type: ignore[assignment]
    timeout: float = 30.0


class FeatureConfig(BaseModel):
    claim_lock_ttl: TTL = timedelta(seconds=60)
    upload_script_max_size: BytesSize = 10 * BytesSizeMultipliers.mb


class NamespaceRegistryClientConfig(BaseModel):
    url: AnyHttpUrl = "https://api.cloudflare.com/client/v4"  # type: ignore[assignment]
    account_id: str = ""
    namespace: str = ""
    api_token: str = ""
    timeout: float = 10.0


class SentryConfig(BaseModel):
    dsn: str | None = None
    environment: str | None = None


DatabaseConfig: TypeAlias = SQLAlchemyConfig


class AppConfig(BaseSettings):
    app_name: str = "Dispatcher"
    app_version: str = "dev"
    app_debug: bool = False

    cache: CacheConfig = CacheConfig()
    cors: CORSConfig = CORSConfig()
    database: DatabaseConfig = DatabaseConfig()
    fabric: DispatchFabricClientConfig = DispatchFabricClientConfig()
    features: FeatureConfig = FeatureConfig()
    registry: NamespaceRegistryClientConfig = NamespaceRegistryClientConfig()
    sentry: SentryConfig = SentryConfig()

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.prod", ".env.local"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )

    @model_validator(mode="after")
    def check_claim_lock_ttl(self) -> Self:
        # publish holds the claim lock over three registry calls and two writes
        required = 3 * self.registry.timeout + 2 * self.database.timeout
        if self.features.claim_lock_ttl.total_seconds() < required:
            raise ValueError(
                f"features.claim_lock_ttl must be at least {required:g}s "
                "to cover registry and database timeouts"
            )
        return self


config = AppConfig()
