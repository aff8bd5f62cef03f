from __future__ import annotations

from datetime import timedelta

import pytest

from dispatcher.config import (
    AppConfig,
    SQLAlchemyConfig,
    _parse_bytes_size,
    _parse_timedelta_from_str,
)


class TestParseBytesSize:
    @pytest.mark.parametrize(["given", "expected"], [
        (512, 512),
        ("0B", 0),
        ("256", 256),
        ("1kb", 1024),
        (" 1KB ", 1024),
        ("1.50KB", 1024 + 512),
        ("10MB", 10 * 2**20),
    ])
    def test(self, given: int | str, expected: int):
        assert _parse_bytes_size(given) == expected

    @pytest.mark.parametrize("given", ["", "KB", "1.5.KB", "-1KB"])
    def test_when_value_is_invalid(self, given: str):
        with pytest.raises(ValueError):
            _parse_bytes_size(given)


class TestParseTimedeltaFromStr:
    @pytest.mark.parametrize(["given", "expected"], [
        ("30s", timedelta(seconds=30)),
        ("2m", timedelta(minutes=2)),
        ("1d", timedelta(days=1)),
    ])
    def test(self, given: str, expected: timedelta):
        assert _parse_timedelta_from_str(given) == expected

    def test_non_string_value(self):
        given = object()
        result = _parse_timedelta_from_str(given)
        assert result is given


class TestAppConfig:
    def test_nested_env(self, monkeypatch: pytest.MonkeyPatch):
        # GIVEN
        monkeypatch.setenv("FEATURES__CLAIM_LOCK_TTL", "1m")
        monkeypatch.setenv("FEATURES__UPLOAD_SCRIPT_MAX_SIZE", "1MB")
        monkeypatch.setenv("REGISTRY__NAMESPACE", "testing")
        # WHEN
        config = AppConfig()
        # THEN
        assert config.features.claim_lock_ttl == timedelta(minutes=1)
        assert config.features.upload_script_max_size == 2**20
        assert config.registry.namespace == "testing"

    def test_default_claim_lock_ttl_covers_publish_timeouts(self):
        config = AppConfig()
        publish_timeout = 3 * config.registry.timeout + 2 * config.database.timeout
        assert config.features.claim_lock_ttl.total_seconds() >= publish_timeout

    def test_when_claim_lock_ttl_is_shorter_than_publish_timeouts(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        # GIVEN
        monkeypatch.setenv("FEATURES__CLAIM_LOCK_TTL", "30s")
        monkeypatch.setenv("REGISTRY__TIMEOUT", "10")
        monkeypatch.setenv("DATABASE__TIMEOUT", "5")
        # WHEN
        with pytest.raises(ValueError) as excinfo:
            AppConfig()
        # THEN
        assert "claim_lock_ttl" in str(excinfo.value)


class TestSQLAlchemyConfig:
    def test_with_dsn(self):
        config = SQLAlchemyConfig()
        result = config.with_dsn("sqlite+aiosqlite:///:memory:")
        assert result.dsn == "sqlite+aiosqlite:///:memory:"
        assert config.dsn != result.dsn
