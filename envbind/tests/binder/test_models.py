"""
Tests for Binding Pydantic Models

Tests that BaseModel instances bind the same way dataclasses do,
including nested models, model_setting overrides and frozen models.
"""

from datetime import timedelta
from typing import Optional

import pytest
from pydantic import BaseModel

from envbind.binder import Binder, model_setting
from envbind.core.exceptions import (
    ConversionError,
    InvalidArgumentError,
    NotAddressableError,
    RequiredValueMissingError,
)
from envbind.tests.fakes import RecordingEnvironment


class _Database(BaseModel):
    url: str = "sqlite://"
    pool_size: int = 5
    timeout: timedelta = timedelta(seconds=10)


class _Service(BaseModel):
    name: str = "svc"
    database: _Database = _Database()
    replica: Optional[_Database] = None
    token: str = model_setting("", env="SERVICE_TOKEN")
    verbose: bool = model_setting(False, flag="-")


class _Frozen(BaseModel):
    model_config = {"frozen": True}

    port: int = 80


class TestModelBinding:
    """Tests for plain and nested models."""

    def test_defaults_kept(self, binder: Binder):
        service = _Service()
        binder.bind(service)

        assert service.name == "svc"
        assert service.database.pool_size == 5

    def test_nested_keys(self, env: RecordingEnvironment, binder: Binder):
        env.set("DATABASE_URL", "postgres://db")
        env.set("DATABASE_POOL_SIZE", "20")
        env.set("DATABASE_TIMEOUT", "1m")
        service = _Service()

        binder.bind(service)

        assert service.database.url == "postgres://db"
        assert service.database.pool_size == 20
        assert service.database.timeout == timedelta(minutes=1)

    def test_lookup_order(self, env: RecordingEnvironment, binder: Binder):
        binder.bind(_Service())

        assert env.lookups == [
            "NAME",
            "DATABASE_URL",
            "DATABASE_POOL_SIZE",
            "DATABASE_TIMEOUT",
            "SERVICE_TOKEN",
        ]

    def test_none_replica_skipped(self, binder: Binder):
        service = _Service()
        binder.bind(service)
        assert service.replica is None

    def test_present_replica_bound(self, env: RecordingEnvironment, binder: Binder):
        env.set("REPLICA_URL", "postgres://replica")
        service = _Service(replica=_Database())

        binder.bind(service)

        assert service.replica.url == "postgres://replica"

    def test_explicit_env_key(self, env: RecordingEnvironment, binder: Binder):
        env.set("SERVICE_TOKEN", "secret")
        env.set("TOKEN", "ignored")
        service = _Service()

        binder.bind(service)

        assert service.token == "secret"

    def test_ignored_field_not_read(self, env: RecordingEnvironment, binder: Binder):
        env.set("VERBOSE", "true")
        service = _Service()

        binder.bind(service)

        assert service.verbose is False
        assert "VERBOSE" not in env.lookups


class TestModelErrors:
    """Tests for failures on model targets."""

    def test_conversion_error_path(self, env: RecordingEnvironment, binder: Binder):
        env.set("DATABASE_POOL_SIZE", "many")

        with pytest.raises(ConversionError) as exc_info:
            binder.bind(_Service())

        assert exc_info.value.field_path == "database.pool_size"

    def test_required_model_field(self, binder: Binder):
        class _Secrets(BaseModel):
            api_key: str = model_setting("", env="API_KEY,required")

        with pytest.raises(RequiredValueMissingError) as exc_info:
            binder.bind(_Secrets())

        assert exc_info.value.key == "API_KEY"

    def test_frozen_model_not_addressable(self, env: RecordingEnvironment, binder: Binder):
        env.set("PORT", "8080")

        with pytest.raises(NotAddressableError) as exc_info:
            binder.bind(_Frozen())

        assert exc_info.value.field_path == "port"
        assert exc_info.value.cause is not None

    def test_model_class_rejected(self, binder: Binder):
        with pytest.raises(InvalidArgumentError) as exc_info:
            binder.bind(_Service)

        assert exc_info.value.received_type == "type[_Service]"
