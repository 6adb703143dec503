"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

from albcheck.annotations.healthcheck import HealthCheckParser
from albcheck.config import GlobalDefaults
from albcheck.ingress import StaticResolver
from tests.helpers.fake_logger import FakeLogger


@pytest.fixture
def fake_logger() -> FakeLogger:
    """Provide an empty fake logger."""
    return FakeLogger()


@pytest.fixture
def defaults() -> GlobalDefaults:
    """Provide deployment defaults with ``tcp`` as the backend protocol."""
    return GlobalDefaults(default_backend_protocol="tcp")


@pytest.fixture
def empty_resolver() -> StaticResolver:
    """Provide a resolver that knows no Services."""
    return StaticResolver()


@pytest.fixture
def hc_parser(empty_resolver: StaticResolver) -> HealthCheckParser:
    """Provide a parser whose backend lookups always miss."""
    return HealthCheckParser(empty_resolver)
