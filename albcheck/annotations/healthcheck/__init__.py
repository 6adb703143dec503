"""Target-group health-check annotations.

Public API
----------
HealthCheckConfig
    Optional-field health-check settings.
HealthCheckParser
    Reads prefixed ``healthcheck-*`` annotations from an ingress.
merge_health_check
    Resolves a specific configuration against a fallback one.

Examples
--------
>>> from albcheck.annotations.healthcheck import (
...     HealthCheckConfig,
...     HealthCheckParser,
... )
>>> from albcheck.config import GlobalDefaults
>>> from albcheck.ingress import Ingress, ObjectMeta, StaticResolver
>>> parser = HealthCheckParser(StaticResolver())
>>> ingress = Ingress(metadata=ObjectMeta(name="web"))
>>> fallback = HealthCheckConfig(path="/healthz", protocol="HTTPS")
>>> effective = parser.parse(ingress).merge(fallback, GlobalDefaults())
>>> effective.path, effective.protocol, effective.interval_seconds
('/healthz', 'HTTPS', 15)

"""

from __future__ import annotations

from albcheck.annotations.healthcheck.constants import (
    DEFAULT_BACKEND_PROTOCOL,
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_PATH,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    SUPPORTED_PROTOCOLS,
)
from albcheck.annotations.healthcheck.merge import merge_health_check
from albcheck.annotations.healthcheck.models import HealthCheckConfig
from albcheck.annotations.healthcheck.parser import HealthCheckParser

__all__ = [
    "DEFAULT_BACKEND_PROTOCOL",
    "DEFAULT_INTERVAL_SECONDS",
    "DEFAULT_PATH",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT_SECONDS",
    "SUPPORTED_PROTOCOLS",
    "HealthCheckConfig",
    "HealthCheckParser",
    "merge_health_check",
]
