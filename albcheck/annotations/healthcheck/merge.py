"""Merge a specific health-check configuration over a fallback one.

Each field is resolved independently. A source field still at its default is
treated as never overridden and yields to the target. Path, port, interval and
timeout compare against fixed constants; protocol compares against the
deployment's configured default backend protocol, which is why the merge takes
``GlobalDefaults``.

Examples
--------
>>> from albcheck.config import GlobalDefaults
>>> source = HealthCheckConfig(path="/", port="8080", protocol="HTTP",
...                            interval_seconds=15, timeout_seconds=5)
>>> target = HealthCheckConfig(path="/healthz", port="traffic-port",
...                            protocol="HTTPS", interval_seconds=30,
...                            timeout_seconds=10)
>>> merged = merge_health_check(source, target, GlobalDefaults())
>>> (merged.path, merged.port, merged.protocol)
('/healthz', '8080', 'HTTPS')

"""

from __future__ import annotations

import typing as typ

from albcheck.annotations.errors import InvalidArgumentError
from albcheck.annotations.healthcheck.constants import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_PATH,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
)
from albcheck.annotations.healthcheck.models import HealthCheckConfig
from albcheck.annotations.parser import merge_value

if typ.TYPE_CHECKING:
    from albcheck.config import GlobalDefaults


def merge_health_check(
    source: HealthCheckConfig | None,
    target: HealthCheckConfig | None,
    defaults: GlobalDefaults | None,
) -> HealthCheckConfig:
    """Return the effective configuration of ``source`` merged over ``target``.

    Parameters
    ----------
    source
        Most specific configuration, typically parsed from annotations.
    target
        Fallback configuration used for every source field left at its
        default.
    defaults
        Deployment defaults; ``default_backend_protocol`` is the default the
        source protocol is compared against.

    Returns
    -------
    HealthCheckConfig
        New, fully populated configuration. Neither input is modified.

    Raises
    ------
    InvalidArgumentError
        If any argument is ``None``.

    """
    if source is None:
        raise InvalidArgumentError.missing("source")
    if target is None:
        raise InvalidArgumentError.missing("target")
    if defaults is None:
        raise InvalidArgumentError.missing("defaults")

    return HealthCheckConfig(
        path=merge_value(source.path, target.path, DEFAULT_PATH),
        port=merge_value(source.port, target.port, DEFAULT_PORT),
        protocol=merge_value(
            source.protocol,
            target.protocol,
            defaults.default_backend_protocol,
        ),
        interval_seconds=merge_value(
            source.interval_seconds,
            target.interval_seconds,
            DEFAULT_INTERVAL_SECONDS,
        ),
        timeout_seconds=merge_value(
            source.timeout_seconds,
            target.timeout_seconds,
            DEFAULT_TIMEOUT_SECONDS,
        ),
    )
