"""Health-check configuration resolved from ingress annotations."""

from __future__ import annotations

import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    from albcheck.config import GlobalDefaults


class HealthCheckConfig(msgspec.Struct, kw_only=True, frozen=True):
    """Target-group health-check settings for one ingress or path.

    Every field is optional so that an unset value stays distinguishable from
    a legitimate zero. Parsed configurations set every field except possibly
    ``protocol``; merged configurations set every field.

    Attributes
    ----------
    path : str, optional
        Request path probed by the load balancer.
    port : str, optional
        Literal port number or ``traffic-port``.
    protocol : str, optional
        Probe protocol such as ``HTTP`` or ``TCP``, kept as written.
    interval_seconds : int, optional
        Seconds between probes.
    timeout_seconds : int, optional
        Seconds before a probe counts as failed.

    """

    path: str | None = None
    port: str | None = None
    protocol: str | None = None
    interval_seconds: int | None = None
    timeout_seconds: int | None = None

    @property
    def is_complete(self) -> bool:
        """Return whether every field holds a value."""
        return all(
            getattr(self, field) is not None for field in self.__struct_fields__
        )

    def merge(
        self,
        target: HealthCheckConfig,
        defaults: GlobalDefaults,
    ) -> HealthCheckConfig:
        """Merge this configuration over ``target``.

        See :func:`albcheck.annotations.healthcheck.merge.merge_health_check`.
        """
        from albcheck.annotations.healthcheck.merge import merge_health_check

        return merge_health_check(self, target, defaults)
