"""Resolve the effective health check for every path of an ingress.

Each rule path routes to a Service. The Service's own health-check
annotations are the most specific configuration, so they are merged over the
ingress's own annotations to give the settings for that path's target group.
Annotations on the default backend Service reach only the default backend
entry, never the other paths.
"""

from __future__ import annotations

import typing as typ

import msgspec

from albcheck.ingress.resolver import BackendNotFoundError
from albcheck.logging import get_logger, log_debug

if typ.TYPE_CHECKING:
    from albcheck.annotations.healthcheck.models import HealthCheckConfig
    from albcheck.annotations.healthcheck.parser import HealthCheckParser
    from albcheck.config import GlobalDefaults
    from albcheck.ingress.models import Ingress, ServiceBackend
    from albcheck.ingress.resolver import Resolver

logger = get_logger(__name__)


class PathHealthCheck(msgspec.Struct, kw_only=True, frozen=True):
    """Effective health check for one ingress path.

    Attributes
    ----------
    host : str, optional
        Host the rule matches, or ``None`` for every host.
    path : str
        Request path routed to the backend.
    service_name : str
        Backend Service name.
    service_port : int | str
        Backend Service port.
    health_check : HealthCheckConfig
        Fully populated health-check settings for the target group.

    """

    host: str | None
    path: str
    service_name: str
    service_port: int | str
    health_check: HealthCheckConfig


def _backend_health_check(
    ingress: Ingress,
    backend: ServiceBackend,
    ingress_config: HealthCheckConfig,
    context: tuple[HealthCheckParser, Resolver, GlobalDefaults],
) -> HealthCheckConfig:
    """Merge the backend Service's annotations over the ingress configuration."""
    parser, resolver, defaults = context
    try:
        service = resolver.get_service(ingress.namespace, backend.service_name)
    except BackendNotFoundError:
        log_debug(
            logger,
            "Service %s/%s not found, path inherits ingress %s health check",
            ingress.namespace,
            backend.service_name,
            ingress.name,
        )
        return ingress_config.merge(ingress_config, defaults)

    service_config = parser.parse_annotations(service.annotations)
    return service_config.merge(ingress_config, defaults)


def resolve_path_health_checks(
    ingress: Ingress,
    parser: HealthCheckParser,
    resolver: Resolver,
    defaults: GlobalDefaults,
) -> list[PathHealthCheck]:
    """Return the effective health check for each path of ``ingress``.

    Parameters
    ----------
    ingress
        Ingress whose rules are walked in declaration order.
    parser
        Parser used for both the ingress and the backend Services.
    resolver
        Lookup for the Services the paths route to.
    defaults
        Deployment defaults used by every merge.

    Returns
    -------
    list[PathHealthCheck]
        One entry per rule path. A default backend without rules yields a
        single entry for ``/``.

    Raises
    ------
    MalformedAnnotationError
        If the ingress or a backend Service carries a malformed annotation.
    ResolverUnavailableError
        If a Service lookup fails for a reason other than not-found.

    """
    # The default backend's annotations apply only to its own entry.
    ingress_config = parser.parse_annotations(ingress.annotations)
    context = (parser, resolver, defaults)
    results: list[PathHealthCheck] = []

    for rule in ingress.spec.rules:
        if rule.http is None:
            continue
        results.extend(
            PathHealthCheck(
                host=rule.host,
                path=ingress_path.path,
                service_name=ingress_path.backend.service_name,
                service_port=ingress_path.backend.service_port,
                health_check=_backend_health_check(
                    ingress, ingress_path.backend, ingress_config, context
                ),
            )
            for ingress_path in rule.http.paths
        )

    default_backend = ingress.spec.backend
    if not results and default_backend is not None:
        results.append(
            PathHealthCheck(
                host=None,
                path="/",
                service_name=default_backend.service_name,
                service_port=default_backend.service_port,
                health_check=_backend_health_check(
                    ingress, default_backend, ingress_config, context
                ),
            )
        )

    return results
