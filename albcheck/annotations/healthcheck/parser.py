"""Parse health-check annotations into a ``HealthCheckConfig``."""

from __future__ import annotations

import collections
import typing as typ

from albcheck.annotations.healthcheck.constants import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_PATH,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    INTERVAL_SECONDS_ANNOTATION,
    PATH_ANNOTATION,
    PORT_ANNOTATION,
    PROTOCOL_ANNOTATION,
    TIMEOUT_SECONDS_ANNOTATION,
    is_supported_protocol,
)
from albcheck.annotations.healthcheck.models import HealthCheckConfig
from albcheck.annotations.parser import (
    DEFAULT_ANNOTATION_PREFIX,
    annotation_key,
    get_int_annotation,
    get_string_annotation,
)
from albcheck.ingress.resolver import BackendNotFoundError
from albcheck.logging import get_logger, log_debug, log_warning

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from albcheck.ingress.models import Ingress
    from albcheck.ingress.resolver import Resolver

logger = get_logger(__name__)


class HealthCheckParser:
    """Build health-check configuration from ingress annotations.

    Absent annotations fall back to the constants in
    :mod:`albcheck.annotations.healthcheck.constants`, except ``protocol``,
    which stays unset so the merge can resolve it against the deployment's
    default backend protocol.

    When an ingress names a default backend, that Service's annotations are
    consulted for keys the ingress does not carry. A missing Service is not an
    error; resolver failures other than not-found propagate.

    Examples
    --------
    >>> from albcheck.ingress import Ingress, ObjectMeta, StaticResolver
    >>> ingress = Ingress(metadata=ObjectMeta(
    ...     name="web",
    ...     annotations={
    ...         "alb.ingress.kubernetes.io/healthcheck-interval-seconds": "30",
    ...     },
    ... ))
    >>> config = HealthCheckParser(StaticResolver()).parse(ingress)
    >>> (config.path, config.interval_seconds)
    ('/', 30)

    """

    def __init__(
        self,
        resolver: Resolver,
        *,
        prefix: str = DEFAULT_ANNOTATION_PREFIX,
    ) -> None:
        """Store the resolver and the annotation prefix to read under."""
        self._resolver = resolver
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        """Return the annotation prefix this parser reads."""
        return self._prefix

    def parse(self, ingress: Ingress) -> HealthCheckConfig:
        """Parse the health-check annotations of ``ingress``.

        Parameters
        ----------
        ingress
            Routing resource carrying the annotations.

        Returns
        -------
        HealthCheckConfig
            Configuration with every field set except, possibly, ``protocol``.

        Raises
        ------
        MalformedAnnotationError
            If an interval or timeout annotation is not a non-negative
            integer.
        ResolverUnavailableError
            If the default backend lookup fails for a reason other than
            not-found.

        """
        annotations: cabc.Mapping[str, str] = ingress.annotations
        backend_annotations = self._default_backend_annotations(ingress)
        if backend_annotations:
            annotations = collections.ChainMap(
                ingress.annotations, backend_annotations
            )
        return self.parse_annotations(annotations)

    def parse_annotations(
        self,
        annotations: cabc.Mapping[str, str],
    ) -> HealthCheckConfig:
        """Parse a bare annotation mapping without any backend lookups.

        Raises
        ------
        MalformedAnnotationError
            If an interval or timeout annotation is not a non-negative
            integer.

        """
        path = self._string(PATH_ANNOTATION, annotations)
        port = self._string(PORT_ANNOTATION, annotations)
        interval = self._int(INTERVAL_SECONDS_ANNOTATION, annotations)
        timeout = self._int(TIMEOUT_SECONDS_ANNOTATION, annotations)

        return HealthCheckConfig(
            path=DEFAULT_PATH if path is None else path,
            port=DEFAULT_PORT if port is None else port,
            protocol=self._protocol(annotations),
            interval_seconds=DEFAULT_INTERVAL_SECONDS if interval is None else interval,
            timeout_seconds=DEFAULT_TIMEOUT_SECONDS if timeout is None else timeout,
        )

    def _string(self, name: str, annotations: cabc.Mapping[str, str]) -> str | None:
        return get_string_annotation(name, annotations, self._prefix)

    def _int(self, name: str, annotations: cabc.Mapping[str, str]) -> int | None:
        return get_int_annotation(name, annotations, self._prefix)

    def _protocol(self, annotations: cabc.Mapping[str, str]) -> str | None:
        """Return the protocol annotation when it names a supported protocol."""
        protocol = self._string(PROTOCOL_ANNOTATION, annotations)
        if protocol is None:
            return None
        if not is_supported_protocol(protocol):
            log_warning(
                logger,
                "Ignoring unsupported %s value %r",
                annotation_key(PROTOCOL_ANNOTATION, self._prefix),
                protocol,
            )
            return None
        return protocol

    def _default_backend_annotations(self, ingress: Ingress) -> dict[str, str]:
        """Return annotations of the ingress's default backend Service.

        Returns an empty mapping when the ingress has no default backend or
        the Service cannot be found.
        """
        backend = ingress.spec.backend
        if backend is None:
            return {}

        try:
            service = self._resolver.get_service(
                ingress.namespace, backend.service_name
            )
        except BackendNotFoundError as exc:
            log_debug(
                logger,
                "Default backend of ingress %s/%s unavailable, using constant "
                "defaults: %s",
                ingress.namespace,
                ingress.name,
                exc,
            )
            return {}
        return service.annotations
