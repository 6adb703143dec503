"""Typed views of the Kubernetes objects albcheck reads.

Only the fields needed to resolve health checks are modelled. The structs
accept manifest-shaped input (camelCase keys) through ``msgspec.convert`` and
ignore anything else a manifest carries.
"""

from __future__ import annotations

import msgspec


class ObjectMeta(msgspec.Struct, kw_only=True, frozen=True):
    """Identity and annotations shared by Ingress and Service objects.

    Attributes
    ----------
    name : str
        Object name.
    namespace : str
        Namespace; Kubernetes fills in ``default`` when a manifest omits it.
    annotations : dict[str, str]
        Free-form annotations; albcheck reads the prefixed health-check keys.

    """

    name: str
    namespace: str = "default"
    annotations: dict[str, str] = msgspec.field(default_factory=dict)


class ServiceBackend(msgspec.Struct, kw_only=True, frozen=True, rename="camel"):
    """Reference from an ingress path to a Service port."""

    service_name: str
    service_port: int | str


class IngressPath(msgspec.Struct, kw_only=True, frozen=True):
    """Single path rule routed to a backend."""

    backend: ServiceBackend
    path: str = "/"


class HTTPIngressRuleValue(msgspec.Struct, kw_only=True, frozen=True):
    """HTTP paths declared under a host rule."""

    paths: list[IngressPath] = msgspec.field(default_factory=list)


class IngressRule(msgspec.Struct, kw_only=True, frozen=True):
    """Host rule; ``host`` is ``None`` for rules matching every host."""

    host: str | None = None
    http: HTTPIngressRuleValue | None = None


class IngressSpec(msgspec.Struct, kw_only=True, frozen=True):
    """Default backend and host rules of an ingress."""

    backend: ServiceBackend | None = None
    rules: list[IngressRule] = msgspec.field(default_factory=list)


class Ingress(msgspec.Struct, kw_only=True, frozen=True):
    """Routing resource whose annotations drive health-check configuration."""

    metadata: ObjectMeta
    spec: IngressSpec = msgspec.field(default_factory=IngressSpec)

    @property
    def name(self) -> str:
        """Return the ingress name."""
        return self.metadata.name

    @property
    def namespace(self) -> str:
        """Return the ingress namespace."""
        return self.metadata.namespace

    @property
    def annotations(self) -> dict[str, str]:
        """Return the ingress annotations."""
        return self.metadata.annotations


class Service(msgspec.Struct, kw_only=True, frozen=True):
    """Backend Service metadata returned by a resolver."""

    metadata: ObjectMeta

    @property
    def name(self) -> str:
        """Return the service name."""
        return self.metadata.name

    @property
    def namespace(self) -> str:
        """Return the service namespace."""
        return self.metadata.namespace

    @property
    def annotations(self) -> dict[str, str]:
        """Return the service annotations."""
        return self.metadata.annotations
