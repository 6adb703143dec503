"""Ingress and Service models plus the backend resolver interface."""

from __future__ import annotations

from albcheck.ingress.models import (
    HTTPIngressRuleValue,
    Ingress,
    IngressPath,
    IngressRule,
    IngressSpec,
    ObjectMeta,
    Service,
    ServiceBackend,
)
from albcheck.ingress.resolver import (
    BackendNotFoundError,
    Resolver,
    ResolverError,
    ResolverUnavailableError,
    StaticResolver,
)

__all__ = [
    "BackendNotFoundError",
    "HTTPIngressRuleValue",
    "Ingress",
    "IngressPath",
    "IngressRule",
    "IngressSpec",
    "ObjectMeta",
    "Resolver",
    "ResolverError",
    "ResolverUnavailableError",
    "Service",
    "ServiceBackend",
    "StaticResolver",
]
