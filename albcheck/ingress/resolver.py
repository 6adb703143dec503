"""Backend lookups used while parsing ingress annotations.

The parser never talks to a cluster directly. It is handed a ``Resolver`` that
can look up the Service an ingress routes to, which keeps parsing testable with
``StaticResolver`` and independent of how objects are stored.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from albcheck.ingress.models import Service


class ResolverError(Exception):
    """Base class for resolver failures."""


class BackendNotFoundError(ResolverError, LookupError):
    """Raised when the referenced Service does not exist."""

    def __init__(self, namespace: str, name: str) -> None:
        """Initialise with the namespace and name that were looked up."""
        self.namespace = namespace
        self.name = name
        super().__init__(f"Service not found: {namespace}/{name}")


class ResolverUnavailableError(ResolverError):
    """Raised when the backing store cannot answer a lookup right now."""

    def __init__(self, reason: str) -> None:
        """Initialise with a description of the failure."""
        self.reason = reason
        super().__init__(f"Resolver unavailable: {reason}")


@typ.runtime_checkable
class Resolver(typ.Protocol):
    """Read-only lookup of backend metadata by namespace and name.

    Implementations raise ``BackendNotFoundError`` when the Service is absent
    and ``ResolverUnavailableError`` when the lookup could not be performed.

    Examples
    --------
    >>> from albcheck.ingress import Resolver, StaticResolver
    >>> isinstance(StaticResolver(), Resolver)
    True

    """

    def get_service(self, namespace: str, name: str) -> Service:
        """Return the Service ``namespace/name``.

        Raises
        ------
        BackendNotFoundError
            If no such Service exists.
        ResolverUnavailableError
            If the lookup could not be completed.

        """
        ...


class StaticResolver:
    """In-memory resolver over a fixed set of Services."""

    def __init__(self, services: cabc.Iterable[Service] = ()) -> None:
        """Index ``services`` by ``(namespace, name)``; later entries win."""
        self._services: dict[tuple[str, str], Service] = {
            (service.namespace, service.name): service for service in services
        }

    def __len__(self) -> int:
        """Return the number of indexed Services."""
        return len(self._services)

    def get_service(self, namespace: str, name: str) -> Service:
        """Return the indexed Service or raise ``BackendNotFoundError``."""
        try:
            return self._services[(namespace, name)]
        except KeyError:
            raise BackendNotFoundError(namespace, name) from None
