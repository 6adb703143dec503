"""Deployment-wide defaults consulted while resolving health checks.

Usage
-----
Use the built-in defaults:

>>> defaults = GlobalDefaults()
>>> defaults.default_backend_protocol
'HTTP'

Or load them from the environment:

>>> import os
>>> os.environ["ALBCHECK_DEFAULT_BACKEND_PROTOCOL"] = "HTTPS"
>>> GlobalDefaults.from_env().default_backend_protocol
'HTTPS'

"""

from __future__ import annotations

import dataclasses as dc
import os

from albcheck.annotations.healthcheck.constants import (
    DEFAULT_BACKEND_PROTOCOL,
    SUPPORTED_PROTOCOLS,
    is_supported_protocol,
)
from albcheck.annotations.parser import DEFAULT_ANNOTATION_PREFIX


class GlobalDefaultsError(ValueError):
    """Raised when environment configuration for defaults is invalid."""

    @classmethod
    def invalid_protocol(cls, value: str) -> GlobalDefaultsError:
        """Create error for an unsupported default backend protocol."""
        valid = ", ".join(f"'{p}'" for p in sorted(SUPPORTED_PROTOCOLS))
        return cls(
            f"Invalid ALBCHECK_DEFAULT_BACKEND_PROTOCOL '{value}'. "
            f"Valid options are: {valid}"
        )

    @classmethod
    def invalid_prefix(cls, value: str) -> GlobalDefaultsError:
        """Create error for an annotation prefix that cannot form keys."""
        return cls(
            f"Invalid ALBCHECK_ANNOTATION_PREFIX {value!r}. "
            "Must be non-empty and contain no '/' or whitespace"
        )


@dc.dataclass(frozen=True, slots=True)
class GlobalDefaults:
    """Defaults owned by the deployment rather than by any one ingress.

    Attributes
    ----------
    default_backend_protocol
        Protocol a backend is assumed to speak. A health-check protocol equal
        to this value counts as "not overridden" when configurations merge.
    annotation_prefix
        Prefix under which the controller's annotations are namespaced.

    """

    default_backend_protocol: str = DEFAULT_BACKEND_PROTOCOL
    annotation_prefix: str = DEFAULT_ANNOTATION_PREFIX

    @staticmethod
    def _protocol_from_env() -> str:
        raw = os.environ.get("ALBCHECK_DEFAULT_BACKEND_PROTOCOL", "")
        if not raw.strip():
            return DEFAULT_BACKEND_PROTOCOL
        if not is_supported_protocol(raw):
            raise GlobalDefaultsError.invalid_protocol(raw)
        return raw.strip()

    @staticmethod
    def _prefix_from_env() -> str:
        raw = os.environ.get("ALBCHECK_ANNOTATION_PREFIX")
        if raw is None:
            return DEFAULT_ANNOTATION_PREFIX
        prefix = raw.strip()
        if not prefix or "/" in prefix or any(ch.isspace() for ch in prefix):
            raise GlobalDefaultsError.invalid_prefix(raw)
        return prefix

    @classmethod
    def from_env(cls) -> GlobalDefaults:
        """Build defaults from environment variables.

        Reads the following environment variables:

        - ``ALBCHECK_DEFAULT_BACKEND_PROTOCOL``: Optional protocol override
          naming ``HTTP``, ``HTTPS``, ``TCP`` or ``UDP`` in any case. The
          value is kept as written so it compares exactly against
          annotations.
        - ``ALBCHECK_ANNOTATION_PREFIX``: Optional annotation prefix override.

        Returns
        -------
        GlobalDefaults
            Defaults with values from the environment or built-in fallbacks.

        Raises
        ------
        GlobalDefaultsError
            If either variable holds an unusable value.

        """
        return cls(
            default_backend_protocol=cls._protocol_from_env(),
            annotation_prefix=cls._prefix_from_env(),
        )
