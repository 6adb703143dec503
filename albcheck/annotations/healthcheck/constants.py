"""Defaults and annotation names for target-group health checks.

Constants
---------
DEFAULT_PATH : str
    Request path probed when no annotation overrides it.
DEFAULT_PORT : str
    ``traffic-port`` probes the port the target receives traffic on.
DEFAULT_INTERVAL_SECONDS : int
    Seconds between probes.
DEFAULT_TIMEOUT_SECONDS : int
    Seconds before a probe counts as failed.
DEFAULT_BACKEND_PROTOCOL : str
    Protocol assumed for backends when the deployment does not configure one.
SUPPORTED_PROTOCOLS : frozenset[str]
    Upper-cased protocol names accepted by the health-check annotation.

"""

from __future__ import annotations

DEFAULT_PATH: str = "/"
DEFAULT_PORT: str = "traffic-port"
DEFAULT_INTERVAL_SECONDS: int = 15
DEFAULT_TIMEOUT_SECONDS: int = 5

DEFAULT_BACKEND_PROTOCOL: str = "HTTP"
SUPPORTED_PROTOCOLS: frozenset[str] = frozenset({"HTTP", "HTTPS", "TCP", "UDP"})

# Annotation names, without the controller prefix
PATH_ANNOTATION = "healthcheck-path"
PORT_ANNOTATION = "healthcheck-port"
PROTOCOL_ANNOTATION = "healthcheck-protocol"
INTERVAL_SECONDS_ANNOTATION = "healthcheck-interval-seconds"
TIMEOUT_SECONDS_ANNOTATION = "healthcheck-timeout-seconds"


def is_supported_protocol(protocol: str) -> bool:
    """Return whether ``protocol`` names a supported protocol, ignoring case."""
    return protocol.strip().upper() in SUPPORTED_PROTOCOLS
