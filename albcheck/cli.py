"""Show the effective target-group health checks for ingress manifests."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

import msgspec

from albcheck.annotations.errors import AnnotationError
from albcheck.annotations.healthcheck.parser import HealthCheckParser
from albcheck.config import GlobalDefaults, GlobalDefaultsError
from albcheck.ingress.resolver import ResolverError, StaticResolver
from albcheck.logging import configure_logging, get_logger, log_info, log_warning
from albcheck.manifests import ManifestError, load_manifests
from albcheck.reconcile import PathHealthCheck, resolve_path_health_checks

logger = get_logger(__name__)


def _format_row(namespace: str, name: str, entry: PathHealthCheck) -> str:
    check = entry.health_check
    return (
        f"{namespace}/{name} {entry.host or '*'}{entry.path} -> "
        f"{entry.service_name}:{entry.service_port} "
        f"protocol={check.protocol} port={check.port} path={check.path} "
        f"interval={check.interval_seconds}s timeout={check.timeout_seconds}s"
    )


def main(argv: list[str] | None = None) -> int:
    """Resolve health checks for every ingress path in a manifest file.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when the manifests, annotations or
        environment configuration are invalid.

    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "manifest", type=Path, help="YAML file with Ingress and Service objects"
    )
    parser.add_argument(
        "--json-out",
        type=Path,
        default=None,
        help="Optional path to write the resolved health checks as JSON",
    )
    args = parser.parse_args(argv)

    raw_level = os.environ.get("ALBCHECK_LOG_LEVEL", "INFO")
    level, invalid_level = configure_logging(raw_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid ALBCHECK_LOG_LEVEL %r, falling back to %s",
            raw_level,
            level,
        )

    manifest_path: Path = args.manifest
    try:
        defaults = GlobalDefaults.from_env()
        bundle = load_manifests(manifest_path)
    except GlobalDefaultsError as exc:
        print(f"Invalid configuration: {exc}")
        return 1
    except ManifestError as exc:
        print(f"Manifest loading failed for {manifest_path}:")
        for issue in exc.issues:
            print(f"  - {issue}")
        return 1

    resolver = StaticResolver(bundle.services)
    hc_parser = HealthCheckParser(resolver, prefix=defaults.annotation_prefix)
    log_info(
        logger,
        "Resolving %d ingresses against %d services",
        len(bundle.ingresses),
        len(resolver),
    )

    resolved: dict[str, list[PathHealthCheck]] = {}
    for ingress in bundle.ingresses:
        try:
            entries = resolve_path_health_checks(ingress, hc_parser, resolver, defaults)
        except (AnnotationError, ResolverError) as exc:
            print(f"Ingress {ingress.namespace}/{ingress.name}: {exc}")
            return 1
        resolved[f"{ingress.namespace}/{ingress.name}"] = entries
        for entry in entries:
            print(_format_row(ingress.namespace, ingress.name, entry))

    if args.json_out:
        args.json_out.write_bytes(msgspec.json.encode(resolved))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
