"""YAML loader for Ingress and Service manifests."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import msgspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from albcheck.ingress.models import Ingress, Service

YAML_VERSION = (1, 2)

_KINDS: dict[str, type[Ingress] | type[Service]] = {
    "Ingress": Ingress,
    "Service": Service,
}


class ManifestError(ValueError):
    """Raised when a manifest file cannot be parsed into known objects."""

    def __init__(self, issues: list[str]) -> None:
        """Capture manifest issues whilst preserving the aggregated message."""
        super().__init__("\n".join(issues))
        self.issues = issues


@dataclasses.dataclass(slots=True)
class ManifestBundle:
    """Ingresses and Services read from one manifest file."""

    ingresses: list[Ingress] = dataclasses.field(default_factory=list)
    services: list[Service] = dataclasses.field(default_factory=list)


def load_manifests(path: Path | str) -> ManifestBundle:
    """Parse a multi-document YAML file of Kubernetes manifests.

    Documents whose ``kind`` is neither ``Ingress`` nor ``Service`` are
    skipped. Every schema problem is collected before raising.

    Raises
    ------
    ManifestError
        If the file cannot be read or parsed, or a document does not match
        the shape of its kind.

    """
    yaml = _yaml()
    path_obj = Path(path)

    try:
        documents = list(yaml.load_all(path_obj.read_text(encoding="utf-8")))
    except (OSError, YAMLError) as exc:
        raise ManifestError([f"failed to parse YAML: {exc}"]) from exc

    bundle = ManifestBundle()
    issues: list[str] = []
    for index, document in enumerate(documents):
        if document is None:
            continue
        if not isinstance(document, dict):
            issues.append(f"document {index}: expected a mapping")
            continue
        kind = document.get("kind")
        model = _KINDS.get(kind) if isinstance(kind, str) else None
        if model is None:
            continue
        try:
            obj = msgspec.convert(document, type=model)
        except msgspec.ValidationError as exc:
            issues.append(f"document {index} ({kind}): {exc}")
            continue
        if isinstance(obj, Ingress):
            bundle.ingresses.append(obj)
        else:
            bundle.services.append(obj)

    if issues:
        raise ManifestError(issues)
    return bundle


def _yaml() -> YAML:
    yaml = YAML(typ="safe")
    yaml.version = YAML_VERSION
    yaml.allow_duplicate_keys = False
    return yaml
