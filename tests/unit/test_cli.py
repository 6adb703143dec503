"""CLI behaviour tests."""
# ruff: noqa: D103

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path  # noqa: TC003

import msgspec

MANIFESTS = """
kind: Ingress
metadata:
  name: foo
  annotations:
    alb.ingress.kubernetes.io/healthcheck-interval-seconds: "20"
spec:
  rules:
    - host: foo.bar.com
      http:
        paths:
          - path: /api
            backend:
              serviceName: api
              servicePort: 80
---
kind: Service
metadata:
  name: api
  annotations:
    alb.ingress.kubernetes.io/healthcheck-path: /ping
"""


def _run_cli(
    args: list[str], cwd: Path, env: dict[str, str] | None = None
) -> subprocess.CompletedProcess[str]:
    full_env = {
        key: value
        for key, value in os.environ.items()
        if not key.startswith("ALBCHECK_")
    }
    full_env.update(env or {})
    return subprocess.run(  # noqa: S603 - fixed argv
        [sys.executable, "-m", "albcheck.cli", *args],
        cwd=cwd,
        text=True,
        capture_output=True,
        env=full_env,
    )


def test_cli_prints_and_writes_resolved_health_checks(tmp_path: Path) -> None:
    manifest = tmp_path / "ingress.yaml"
    manifest.write_text(MANIFESTS, encoding="utf-8")
    json_out = tmp_path / "health.json"

    result = _run_cli([str(manifest), "--json-out", str(json_out)], cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    assert "default/foo foo.bar.com/api -> api:80" in result.stdout
    assert "protocol=HTTP" in result.stdout
    assert "path=/ping" in result.stdout
    assert "interval=20s" in result.stdout

    decoded = msgspec.json.decode(json_out.read_bytes())
    health_check = decoded["default/foo"][0]["health_check"]
    assert health_check == {
        "path": "/ping",
        "port": "traffic-port",
        "protocol": "HTTP",
        "interval_seconds": 20,
        "timeout_seconds": 5,
    }


def test_cli_uses_protocol_from_environment(tmp_path: Path) -> None:
    manifest = tmp_path / "ingress.yaml"
    manifest.write_text(MANIFESTS, encoding="utf-8")

    result = _run_cli(
        [str(manifest)],
        cwd=tmp_path,
        env={"ALBCHECK_DEFAULT_BACKEND_PROTOCOL": "https"},
    )

    assert result.returncode == 0, result.stderr
    assert "protocol=https" in result.stdout


def test_cli_reports_malformed_annotations(tmp_path: Path) -> None:
    manifest = tmp_path / "ingress.yaml"
    manifest.write_text(
        MANIFESTS.replace('"20"', '"abc"'),
        encoding="utf-8",
    )

    result = _run_cli([str(manifest)], cwd=tmp_path)

    assert result.returncode == 1
    assert "Ingress default/foo" in result.stdout
    assert "healthcheck-interval-seconds" in result.stdout


def test_cli_reports_manifest_errors(tmp_path: Path) -> None:
    manifest = tmp_path / "broken.yaml"
    manifest.write_text("kind: [unclosed\n", encoding="utf-8")

    result = _run_cli([str(manifest)], cwd=tmp_path)

    assert result.returncode == 1
    assert "Manifest loading failed" in result.stdout


def test_cli_reports_invalid_configuration(tmp_path: Path) -> None:
    manifest = tmp_path / "ingress.yaml"
    manifest.write_text(MANIFESTS, encoding="utf-8")

    result = _run_cli(
        [str(manifest)],
        cwd=tmp_path,
        env={"ALBCHECK_DEFAULT_BACKEND_PROTOCOL": "gopher"},
    )

    assert result.returncode == 1
    assert "Invalid configuration" in result.stdout
