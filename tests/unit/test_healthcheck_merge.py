"""Unit tests for merging health-check configurations."""

from __future__ import annotations

import copy
import doctest

import msgspec.structs
import pytest

import albcheck.annotations.healthcheck as healthcheck_package
from albcheck.annotations.errors import InvalidArgumentError
from albcheck.annotations.healthcheck import (
    DEFAULT_INTERVAL_SECONDS,
    DEFAULT_PATH,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT_SECONDS,
    HealthCheckConfig,
    merge_health_check,
)
from albcheck.config import GlobalDefaults

EXPLICIT_SOURCE = HealthCheckConfig(
    path="PathA",
    port="PortA",
    protocol="udp",
    interval_seconds=42,
    timeout_seconds=43,
)

DEFAULT_SOURCE = HealthCheckConfig(
    path=DEFAULT_PATH,
    port=DEFAULT_PORT,
    protocol="tcp",
    interval_seconds=DEFAULT_INTERVAL_SECONDS,
    timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
)


def _target(protocol: str) -> HealthCheckConfig:
    return HealthCheckConfig(
        path="PathB",
        port="PortB",
        protocol=protocol,
        interval_seconds=52,
        timeout_seconds=53,
    )


@pytest.mark.parametrize(
    ("source", "target", "expected"),
    [
        pytest.param(EXPLICIT_SOURCE, _target("tcp"), EXPLICIT_SOURCE, id="explicit"),
        pytest.param(DEFAULT_SOURCE, _target("udp"), _target("udp"), id="defaults"),
    ],
)
def test_merge_scenarios(
    source: HealthCheckConfig,
    target: HealthCheckConfig,
    expected: HealthCheckConfig,
    defaults: GlobalDefaults,
) -> None:
    """Explicit sources survive whole; default sources yield to the target."""
    assert source.merge(target, defaults) == expected


class TestMergePerField:
    """Each field is resolved independently of the others."""

    @pytest.mark.parametrize(
        ("field", "default"),
        [
            ("path", DEFAULT_PATH),
            ("port", DEFAULT_PORT),
            ("interval_seconds", DEFAULT_INTERVAL_SECONDS),
            ("timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
        ],
    )
    def test_default_field_takes_target(
        self, field: str, default: object, defaults: GlobalDefaults
    ) -> None:
        """Only the field left at its constant default is taken from target."""
        source = msgspec.structs.replace(EXPLICIT_SOURCE, **{field: default})
        target = _target("tcp")

        merged = merge_health_check(source, target, defaults)

        for name in HealthCheckConfig.__struct_fields__:
            expected_from = target if name == field else source
            assert getattr(merged, name) == getattr(expected_from, name), (
                f"Field {name} resolved from the wrong side"
            )

    def test_protocol_compares_against_global_default(self) -> None:
        """Protocol defaults are dynamic, not a fixed constant."""
        source = HealthCheckConfig(protocol="HTTPS")
        target = HealthCheckConfig(protocol="TCP")

        https_default = GlobalDefaults(default_backend_protocol="HTTPS")
        http_default = GlobalDefaults(default_backend_protocol="HTTP")

        assert merge_health_check(source, target, https_default).protocol == "TCP"
        assert merge_health_check(source, target, http_default).protocol == "HTTPS"

    def test_protocol_equal_to_fixed_constants_is_explicit(
        self, defaults: GlobalDefaults
    ) -> None:
        """A protocol of HTTP is explicit when the global default is tcp."""
        source = msgspec.structs.replace(DEFAULT_SOURCE, protocol="HTTP")

        merged = merge_health_check(source, _target("udp"), defaults)

        assert merged.protocol == "HTTP"

    def test_unset_source_protocol_takes_target(self, defaults: GlobalDefaults) -> None:
        """A protocol left unset by the parser resolves from the target."""
        source = HealthCheckConfig(path="/a")

        assert merge_health_check(source, _target("udp"), defaults).protocol == "udp"

    def test_unset_target_fields_fall_back_to_defaults(
        self, defaults: GlobalDefaults
    ) -> None:
        """The result is fully populated even when both sides are unset."""
        merged = merge_health_check(
            HealthCheckConfig(), HealthCheckConfig(), defaults
        )

        assert merged == HealthCheckConfig(
            path=DEFAULT_PATH,
            port=DEFAULT_PORT,
            protocol="tcp",
            interval_seconds=DEFAULT_INTERVAL_SECONDS,
            timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        )
        assert merged.is_complete


class TestMergeProperties:
    """Structural properties of the merge."""

    @pytest.mark.parametrize(
        "source",
        [EXPLICIT_SOURCE, DEFAULT_SOURCE, HealthCheckConfig(port="8080")],
        ids=["explicit", "defaults", "partial"],
    )
    def test_merge_is_idempotent_against_same_target(
        self, source: HealthCheckConfig, defaults: GlobalDefaults
    ) -> None:
        """Re-merging a result against the same target changes nothing."""
        target = _target("udp")

        once = merge_health_check(source, target, defaults)
        twice = merge_health_check(once, target, defaults)

        assert twice == once

    def test_merge_does_not_mutate_inputs(self, defaults: GlobalDefaults) -> None:
        """Merge returns a new instance and leaves its inputs alone."""
        source = HealthCheckConfig(path="/a")
        target = _target("udp")
        source_before = copy.copy(source)
        target_before = copy.copy(target)

        merged = merge_health_check(source, target, defaults)

        assert merged is not source
        assert merged is not target
        assert source == source_before
        assert target == target_before

    def test_config_is_immutable(self) -> None:
        """Configurations cannot be modified after construction."""
        config = HealthCheckConfig(path="/a")

        with pytest.raises(AttributeError):
            config.path = "/b"  # type: ignore[misc]


class TestMergeContract:
    """Missing operands are rejected up front."""

    @pytest.mark.parametrize(
        ("missing", "args"),
        [
            ("source", (None, HealthCheckConfig(), GlobalDefaults())),
            ("target", (HealthCheckConfig(), None, GlobalDefaults())),
            ("defaults", (HealthCheckConfig(), HealthCheckConfig(), None)),
        ],
        ids=["source", "target", "defaults"],
    )
    def test_none_operand_raises(self, missing: str, args: tuple) -> None:
        """A None operand raises InvalidArgumentError naming it."""
        with pytest.raises(InvalidArgumentError, match=missing):
            merge_health_check(*args)

    def test_method_rejects_none_target(self, defaults: GlobalDefaults) -> None:
        """The merge method enforces the same contract."""
        with pytest.raises(ValueError, match="target"):
            HealthCheckConfig().merge(None, defaults)  # type: ignore[arg-type]



def test_package_usage_example_runs() -> None:
    """The usage example in the package docstring executes as written."""
    result = doctest.testmod(healthcheck_package, raise_on_error=False)

    assert result.attempted > 0, "Expected the package docstring to hold examples"
    assert result.failed == 0, "Package docstring example should run cleanly"
