"""Typed lookups over prefixed annotation mappings.

Ingress controllers namespace their annotations with a shared prefix, for
example ``alb.ingress.kubernetes.io/healthcheck-path``. The helpers here build
those keys, coerce raw string values into Python types, and provide the single
default-detection rule used when two configurations are merged.

Examples
--------
>>> annotations = {"alb.ingress.kubernetes.io/healthcheck-port": "8080"}
>>> get_string_annotation("healthcheck-port", annotations)
'8080'
>>> merge_value("/", "/healthz", "/")
'/healthz'

"""

from __future__ import annotations

import re
import typing as typ

from albcheck.annotations.errors import (
    MalformedAnnotationError,
    MissingAnnotationError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_ANNOTATION_PREFIX = "alb.ingress.kubernetes.io"

_NON_NEGATIVE_INT = re.compile(r"\+?[0-9]+")

T = typ.TypeVar("T")


def annotation_key(name: str, prefix: str = DEFAULT_ANNOTATION_PREFIX) -> str:
    """Return the fully prefixed annotation key for ``name``.

    >>> annotation_key("healthcheck-path")
    'alb.ingress.kubernetes.io/healthcheck-path'

    """
    return f"{prefix}/{name}"


def _raw_annotation(
    name: str,
    annotations: cabc.Mapping[str, str],
    prefix: str,
) -> tuple[str, str]:
    """Return ``(key, value)`` as written or raise when absent or blank."""
    key = annotation_key(name, prefix)
    value = annotations.get(key)
    if value is None or not value.strip():
        raise MissingAnnotationError(key)
    return key, value


def get_string_annotation(
    name: str,
    annotations: cabc.Mapping[str, str],
    prefix: str = DEFAULT_ANNOTATION_PREFIX,
) -> str | None:
    """Return the annotation value verbatim, or ``None`` when absent or blank."""
    try:
        _, value = _raw_annotation(name, annotations, prefix)
    except MissingAnnotationError:
        return None
    return value


def get_int_annotation(
    name: str,
    annotations: cabc.Mapping[str, str],
    prefix: str = DEFAULT_ANNOTATION_PREFIX,
) -> int | None:
    """Return the annotation as a non-negative integer.

    Parameters
    ----------
    name
        Annotation name without the prefix.
    annotations
        Annotation mapping to read from.
    prefix
        Annotation prefix shared by the controller's keys.

    Returns
    -------
    int | None
        Parsed value, or ``None`` when the annotation is absent or blank.

    Raises
    ------
    MalformedAnnotationError
        If the value is present but is not a non-negative integer.

    """
    try:
        key, value = _raw_annotation(name, annotations, prefix)
    except MissingAnnotationError:
        return None

    digits = value.strip()
    if not digits.isascii() or _NON_NEGATIVE_INT.fullmatch(digits) is None:
        raise MalformedAnnotationError.not_non_negative_int(key, value)
    return int(digits)


def is_default_value(value: T | None, default: T) -> bool:
    """Return whether ``value`` should be treated as never overridden.

    Defaulting is value based: a field holding its default is
    indistinguishable from one that was never set, and ``None`` means unset.
    """
    return value is None or value == default


def merge_value(source: T | None, target: T | None, default: T) -> T:
    """Pick the effective value for one field of a merge.

    Parameters
    ----------
    source
        Value from the more specific configuration.
    target
        Value from the fallback configuration.
    default
        Default used both to detect an unset ``source`` and to fill the
        result when ``target`` is unset as well.

    Returns
    -------
    T
        ``source`` when it was overridden, else ``target``, else ``default``.

    """
    if not is_default_value(source, default):
        return typ.cast("T", source)
    if target is None:
        return default
    return target


__all__ = [
    "DEFAULT_ANNOTATION_PREFIX",
    "annotation_key",
    "get_int_annotation",
    "get_string_annotation",
    "is_default_value",
    "merge_value",
]
