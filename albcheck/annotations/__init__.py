"""Annotation parsing for the ALB ingress controller."""

from __future__ import annotations

from albcheck.annotations.errors import (
    AnnotationError,
    InvalidArgumentError,
    MalformedAnnotationError,
    MissingAnnotationError,
)
from albcheck.annotations.parser import (
    DEFAULT_ANNOTATION_PREFIX,
    annotation_key,
    get_int_annotation,
    get_string_annotation,
    is_default_value,
    merge_value,
)

__all__ = [
    "DEFAULT_ANNOTATION_PREFIX",
    "AnnotationError",
    "InvalidArgumentError",
    "MalformedAnnotationError",
    "MissingAnnotationError",
    "annotation_key",
    "get_int_annotation",
    "get_string_annotation",
    "is_default_value",
    "merge_value",
]
