"""Errors raised while reading and merging ingress annotations."""

from __future__ import annotations


class AnnotationError(Exception):
    """Base class for annotation parsing and merging errors.

    Catch this to handle every failure raised by ``albcheck.annotations``.
    """


class MissingAnnotationError(AnnotationError, LookupError):
    """Raised when a recognised annotation is absent or blank."""

    def __init__(self, key: str) -> None:
        """Initialise with the fully prefixed annotation key."""
        self.key = key
        super().__init__(f"Annotation not present: {key}")


class MalformedAnnotationError(AnnotationError, ValueError):
    """Raised when an annotation value cannot be coerced to its type.

    Attributes
    ----------
    key
        Fully prefixed annotation key.
    value
        Raw annotation value as found on the resource.
    expected
        Human-readable description of the accepted values.

    """

    def __init__(self, key: str, value: str, expected: str) -> None:
        """Initialise with the offending key, value and expected shape."""
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(
            f"Malformed annotation {key}={value!r}: expected {expected}"
        )

    @classmethod
    def not_non_negative_int(cls, key: str, value: str) -> MalformedAnnotationError:
        """Create error for values that are not non-negative integers.

        Parameters
        ----------
        key
            Fully prefixed annotation key.
        value
            Raw annotation value.

        Returns
        -------
        MalformedAnnotationError
            Error describing the integer constraint.

        """
        return cls(key, value, "a non-negative integer")


class InvalidArgumentError(AnnotationError, ValueError):
    """Raised when a merge is attempted with a missing operand."""

    @classmethod
    def missing(cls, argument: str) -> InvalidArgumentError:
        """Create error naming the missing merge operand.

        Parameters
        ----------
        argument
            Name of the parameter that was ``None``.

        Returns
        -------
        InvalidArgumentError
            Error identifying the contract violation.

        """
        return cls(f"merge requires a {argument}, got None")
