"""Validation errors raised while configuring builders and width ranges."""

from __future__ import annotations


class URLBuilderError(ValueError):
    """Base class for every input-validation failure of the URL engine."""


class InvalidDomainError(URLBuilderError):
    def __init__(self, domain: str, reason: str = "") -> None:
        self.domain = domain
        message = f"Invalid domain {domain!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NegativeWidthError(URLBuilderError):
    def __init__(self, width: int, name: str = "width") -> None:
        self.width = width
        super().__init__(f"`{name}` must be greater than, or equal to, zero (got {width})")


class NegativeWidthAtIndexError(NegativeWidthError):
    """Raised for the first negative entry of an explicit widths list."""

    def __init__(self, width: int, index: int) -> None:
        self.index = index
        super().__init__(width, name=f"widths[{index}]")


class ToleranceTooSmallError(URLBuilderError):
    def __init__(self, tolerance: float) -> None:
        self.tolerance = tolerance
        super().__init__(
            f"Tolerance must be greater than, or equal to, one percent (0.01) (got {tolerance})"
        )


class InvertedRangeError(URLBuilderError):
    def __init__(self, min_width: int, max_width: int) -> None:
        self.min_width = min_width
        self.max_width = max_width
        super().__init__(
            f"`min_width` ({min_width}) must be less than or equal to `max_width` ({max_width})"
        )


class WidthTooLargeError(URLBuilderError):
    def __init__(self, width: int, name: str = "width") -> None:
        self.width = width
        super().__init__(f"`{name}` exceeds the largest supported width")
