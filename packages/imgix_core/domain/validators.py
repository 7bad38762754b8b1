"""Input validators for builder domains and srcset width ranges.

Each validator returns its (possibly normalized) input on success and raises a
``URLBuilderError`` subclass on failure; nothing is partially constructed.
"""

from __future__ import annotations

import re
import sys
import urllib.parse
from collections.abc import Sequence

from packages.imgix_core.domain.errors import (
    InvalidDomainError,
    InvertedRangeError,
    NegativeWidthAtIndexError,
    NegativeWidthError,
    ToleranceTooSmallError,
    WidthTooLargeError,
)

MIN_TOLERANCE = 0.01
# Widths grow in floating point; anything past the largest float cannot be stepped.
MAX_WIDTH_LIMIT = int(sys.float_info.max)

# "https://", "http://", or any other scheme the caller left in front of the host.
SCHEME_PREFIX_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
# Characters urlsplit tolerates but no hostname may contain.
INVALID_HOST_CHARS_RE = re.compile(r"[\s<>\"'{}|\\^`%/?#@]")


def validate_domain(domain: str) -> str:
    """Return the bare hostname of ``domain``, stripping any scheme, port or path.

    ``"https://demo.imgix.net/"`` and ``"demo.imgix.net"`` both yield
    ``"demo.imgix.net"``.

    Raises:
        InvalidDomainError: If no hostname can be parsed out of ``domain``.
    """
    raw = (domain or "").strip()
    if not raw:
        raise InvalidDomainError(domain, "domain cannot be empty")

    candidate = raw if SCHEME_PREFIX_RE.match(raw) else f"https://{raw}"
    try:
        hostname = urllib.parse.urlsplit(candidate).hostname
    except ValueError as exc:
        raise InvalidDomainError(domain, str(exc)) from exc

    if not hostname or INVALID_HOST_CHARS_RE.search(hostname):
        raise InvalidDomainError(domain, "no valid hostname found")
    return hostname


def validate_width(value: int, name: str = "width") -> int:
    if value < 0:
        raise NegativeWidthError(value, name=name)
    if value > MAX_WIDTH_LIMIT:
        raise WidthTooLargeError(value, name=name)
    return value


def validate_min_width(value: int) -> int:
    return validate_width(value, name="min_width")


def validate_max_width(value: int) -> int:
    return validate_width(value, name="max_width")


def validate_tolerance(value: float) -> float:
    """Tolerances below one percent would produce an unbounded number of widths."""
    if value < MIN_TOLERANCE:
        raise ToleranceTooSmallError(value)
    return value


def validate_range(min_width: int, max_width: int) -> tuple[int, int]:
    valid_min = validate_min_width(min_width)
    valid_max = validate_max_width(max_width)
    if valid_max < valid_min:
        raise InvertedRangeError(valid_min, valid_max)
    return (valid_min, valid_max)


def validate_range_with_tolerance(
    min_width: int, max_width: int, tolerance: float
) -> tuple[int, int, float]:
    valid_min, valid_max = validate_range(min_width, max_width)
    return (valid_min, valid_max, validate_tolerance(tolerance))


def validate_widths(widths: Sequence[int]) -> Sequence[int]:
    """Return ``widths`` unchanged, failing on the first out-of-range entry (left to right)."""
    for index, width in enumerate(widths):
        if width < 0:
            raise NegativeWidthAtIndexError(width, index)
        if width > MAX_WIDTH_LIMIT:
            raise WidthTooLargeError(width, name=f"widths[{index}]")
    return widths
