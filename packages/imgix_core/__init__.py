"""Deterministic image CDN URL construction: encoding, signing and srcset generation."""

from packages.imgix_core.application.url_builder import URLBuilder, build_url
from packages.imgix_core.domain import (
    DEFAULT_WIDTHS,
    URLBuilderError,
    WidthRange,
    target_widths,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_WIDTHS",
    "URLBuilder",
    "URLBuilderError",
    "WidthRange",
    "build_url",
    "target_widths",
]
