"""Path encoding for asset paths and proxy (web folder / remote URL) paths.

A proxy path embeds a full remote URL (``/http://example.com/a.jpg``) and is
escaped as one opaque segment. An asset path is escaped segment by segment so
that its ``/`` separators survive.
"""

from __future__ import annotations

import urllib.parse
from typing import Literal

PathKind = Literal["asset", "proxy", "encoded_proxy"]

PROXY_PREFIXES = ("http://", "https://")
ENCODED_PROXY_PREFIXES = ("http%3A%2F%2F", "https%3A%2F%2F")

# Sub-delimiters left literal inside a path segment. "+" is excluded for assets
# so that it can never be read back as an encoded space.
ASSET_SEGMENT_SAFE = "$&:=@"
# ":" and "/" are excluded so the embedded URL stays a single segment.
PROXY_SAFE = "$&+=@"
# Lone surrogates (e.g. from JSON "\ud800") are escaped as their raw code units.
UNICODE_ERRORS = "surrogatepass"


def classify_path(path: str) -> PathKind:
    """Tell asset paths from raw or already percent-encoded proxy paths."""
    stripped = path[1:] if path.startswith("/") else path
    if stripped.startswith(PROXY_PREFIXES):
        return "proxy"
    if stripped.startswith(ENCODED_PROXY_PREFIXES):
        return "encoded_proxy"
    return "asset"


def encode_proxy_path(path: str) -> str:
    stripped = path[1:] if path.startswith("/") else path
    return "/" + urllib.parse.quote(stripped, safe=PROXY_SAFE, errors=UNICODE_ERRORS)


def encode_asset_path(path: str) -> str:
    stripped = path[1:] if path.startswith("/") else path
    segments = stripped.split("/")
    return "/" + "/".join(
        urllib.parse.quote(segment, safe=ASSET_SEGMENT_SAFE, errors=UNICODE_ERRORS)
        for segment in segments
    )


def encode_path(path: str) -> str:
    """Return the URL-ready form of ``path``, always with a leading ``/``.

    An empty path stays empty. Encoded proxy paths are returned as given so that
    callers may pass either the raw remote URL or their own encoding of it.
    """
    if not path:
        return path
    if not path.startswith("/"):
        path = "/" + path

    kind = classify_path(path)
    if kind == "encoded_proxy":
        return path
    if kind == "proxy":
        return encode_proxy_path(path)
    return encode_asset_path(path)
