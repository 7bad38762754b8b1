"""Shared-secret URL signatures verified by the CDN."""

from __future__ import annotations

import hashlib

SIGNATURE_PARAM = "s"


def md5_signature(token: str, path: str, query: str) -> str:
    """Hex MD5 of ``{token}{path}[?{query}]``.

    MD5 is the digest the CDN expects; it is an integrity check over a shared
    secret, not a collision-resistant commitment.
    """
    delimiter = "?" if query else ""
    base = f"{token}{path}{delimiter}{query}"
    payload = base.encode("utf-8", "surrogatepass")
    return hashlib.md5(payload, usedforsecurity=False).hexdigest()


def sign(token: str, path: str, query: str) -> str:
    """Return the ``s=<digest>`` parameter, or ``""`` when there is no token to sign with."""
    if not token:
        return ""
    return f"{SIGNATURE_PARAM}={md5_signature(token, path, query)}"
