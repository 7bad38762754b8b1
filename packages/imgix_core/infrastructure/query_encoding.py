"""Canonical query string serialization.

Keys are sorted so that the same logical parameters always serialize to the
same bytes, which is what keeps signatures stable.
"""

from __future__ import annotations

import base64
import urllib.parse
from collections.abc import Iterable, Mapping, Sequence

ParamValue = str | int | float
ParamsInput = Mapping[str, ParamValue | Sequence[ParamValue] | None]

BASE64_SUFFIX = "64"
MULTI_VALUE_SEPARATOR = ","
UNICODE_ERRORS = "surrogatepass"


def normalize_params(params: ParamsInput | None) -> dict[str, list[str]]:
    """Copy ``params`` into a fresh ``{key: [values]}`` multimap of strings."""
    normalized: dict[str, list[str]] = {}
    if not params:
        return normalized
    for key, value in params.items():
        if value is None:
            normalized[key] = []
        elif isinstance(value, (str, int, float)):
            normalized[key] = [str(value)]
        else:
            normalized[key] = [str(item) for item in value]
    return normalized


def is_base64_key(key: str) -> bool:
    return key.endswith(BASE64_SUFFIX)


def base64url_encode(value: str) -> str:
    """Unpadded base64url (RFC 4648 §5); ``&`` already delimits each value."""
    encoded = base64.urlsafe_b64encode(value.encode("utf-8", UNICODE_ERRORS))
    return encoded.rstrip(b"=").decode("ascii")


def escape_query_component(value: str) -> str:
    # Literal "+" becomes "%2B" and a space becomes "+", as the CDN parses it.
    return urllib.parse.quote_plus(value, safe="", errors=UNICODE_ERRORS)


def encode_query_param(key: str, values: Iterable[str]) -> str:
    value = MULTI_VALUE_SEPARATOR.join(values)
    if is_base64_key(key):
        encoded_value = base64url_encode(value)
    else:
        encoded_value = escape_query_component(value)
    return f"{escape_query_component(key)}={encoded_value}"


def encode_query(params: Mapping[str, Sequence[str]]) -> str:
    """Serialize a normalized multimap; multi-valued keys become one comma-joined value."""
    return "&".join(encode_query_param(key, params[key]) for key in sorted(params))
