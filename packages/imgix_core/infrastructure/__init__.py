from packages.imgix_core.infrastructure.path_encoding import classify_path, encode_path
from packages.imgix_core.infrastructure.query_encoding import encode_query, normalize_params
from packages.imgix_core.infrastructure.signing import md5_signature, sign

__all__ = [
    "classify_path",
    "encode_path",
    "encode_query",
    "md5_signature",
    "normalize_params",
    "sign",
]
