from __future__ import annotations

import os
from dataclasses import dataclass


def _to_bool(value: str, default: bool) -> bool:
    if not value:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _to_optional_bool(value: str | None) -> bool | None:
    if value is None or not value.strip():
        return None
    return _to_bool(value, False)


@dataclass(frozen=True)
class Settings:
    imgix_domain: str
    imgix_token: str
    use_https: bool
    use_lib_param: bool
    api_key: str
    # None: required only when URLs are signed.
    require_api_key: bool | None
    log_level: str


def get_settings() -> Settings:
    return Settings(
        imgix_domain=os.getenv("IMGIX_DOMAIN", ""),
        imgix_token=os.getenv("IMGIX_TOKEN", ""),
        use_https=_to_bool(os.getenv("IMGIX_USE_HTTPS", "true"), True),
        use_lib_param=_to_bool(os.getenv("IMGIX_USE_LIB_PARAM", "true"), True),
        api_key=os.getenv("API_KEY", ""),
        require_api_key=_to_optional_bool(os.getenv("REQUIRE_API_KEY")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
