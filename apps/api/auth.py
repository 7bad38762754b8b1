from __future__ import annotations

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from apps.api.config import Settings, get_settings

logger = logging.getLogger(__name__)


def api_key_required(settings: Settings) -> bool:
    """An explicit REQUIRE_API_KEY wins; otherwise only signing deployments need a key."""
    if settings.require_api_key is not None:
        return settings.require_api_key
    return bool(settings.imgix_token)


def verify_api_key(
    x_api_key: Annotated[str | None, Header(alias="X-API-Key")] = None,
    settings: Annotated[Settings | None, Depends(get_settings)] = None,
) -> None:
    if settings is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "SETTINGS_MISSING", "message": "Failed to load API settings."},
        )

    if not api_key_required(settings):
        return

    if not settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "code": "API_KEY_NOT_CONFIGURED",
                "message": "An API key is required to build URLs but API_KEY is not set.",
            },
        )

    if x_api_key is None or not secrets.compare_digest(x_api_key, settings.api_key):
        logger.info(
            "api_key_rejected",
            extra={"event": "auth", "signed": bool(settings.imgix_token)},
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "INVALID_API_KEY", "message": "Invalid X-API-Key header."},
        )
