from __future__ import annotations

import logging
from typing import Annotated

from dotenv import load_dotenv

load_dotenv(override=False)

from fastapi import Depends, FastAPI, HTTPException, status

from apps.api.auth import verify_api_key
from apps.api.config import Settings, get_settings
from apps.api.schemas import SrcsetRequest, SrcsetResponse, URLRequest, URLResponse
from packages.imgix_core import URLBuilder, URLBuilderError
from packages.imgix_core.domain.srcset import CANDIDATE_SEPARATOR
from packages.imgix_core.logging_utils import setup_logging

app = FastAPI(title="imgix URL API", version="0.1.0")
logger = logging.getLogger(__name__)


def _unprocessable(exc: URLBuilderError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"code": type(exc).__name__, "message": str(exc)},
    )


def get_builder(settings: Annotated[Settings, Depends(get_settings)]) -> URLBuilder:
    if not settings.imgix_domain:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "DOMAIN_NOT_CONFIGURED", "message": "IMGIX_DOMAIN is not set."},
        )
    try:
        return URLBuilder(
            settings.imgix_domain,
            token=settings.imgix_token,
            use_https=settings.use_https,
            use_lib_param=settings.use_lib_param,
        )
    except URLBuilderError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "INVALID_DOMAIN", "message": str(exc)},
        ) from exc


@app.on_event("startup")
def on_startup() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("api_started", extra={"event": "startup"})
    logger.info(
        "signing_check",
        extra={
            "event": "startup",
            "domain": settings.imgix_domain or None,
            "signed": bool(settings.imgix_token),
        },
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/url", response_model=URLResponse, dependencies=[Depends(verify_api_key)])
def create_url(
    request: URLRequest,
    builder: Annotated[URLBuilder, Depends(get_builder)],
) -> URLResponse:
    return URLResponse(url=builder.create_url(request.path, request.params))


@app.post("/srcset", response_model=SrcsetResponse, dependencies=[Depends(verify_api_key)])
def create_srcset(
    request: SrcsetRequest,
    builder: Annotated[URLBuilder, Depends(get_builder)],
) -> SrcsetResponse:
    try:
        if request.widths is not None:
            srcset = builder.create_srcset_from_widths(
                request.path, request.params, request.widths
            )
        else:
            srcset = builder.create_srcset(
                request.path,
                request.params,
                min_width=request.min_width,
                max_width=request.max_width,
                tolerance=request.tolerance,
                variable_quality=request.variable_quality,
            )
    except URLBuilderError as exc:
        logger.info("srcset_rejected", extra={"event": "validation", "path": request.path})
        raise _unprocessable(exc) from exc
    return SrcsetResponse(srcset=srcset, candidates=srcset.split(CANDIDATE_SEPARATOR))
