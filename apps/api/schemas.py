"""Request/response models of the URL API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from packages.imgix_core.domain.srcset import MAX_WIDTH, MIN_WIDTH, TOLERANCE

ParamValues = str | int | float | list[str | int | float]


class URLRequest(BaseModel):
    path: str
    params: dict[str, ParamValues] = Field(default_factory=dict)


class URLResponse(BaseModel):
    url: str


class SrcsetRequest(BaseModel):
    """Srcset request. ``widths`` takes precedence over the width range."""

    path: str
    params: dict[str, ParamValues] = Field(default_factory=dict)
    widths: list[int] | None = None
    min_width: int = MIN_WIDTH
    max_width: int = MAX_WIDTH
    tolerance: float = TOLERANCE
    variable_quality: bool = True

    @field_validator("widths")
    @classmethod
    def widths_not_empty(cls, v: list[int] | None) -> list[int] | None:
        if v is not None and len(v) == 0:
            raise ValueError("widths must contain at least one value when provided")
        return v


class SrcsetResponse(BaseModel):
    srcset: str
    candidates: list[str]
