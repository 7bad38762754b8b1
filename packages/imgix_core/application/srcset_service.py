"""Responsive candidate-set generation on top of a ``URLBuilder``."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence

from packages.imgix_core.domain.srcset import (
    CANDIDATE_SEPARATOR,
    DPR_QUALITIES,
    Candidate,
    SrcsetMode,
)

logger = logging.getLogger(__name__)

# (path, normalized params) -> URL; bound to URLBuilder.create_url_from_values.
UrlFactory = Callable[[str, Mapping[str, Sequence[str]]], str]


def _has_value(params: Mapping[str, Sequence[str]], key: str) -> bool:
    values = params.get(key)
    return bool(values) and values[0] != ""


def select_mode(params: Mapping[str, Sequence[str]]) -> SrcsetMode:
    """Fixed-size images (``w``, or ``h`` with ``ar``) vary by pixel density; others by width."""
    if _has_value(params, "w"):
        return "dpr"
    if _has_value(params, "h") and _has_value(params, "ar"):
        return "dpr"
    return "width"


def width_candidates(
    make_url: UrlFactory,
    path: str,
    params: Mapping[str, Sequence[str]],
    widths: Iterable[int],
) -> list[Candidate]:
    candidates: list[Candidate] = []
    for width in widths:
        entry_params = {key: list(values) for key, values in params.items()}
        entry_params["w"] = [str(width)]
        candidates.append(Candidate(url=make_url(path, entry_params), descriptor=f"{width}w"))
    return candidates


def dpr_candidates(
    make_url: UrlFactory,
    path: str,
    params: Mapping[str, Sequence[str]],
    variable_quality: bool = True,
) -> list[Candidate]:
    """One candidate per ratio 1x..5x.

    An explicit ``q`` always wins. Without one, each ratio gets its ladder
    quality unless ``variable_quality`` is off, in which case ``q`` is omitted.
    """
    explicit_quality = _has_value(params, "q")
    candidates: list[Candidate] = []
    for ratio, quality in sorted(DPR_QUALITIES.items()):
        entry_params = {key: list(values) for key, values in params.items()}
        entry_params["dpr"] = [str(ratio)]
        if variable_quality and not explicit_quality:
            entry_params["q"] = [str(quality)]
        candidates.append(Candidate(url=make_url(path, entry_params), descriptor=f"{ratio}x"))
    return candidates


def join_candidates(candidates: Iterable[Candidate]) -> str:
    return CANDIDATE_SEPARATOR.join(candidate.render() for candidate in candidates)
