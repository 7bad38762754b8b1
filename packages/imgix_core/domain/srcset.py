"""Domain constants and value types for responsive image candidate sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from packages.imgix_core.domain.validators import validate_range_with_tolerance

# Descriptor kind of each candidate: "320w" (width) or "2x" (pixel ratio).
SrcsetMode = Literal["width", "dpr"]

MIN_WIDTH = 100
MAX_WIDTH = 8192
TOLERANCE = 0.08

# TargetWidths(100, 8192, 0.08), kept as a baseline so the default range is never recomputed.
DEFAULT_WIDTHS: tuple[int, ...] = (
    100, 116, 135, 156,
    181, 210, 244, 283,
    328, 380, 441, 512,
    594, 689, 799, 927,
    1075, 1247, 1446, 1678,
    1946, 2257, 2619, 3038,
    3524, 4087, 4741, 5500,
    6380, 7401, 8192,
)  # fmt: skip

# Higher density -> lower default quality, keeping bytes on the wire roughly constant.
DPR_QUALITIES: dict[int, int] = {1: 75, 2: 50, 3: 35, 4: 23, 5: 20}

CANDIDATE_SEPARATOR = ",\n"


@dataclass(frozen=True)
class WidthRange:
    """A validated ``[min_width, max_width]`` range with its growth tolerance."""

    min_width: int = MIN_WIDTH
    max_width: int = MAX_WIDTH
    tolerance: float = TOLERANCE

    def __post_init__(self) -> None:
        validate_range_with_tolerance(self.min_width, self.max_width, self.tolerance)

    @property
    def is_default(self) -> bool:
        return (
            self.min_width == MIN_WIDTH
            and self.max_width == MAX_WIDTH
            and self.tolerance == TOLERANCE
        )


@dataclass(frozen=True)
class Candidate:
    """One image candidate string of a srcset attribute."""

    url: str
    descriptor: str

    def render(self) -> str:
        return f"{self.url} {self.descriptor}"
