from packages.imgix_core.domain.errors import (
    InvalidDomainError,
    InvertedRangeError,
    NegativeWidthAtIndexError,
    NegativeWidthError,
    ToleranceTooSmallError,
    URLBuilderError,
    WidthTooLargeError,
)
from packages.imgix_core.domain.srcset import (
    DEFAULT_WIDTHS,
    DPR_QUALITIES,
    Candidate,
    WidthRange,
)
from packages.imgix_core.domain.widths import target_widths

__all__ = [
    "Candidate",
    "DEFAULT_WIDTHS",
    "DPR_QUALITIES",
    "InvalidDomainError",
    "InvertedRangeError",
    "NegativeWidthAtIndexError",
    "NegativeWidthError",
    "ToleranceTooSmallError",
    "URLBuilderError",
    "WidthRange",
    "WidthTooLargeError",
    "target_widths",
]
