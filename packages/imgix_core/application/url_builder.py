"""URL assembly: scheme + host + encoded path + canonical query + signature."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from packages.imgix_core.application.srcset_service import (
    dpr_candidates,
    join_candidates,
    select_mode,
    width_candidates,
)
from packages.imgix_core.domain.srcset import MAX_WIDTH, MIN_WIDTH, TOLERANCE, WidthRange
from packages.imgix_core.domain.validators import validate_domain, validate_widths
from packages.imgix_core.domain.widths import widths_for_range
from packages.imgix_core.infrastructure.path_encoding import encode_path
from packages.imgix_core.infrastructure.query_encoding import (
    ParamsInput,
    encode_query,
    normalize_params,
)
from packages.imgix_core.infrastructure.signing import sign

logger = logging.getLogger(__name__)

IXLIB_PARAM = "ixlib"
IXLIB_VERSION = "python-v0.1.0"


def build_url(
    scheme: str,
    host: str,
    path: str,
    params: Mapping[str, Sequence[str]],
    token: str = "",
) -> str:
    """Assemble ``scheme://host/path[?query][&s=signature]``.

    The signature covers the encoded path and query and is always appended last.
    """
    encoded_path = encode_path(path)
    query = encode_query(params)
    signature = sign(token, encoded_path, query)

    url = f"{scheme}://{host}{encoded_path}"
    query_parts = [part for part in (query, signature) if part]
    if not query_parts:
        return url
    return f"{url}?{'&'.join(query_parts)}"


class URLBuilder:
    """Builds (optionally signed) image URLs and srcset attributes for one source domain.

    Configure once, then share for reads: the setters mutate the builder in
    place and are not synchronized against concurrent ``create_*`` calls.
    """

    def __init__(
        self,
        domain: str,
        token: str = "",
        use_https: bool = True,
        use_lib_param: bool = True,
    ) -> None:
        self._domain = validate_domain(domain)
        self._token = token
        self._use_https = use_https
        self._use_lib_param = use_lib_param
        logger.debug(
            "url_builder_configured",
            extra={
                "event": "configure",
                "domain": self._domain,
                "signed": bool(token),
            },
        )

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def use_https(self) -> bool:
        return self._use_https

    @property
    def use_lib_param(self) -> bool:
        return self._use_lib_param

    @property
    def scheme(self) -> str:
        return "https" if self._use_https else "http"

    def set_token(self, token: str) -> None:
        self._token = token

    def set_use_https(self, use_https: bool) -> None:
        self._use_https = use_https

    def set_use_lib_param(self, use_lib_param: bool) -> None:
        self._use_lib_param = use_lib_param

    def create_url(self, path: str, params: ParamsInput | None = None) -> str:
        """Return the full URL for ``path`` with ``params``, signed when a token is set."""
        return self.create_url_from_values(path, normalize_params(params))

    def create_url_from_values(self, path: str, params: Mapping[str, Sequence[str]]) -> str:
        return build_url(
            self.scheme, self._domain, path, self._with_lib_param(params), self._token
        )

    def create_srcset(
        self,
        path: str,
        params: ParamsInput | None = None,
        *,
        min_width: int = MIN_WIDTH,
        max_width: int = MAX_WIDTH,
        tolerance: float = TOLERANCE,
        variable_quality: bool = True,
    ) -> str:
        """Return a srcset attribute value for ``path``.

        If ``params`` pin the rendered size (a ``w``, or both ``h`` and ``ar``)
        the candidates are pixel-density variants 1x..5x; otherwise they are
        width variants over ``[min_width, max_width]``.

        Raises:
            URLBuilderError: If the width range or tolerance is invalid.
        """
        values = normalize_params(params)
        mode = select_mode(values)
        logger.debug("srcset_mode_selected", extra={"event": "srcset", "mode": mode})
        if mode == "dpr":
            candidates = dpr_candidates(
                self.create_url_from_values, path, values, variable_quality
            )
        else:
            widths = widths_for_range(WidthRange(min_width, max_width, tolerance))
            candidates = width_candidates(self.create_url_from_values, path, values, widths)
        return join_candidates(candidates)

    def create_srcset_from_range(
        self, path: str, params: ParamsInput | None, width_range: WidthRange
    ) -> str:
        values = normalize_params(params)
        widths = widths_for_range(width_range)
        return join_candidates(
            width_candidates(self.create_url_from_values, path, values, widths)
        )

    def create_srcset_from_widths(
        self, path: str, params: ParamsInput | None, widths: Sequence[int]
    ) -> str:
        """Width-described srcset over exactly ``widths``, in the order given."""
        valid_widths = validate_widths(widths)
        values = normalize_params(params)
        return join_candidates(
            width_candidates(self.create_url_from_values, path, values, valid_widths)
        )

    def _with_lib_param(
        self, params: Mapping[str, Sequence[str]]
    ) -> Mapping[str, Sequence[str]]:
        if not self._use_lib_param:
            return params
        return {**params, IXLIB_PARAM: [IXLIB_VERSION]}
