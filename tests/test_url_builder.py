from __future__ import annotations

import hashlib

import pytest

from packages.imgix_core.application.url_builder import (
    IXLIB_VERSION,
    URLBuilder,
    build_url,
)
from packages.imgix_core.domain.errors import InvalidDomainError


def _builder(domain: str = "test.imgix.net", token: str = "") -> URLBuilder:
    return URLBuilder(domain, token=token, use_lib_param=False)


def test_default_builder() -> None:
    builder = URLBuilder("test.imgix.net")
    assert builder.use_https is True
    assert builder.scheme == "https"
    assert builder.use_lib_param is True
    assert builder.domain == "test.imgix.net"


def test_domain_scheme_is_stripped() -> None:
    assert URLBuilder("https://test.imgix.net/").domain == "test.imgix.net"


def test_invalid_domain_fails_construction() -> None:
    with pytest.raises(InvalidDomainError):
        URLBuilder("https://")


def test_basic_path_no_params() -> None:
    assert _builder().create_url("image.png") == "https://test.imgix.net/image.png"


def test_basic_path_with_params() -> None:
    assert _builder().create_url("image.png", {"w": "100"}) == (
        "https://test.imgix.net/image.png?w=100"
    )


def test_numeric_params() -> None:
    assert _builder().create_url("image.png", {"w": 320, "dpr": 2}) == (
        "https://test.imgix.net/image.png?dpr=2&w=320"
    )


def test_empty_path_with_repeated_values() -> None:
    assert _builder().create_url("", {"auto": ["format", "compress"]}) == (
        "https://test.imgix.net?auto=format%2Ccompress"
    )


def test_readme_usage() -> None:
    builder = URLBuilder("demo.imgix.net", use_lib_param=False)
    assert builder.create_url("path/to/image.jpg") == "https://demo.imgix.net/path/to/image.jpg"
    assert builder.create_url(
        "path/to/image.jpg", {"w": "320", "auto": ["format", "compress"]}
    ) == "https://demo.imgix.net/path/to/image.jpg?auto=format%2Ccompress&w=320"


def test_param_values_are_escaped() -> None:
    url = _builder().create_url(
        "image.png", {"hello_world": '/foo"> <script>alert("hacked")</script><'}
    )
    assert url == (
        "https://test.imgix.net/image.png?hello_world="
        "%2Ffoo%22%3E+%3Cscript%3Ealert%28%22hacked%22%29%3C%2Fscript%3E%3C"
    )


def test_paths_are_plus_safe() -> None:
    assert _builder().create_url("E+P-003_D.jpeg") == "https://test.imgix.net/E%2BP-003_D.jpeg"


def test_base64_unicode_param() -> None:
    url = _builder().create_url("~text", {"txt64": "I cannøt belîév∑ it wor\uf8ffs! 😱"})
    assert url == (
        "https://test.imgix.net/~text?txt64=SSBjYW5uw7h0IGJlbMOuw6l24oiRIGl0IHdvcu-jv3MhIPCfmLE"
    )


def test_base64_problematic_param() -> None:
    url = _builder().create_url("image.png", {"mark64": "https://assets.imgix.net/logo.png"})
    assert url == (
        "https://test.imgix.net/image.png?mark64=aHR0cHM6Ly9hc3NldHMuaW1naXgubmV0L2xvZ28ucG5n"
    )


def test_signed_proxy_path() -> None:
    builder = _builder("my-social-network.imgix.net", token="FOO123bar")
    expected = (
        "https://my-social-network.imgix.net/http%3A%2F%2Favatars.com%2Fjohn-smith.png"
        "?s=493a52f008c91416351f8b33d4883135"
    )
    assert builder.create_url("/http%3A%2F%2Favatars.com%2Fjohn-smith.png") == expected
    assert builder.create_url("http://avatars.com/john-smith.png") == expected


def test_signed_url_with_params() -> None:
    builder = _builder("my-social-network.imgix.net", token="FOO123bar")
    expected = (
        "https://my-social-network.imgix.net/users/1.png"
        "?h=300&w=400&s=1a4e48641614d1109c6a7af51be23d18"
    )
    assert builder.create_url("/users/1.png", {"h": "300", "w": "400"}) == expected
    assert builder.create_url("users/1.png", {"w": 400, "h": 300}) == expected


def test_signed_proxy_path_with_params() -> None:
    builder = _builder("my-social-network.imgix.net", token="FOO123bar")
    url = builder.create_url(
        "/http%3A%2F%2Favatars.com%2Fjohn-smith.png", {"w": "400", "h": "300"}
    )
    assert url == (
        "https://my-social-network.imgix.net/http%3A%2F%2Favatars.com%2Fjohn-smith.png"
        "?h=300&w=400&s=a201fe1a3caef4944dcb40f6ce99e746"
    )


def test_signed_url_without_params() -> None:
    builder = URLBuilder("demo.imgix.net", token="MYT0KEN", use_lib_param=False)
    assert builder.create_url("path/to/image.jpg") == (
        "https://demo.imgix.net/path/to/image.jpg?s=c8bd1807209f7f1d96dd7123f92febb4"
    )


def test_signing_is_repeatable() -> None:
    builder = _builder("my-social-network.imgix.net", token="FOO123bar")
    urls = {builder.create_url("/users/1.png", {"w": 400, "h": 300}) for _ in range(3)}
    assert len(urls) == 1


def test_no_token_never_signs() -> None:
    builder = _builder()
    assert "s=" not in builder.create_url("/users/1.png", {"w": 400, "h": 300})
    assert "s=" not in builder.create_url("/users/1.png")


def test_setters() -> None:
    builder = _builder("demo.imgix.net")
    builder.set_use_https(False)
    assert builder.scheme == "http"
    assert builder.create_url("a.png") == "http://demo.imgix.net/a.png"

    builder.set_token("MYT0KEN")
    builder.set_use_https(True)
    assert builder.create_url("path/to/image.jpg").endswith(
        "?s=c8bd1807209f7f1d96dd7123f92febb4"
    )

    builder.set_use_lib_param(True)
    assert builder.use_lib_param is True


def test_lib_param_is_sorted_into_query() -> None:
    builder = URLBuilder("test.imgix.net")
    assert builder.create_url("image.png") == (
        f"https://test.imgix.net/image.png?ixlib={IXLIB_VERSION}"
    )
    assert builder.create_url("image.png", {"w": 100}) == (
        f"https://test.imgix.net/image.png?ixlib={IXLIB_VERSION}&w=100"
    )


def test_lib_param_is_signed_and_signature_is_last() -> None:
    builder = URLBuilder("test.imgix.net", token="FOO123bar")
    url = builder.create_url("image.png", {"w": 100})
    query = url.split("?", 1)[1]
    parts = query.split("&")
    assert parts[:-1] == [f"ixlib={IXLIB_VERSION}", "w=100"]
    assert parts[-1].startswith("s=")


def test_caller_params_are_not_mutated() -> None:
    params = {"w": ["100"]}
    URLBuilder("test.imgix.net").create_url("image.png", params)
    assert params == {"w": ["100"]}


@pytest.mark.parametrize(
    ("params", "token", "expected"),
    [
        ({}, "", "https://h.net/a.png"),
        ({"w": ["1"]}, "", "https://h.net/a.png?w=1"),
        ({}, "t", "https://h.net/a.png?s=%s"),
        ({"w": ["1"]}, "t", "https://h.net/a.png?w=1&s=%s"),
    ],
)
def test_build_url_query_and_signature_combinations(
    params: dict[str, list[str]], token: str, expected: str
) -> None:
    url = build_url("https", "h.net", "a.png", params, token)
    if token:
        base = "t/a.png?w=1" if params else "t/a.png"
        expected = expected % hashlib.md5(base.encode()).hexdigest()
    assert url == expected
    assert not url.endswith(("?", "&"))
