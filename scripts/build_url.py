#!/usr/bin/env python3
"""Build an image URL or srcset attribute from the command line (no API).

Run from repo root:
  uv run python scripts/build_url.py demo.imgix.net path/to/image.jpg -p w=320 -p auto=format,compress
  uv run python scripts/build_url.py demo.imgix.net image.png --srcset --min-width 100 --max-width 380

The signing token is read from IMGIX_TOKEN unless --token is given.
"""

from __future__ import annotations

import argparse
import os
import sys

# Run from repo root so packages are importable.
sys.path.insert(0, ".")

from packages.imgix_core import URLBuilder, URLBuilderError
from packages.imgix_core.domain.srcset import MAX_WIDTH, MIN_WIDTH, TOLERANCE


def _parse_param(raw: str) -> tuple[str, list[str]]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    return key, value.split(",")


def main() -> None:
    parser = argparse.ArgumentParser(description="Build (signed) image URLs and srcsets")
    parser.add_argument("domain", help="Source domain, e.g. demo.imgix.net")
    parser.add_argument("path", help="Asset path or remote URL to proxy")
    parser.add_argument(
        "-p",
        "--param",
        action="append",
        type=_parse_param,
        default=[],
        metavar="KEY=VALUE[,VALUE...]",
        help="Rendering parameter; repeatable",
    )
    parser.add_argument("--token", default=None, help="Signing token (default: env IMGIX_TOKEN)")
    parser.add_argument("--http", action="store_true", help="Use http instead of https")
    parser.add_argument("--no-lib-param", action="store_true", help="Omit the ixlib parameter")
    parser.add_argument("--srcset", action="store_true", help="Print a srcset attribute")
    parser.add_argument("--widths", type=int, nargs="+", default=None, metavar="W")
    parser.add_argument("--min-width", type=int, default=MIN_WIDTH)
    parser.add_argument("--max-width", type=int, default=MAX_WIDTH)
    parser.add_argument("--tolerance", type=float, default=TOLERANCE)
    parser.add_argument(
        "--no-variable-quality",
        action="store_true",
        help="Do not lower q as the pixel ratio grows",
    )
    args = parser.parse_args()

    token = args.token if args.token is not None else os.environ.get("IMGIX_TOKEN", "")
    params: dict[str, list[str]] = {}
    for key, values in args.param:
        params.setdefault(key, []).extend(values)

    try:
        builder = URLBuilder(
            args.domain,
            token=token,
            use_https=not args.http,
            use_lib_param=not args.no_lib_param,
        )
        if not args.srcset:
            print(builder.create_url(args.path, params))
        elif args.widths:
            print(builder.create_srcset_from_widths(args.path, params, args.widths))
        else:
            print(
                builder.create_srcset(
                    args.path,
                    params,
                    min_width=args.min_width,
                    max_width=args.max_width,
                    tolerance=args.tolerance,
                    variable_quality=not args.no_variable_quality,
                )
            )
    except URLBuilderError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
