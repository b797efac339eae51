from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import load_settings
from .errors import IRIError
from .iri import IRI
from .validation import ValidationMode, is_valid_http, is_valid_iri


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="irikit", description="Validate, normalize and convert IRIs.")
    parser.add_argument("--config", type=Path, default=None, help="Settings YAML (default: config/irikit.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check that each value is a valid IRI")
    validate.add_argument("values", nargs="+")
    validate.add_argument("--strict", action="store_true", help="Use strict RFC 3987 checks")
    validate.add_argument("--http", action="store_true", help="Also require an http(s) scheme")

    normalize = sub.add_parser("normalize", help="Print the normalized form of each IRI")
    normalize.add_argument("values", nargs="+")

    to_uri = sub.add_parser("to-uri", help="Print the percent-encoded URI form of each IRI")
    to_uri.add_argument("values", nargs="+")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(args.config)

    exit_code = 0
    if args.command == "validate":
        mode = ValidationMode.STRICT if args.strict else ValidationMode(settings.default_mode)
        for value in args.values:
            ok = is_valid_iri(value, mode)
            if ok and args.http:
                ok = is_valid_http(value, settings=settings)
            print(f"{'valid' if ok else 'invalid'}\t{value}")
            if not ok:
                exit_code = 1
        return exit_code

    for value in args.values:
        try:
            iri = IRI(value)
        except IRIError as exc:
            print(f"error: {exc}", file=sys.stderr)
            exit_code = 1
            continue
        if args.command == "normalize":
            print(iri.normalized(settings=settings))
        else:
            print(iri.to_uri())
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
