"""Command line interface: shamir-recover <path-to-json>."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from shamir_recover.config import APPROXIMATION_DIGITS_DEFAULT, ReconstructionConfig
from shamir_recover.core.errors import ReconstructionError
from shamir_recover.reconstruction import reconstruct, render_json, render_text

logger = logging.getLogger("shamir_recover")

EXIT_OK = 0
EXIT_FAILURE = 1

# Ошибки на stderr: "ERROR: <message>"
LOG_FORMAT = "%(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shamir-recover",
        description="Reconstruct a Shamir secret f(0) from a JSON share document",
    )
    parser.add_argument("path", nargs="?", help="JSON document with keys.n, keys.k and shares")
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument(
        "--approx-digits",
        type=int,
        default=APPROXIMATION_DIGITS_DEFAULT,
        help="significant digits of the approximation shown for fractional secrets",
    )
    parser.add_argument(
        "--strict-count",
        action="store_true",
        help="fail when keys.n differs from the number of share entries",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def load_document(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.path:
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        config = ReconstructionConfig(
            approximation_digits=args.approx_digits,
            strict_count=args.strict_count,
        )
        document = load_document(args.path)
        result = reconstruct(document, config=config)
    except (ReconstructionError, OSError, ValueError) as exc:
        # json.JSONDecodeError — подкласс ValueError
        logger.error("%s", exc)
        return EXIT_FAILURE

    if args.format == "json":
        print(render_json(result))
    else:
        print(render_text(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
