from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from casekit.settings import configure_logging, serve_host, serve_port
from modules.case_convert.core.case import (
    CASE_TYPES,
    UnsupportedCaseTypeError,
    convert_case,
    transform_cases,
)
from modules.case_convert.core.words import extract_words

logger = logging.getLogger(__name__)

EXIT_USAGE = 2


def _cmd_convert(args: argparse.Namespace) -> int:
    try:
        print(convert_case(args.text, args.to))
    except UnsupportedCaseTypeError as exc:
        print(exc, file=sys.stderr)
        return EXIT_USAGE
    return 0


def _cmd_words(args: argparse.Namespace) -> int:
    for word in extract_words(args.text):
        print(word)
    return 0


def _cmd_all(args: argparse.Namespace) -> int:
    result, error = transform_cases(args.text)
    if error:
        print(error, file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from casekit.engine import build_app

    logger.info("Serving casekit on %s:%s", args.host, args.port)
    uvicorn.run(build_app(), host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casekit", description="Split text into words and convert between case styles."
    )
    parser.add_argument("--log-level", help="Override CASEKIT_LOG_LEVEL, e.g. DEBUG")
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert text to one case style")
    convert.add_argument("text")
    convert.add_argument(
        "--to", required=True, metavar="CASE", help=f"One of: {', '.join(CASE_TYPES)}"
    )
    convert.set_defaults(handler=_cmd_convert)

    words = sub.add_parser("words", help="Print the extracted words, one per line")
    words.add_argument("text")
    words.set_defaults(handler=_cmd_words)

    every = sub.add_parser("all", help="Print every case style as JSON")
    every.add_argument("text")
    every.set_defaults(handler=_cmd_all)

    serve = sub.add_parser("serve", help="Run the web app")
    serve.add_argument("--host", default=serve_host())
    serve.add_argument("--port", type=int, default=serve_port())
    serve.set_defaults(handler=_cmd_serve)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level: int | None = None
    if args.log_level:
        parsed = logging.getLevelName(args.log_level.upper())
        if not isinstance(parsed, int):
            parser.error(f"unknown log level: {args.log_level}")
        level = parsed
    configure_logging(level)

    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
