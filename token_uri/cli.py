#!/usr/bin/env python3
"""Print the JSON text embedded in a token URI.

    parse-token-uri 'data:application/json;base64,eyJhIjoxfQ=='

Exit status: 0 on success, 1 when the argument is missing or (in strict mode)
the payload is malformed, 2 on invalid environment configuration.
"""
from __future__ import annotations

import argparse
import sys

from token_uri.domain.uri import TokenURIError, decode_token_uri, encode_token_uri
from token_uri.logging_conf import get_logger, setup_logging
from token_uri.settings import ConfigError, load_settings

logger = get_logger("token_uri")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the decoder."""
    parser = argparse.ArgumentParser(
        prog="parse-token-uri", description="Decode a base64 JSON token URI"
    )
    parser.add_argument(
        "token_uri",
        nargs="?",
        metavar="tokenURI",
        help="token URI or bare payload; put '--' before a payload that starts with '-'",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="fail on non-canonical base64 or invalid UTF-8 (env: TOKEN_URI_STRICT)",
    )
    parser.add_argument(
        "--encode",
        action="store_true",
        help="treat the argument as JSON text and print its token URI",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="override LOG_LEVEL",
    )
    args, extras = parser.parse_known_args(argv)
    # URL-safe payloads may start with "-"; argparse reads those as unknown options.
    if extras:
        if args.token_uri is not None or len(extras) > 1 or extras[0].startswith("--"):
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
        args.token_uri = extras[0]
    return args


def run(argv: list[str]) -> int:
    args = parse_args(argv)
    if not args.token_uri:
        logger.info("token_uri.rejected", extra={"reason": "missing_argument"})
        print("tokenURI parameter required", file=sys.stderr)
        return EXIT_FAILURE

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    setup_logging(args.log_level or settings.log_level)
    strict = settings.strict if args.strict is None else args.strict

    if args.encode:
        print(encode_token_uri(args.token_uri))
        return EXIT_OK

    try:
        text = decode_token_uri(args.token_uri, strict=strict)
    except TokenURIError as e:
        logger.info("token_uri.rejected", extra={"reason": e.code})
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.debug(
        "token_uri.decoded",
        extra={"uri_chars": len(args.token_uri), "text_chars": len(text), "strict": strict},
    )
    print(text)
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    raise SystemExit(run(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
