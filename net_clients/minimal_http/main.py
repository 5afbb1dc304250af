"""Command-line entry point: fetch one URL and write the body to stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from .config import ClientConfig
from .http_client import get

logger = logging.getLogger("minimal_http")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minimal-http-get", description="Fetch a URL with a single HTTP/1.0 GET.")
    parser.add_argument("url")
    parser.add_argument("-i", "--include", action="store_true", help="write the response header to stderr")
    parser.add_argument("--timeout", type=float, default=None, help="socket timeout in seconds")
    parser.add_argument("--chunk-size", type=int, default=None, help="bytes requested per read")
    parser.add_argument("--insecure", action="store_true", help="skip TLS certificate verification")
    parser.add_argument("--scan-nul", action="store_true", help="scan past NUL bytes in the header")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    config = ClientConfig.from_env()
    if args.timeout is not None:
        config = replace(config, timeout=args.timeout)
    if args.chunk_size is not None:
        config = replace(config, read_chunk_size=args.chunk_size)
    if args.insecure:
        config = replace(config, verify_tls=False)
    if args.scan_nul:
        config = replace(config, stop_at_nul=False)

    response = get(args.url, config)
    if response is None:
        logger.error("retrieval failed")
        return 1
    if args.include:
        sys.stderr.buffer.write(response.header + b"\n")
        sys.stderr.buffer.flush()
    sys.stdout.buffer.write(response.body)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
