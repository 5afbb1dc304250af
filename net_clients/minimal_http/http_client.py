from __future__ import annotations

import contextlib
import logging

from .config import ClientConfig
from .errors import (
    HttpClientError,
    IncompleteWriteError,
    InvalidURLError,
    ReadError,
    UnreachableHostError,
    UnsupportedSchemeError,
)
from .redaction import redact_url
from .request import build_request
from .response import Response, read_response
from .transport import Transport, transport_for_scheme
from .url import URL, Scheme, parse_url

logger = logging.getLogger("minimal_http.client")

__all__ = ["HttpClientError", "fetch", "get", "retrieve"]


def retrieve(url: URL, transport: Transport, config: ClientConfig | None = None) -> Response:
    """Run one GET for `url` over `transport`.

    The connection is closed on every path once it has been opened. No retries:
    the first failure raises.
    """
    cfg = config or ClientConfig()
    if not url.retrievable:
        raise InvalidURLError(f"URL is not retrievable: {redact_url(url)!r}")

    conn = transport.open(url.host, url.port)
    if conn is None:
        raise UnreachableHostError(f"could not connect to {url.host}:{url.port}")

    with contextlib.closing(conn):
        request = build_request(url, user_agent=cfg.user_agent)
        try:
            written = conn.write(request)
        except OSError as exc:
            raise IncompleteWriteError(f"write failed: {exc}") from exc
        if written != len(request):
            raise IncompleteWriteError(f"wrote {written} of {len(request)} request bytes")
        try:
            return read_response(conn, chunk_size=cfg.read_chunk_size, stop_at_nul=cfg.stop_at_nul)
        except OSError as exc:
            raise ReadError(f"read failed: {exc}") from exc


def fetch(
    url: str | URL | None,
    config: ClientConfig | None = None,
    transport: Transport | None = None,
) -> Response:
    """Like `get()`, but raises HttpClientError subclasses instead of returning None."""
    cfg = config or ClientConfig()
    parsed = url if isinstance(url, URL) else parse_url(url)
    if parsed.scheme is Scheme.UNKNOWN:
        raise UnsupportedSchemeError("only http and https URLs are supported")
    if transport is None:
        transport = transport_for_scheme(parsed.scheme, timeout=cfg.timeout, verify_tls=cfg.verify_tls)
    if transport is None:
        raise UnsupportedSchemeError(f"no transport for scheme {parsed.scheme.value}")
    logger.debug("GET %s", redact_url(parsed))
    response = retrieve(parsed, transport, cfg)
    logger.debug("GET %s -> %d body bytes", redact_url(parsed), response.length)
    return response


def get(
    url: str | URL | None,
    config: ClientConfig | None = None,
    transport: Transport | None = None,
) -> Response | None:
    """Fetch `url`; None when the retrieval failed for any reason."""
    try:
        return fetch(url, config, transport)
    except HttpClientError as exc:
        logger.info("http_error %s", exc)
        return None
