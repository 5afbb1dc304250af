"""Minimal HTTP/HTTPS GET client for constrained environments.

`get()` parses a URL, sends one HTTP/1.0 GET with `Connection: close`, and reads
until the server closes, returning the raw header and body.
"""

from __future__ import annotations

from .config import ClientConfig
from .errors import (
    HttpClientError,
    IncompleteWriteError,
    InvalidURLError,
    ReadError,
    UnreachableHostError,
    UnsupportedSchemeError,
)
from .http_client import fetch, get, retrieve
from .request import build_request
from .response import Response, ResponseReader, read_response
from .transport import TcpTransport, TlsTransport, transport_for_scheme
from .url import URL, Scheme, parse_url

__all__ = [
    "URL",
    "ClientConfig",
    "HttpClientError",
    "IncompleteWriteError",
    "InvalidURLError",
    "ReadError",
    "Response",
    "ResponseReader",
    "Scheme",
    "TcpTransport",
    "TlsTransport",
    "UnreachableHostError",
    "UnsupportedSchemeError",
    "build_request",
    "fetch",
    "get",
    "parse_url",
    "read_response",
    "retrieve",
    "transport_for_scheme",
]
