"""Error types raised by the minimal HTTP client.

`get()` collapses every one of these into a `None` result; `fetch()` lets them
propagate so callers that want a reason can have one.
"""

from __future__ import annotations


class HttpClientError(Exception):
    pass


class InvalidURLError(HttpClientError):
    """URL lacks a host, a path or a usable port."""


class UnsupportedSchemeError(HttpClientError):
    """URL names a scheme other than http/https."""


class UnreachableHostError(HttpClientError):
    """Name resolution, TCP connect or TLS handshake failed."""


class IncompleteWriteError(HttpClientError):
    """The transport did not accept the whole request in one write."""


class ReadError(HttpClientError):
    """The transport failed while the response was being read."""
