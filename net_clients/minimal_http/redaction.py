"""Redaction helpers for logging URLs.

Userinfo (`user:pass@host`) is dropped so credentials never reach a log line.
"""

from __future__ import annotations

from dataclasses import replace

from .url import URL, Scheme


def redact_url(url: URL) -> str:
    if url.scheme is Scheme.UNKNOWN or url.host is None:
        return "<unsupported url>"
    if url.user is None:
        return url.geturl()
    return replace(url, user=None, password=None).geturl()
