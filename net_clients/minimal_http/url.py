"""URL parsing for the minimal HTTP client.

The parser is deliberately forgiving: it never raises, and anything it cannot
make sense of comes back as an empty URL with an UNKNOWN scheme. Callers check
`URL.retrievable` before trying to fetch.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass

from .text_utils import URL_ESCAPE_CHARS, escape_chars_to_hex

logger = logging.getLogger("minimal_http.url")

MAX_PORT = 65535
_MAX_PORT_TEXT_LEN = 5
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class Scheme(enum.Enum):
    UNKNOWN = "unknown"
    HTTP = "http"
    HTTPS = "https"


DEFAULT_PORTS: dict[Scheme, int] = {
    Scheme.HTTP: 80,
    Scheme.HTTPS: 443,
}

_PREFIXES: tuple[tuple[str, Scheme], ...] = (
    ("http://", Scheme.HTTP),
    ("https://", Scheme.HTTPS),
)


@dataclass(frozen=True, slots=True)
class URL:
    scheme: Scheme = Scheme.UNKNOWN
    user: str | None = None
    password: str | None = None
    host: str | None = None
    port: int = -1
    path: str | None = None

    @property
    def retrievable(self) -> bool:
        return self.host is not None and self.port >= 0 and self.path is not None

    @property
    def default_port(self) -> int | None:
        return DEFAULT_PORTS.get(self.scheme)

    def geturl(self) -> str:
        """Render the URL back to text (userinfo included); empty for UNKNOWN."""
        if self.scheme is Scheme.UNKNOWN or self.host is None:
            return ""
        userinfo = ""
        if self.user is not None:
            userinfo = self.user if self.password is None else f"{self.user}:{self.password}"
            userinfo += "@"
        port = f":{self.port}" if self.port != self.default_port else ""
        return f"{self.scheme.value}://{userinfo}{self.host}{port}{self.path or '/'}"


def _path_start(text: str) -> int:
    idx = text.find("/")
    return idx if idx >= 0 else len(text)


def _parse_port(text: str, default: int) -> int:
    # Mirrors scanf("%d"): a leading integer is enough, trailing junk is ignored.
    if len(text) > _MAX_PORT_TEXT_LEN:
        return default
    m = _LEADING_INT_RE.match(text)
    if not m:
        return default
    value = int(m.group(1))
    if 0 <= value <= MAX_PORT:
        return value
    return default


def _split_scheme(raw: str) -> tuple[Scheme, str] | None:
    lowered = raw.lower()
    for prefix, scheme in _PREFIXES:
        if lowered.startswith(prefix):
            return scheme, raw[len(prefix) :]
    if "://" not in lowered:
        return Scheme.HTTP, raw
    return None


def parse_url(raw: str | None) -> URL:
    if raw is None:
        return URL()

    split = _split_scheme(raw)
    if split is None:
        logger.debug("unsupported scheme in %r", raw.split("://", 1)[0])
        return URL()
    scheme, remainder = split
    port = DEFAULT_PORTS[scheme]

    user: str | None = None
    password: str | None = None
    path_begin = _path_start(remainder)
    at = remainder.find("@")
    if 0 <= at < path_begin:
        colon = remainder.find(":")
        user_end = colon if 0 <= colon < at else at
        user = remainder[:user_end]
        if user_end != at:
            password = remainder[user_end + 1 : at]
        remainder = remainder[at + 1 :]
        path_begin = _path_start(remainder)

    authority, rest = remainder[:path_begin], remainder[path_begin:]
    colon = authority.find(":")
    if colon >= 0:
        host = authority[:colon]
        port = _parse_port(authority[colon + 1 :], port)
    else:
        host = authority

    path = escape_chars_to_hex(rest, URL_ESCAPE_CHARS) if rest.startswith("/") else "/"
    return URL(
        scheme=scheme,
        user=user,
        password=password,
        host=escape_chars_to_hex(host, URL_ESCAPE_CHARS),
        port=port,
        path=path,
    )
