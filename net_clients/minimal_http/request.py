from __future__ import annotations

from .errors import InvalidURLError
from .redaction import redact_url
from .text_utils import encode_base64
from .url import URL

DEFAULT_USER_AGENT = "http_minimal_client 1.0"


def _basic_credentials(url: URL) -> str:
    plain = url.user if url.password is None else f"{url.user}:{url.password}"
    return encode_base64(plain)


def build_request(url: URL, *, user_agent: str = DEFAULT_USER_AGENT) -> bytes:
    """Render the HTTP/1.0 GET request for `url`.

    The Host header carries the port only when it differs from the scheme's
    default. Userinfo becomes a Basic Authorization header.
    """
    if not url.retrievable:
        raise InvalidURLError(f"URL is not retrievable: {redact_url(url)!r}")

    host_line = f"Host: {url.host}"
    default_port = url.default_port
    if default_port is not None and url.port != default_port:
        host_line += f":{url.port}"

    lines = [
        f"GET {url.path} HTTP/1.0",
        f"User-Agent: {user_agent}",
        "Accept: */*",
        "Connection: close",
        host_line,
    ]
    if url.user is not None:
        lines.append(f"Authorization: Basic {_basic_credentials(url)}")
    return ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8")
