from __future__ import annotations

import base64

# Characters that must not reach the request line or Host header unescaped.
URL_ESCAPE_CHARS = '\n\r\t"\\ []<>{}|^~`:,'


def escape_chars_to_hex(text: str | None, chars_to_escape: str | None) -> str | None:
    """Replace every character of `chars_to_escape` in `text` with `%XX`."""
    if text is None:
        return None
    if not chars_to_escape:
        return text
    return "".join(f"%{ord(ch):02X}" if ch in chars_to_escape else ch for ch in text)


def encode_base64(data: str | bytes | None, line_size: int | None = None) -> str:
    """Base64-encode `data`; with `line_size`, break the output into lines of that width."""
    if data is None:
        return ""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    encoded = base64.b64encode(raw).decode("ascii")
    if not line_size or line_size <= 0 or len(encoded) <= line_size:
        return encoded
    return "\n".join(encoded[i : i + line_size] for i in range(0, len(encoded), line_size))
