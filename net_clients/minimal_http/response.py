"""Incremental HTTP response reader.

The reader has no notion of Content-Length: it consumes chunks until the
transport reports end of stream, splitting the bytes into header and body at
the first blank line (`\\n\\r\\n` or `\\n\\n`). The terminator may straddle two
chunks.

A short read (fewer bytes than asked for) with no terminator in sight forces
the boundary onto the last byte of that chunk, so a server that closes before
finishing its header cannot stall the reader.

With `stop_at_nul=True` (the default) the terminator and content-type scans
stop at the first NUL byte, and the stored header is cut there, the way a
NUL-terminated string buffer would read it. Pass
`stop_at_nul=False` to scan the full byte length.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger("minimal_http.response")

DEFAULT_CHUNK_SIZE = 1024

_CRLF_END = b"\n\r\n"
_LF_END = b"\n\n"
_CONTENT_TYPE = b"content-type:"


class Readable(Protocol):
    def read(self, max_bytes: int) -> bytes: ...


@dataclass(slots=True)
class Response:
    header: bytes = b""
    body: bytes = b""
    is_text: bool = False

    @property
    def length(self) -> int:
        return len(self.body)

    @property
    def status_line(self) -> str | None:
        if not self.header:
            return None
        line = self.header.split(b"\n", 1)[0].rstrip(b"\r").decode("latin-1")
        return line if line.upper().startswith("HTTP/") else None

    @property
    def status_code(self) -> int | None:
        line = self.status_line
        if line is None:
            return None
        parts = line.split(None, 2)
        if len(parts) < 2 or len(parts[1]) != 3 or not parts[1].isdigit():
            return None
        return int(parts[1])

    def text(self, encoding: str = "utf-8", errors: str = "replace") -> str:
        return self.body.decode(encoding, errors)

    def release(self) -> None:
        """Drop the buffered header and body. Safe to call more than once."""
        self.header = b""
        self.body = b""
        self.is_text = False


def _scan_region(data: bytes, stop_at_nul: bool) -> bytes:
    if stop_at_nul:
        nul = data.find(b"\0")
        if nul >= 0:
            return data[:nul]
    return data


def is_text_header(header: bytes, *, stop_at_nul: bool = True) -> bool:
    """True when the first `content-type:` field of `header` mentions "text"."""
    lowered = _scan_region(header, stop_at_nul).lower()
    start = lowered.find(_CONTENT_TYPE)
    if start < 0:
        return False
    end = lowered.find(b"\n", start)
    field = lowered[start:] if end < 0 else lowered[start:end]
    return b"text" in field


class ResponseReader:
    """Push-style header/body splitter.

    Feed it each chunk exactly as one read returned it (short chunks matter, see
    the module docstring), then call `finish()` once the stream has ended.
    """

    def __init__(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE, stop_at_nul: bool = True) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size
        self.stop_at_nul = stop_at_nul
        self._header: bytes | None = None
        self._is_text = False
        # Pre-boundary bytes until the header is final, body bytes afterwards.
        self._data = bytearray()
        # Last scanned bytes of the previous chunk, for terminators split across reads.
        self._tail = b""

    @property
    def header_complete(self) -> bool:
        return self._header is not None

    def feed(self, chunk: bytes) -> None:
        if not chunk:
            return
        if self._header is None:
            boundary = self._find_boundary(chunk)
            if boundary is not None:
                self._finish_header(chunk, boundary)
                return
        self._data += chunk

    def finish(self) -> Response:
        header = self._header if self._header is not None else b""
        response = Response(header=header, body=bytes(self._data), is_text=self._is_text)
        logger.debug(
            "response complete header_bytes=%d body_bytes=%d is_text=%s",
            len(response.header),
            response.length,
            response.is_text,
        )
        return response

    def _find_boundary(self, chunk: bytes) -> int | None:
        """Offset of the boundary byte within buffered data + `chunk`, if any."""
        scanned = _scan_region(chunk, self.stop_at_nul)
        window = self._tail + scanned
        base = len(self._data) - len(self._tail)
        self._tail = window[-2:] if len(scanned) == len(chunk) else b""

        crlf = window.find(_CRLF_END)
        lf = window.find(_LF_END)
        if crlf >= 0 and (lf < 0 or crlf < lf):
            return base + crlf + 2
        if lf >= 0:
            return base + lf + 1
        if len(chunk) < self.chunk_size and len(chunk) > 1:
            logger.debug("no header terminator before short read; forcing boundary")
            return len(self._data) + len(chunk) - 1
        return None

    def _finish_header(self, chunk: bytes, boundary: int) -> None:
        data = bytes(self._data) + chunk
        header = data[:boundary]
        if self.stop_at_nul:
            header = _scan_region(header, True)
        self._header = header
        self._data = bytearray(data[boundary + 1 :])
        self._tail = b""
        self._is_text = is_text_header(header, stop_at_nul=self.stop_at_nul)


def read_response(
    stream: Readable,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    stop_at_nul: bool = True,
) -> Response:
    """Read `stream` to end of stream and split it into a Response.

    Transport errors (OSError) propagate to the caller.
    """
    reader = ResponseReader(chunk_size=chunk_size, stop_at_nul=stop_at_nul)
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        reader.feed(chunk)
    return reader.finish()
