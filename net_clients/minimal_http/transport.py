"""Byte-stream transports: plain TCP and TLS over TCP.

`Transport.open()` reports every connection failure (resolution, connect, TLS
handshake) the same way, by returning None. Once a connection is open, reads
and writes raise OSError on failure; an empty read means the peer closed.
"""

from __future__ import annotations

import contextlib
import logging
import socket
import ssl
from typing import Protocol

from .url import Scheme

logger = logging.getLogger("minimal_http.transport")


class Connection(Protocol):
    def read(self, max_bytes: int) -> bytes: ...

    def write(self, data: bytes) -> int: ...

    def close(self) -> None: ...


class Transport(Protocol):
    def open(self, host: str, port: int) -> Connection | None: ...


class SocketConnection:
    """Connection over an already-connected (optionally TLS-wrapped) socket."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock: socket.socket | None = sock

    @property
    def closed(self) -> bool:
        return self._sock is None

    def _socket(self) -> socket.socket:
        if self._sock is None:
            raise OSError("connection is closed")
        return self._sock

    def read(self, max_bytes: int) -> bytes:
        return self._socket().recv(max_bytes)

    def write(self, data: bytes) -> int:
        # One write, no retry: a short count is reported to the caller as is.
        return self._socket().send(data)

    def close(self) -> None:
        sock, self._sock = self._sock, None
        if sock is None:
            return
        with contextlib.suppress(OSError):
            sock.close()


class TcpTransport:
    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def _connect(self, host: str, port: int) -> socket.socket | None:
        try:
            return socket.create_connection((host, port), timeout=self.timeout)
        except (OSError, UnicodeError) as exc:  # bad IDNA labels raise UnicodeError
            logger.info("connect_failed host=%s port=%s: %s", host, port, exc)
            return None

    def open(self, host: str, port: int) -> Connection | None:
        sock = self._connect(host, port)
        if sock is None:
            return None
        return SocketConnection(sock)


class TlsTransport(TcpTransport):
    def __init__(
        self,
        timeout: float | None = None,
        *,
        verify: bool = True,
        context: ssl.SSLContext | None = None,
    ) -> None:
        super().__init__(timeout)
        self.context = context or self._default_context(verify)

    @staticmethod
    def _default_context(verify: bool) -> ssl.SSLContext:
        ctx = ssl.create_default_context()
        if not verify:
            ctx.check_hostname = False
            ctx.verify_mode = ssl.CERT_NONE
        return ctx

    def open(self, host: str, port: int) -> Connection | None:
        sock = self._connect(host, port)
        if sock is None:
            return None
        try:
            tls = self.context.wrap_socket(sock, server_hostname=host)
        except (OSError, UnicodeError) as exc:  # ssl.SSLError is an OSError
            logger.info("tls_handshake_failed host=%s port=%s: %s", host, port, exc)
            with contextlib.suppress(OSError):
                sock.close()
            return None
        return SocketConnection(tls)


def transport_for_scheme(
    scheme: Scheme,
    *,
    timeout: float | None = None,
    verify_tls: bool = True,
) -> Transport | None:
    if scheme is Scheme.HTTP:
        return TcpTransport(timeout)
    if scheme is Scheme.HTTPS:
        return TlsTransport(timeout, verify=verify_tls)
    return None
