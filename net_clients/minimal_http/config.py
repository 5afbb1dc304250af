from __future__ import annotations

import os
from dataclasses import dataclass

from .request import DEFAULT_USER_AGENT
from .response import DEFAULT_CHUNK_SIZE

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    raw = (os.environ.get(name) or "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


@dataclass
class ClientConfig:
    # None, zero or negative blocks forever; applied to the socket, not the reader.
    timeout: float | None = None
    read_chunk_size: int = DEFAULT_CHUNK_SIZE
    user_agent: str = DEFAULT_USER_AGENT
    stop_at_nul: bool = True
    verify_tls: bool = True

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            self.timeout = None
        self.read_chunk_size = max(1, int(self.read_chunk_size))

    @classmethod
    def from_env(cls) -> ClientConfig:
        timeout_raw = (os.environ.get("MINIMAL_HTTP_TIMEOUT") or "").strip()
        timeout = float(timeout_raw) if timeout_raw else None
        chunk_size = int(os.environ.get("MINIMAL_HTTP_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE)))
        user_agent = os.environ.get("MINIMAL_HTTP_USER_AGENT", "").strip() or DEFAULT_USER_AGENT
        return cls(
            timeout=timeout,
            read_chunk_size=chunk_size,
            user_agent=user_agent,
            stop_at_nul=env_flag("MINIMAL_HTTP_STOP_AT_NUL", True),
            verify_tls=env_flag("MINIMAL_HTTP_TLS_VERIFY", True),
        )
