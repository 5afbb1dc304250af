#!/usr/bin/env python3
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

if os.environ.get("MINIMAL_HTTP_TRACE"):
    print(
        f"[minimal-http] timeout={os.environ.get('MINIMAL_HTTP_TIMEOUT', 'none')} | "
        f"chunk={os.environ.get('MINIMAL_HTTP_CHUNK_SIZE', '1024')} | "
        f"tls_verify={os.environ.get('MINIMAL_HTTP_TLS_VERIFY', '1')}",
        file=sys.stderr,
    )

from net_clients.minimal_http.main import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
