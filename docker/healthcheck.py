"""Container healthcheck script: exit 0 when the API answers /ready with 200."""

from __future__ import annotations

import os
import sys

import httpx

port = os.environ.get("HEALTHMATE_API_PORT", "8080")

try:
    resp = httpx.get(f"http://localhost:{port}/ready", timeout=5.0)
except httpx.HTTPError as exc:
    print(f"healthcheck failed: {exc}", file=sys.stderr)
    sys.exit(1)

sys.exit(0 if resp.status_code == 200 else 1)
