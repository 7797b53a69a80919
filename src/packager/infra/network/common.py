from __future__ import annotations

import os

USER_AGENT = "Laravel-Packager-Client/1.0.0"
DEFAULT_TIMEOUT = 30
CHUNK_SIZE = 8192

VERIFY_TLS_ENV = "PACKAGER_VERIFY_TLS"


def resolve_verify_tls(configured: bool = True) -> bool:
    """Apply the PACKAGER_VERIFY_TLS environment override to the configured flag."""
    raw = os.environ.get(VERIFY_TLS_ENV)
    if raw is None:
        return configured
    v = raw.strip().lower()
    if v in ("0", "false", "no", "off"):
        return False
    if v in ("1", "true", "yes", "on"):
        return True
    return configured
