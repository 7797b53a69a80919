from __future__ import annotations

"""
Network Communication Infrastructure.

Exposes the HTTP client used to acquire remote package skeleton archives.
"""

from packager.infra.network.common import resolve_verify_tls
from packager.infra.network.skeleton_client import download_archive

__all__ = [
    "download_archive",
    "resolve_verify_tls",
]
