from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

import requests

from packager.infra.network.common import CHUNK_SIZE, DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def download_archive(
        url: str,
        dest_path: str,
        verify: bool = True,
        progress_callback: Optional[Callable[[float], None]] = None
) -> Tuple[bool, str]:
    """
    Stream a remote skeleton archive to a local file.

    Args:
        url: Archive location.
        dest_path: Local file to write.
        verify: Verify the server TLS certificate.
        progress_callback: Receives the completed percentage (0-100) when the
            server announces a content length.

    Returns:
        Tuple[bool, str]: (Success flag, human readable message).
    """
    headers = {"User-Agent": USER_AGENT}
    logger.info(f"Downloading package skeleton: {url}")
    if not verify:
        logger.warning("TLS certificate verification is disabled for this download.")

    try:
        with requests.get(
                url, headers=headers, stream=True, timeout=DEFAULT_TIMEOUT, verify=verify
        ) as response:
            response.raise_for_status()
            total_size = int(response.headers.get("content-length", 0))
            downloaded_size = 0

            with open(dest_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        downloaded_size += len(chunk)
                        if progress_callback and total_size > 0:
                            progress_callback((downloaded_size / total_size) * 100)

        logger.info(f"Skeleton archive saved to: {dest_path} ({downloaded_size / 1024:.1f} KB)")
        return True, "Download completed successfully."

    except requests.exceptions.RequestException as e:
        msg = f"Skeleton download failed: {e}"
        logger.error(msg)
        return False, msg
    except OSError as e:
        msg = f"Filesystem error while saving the skeleton archive: {e}"
        logger.error(msg)
        return False, msg
