from __future__ import annotations

"""
Integration tests for Network Infrastructure.

Utilizes mocking to verify the skeleton archive download and the TLS
verification override without making real network calls.
"""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from packager.infra.network import download_archive, resolve_verify_tls
from packager.infra.network.common import VERIFY_TLS_ENV

# -----------------------------------------------------------------------------
# DOWNLOAD TESTS
# -----------------------------------------------------------------------------

def test_download_archive_success(tmp_path: Path) -> None:
    """TC-01: Verify buffered download of the skeleton archive."""
    dest_path = tmp_path / "package.zip"
    mock_content = [b"chunk1", b"chunk2", b"chunk3"]

    mock_response = MagicMock()
    mock_response.headers = {"content-length": "18"}
    mock_response.iter_content.return_value = iter(mock_content)
    mock_response.__enter__.return_value = mock_response

    with patch("requests.get", return_value=mock_response) as mock_get:
        progress_calls = []

        def callback(p: float) -> None:
            progress_calls.append(p)

        success, msg = download_archive(
            "https://host/skeleton.zip", str(dest_path), progress_callback=callback
        )

    assert success is True
    assert dest_path.read_bytes() == b"chunk1chunk2chunk3"
    assert progress_calls[-1] == 100.0
    assert mock_get.call_args.kwargs["verify"] is True
    assert mock_get.call_args.kwargs["stream"] is True


def test_download_archive_insecure_flag(tmp_path: Path) -> None:
    """TC-02: verify=False is forwarded to requests."""
    mock_response = MagicMock()
    mock_response.headers = {}
    mock_response.iter_content.return_value = iter([b"PK"])
    mock_response.__enter__.return_value = mock_response

    with patch("requests.get", return_value=mock_response) as mock_get:
        success, _ = download_archive("https://host/s.zip", str(tmp_path / "s.zip"), verify=False)

    assert success is True
    assert mock_get.call_args.kwargs["verify"] is False


def test_download_archive_http_error(tmp_path: Path) -> None:
    """TC-03: HTTP errors are reported as (False, message), not raised."""
    mock_response = MagicMock()
    mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Not Found")
    mock_response.__enter__.return_value = mock_response

    with patch("requests.get", return_value=mock_response):
        success, msg = download_archive("https://host/missing.zip", str(tmp_path / "m.zip"))

    assert success is False
    assert "404" in msg


def test_download_archive_connection_error(tmp_path: Path) -> None:
    with patch("requests.get", side_effect=requests.exceptions.ConnectionError("offline")):
        success, msg = download_archive("https://host/s.zip", str(tmp_path / "s.zip"))

    assert success is False
    assert "offline" in msg


def test_download_archive_unwritable_destination(tmp_path: Path) -> None:
    """TC-04: A destination in a missing directory fails gracefully."""
    mock_response = MagicMock()
    mock_response.headers = {}
    mock_response.iter_content.return_value = iter([b"PK"])
    mock_response.__enter__.return_value = mock_response

    with patch("requests.get", return_value=mock_response):
        success, msg = download_archive("https://host/s.zip", str(tmp_path / "no" / "s.zip"))

    assert success is False
    assert "Filesystem error" in msg

# -----------------------------------------------------------------------------
# TLS OVERRIDE
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("raw, configured, expected", [
    ("0", True, False),
    ("false", True, False),
    ("yes", False, True),
    ("garbage", True, True),
    ("garbage", False, False),
])
def test_resolve_verify_tls_env_override(raw: str, configured: bool, expected: bool) -> None:
    """TC-05: The environment variable overrides the configured flag."""
    with patch.dict(os.environ, {VERIFY_TLS_ENV: raw}):
        assert resolve_verify_tls(configured) is expected


def test_resolve_verify_tls_without_env() -> None:
    with patch.dict(os.environ, {}, clear=False):
        os.environ.pop(VERIFY_TLS_ENV, None)
        assert resolve_verify_tls(False) is False
        assert resolve_verify_tls() is True
