from __future__ import annotations

"""
Integration tests for the archive extraction helpers.
"""

import zipfile
from pathlib import Path

import pytest

from packager.infra.archive import extract_archive, top_level_entries


def test_extract_archive_unpacks_members(tmp_path: Path, skeleton_zip: Path) -> None:
    """TC-01: Every member lands under the destination directory."""
    dest = tmp_path / "vendor"

    names = extract_archive(str(skeleton_zip), str(dest))

    assert "skeleton-master/composer.json" in names
    assert (dest / "skeleton-master" / "src" / "SkeletonClass.php").is_file()


def test_extract_archive_rejects_corrupt_file(tmp_path: Path) -> None:
    """TC-02: A non-zip file raises BadZipFile."""
    bogus = tmp_path / "package.zip"
    bogus.write_bytes(b"<html>not a zip</html>")

    with pytest.raises(zipfile.BadZipFile):
        extract_archive(str(bogus), str(tmp_path / "out"))


def test_top_level_entries_keeps_order() -> None:
    names = ["skeleton-main/", "skeleton-main/a.txt", "other/b.txt", "skeleton-main/c/d"]
    assert top_level_entries(names) == ["skeleton-main", "other"]
