from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A fake skeleton archive shaped like the upstream package skeleton.
3. A configuration dictionary whose workspace lives in tmp_path.
"""

import os
import sys
import zipfile
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


SKELETON_COMPOSER = """{
    "name": ":vendor/:package_name",
    "description": ":package_description",
    "license": "MIT",
    "authors": [
        {
            "name": ":author_name",
            "email": ":author_email"
        }
    ],
    "autoload": {
        "psr-4": {
            "League\\\\Skeleton\\\\": "src"
        }
    },
    "autoload-dev": {
        "psr-4": {
            "League\\\\Skeleton\\\\": "tests"
        }
    }
}
"""

SKELETON_CLASS = """<?php

namespace League\\Skeleton;

class SkeletonClass
{
}
"""


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def skeleton_zip(tmp_path: Path) -> Path:
    """
    Build a zip archive mimicking the upstream skeleton.

    Structure:
    skeleton-master/
      composer.json
      README.md
      CONDUCT.md, CONTRIBUTING.md, LICENSE.md, prefill.php
      src/SkeletonClass.php
      tests/ExampleTest.php
    """
    archive = tmp_path / "fixtures" / "skeleton.zip"
    archive.parent.mkdir(parents=True)
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("skeleton-master/composer.json", SKELETON_COMPOSER)
        zf.writestr("skeleton-master/README.md", "# :vendor/:package_name\n")
        zf.writestr("skeleton-master/CONDUCT.md", "conduct")
        zf.writestr("skeleton-master/CONTRIBUTING.md", "contributing")
        zf.writestr("skeleton-master/LICENSE.md", "license")
        zf.writestr("skeleton-master/prefill.php", "<?php")
        zf.writestr("skeleton-master/src/SkeletonClass.php", SKELETON_CLASS)
        zf.writestr(
            "skeleton-master/tests/ExampleTest.php",
            "<?php\n\nnamespace League\\Skeleton;\n"
        )
    return archive


@pytest.fixture
def base_config(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a complete configuration dictionary for testing.

    The workspace root points inside tmp_path and the skeleton URL is a
    placeholder; tests patch the downloader.
    """
    return {
        "workspace_root": str(tmp_path / "packages"),
        "skeleton_url": "https://example.invalid/skeleton.zip",
        "skeleton_dir_name": "skeleton-master",
        "verify_tls": True,
        "folders": None,
        "create_markers": True,
        "marker_name": ".gitkeep",
    }


@pytest.fixture
def fake_download(skeleton_zip: Path):
    """Side effect for download_archive that copies the fixture archive."""
    def _download(url: str, dest_path: str, verify: bool = True, progress_callback=None):
        with open(skeleton_zip, "rb") as src, open(dest_path, "wb") as dst:
            dst.write(src.read())
        return True, "Download completed successfully."
    return _download
