from __future__ import annotations

"""
Generation Domain Data Models.

Result object exchanged between the generation engine and the CLI, plus
the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one generation (or removal) run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        vendor: Vendor segment of the package.
        name: Package name segment.
        package_path: Absolute package directory.
        created_dirs: Directories described by the folder specification.
        generated_files: Files rendered or copied into the package.
        markers: Marker files written by the empty-directory sweep.
        summary: Run statistics and settings echo.
    """
    ok: bool
    error: str

    vendor: str
    name: str
    package_path: str

    created_dirs: List[str] = field(default_factory=list)
    generated_files: List[str] = field(default_factory=list)
    markers: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        vendor: str,
        name: str,
        package_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """Create a failed result instance."""
    return GenerationResult(
        ok=False,
        error=error,
        vendor=vendor,
        name=name,
        package_path=package_path,
        summary=summary_extra or {},
    )


def create_success_result(
        vendor: str,
        name: str,
        package_path: str,
        created_dirs: Optional[List[str]] = None,
        generated_files: Optional[List[str]] = None,
        markers: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> GenerationResult:
    """Create a successful result instance."""
    return GenerationResult(
        ok=True,
        error="",
        vendor=vendor,
        name=name,
        package_path=package_path,
        created_dirs=created_dirs or [],
        generated_files=generated_files or [],
        markers=markers or [],
        summary=summary_extra or {},
    )
