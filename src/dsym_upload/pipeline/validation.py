"""dSYM bundle validation and symbol map restoration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from dsym_upload.config import UploadConfig
from dsym_upload.toolchain import Toolchain

DWARF_SUBPATH = Path("Contents", "Resources", "DWARF")

CheckStatus = Literal["ok", "warning", "failure"]


@dataclass
class BundleCheck:
    """Result of checking one dSYM bundle."""

    dsym: Path
    status: CheckStatus
    message: str | None = None
    dwarf_dir: Path | None = None

    @property
    def is_valid(self) -> bool:
        return self.status == "ok"


def check_bundle(dsym: Path, config: UploadConfig, toolchain: Toolchain) -> BundleCheck:
    """
    Validate a dSYM and locate its DWARF directory.

    Steps:
    1. Reject bundles that are plain files (empty dSYM)
    2. Restore bitcode symbols when a symbol map directory is configured
    3. Reject bundles without Contents/Resources/DWARF

    Args:
        dsym: Path to the candidate bundle
        config: Upload configuration
        toolchain: External utilities

    Returns:
        BundleCheck; rejected bundles carry "warning" or "failure" depending
        on the matching ignore flag

    Raises:
        ToolError: If symbol map restoration fails
    """
    if not dsym.is_dir():
        # lstat so dangling symlinks are sized, not followed
        size = dsym.lstat().st_size
        message = f"Skipping empty dSYM file: {dsym} ({size} bytes)"
        status: CheckStatus = "warning" if config.ignore_empty_dsym else "failure"
        return BundleCheck(dsym=dsym, status=status, message=message)

    if config.symbol_maps is not None:
        toolchain.symbol_map_restorer.restore(dsym, config.symbol_maps)

    dwarf_dir = dsym / DWARF_SUBPATH
    if not dwarf_dir.is_dir():
        message = f"Skipping file missing DWARF data: {dsym}"
        status = "warning" if config.ignore_missing_dwarf else "failure"
        return BundleCheck(dsym=dsym, status=status, message=message)

    return BundleCheck(dsym=dsym, status="ok", dwarf_dir=dwarf_dir)
