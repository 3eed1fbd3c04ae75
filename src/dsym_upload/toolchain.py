"""External utilities the upload pipeline calls into.

Each utility sits behind a small protocol so the pipeline can be driven
with fakes in tests. ``detect_toolchain()`` returns the real macOS tools.
"""

import shutil
import subprocess
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from dsym_upload.errors import ToolError, ToolNotFoundError


@runtime_checkable
class UuidReader(Protocol):
    """Reports the build UUIDs embedded in a DWARF file."""

    def read_uuid(self, dwarf_file: Path) -> str:
        """Return the tool output; a valid result starts with ``UUID``."""
        ...


@runtime_checkable
class SymbolMapRestorer(Protocol):
    """Rewrites a dSYM in place using bitcode symbol maps."""

    def is_available(self) -> bool: ...

    def restore(self, dsym: Path, symbol_maps: Path) -> None:
        """
        Raises:
            ToolError: If the bundle could not be rewritten
        """
        ...


@runtime_checkable
class ArchiveExtractor(Protocol):
    """Unpacks a .zip archive into a directory."""

    name: str

    def is_available(self) -> bool: ...

    def extract(self, archive: Path, destination: Path) -> None: ...


class DwarfdumpUuidReader:
    """Runs ``dwarfdump -u`` against a single file."""

    def __init__(self, executable: str = "dwarfdump"):
        self.executable = executable

    def read_uuid(self, dwarf_file: Path) -> str:
        # Missing binary or unreadable file both show up as "no UUID".
        try:
            result = subprocess.run(
                [self.executable, "-u", str(dwarf_file)],
                capture_output=True,
                text=True,
            )
        except OSError:
            return ""
        return result.stdout.strip()


class DsymutilRestorer:
    """Runs ``dsymutil <dsym> --symbol-map <dir>``."""

    def __init__(self, executable: str = "dsymutil"):
        self.executable = executable

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def restore(self, dsym: Path, symbol_maps: Path) -> None:
        try:
            result = subprocess.run(
                [self.executable, str(dsym), "--symbol-map", str(symbol_maps)],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise ToolNotFoundError(self.executable, str(e)) from e

        if result.returncode != 0:
            raise ToolError(self.executable, result.returncode, result.stderr or result.stdout)


class ZipExtractor:
    """Extracts archives with :mod:`zipfile`."""

    name = "zipfile"

    def is_available(self) -> bool:
        return True

    def extract(self, archive: Path, destination: Path) -> None:
        try:
            with zipfile.ZipFile(archive) as zf:
                zf.extractall(destination)
        except zipfile.BadZipFile as e:
            raise ToolError(self.name, 1, f"{archive}: {e}") from e


@dataclass
class Toolchain:
    """The set of collaborators used by one run."""

    uuid_reader: UuidReader = field(default_factory=DwarfdumpUuidReader)
    symbol_map_restorer: SymbolMapRestorer = field(default_factory=DsymutilRestorer)
    archive_extractor: ArchiveExtractor = field(default_factory=ZipExtractor)


def detect_toolchain() -> Toolchain:
    """Return the system implementations of every collaborator."""
    return Toolchain()
