"""Resolve the PATH argument to a directory of dSYMs."""

import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from dsym_upload.errors import ConfigurationError, ToolNotFoundError
from dsym_upload.toolchain import ArchiveExtractor, SymbolMapRestorer

ARCHIVE_SUFFIX = ".zip"


@contextmanager
def resolve_input(path: Path, extractor: ArchiveExtractor) -> Iterator[Path]:
    """
    Yield the directory to search for dSYMs.

    Directories are used as-is. A .zip archive is extracted into a temporary
    directory which is removed when the context exits, whatever the outcome.

    Args:
        path: Directory or .zip archive given on the command line
        extractor: Archive extraction utility

    Raises:
        ConfigurationError: If the path is neither a directory nor a .zip file
        ToolNotFoundError: If the path is an archive and no extractor is available
    """
    if path.is_dir():
        yield path
        return

    if not path.name.endswith(ARCHIVE_SUFFIX) or not path.is_file():
        raise ConfigurationError(f"{path} is not a directory or a {ARCHIVE_SUFFIX} file")

    if not extractor.is_available():
        raise ToolNotFoundError(extractor.name, f"required to extract {path}")

    with tempfile.TemporaryDirectory(prefix="dsym-upload-") as tmp:
        extract_dir = Path(tmp)
        extractor.extract(path, extract_dir)
        yield extract_dir


def check_symbol_maps(symbol_maps: Path | None, restorer: SymbolMapRestorer):
    """
    Ensure symbol maps can be applied before anything is uploaded.

    Raises:
        ConfigurationError: If the symbol map directory does not exist
        ToolNotFoundError: If dsymutil is not installed
    """
    if symbol_maps is None:
        return
    if not symbol_maps.is_dir():
        raise ConfigurationError(f"Bitcode symbol map parameter is not a directory: {symbol_maps}")
    if not restorer.is_available():
        raise ToolNotFoundError("dsymutil", "it is required to apply bitcode symbol maps")
