"""Find dSYM bundles beneath a directory."""

import os
from collections.abc import Iterator
from pathlib import Path

DSYM_SUFFIX = ".dSYM"

# Resource fork folder added by the macOS Archive Utility when zipping.
EXCLUDED_DIR = "__MACOSX"


def find_dsyms(root: Path) -> Iterator[Path]:
    """
    Yield every entry under root whose name ends in .dSYM.

    Both directories and plain files are yielded; the validator decides what
    to do with each. Anything below a __MACOSX folder is skipped. Entries are
    visited in sorted order within each directory.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d != EXCLUDED_DIR)
        current = Path(dirpath)

        for name in sorted(dirnames + filenames):
            if name.endswith(DSYM_SUFFIX):
                yield current / name
