"""Shared types for the upload pipeline."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class UploadResult:
    """Outcome counters for one run."""

    uploaded: int = 0
    warnings: list[dict[str, Any]] = field(default_factory=list)
    failed: list[dict[str, Any]] = field(default_factory=list)

    def add_warning(self, path, error: str):
        self.warnings.append({"path": str(path), "error": error})

    def add_failure(self, path, error: str):
        self.failed.append({"path": str(path), "error": error})

    @property
    def exit_code(self) -> int:
        """1 if anything failed; warnings never change the status."""
        return 1 if self.failed else 0
