"""Shared fixtures: fake external tools and a fake HTTP session."""

import io
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

from dsym_upload.config import UploadConfig
from dsym_upload.console import Reporter
from dsym_upload.errors import ToolError
from dsym_upload.toolchain import Toolchain, ZipExtractor


class FakeUuidReader:
    """Returns dwarfdump-style output, or a per-file override."""

    def __init__(self, outputs: dict[str, str] | None = None):
        self.outputs = outputs or {}
        self.calls: list[Path] = []

    def read_uuid(self, dwarf_file: Path) -> str:
        self.calls.append(dwarf_file)
        default = f"UUID: 5D1F3C2A-0000-1111-2222-333344445555 (arm64) {dwarf_file}"
        return self.outputs.get(dwarf_file.name, default)


class FakeRestorer:
    def __init__(self, available: bool = True, fail: bool = False):
        self.available = available
        self.fail = fail
        self.calls: list[tuple[Path, Path]] = []

    def is_available(self) -> bool:
        return self.available

    def restore(self, dsym: Path, symbol_maps: Path) -> None:
        self.calls.append((dsym, symbol_maps))
        if self.fail:
            raise ToolError("dsymutil", 1, "could not apply symbol map")


class FakeSession:
    """Records multipart posts and replies with a fixed body or error."""

    def __init__(self, body: str = "OK", error: Exception | None = None):
        self.body = body
        self.error = error
        self.calls: list[dict] = []

    def post(self, url, data=None, files=None, timeout=None):
        self.calls.append(
            {
                "url": url,
                "data": dict(data or {}),
                "files": {name: (part[0], part[1].read()) for name, part in (files or {}).items()},
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.body, status_code=200)


def make_dsym(root: Path, name: str = "App.app.dSYM", archs=("arm64",)) -> Path:
    """Create a well-formed dSYM bundle with one DWARF file per arch."""
    dwarf_dir = root / name / "Contents" / "Resources" / "DWARF"
    dwarf_dir.mkdir(parents=True)
    for arch in archs:
        (dwarf_dir / f"App-{arch}").write_bytes(b"\xcf\xfa\xed\xfe" + arch.encode())
    return root / name


@pytest.fixture
def uuid_reader():
    return FakeUuidReader()


@pytest.fixture
def restorer():
    return FakeRestorer()


@pytest.fixture
def toolchain(uuid_reader, restorer):
    return Toolchain(
        uuid_reader=uuid_reader,
        symbol_map_restorer=restorer,
        archive_extractor=ZipExtractor(),
    )


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def reporter(output):
    console = Console(file=output, highlight=False, soft_wrap=True, width=200)
    return Reporter(console=console, err_console=console)


@pytest.fixture
def config(tmp_path):
    return UploadConfig(path=tmp_path)


@pytest.fixture
def dsym_factory():
    return make_dsym
