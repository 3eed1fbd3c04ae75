"""Pipeline for finding, checking and uploading dSYMs."""

from pathlib import Path

import requests

from dsym_upload.config import UploadConfig
from dsym_upload.console import Reporter
from dsym_upload.pipeline._shared import UploadResult
from dsym_upload.pipeline.discovery import find_dsyms
from dsym_upload.pipeline.inputs import check_symbol_maps, resolve_input
from dsym_upload.pipeline.validation import check_bundle
from dsym_upload.server.upload import upload_dwarf_file
from dsym_upload.toolchain import Toolchain


def upload_dwarf_dir(
    dwarf_dir: Path,
    config: UploadConfig,
    toolchain: Toolchain,
    session: requests.Session,
    reporter: Reporter,
    result: UploadResult,
) -> UploadResult:
    """Upload every architecture file in a DWARF directory."""
    files = (p for p in dwarf_dir.iterdir() if p.is_file() and not p.name.startswith("."))
    for dwarf_file in sorted(files):
        uuid = toolchain.uuid_reader.read_uuid(dwarf_file)
        if not uuid.startswith("UUID"):
            reporter.failure(f"Skipping file without UUID: {dwarf_file}")
            result.add_failure(dwarf_file, "No UUID found")
            continue

        reporter.verbose(f"Uploading {uuid}")
        response = upload_dwarf_file(
            session,
            dwarf_file,
            upload_server=config.upload_server,
            api_key=config.api_key,
            project_root=config.project_root,
            timeout=config.timeout,
        )

        if response.ok:
            result.uploaded += 1
        else:
            reporter.failure(f"Failed to upload file: {dwarf_file}")
            if response.error:
                reporter.verbose(response.error)
            result.add_failure(dwarf_file, response.error or "Upload failed")

        if response.should_echo:
            reporter.echo(response.body)

    return result


def upload_dsyms(
    root: Path,
    config: UploadConfig,
    toolchain: Toolchain,
    session: requests.Session,
    reporter: Reporter,
    result: UploadResult | None = None,
) -> UploadResult:
    """
    Check and upload every dSYM found beneath root.

    Flow:
    1. Discover *.dSYM entries
    2. Validate each bundle (and restore symbol maps if configured)
    3. Upload each DWARF file of valid bundles

    Returns:
        UploadResult with counts and any warnings/failures
    """
    if result is None:
        result = UploadResult()

    for dsym in find_dsyms(root):
        reporter.verbose(f"Processing {dsym}")
        check = check_bundle(dsym, config, toolchain)

        if check.status == "warning":
            reporter.warning(check.message)
            result.add_warning(dsym, check.message)
            continue
        if check.status == "failure":
            reporter.failure(check.message)
            result.add_failure(dsym, check.message)
            continue

        upload_dwarf_dir(check.dwarf_dir, config, toolchain, session, reporter, result)

    return result


def print_summary(result: UploadResult, reporter: Reporter):
    """Print outcome counts; zero counts are left out."""
    if result.uploaded:
        reporter.log(f"{result.uploaded} files uploaded successfully", style="green")
    if result.warnings:
        reporter.warning(f"{len(result.warnings)} files skipped")
    if result.failed:
        reporter.failure(f"{len(result.failed)} files failed to upload")

    if (result.warnings or result.failed) and not reporter.verbose_enabled:
        reporter.log("Re-run dsym-upload with the --verbose option for more information")


def upload_from_path(
    config: UploadConfig,
    toolchain: Toolchain,
    session: requests.Session,
    reporter: Reporter,
) -> UploadResult:
    """
    Full pipeline: resolve input -> discover -> validate -> upload -> summarize.

    The summary is printed even when a fatal error stops the run part-way;
    the error is re-raised afterwards.

    Args:
        config: Upload configuration
        toolchain: External utilities
        session: requests session used for every upload
        reporter: Console output

    Returns:
        UploadResult with counts and any warnings/failures

    Raises:
        DsymUploadError: On configuration errors or a failing external tool
    """
    check_symbol_maps(config.symbol_maps, toolchain.symbol_map_restorer)

    result = UploadResult()
    with resolve_input(config.path, toolchain.archive_extractor) as root:
        reporter.verbose(f"Searching {root} for dSYM files")
        try:
            upload_dsyms(root, config, toolchain, session, reporter, result)
        finally:
            print_summary(result, reporter)
    return result
