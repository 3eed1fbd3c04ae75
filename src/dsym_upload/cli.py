"""CLI entrypoint for dsym-upload."""

import sys
from pathlib import Path
from typing import Annotated

import typer

from dsym_upload.config import build_config
from dsym_upload.console import Reporter
from dsym_upload.errors import DsymUploadError
from dsym_upload.pipeline.upload import upload_from_path
from dsym_upload.server.client import create_session
from dsym_upload.toolchain import detect_toolchain

app = typer.Typer(
    name="dsym-upload",
    help="Upload dSYM debug symbols to Bugsnag",
    add_completion=False,
)

# The first positional argument ends option parsing; anything after it is ignored.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "allow_interspersed_args": False,
    "allow_extra_args": True,
}


def version_callback(value: bool):
    if value:
        from dsym_upload import __version__

        typer.echo(f"dsym-upload version {__version__}")
        raise typer.Exit()


@app.command(context_settings=CONTEXT_SETTINGS)
def upload(
    path: Annotated[
        Path,
        typer.Argument(help="Directory or .zip archive containing dSYM files", show_default=False),
    ],
    silent: Annotated[
        bool, typer.Option("--silent", "-s", help="Suppress all non-essential output")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Print progress for every file")
    ] = False,
    ignore_missing_dwarf: Annotated[
        bool,
        typer.Option(
            "--ignore-missing-dwarf",
            help="Warn instead of failing when a dSYM has no DWARF data",
        ),
    ] = False,
    ignore_empty_dsym: Annotated[
        bool,
        typer.Option(
            "--ignore-empty-dsym",
            help="Warn instead of failing when a dSYM is an empty file",
        ),
    ] = False,
    symbol_maps: Annotated[
        Path | None,
        typer.Option(
            "--symbol-maps",
            metavar="DIR",
            help="Directory of bitcode symbol maps to apply with dsymutil",
        ),
    ] = None,
    upload_server: Annotated[
        str | None,
        typer.Option(
            "--upload-server",
            metavar="URL",
            help="Upload endpoint [default: https://upload.bugsnag.com]",
        ),
    ] = None,
    api_key: Annotated[
        str | None, typer.Option("--api-key", metavar="KEY", help="Bugsnag API key")
    ] = None,
    project_root: Annotated[
        str | None,
        typer.Option("--project-root", metavar="DIR", help="Root directory of the project"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", metavar="FILE", help="YAML file with default settings"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = False,
):
    """Find dSYM files in PATH and upload their DWARF data."""
    reporter = Reporter(verbose=verbose, silent=silent)

    try:
        upload_config = build_config(
            path,
            config_file=config,
            upload_server=upload_server,
            symbol_maps=symbol_maps,
            api_key=api_key,
            project_root=project_root,
            # Unset flags must not override the config file.
            ignore_missing_dwarf=ignore_missing_dwarf or None,
            ignore_empty_dsym=ignore_empty_dsym or None,
        )
        result = upload_from_path(upload_config, detect_toolchain(), create_session(), reporter)
    except DsymUploadError as e:
        reporter.error(str(e))
        reporter.err_console.print("Run 'dsym-upload --help' for usage.")
        raise typer.Exit(code=1)

    if result.exit_code:
        raise typer.Exit(code=result.exit_code)


def main():
    """Console script entry point; usage errors exit with status 1."""
    try:
        app()
    except SystemExit as e:
        # click reports usage errors with status 2
        if e.code == 2:
            sys.exit(1)
        raise


if __name__ == "__main__":
    main()
