"""Configuration loading and validation."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from dsym_upload.errors import ConfigurationError

DEFAULT_UPLOAD_SERVER = "https://upload.bugsnag.com"


class UploadConfig(BaseModel):
    """Settings for a single upload run."""

    path: Path
    upload_server: str = DEFAULT_UPLOAD_SERVER
    symbol_maps: Path | None = None
    api_key: str | None = None
    project_root: str | None = None
    ignore_missing_dwarf: bool = False
    ignore_empty_dsym: bool = False
    timeout: float | None = None

    @field_validator("path", "symbol_maps", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        """Expand environment variables and ~ in path."""
        if v is None:
            return v
        expanded = os.path.expandvars(os.path.expanduser(str(v)))
        return Path(expanded)

    @field_validator("upload_server")
    @classmethod
    def check_upload_server(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"upload server must be an http(s) URL, got '{v}'")
        return v


# Keys a config file may set; everything else comes from the command line.
FILE_KEYS = {
    "upload_server",
    "symbol_maps",
    "api_key",
    "project_root",
    "ignore_missing_dwarf",
    "ignore_empty_dsym",
    "timeout",
}


def load_config_file(config_path: Path) -> dict[str, Any]:
    """
    Load upload defaults from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Mapping of config keys to values

    Raises:
        ConfigurationError: If the file is missing, unreadable or has unknown keys
    """
    if not config_path.is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    unknown = set(data) - FILE_KEYS
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in {config_path}: {sorted(unknown)}. Allowed: {sorted(FILE_KEYS)}"
        )
    return data


def build_config(
    path: Path,
    config_file: Path | None = None,
    **overrides: Any,
) -> UploadConfig:
    """
    Merge config file defaults with command line values.

    Overrides set to None are treated as "not given" and fall back to the
    config file, then to the model defaults.
    """
    values: dict[str, Any] = {}
    if config_file is not None:
        values.update(load_config_file(config_file))

    values.update({key: value for key, value in overrides.items() if value is not None})
    values["path"] = path

    try:
        return UploadConfig(**values)
    except ValidationError as e:
        messages = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors(include_url=False)
        ]
        raise ConfigurationError("; ".join(messages)) from e
