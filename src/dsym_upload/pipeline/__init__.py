"""Pipeline for discovering, checking and uploading dSYMs."""

from .discovery import find_dsyms
from .upload import upload_dsyms, upload_from_path

__all__ = ["find_dsyms", "upload_dsyms", "upload_from_path"]
