"""Symbol upload server client."""

from dsym_upload.server.client import create_session
from dsym_upload.server.upload import UploadResponse, classify_response, upload_dwarf_file

__all__ = ["create_session", "UploadResponse", "classify_response", "upload_dwarf_file"]
