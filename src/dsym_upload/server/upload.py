"""Upload DWARF files to the symbol server."""

from dataclasses import dataclass
from pathlib import Path

import requests

INVALID_API_KEY = "invalid apiKey"
OK_RESPONSE = "OK"


@dataclass
class UploadResponse:
    """Outcome of a single upload attempt."""

    ok: bool
    body: str = ""
    error: str | None = None

    @property
    def should_echo(self) -> bool:
        """Whether the body is worth showing; a bare OK is not."""
        return bool(self.body) and self.body != OK_RESPONSE


def classify_response(body: str) -> UploadResponse:
    """Classify a response body from a request that reached the server."""
    body = body.rstrip("\r\n")
    if body == INVALID_API_KEY:
        return UploadResponse(ok=False, body=body, error="Invalid API key")
    return UploadResponse(ok=True, body=body)


def upload_dwarf_file(
    session: requests.Session,
    dwarf_file: Path,
    upload_server: str,
    api_key: str | None = None,
    project_root: str | None = None,
    timeout: float | None = None,
) -> UploadResponse:
    """
    POST a DWARF file as multipart form data.

    Exactly one attempt is made. Any response that arrives counts as a
    completed transfer; only the body decides success.

    Args:
        session: requests session
        dwarf_file: File to upload as the "dsym" part
        upload_server: Upload endpoint URL
        api_key: Optional "apiKey" field
        project_root: Optional "projectRoot" field
        timeout: Request timeout in seconds

    Returns:
        UploadResponse
    """
    data = {}
    if project_root:
        data["projectRoot"] = project_root
    if api_key:
        data["apiKey"] = api_key

    try:
        with open(dwarf_file, "rb") as f:
            response = session.post(
                upload_server,
                data=data,
                files={"dsym": (dwarf_file.name, f, "application/octet-stream")},
                timeout=timeout,
            )
    except (requests.RequestException, OSError) as e:
        return UploadResponse(ok=False, error=str(e))

    return classify_response(response.text)
