"""HTTP session for the symbol upload server."""

import requests

from dsym_upload import __version__

USER_AGENT = f"dsym-upload/{__version__}"


def create_session() -> requests.Session:
    """Create a requests session for uploads."""
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session
