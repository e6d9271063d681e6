"""
HTTP header maps for requests to the Bmob REST API.
"""

from __future__ import annotations

from bmob.protocol import constants as c


def build_headers(
    application_id: str,
    api_key: str | None = None,
    master_key: str | None = None,
    session_token: str | None = None,
) -> dict[str, str]:
    """Build the headers identifying the application and, optionally, the
    logged in user.

    Credentials given as ``None`` are left out.

    Args:
        application_id: The application ID, always required.
        api_key: The REST API key.
        master_key: The master key, for requests that bypass ACLs.
        session_token: Session token of a logged in user.

    Returns:
        A new dict of header name -> value, including
        ``Content-Type: application/json``.
    """
    headers = {
        c.HEADER_APP_ID: application_id,
        "Content-Type": "application/json",
    }
    if api_key is not None:
        headers[c.HEADER_API_KEY] = api_key
    if master_key is not None:
        headers[c.HEADER_MASTER_KEY] = master_key
    if session_token is not None:
        headers[c.HEADER_SESSION_TOKEN] = session_token
    return headers
