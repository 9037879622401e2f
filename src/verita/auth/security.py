"""Security utilities for OAuth 2.0 authorization requests.

Redirect URIs are stored and sent exactly as the caller supplied them, so the
raw string is checked before pydantic parses it; pydantic's URL parser repairs
some malformed input (missing slashes, stray whitespace) rather than
rejecting it.
"""

from __future__ import annotations

from typing import Annotated, Any
from urllib.parse import urlsplit

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

_ALLOWED_SCHEMES = ("http", "https")

_redirect_url_adapter = TypeAdapter(
    Annotated[
        AnyUrl,
        UrlConstraints(allowed_schemes=list(_ALLOWED_SCHEMES), host_required=True),
    ]
)


def validate_redirect_uri(uri: Any) -> bool:
    """Validate redirect URI is an absolute HTTP or HTTPS URL.

    Args:
        uri: Candidate redirect URI, of any type

    Returns:
        True if ``uri`` is a string with an http/https scheme, an authority
        with a non-empty host, and no whitespace, control characters or
        backslashes
    """
    if not isinstance(uri, str):
        return False
    if any(ch.isspace() or ch == "\\" or ord(ch) < 0x20 or ch == "\x7f" for ch in uri):
        return False

    try:
        parsed = urlsplit(uri)
        if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.hostname:
            return False
        _redirect_url_adapter.validate_python(uri)
    except (ValueError, ValidationError):
        return False
    return True
