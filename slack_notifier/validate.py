"""Validation helpers. Each returns None when valid, or an error message."""

from typing import Optional
from urllib.parse import urlparse

import httpx


def validate_url(value, field_name: str) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return f"Missing required field: {field_name}"
    try:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https"):
            return f"{field_name} must use http or https protocol"
        if not parsed.hostname:
            return f"{field_name} is not a valid URL"
        parsed.port  # raises on a non-numeric or out-of-range port
        httpx.URL(value)
    except (ValueError, httpx.InvalidURL) as exc:
        return f"{field_name} is not a valid URL: {exc}"
    return None


def validate_webhook_token(token) -> Optional[str]:
    """Slack tokens look like ``T00000000/B00000000/XXXXXXXX``."""
    if not isinstance(token, str) or not token:
        return "Missing required field: webhook_token"
    parts = token.split("/")
    if len(parts) != 3 or not all(parts):
        return "webhook_token should look like T00000000/B00000000/XXXXXXXXXXXXXXXXXXXXXXXX"
    return None
