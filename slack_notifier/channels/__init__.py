"""Base types for the Slack channel adapter."""

from dataclasses import dataclass


@dataclass
class ChannelPayload:
    """Represents the HTTP request payload for a notification channel."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # form-encoded
