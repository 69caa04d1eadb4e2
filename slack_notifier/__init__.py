"""Rundeck job notifications posted to a Slack incoming webhook."""

from slack_notifier.delivery import DeliveryOutcome
from slack_notifier.errors import (
    InvalidConfigError,
    MalformedURLError,
    NotificationError,
    RenderError,
    ResponseReadError,
    UnexpectedResponseError,
    UnknownTriggerError,
    WebhookConnectionError,
)
from slack_notifier.notifier import Notifier
from slack_notifier.plugin import SlackNotificationPlugin

__all__ = [
    "DeliveryOutcome",
    "InvalidConfigError",
    "MalformedURLError",
    "NotificationError",
    "Notifier",
    "RenderError",
    "ResponseReadError",
    "SlackNotificationPlugin",
    "UnexpectedResponseError",
    "UnknownTriggerError",
    "WebhookConnectionError",
]
