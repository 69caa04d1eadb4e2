"""
Host-facing plugin layer.

Rundeck registers notification plugins with a service name, a title and a
list of configuration properties, and calls ``post_notification`` with a
trigger and two maps. Everything Rundeck-specific lives here; the pipeline
itself is in ``slack_notifier.notifier``.
"""

from typing import Any, Mapping, Optional

from slack_notifier.config import PluginConfig
from slack_notifier.notifier import Notifier
from slack_notifier.validate import validate_url, validate_webhook_token

PLUGIN_SERVICE = "Notification"
PLUGIN_NAME = "SlackNotification"
PLUGIN_TITLE = "Slack Incoming WebHook"
PLUGIN_DESCRIPTION = "Sends Rundeck Notifications to Slack"


def describe_properties() -> list[dict[str, Any]]:
    """Configuration properties as the host's property UI expects them."""
    properties = []
    for name, info in PluginConfig.model_fields.items():
        extra = info.json_schema_extra or {}
        default = None if info.is_required() else info.default
        properties.append({
            "name": name,
            "title": info.title,
            "description": info.description,
            "required": True,
            "default": default,
            "password": bool(extra.get("password", False)),
        })
    return properties


def describe_plugin() -> dict[str, Any]:
    return {
        "service": PLUGIN_SERVICE,
        "name": PLUGIN_NAME,
        "title": PLUGIN_TITLE,
        "description": PLUGIN_DESCRIPTION,
        "properties": describe_properties(),
    }


def validate_plugin_config(config: Mapping) -> Optional[str]:
    """
    Check a property map before it is saved by the host.
    Returns None if valid, or an error message string if invalid.
    """
    base_url = config.get("webhook_base_url") or PluginConfig.model_fields["webhook_base_url"].default
    err = validate_url(base_url, "webhook_base_url")
    if err:
        return err
    return validate_webhook_token(config.get("webhook_token"))


class SlackNotificationPlugin:
    """Entry point the host invokes for each job notification."""

    def __init__(self, notifier: Optional[Notifier] = None):
        self.notifier = notifier or Notifier()

    def post_notification(self, trigger: str, execution_data: Mapping, config: Mapping) -> bool:
        """
        Send a Slack message for a job notification event.

        Returns True when Slack confirmed delivery. Any failure is raised as
        a NotificationError subclass so that the host logs its message.
        """
        outcome = self.notifier.notify(trigger, execution_data, config)
        if not outcome.success:
            raise outcome.error
        return True
