"""Slack notifier: resolve presentation, render, deliver, interpret."""

import logging
from typing import Mapping, Optional

import httpx

from slack_notifier.channels.slack import format_slack, render_message
from slack_notifier.config import PluginConfig
from slack_notifier.delivery import DEFAULT_TIMEOUT, DeliveryOutcome, deliver
from slack_notifier.errors import NotificationError, UnexpectedResponseError
from slack_notifier.triggers import TRIGGER_PRESENTATION, parse_trigger

logger = logging.getLogger(__name__)


class Notifier:
    """
    Posts one Slack message per job lifecycle event.

    Holds no per-notification state, so a single instance may serve
    concurrent callers.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout = timeout
        self.transport = transport

    def notify(self, trigger: str, execution_data: Mapping, config: Mapping) -> DeliveryOutcome:
        """
        Run the whole pipeline. Never raises a NotificationError; the first
        failing step is reported in the returned outcome.
        """
        try:
            resolved = parse_trigger(trigger)
            entry = TRIGGER_PRESENTATION[resolved]
            message = render_message(resolved, entry, execution_data)
            plugin_config = PluginConfig.from_config(config)
        except NotificationError as exc:
            logger.warning("Slack notification for trigger %r not sent (%s): %s", trigger, exc.kind, exc)
            return DeliveryOutcome.failed(exc)

        payload = format_slack(plugin_config, message)
        outcome = deliver(payload, timeout=self.timeout, transport=self.transport)

        if outcome.success:
            logger.info("Slack notification for trigger %s delivered to %s", trigger, plugin_config.masked_webhook_url)
        elif isinstance(outcome.error, UnexpectedResponseError):
            logger.warning(
                "Slack at %s rejected notification for trigger %s: %s",
                plugin_config.masked_webhook_url,
                trigger,
                outcome.error.response_body[:200],
            )
        else:
            logger.error(
                "Failed to send Slack notification to %s (%s): %s",
                plugin_config.masked_webhook_url,
                outcome.error.kind,
                outcome.message,
                exc_info=outcome.error,
            )
        return outcome
