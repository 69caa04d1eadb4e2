"""Slack incoming-webhook channel adapter."""

import json
from types import MappingProxyType
from typing import Any, Callable, Mapping
from urllib.parse import urlencode

from pydantic import ValidationError

from slack_notifier.channels import ChannelPayload
from slack_notifier.channels.format_value import format_node_list, slack_link
from slack_notifier.config import PluginConfig
from slack_notifier.errors import RenderError
from slack_notifier.schemas import ExecutionData
from slack_notifier.triggers import SLACK_MESSAGE_TEMPLATE, PresentationEntry, Trigger

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"

TRIGGER_STATES = MappingProxyType({
    Trigger.START: "Started",
    Trigger.SUCCESS: "Succeeded",
    Trigger.FAILURE: "Failed",
})


def _field(title: str, value: str, short: bool = True) -> dict[str, Any]:
    return {"title": title, "value": value, "short": short}


def build_attachment(trigger: Trigger, color: str, execution: ExecutionData) -> dict[str, Any]:
    state = TRIGGER_STATES[trigger]
    job_link = slack_link(execution.job.href, execution.job.display_name)
    message = f"{slack_link(execution.href, f'Execution #{execution.id}')} of job {job_link}"

    fields = [
        _field("Job Name", job_link),
        _field("Project", execution.project),
        _field("Status", state),
        _field("Execution ID", slack_link(execution.href, f"#{execution.id}")),
    ]
    if trigger is Trigger.FAILURE:
        fields.append(
            _field(
                "Failed Nodes",
                format_node_list(execution.failed_node_list_string, execution.failed_node_list),
                short=False,
            )
        )

    return {
        "fallback": f"{state}: {message}",
        "pretext": message,
        "color": color,
        "fields": fields,
    }


def build_incoming_message(trigger: Trigger, color: str, execution: ExecutionData) -> dict[str, Any]:
    return {"attachments": [build_attachment(trigger, color, execution)]}


# Presentation template name -> payload builder
MESSAGE_BUILDERS: Mapping[str, Callable[[Trigger, str, ExecutionData], dict]] = MappingProxyType({
    SLACK_MESSAGE_TEMPLATE: build_incoming_message,
})


def render_message(trigger: Trigger, entry: PresentationEntry, execution_data: Mapping) -> str:
    """
    Render the JSON message for one notification.

    Raises:
        RenderError: unknown template, or execution data lacking fields the
            message needs. No partial message is ever returned.
    """
    builder = MESSAGE_BUILDERS.get(entry.template)
    if builder is None:
        raise RenderError(f"Error loading Slack notification message template: [{entry.template}].")

    try:
        execution = ExecutionData.model_validate(execution_data)
    except ValidationError as exc:
        missing = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise RenderError(
            f"Error merging Slack notification message template: [invalid execution data: {missing}]."
        ) from exc

    return json.dumps(builder(trigger, entry.color, execution), ensure_ascii=False)


def format_slack(config: PluginConfig, message: str) -> ChannelPayload:
    """Wrap a rendered message into the form POST Slack incoming webhooks accept."""
    return ChannelPayload(
        method="POST",
        url=config.webhook_url,
        headers={"Content-Type": FORM_CONTENT_TYPE},
        body=urlencode({"payload": message}),
    )
