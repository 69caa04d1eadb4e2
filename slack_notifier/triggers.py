"""Trigger to presentation lookup."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from slack_notifier.errors import UnknownTriggerError

SLACK_MESSAGE_TEMPLATE = "slack-incoming-message"

COLOR_GREEN = "good"
COLOR_YELLOW = "warning"
COLOR_RED = "danger"


class Trigger(str, Enum):
    START = "start"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class PresentationEntry:
    """How a trigger looks in Slack: which payload builder and which color bar."""
    template: str
    color: str


TRIGGER_PRESENTATION = MappingProxyType({
    Trigger.START: PresentationEntry(SLACK_MESSAGE_TEMPLATE, COLOR_YELLOW),
    Trigger.SUCCESS: PresentationEntry(SLACK_MESSAGE_TEMPLATE, COLOR_GREEN),
    Trigger.FAILURE: PresentationEntry(SLACK_MESSAGE_TEMPLATE, COLOR_RED),
})


def parse_trigger(name: str) -> Trigger:
    """Case-exact parse of a host trigger name."""
    try:
        return Trigger(name)
    except ValueError:
        raise UnknownTriggerError(f"Unknown trigger type: [{name}].") from None


def resolve_presentation(name: str) -> PresentationEntry:
    return TRIGGER_PRESENTATION[parse_trigger(name)]
