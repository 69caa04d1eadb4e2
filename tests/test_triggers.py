"""Tests for trigger to presentation lookup."""

import pytest

from slack_notifier.errors import UnknownTriggerError
from slack_notifier.triggers import (
    SLACK_MESSAGE_TEMPLATE,
    TRIGGER_PRESENTATION,
    PresentationEntry,
    Trigger,
    parse_trigger,
    resolve_presentation,
)


@pytest.mark.parametrize("name,color", [
    ("start", "warning"),
    ("success", "good"),
    ("failure", "danger"),
])
def test_known_triggers_resolve_to_color(name, color):
    entry = resolve_presentation(name)
    assert entry == PresentationEntry(SLACK_MESSAGE_TEMPLATE, color)


@pytest.mark.parametrize("name", ["Start", "FAILURE", "succes", "", " start", "avgduration"])
def test_unknown_trigger_rejected(name):
    with pytest.raises(UnknownTriggerError) as exc:
        resolve_presentation(name)
    assert exc.value.kind == "UnknownTrigger"
    assert f"[{name}]" in str(exc.value)


def test_mapping_covers_every_trigger_and_is_read_only():
    assert set(TRIGGER_PRESENTATION) == set(Trigger)
    with pytest.raises(TypeError):
        TRIGGER_PRESENTATION[Trigger.START] = PresentationEntry("x", "y")


def test_parse_trigger_returns_enum_member():
    assert parse_trigger("failure") is Trigger.FAILURE
