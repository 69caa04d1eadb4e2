"""Display formatting for values that end up in Slack attachment fields."""

from typing import Any, Optional

FAILED_NODES_PLACEHOLDER = "- (Job itself failed)"


def slack_link(href: str, label: Any) -> str:
    """Slack link markup, ``<url|label>``. Both parts are used verbatim."""
    return f"<{href}|{label}>"


def format_node_list(
    node_list_string: Optional[str],
    node_list: Optional[list[Any]],
) -> str:
    """
    Render the failed nodes of an execution.

    - The host's preformatted string wins when present.
    - Otherwise a list of node names is joined with ", ".
    - With neither, the job itself failed before reaching any node.
    """
    if node_list_string:
        return node_list_string
    if node_list:
        return ", ".join(str(n) for n in node_list)
    return FAILED_NODES_PLACEHOLDER
