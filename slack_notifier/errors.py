"""Error taxonomy for Slack notification delivery."""


class NotificationError(Exception):
    """Base class for every failure a notification attempt can end in."""

    kind = "NotificationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownTriggerError(NotificationError):
    kind = "UnknownTrigger"


class InvalidConfigError(NotificationError):
    kind = "InvalidConfig"


class RenderError(NotificationError):
    kind = "RenderError"


class MalformedURLError(NotificationError):
    kind = "MalformedURL"


class WebhookConnectionError(NotificationError):
    kind = "ConnectionError"


class ResponseReadError(NotificationError):
    kind = "ResponseReadError"


class UnexpectedResponseError(NotificationError):
    """Slack answered, but not with the literal ``ok``."""

    kind = "UnexpectedResponse"

    def __init__(self, response_body: str, form_body: str):
        super().__init__(
            f"Unknown status returned from Slack API: [{response_body}].\n{form_body}"
        )
        self.response_body = response_body
        self.form_body = form_body
