"""Single-shot HTTP delivery of a Slack payload and interpretation of the reply."""

from dataclasses import dataclass
from typing import Optional

import httpx

from slack_notifier.channels import ChannelPayload
from slack_notifier.errors import (
    MalformedURLError,
    NotificationError,
    ResponseReadError,
    UnexpectedResponseError,
    WebhookConnectionError,
)
from slack_notifier.validate import validate_url

DEFAULT_TIMEOUT = 10.0
SLACK_OK = "ok"


@dataclass(frozen=True)
class DeliveryOutcome:
    success: bool
    error: Optional[NotificationError] = None

    @classmethod
    def ok(cls) -> "DeliveryOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, error: NotificationError) -> "DeliveryOutcome":
        return cls(success=False, error=error)

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""


def webhook_http_client(
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
    **kwargs,
) -> httpx.Client:
    return httpx.Client(timeout=timeout, transport=transport, **kwargs)


def send_payload(
    payload: ChannelPayload,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """
    POST the payload and return the full response body decoded as UTF-8.

    The status code is not looked at; Slack's verdict is in the body.
    Client and response are closed on every exit path.

    Raises:
        MalformedURLError, WebhookConnectionError, ResponseReadError
    """
    err = validate_url(payload.url, "webhook_url")
    if err:
        raise MalformedURLError(f"Slack API URL is malformed: [{err}].")

    with webhook_http_client(timeout=timeout, transport=transport) as client:
        try:
            request = client.build_request(
                payload.method,
                payload.url,
                headers=payload.headers,
                content=payload.body.encode("utf-8"),
            )
        except httpx.InvalidURL as exc:
            raise MalformedURLError(f"Slack API URL is malformed: [{exc}].") from exc

        try:
            response = client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise WebhookConnectionError(
                f"Error opening connection to Slack URL: [{exc}]."
            ) from exc

        try:
            return response.read().decode("utf-8")
        except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError) as exc:
            raise ResponseReadError(
                f"Error reading Slack API response: [{exc}]."
            ) from exc
        finally:
            response.close()


def interpret_response(response_body: str, payload: ChannelPayload) -> DeliveryOutcome:
    if response_body == SLACK_OK:
        return DeliveryOutcome.ok()
    return DeliveryOutcome.failed(UnexpectedResponseError(response_body, payload.body))


def deliver(
    payload: ChannelPayload,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> DeliveryOutcome:
    try:
        response_body = send_payload(payload, timeout=timeout, transport=transport)
    except NotificationError as exc:
        return DeliveryOutcome.failed(exc)
    return interpret_response(response_body, payload)
