"""Adapter configuration: webhook base URL and token."""

from typing import Mapping

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from slack_notifier.errors import InvalidConfigError

DEFAULT_WEBHOOK_BASE_URL = "https://hooks.slack.com/services"


class PluginConfig(BaseSettings):
    webhook_base_url: str = Field(
        DEFAULT_WEBHOOK_BASE_URL,
        title="WebHook Base URL",
        description="Slack Incoming WebHook Base URL",
    )
    webhook_token: str = Field(
        ...,
        min_length=1,
        title="WebHook Token",
        description="WebHook Token, like T00000000/B00000000/XXXXXXXXXXXXXXXXXXXXXXXX",
        json_schema_extra={"password": True},
    )

    # Values passed by the host win over SLACK_* environment variables
    model_config = {"env_prefix": "SLACK_", "extra": "ignore", "frozen": True}

    @classmethod
    def from_config(cls, config: Mapping) -> "PluginConfig":
        """
        Build from the host's configuration mapping.

        Keys other than the model fields are ignored. Keys that are present
        but empty fall back to the default (base URL) or fail validation (token).
        """
        values = {
            k: v for k, v in (config or {}).items()
            if k in cls.model_fields and v not in (None, "")
        }
        try:
            return cls(**values)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise InvalidConfigError(f"Invalid Slack plugin configuration: {problems}") from exc

    @property
    def webhook_url(self) -> str:
        return f"{self.webhook_base_url}/{self.webhook_token}"

    @property
    def masked_webhook_url(self) -> str:
        return f"{self.webhook_base_url}/****"
