"""Configuration models using Pydantic for validation.

These models define the schema for webhook configuration YAML files.
"""

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError
from pydantic import BaseModel, Field, field_validator


class WebhookConfig(BaseModel):
    """Configuration for a Mattermost incoming webhook destination.

    Attributes:
        webhook_url: Incoming webhook URL (required)
        username: Default bot display name
        channel: Default channel override (webhook default if unset)
        icon_url: Default avatar URL
        icon_emoji: Default avatar emoji
        timeout: Request timeout in seconds (None = no timeout)
        message_template: Jinja2 template for message text

    Example:
        ```yaml
        webhook:
          webhook_url: "${MATTERMOST_WEBHOOK}"
          username: "Deploy Bot"
          channel: "releases"
          timeout: 10
          message_template: |
            :rocket: **{{ service }}** deployed to `{{ env }}`
        ```
    """

    webhook_url: str = Field(..., description="Incoming webhook URL")
    username: str | None = Field(default=None, description="Default bot display name")
    channel: str | None = Field(default=None, description="Default channel override")
    icon_url: str | None = Field(default=None, description="Default avatar URL")
    icon_emoji: str | None = Field(default=None, description="Default avatar emoji")
    timeout: float | None = Field(default=None, description="Request timeout in seconds", gt=0)
    message_template: str | None = Field(default=None, description="Jinja2 template for message text")

    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v: str) -> str:
        """Ensure URL is non-empty and uses http(s)."""
        v = v.strip()
        if not v:
            raise ValueError("webhook_url cannot be empty")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid webhook URL: {v}. Must start with http:// or https://")
        return v

    @field_validator("message_template")
    @classmethod
    def validate_message_template(cls, v: str | None) -> str | None:
        """Fail early on templates Jinja2 cannot parse."""
        if v is None:
            return v
        try:
            Environment(undefined=StrictUndefined).parse(v)
        except TemplateSyntaxError as e:
            raise ValueError(f"Invalid Jinja2 template in message_template: {e}") from e
        return v
