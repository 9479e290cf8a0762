"""Configured webhook client.

Binds a WebhookConfig to the body model and the transport so callers that
post repeatedly to the same webhook don't have to repeat URL and defaults.
"""

import logging
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

from mmhook.config.models import WebhookConfig
from mmhook.exceptions import ConfigurationError
from mmhook.models import MessageBody
from mmhook.transport import post_json

logger = logging.getLogger(__name__)


class WebhookClient:
    """Sends messages to one Mattermost webhook using configured defaults.

    Configured username, channel and icons are applied to every message;
    keyword overrides passed to build_body() or send() take precedence.
    The client holds no connection state, each send() is an independent
    POST.

    Example:
        >>> config = WebhookConfig(
        ...     webhook_url="https://chat.example.com/hooks/xxx",
        ...     username="Deploy Bot",
        ... )
        >>> client = WebhookClient(config)
        >>> status = client.send("Deploy finished", channel="releases")
    """

    DEFAULT_FIELDS = ("username", "channel", "icon_url", "icon_emoji")

    def __init__(self, config: WebhookConfig) -> None:
        self.config = config
        self._jinja_env = Environment(undefined=StrictUndefined)

    def build_body(self, text: str | None = None, **overrides: Any) -> MessageBody:
        """Build a message body from config defaults plus overrides.

        Args:
            text: Message text
            **overrides: Any MessageBody field; None values are ignored

        Returns:
            New MessageBody
        """
        body = MessageBody()

        for field in self.DEFAULT_FIELDS:
            default = getattr(self.config, field)
            if default is not None:
                setattr(body, field, default)

        if text is not None:
            body.text = text

        for field, value in overrides.items():
            if field not in MessageBody.model_fields:
                raise TypeError(f"Unknown message field: {field}")
            if value is not None:
                setattr(body, field, value)

        return body

    def render_text(self, **context: Any) -> str:
        """Render the configured message_template.

        Raises:
            ConfigurationError: If no template is configured or rendering fails
        """
        if not self.config.message_template:
            raise ConfigurationError(
                "No message_template configured",
                config_path="webhook.message_template",
            )

        try:
            template = self._jinja_env.from_string(self.config.message_template)
            return template.render(**context)
        except TemplateError as e:
            raise ConfigurationError(
                f"Failed to render message_template: {e}",
                config_path="webhook.message_template",
            ) from e

    def send(self, text: str | None = None, **overrides: Any) -> int:
        """Build, serialize and post one message.

        Returns:
            HTTP status code (non-2xx is returned, not raised)

        Raises:
            SerializationError: If the body cannot be encoded
            TransportError: If the request could not be completed
        """
        body = self.build_body(text, **overrides)
        status = post_json(self.config.webhook_url, body.to_json(), timeout=self.config.timeout)

        if 200 <= status < 300:
            logger.info(f"Message posted to webhook (status {status})")
        else:
            logger.warning(f"Webhook returned status {status}")

        return status
