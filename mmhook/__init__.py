"""mmhook - post messages to Mattermost incoming webhooks.

Two building blocks:
- MessageBody: the JSON payload (only fields that are set get sent)
- send_message: one blocking POST, returns the HTTP status code

Example:
    >>> from mmhook import MessageBody, send_message
    >>> body = MessageBody()
    >>> body.text = "Deploy finished"
    >>> status = send_message("https://chat.example.com/hooks/xxx", body.to_json())
"""

__version__ = "0.1.0"

from mmhook.client import WebhookClient
from mmhook.config import ConfigLoader, WebhookConfig
from mmhook.exceptions import (
    ConfigurationError,
    MMHookError,
    SerializationError,
    TransportError,
)
from mmhook.models import MessageBody
from mmhook.transport import send_message

__all__ = [
    "__version__",
    "MessageBody",
    "send_message",
    "WebhookClient",
    "WebhookConfig",
    "ConfigLoader",
    "MMHookError",
    "SerializationError",
    "TransportError",
    "ConfigurationError",
]
