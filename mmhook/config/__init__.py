"""Webhook configuration loading and validation."""

from mmhook.config.loader import ConfigLoader
from mmhook.config.models import WebhookConfig

__all__ = ["ConfigLoader", "WebhookConfig"]
