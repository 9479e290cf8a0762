"""Configuration loader with YAML parsing and environment substitution.

Loads webhook configuration files, replacing ${VAR_NAME} placeholders with
environment variables before parsing, then validating with Pydantic.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mmhook.config.models import WebhookConfig
from mmhook.exceptions import ConfigurationError

ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class ConfigLoader:
    """Loads and validates webhook configuration.

    The webhook settings may sit at the top level of the file or under a
    ``webhook:`` key, so they can live next to other settings of a larger
    application config.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load_file("mattermost.yaml")
        >>> config.webhook_url
        'https://chat.example.com/hooks/xxx'
    """

    def load_file(self, config_path: str | Path) -> WebhookConfig:
        """Load webhook configuration from a YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Validated WebhookConfig

        Raises:
            ConfigurationError: If file not found, parsing fails, or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                config_path=str(config_path),
            )

        try:
            raw_content = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file: {e}",
                config_path=str(config_path),
            ) from e

        try:
            config_dict = self._parse_yaml(raw_content)
        except ConfigurationError as e:
            e.config_path = str(config_path)
            raise

        return self._validate(config_dict, config_path=str(config_path))

    def load_dict(self, config_dict: dict[str, Any]) -> WebhookConfig:
        """Load webhook configuration from a dictionary.

        Useful for programmatic configuration or testing.

        Raises:
            ConfigurationError: If validation fails
        """
        return self._validate(config_dict)

    def _validate(
        self,
        config_dict: dict[str, Any],
        config_path: str | None = None,
    ) -> WebhookConfig:
        if "webhook" in config_dict and isinstance(config_dict["webhook"], dict):
            config_dict = config_dict["webhook"]

        try:
            return WebhookConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                config_path=config_path,
            ) from e

    def _parse_yaml(self, yaml_content: str) -> dict[str, Any]:
        """Substitute environment variables, then parse YAML.

        Raises:
            ConfigurationError: If substitution or parsing fails
        """
        content = self._substitute_env_vars(yaml_content)

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"YAML parsing failed: {e}") from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML mapping (dict)")

        return config_dict

    def _substitute_env_vars(self, content: str) -> str:
        """Substitute environment variables in format ${VAR_NAME}.

        Supports:
        - ${VAR_NAME} - required variable (raises error if not set)
        - ${VAR_NAME:-default_value} - optional with default value

        Example:
            Input: "webhook_url: ${MM_HOOK:-http://localhost:8065/hooks/dev}"
            Output: "webhook_url: http://localhost:8065/hooks/dev" (if MM_HOOK not set)
        """

        def replace_var(match: re.Match) -> str:
            full_match = match.group(1)

            if ":-" in full_match:
                var_name, default_value = full_match.split(":-", 1)
                var_name = var_name.strip()
                default_value = default_value.strip()
            else:
                var_name = full_match.strip()
                default_value = None

            value = os.environ.get(var_name)

            if value is None:
                if default_value is not None:
                    return default_value
                raise ConfigurationError(
                    f"Required environment variable not set: {var_name}",
                    field=f"${{{var_name}}}",
                )

            return value

        return ENV_VAR_PATTERN.sub(replace_var, content)
