"""mmhook CLI main entry point.

This module provides the command line interface using Click framework.
"""

import logging
import sys
from pathlib import Path

import click

from mmhook import __version__
from mmhook.client import WebhookClient
from mmhook.config import ConfigLoader, WebhookConfig
from mmhook.exceptions import ConfigurationError, MMHookError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def _parse_vars(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ("key=value", ...) into a template context."""
    context = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--var")
        key, value = pair.split("=", 1)
        context[key.strip()] = value
    return context


@click.group()
@click.version_option(version=__version__, prog_name="mmhook")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging (DEBUG level)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress all output except errors",
)
def cli(verbose: bool, quiet: bool) -> None:
    """mmhook - post messages to Mattermost incoming webhooks.

    \b
    Examples:
        mmhook send --url https://chat.example.com/hooks/xxx --text "hi"
        mmhook send -c mattermost.yaml --var service=api
        mmhook validate mattermost.yaml
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.ERROR)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML webhook configuration file",
)
@click.option("--url", "-u", help="Webhook URL (overrides config)")
@click.option("--text", "-t", help="Message text (read from stdin if omitted)")
@click.option("--username", help="Bot display name")
@click.option("--channel", help="Channel name or ID")
@click.option("--icon-url", help="Avatar URL")
@click.option("--icon-emoji", help="Avatar emoji")
@click.option(
    "--var",
    "variables",
    multiple=True,
    metavar="KEY=VALUE",
    help="Variable for message_template (repeatable)",
)
def send(
    config_path: Path | None,
    url: str | None,
    text: str | None,
    username: str | None,
    channel: str | None,
    icon_url: str | None,
    icon_emoji: str | None,
    variables: tuple[str, ...],
) -> None:
    """Send one message to a webhook.

    Exits with status 0 when the server answers 2xx, 1 otherwise.

    \b
    Examples:
        mmhook send --url https://chat.example.com/hooks/xxx --text "hi"
        echo "build failed" | mmhook send -c mattermost.yaml --channel ci
    """
    context = _parse_vars(variables)

    try:
        if config_path:
            config = ConfigLoader().load_file(config_path)
            if url:
                config = ConfigLoader().load_dict({**config.model_dump(), "webhook_url": url})
        elif url:
            config = ConfigLoader().load_dict({"webhook_url": url})
        else:
            raise ConfigurationError("Either --config or --url is required")

        client = WebhookClient(config)

        if text is None:
            if config.message_template:
                text = client.render_text(**context)
            else:
                stdin = click.get_text_stream("stdin")
                if not stdin.isatty():
                    text = stdin.read().strip() or None

        if not text:
            raise ConfigurationError("No message text: use --text, stdin or message_template")

        status = client.send(
            text,
            username=username,
            channel=channel,
            icon_url=icon_url,
            icon_emoji=icon_emoji,
        )

    except ConfigurationError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)
    except MMHookError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Status: {status}")
    if not 200 <= status < 300:
        sys.exit(1)


@cli.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(config_path: Path) -> None:
    """Validate a webhook configuration file without sending anything.

    CONFIG_PATH: Path to YAML configuration file
    """
    try:
        config = ConfigLoader().load_file(config_path)
    except ConfigurationError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)

    _print_summary(config)
    click.echo()
    click.echo("✅ Configuration is valid!")


def _print_summary(config: WebhookConfig) -> None:
    click.echo(f"Webhook: {config.webhook_url}")
    click.echo(f"Username: {config.username or '(webhook default)'}")
    click.echo(f"Channel: {config.channel or '(webhook default)'}")
    click.echo(f"Timeout: {config.timeout if config.timeout is not None else 'none'}")
    click.echo(f"Template: {'yes' if config.message_template else 'no'}")


if __name__ == "__main__":
    cli()
