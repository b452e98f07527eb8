"""
Helpers shared by the CLI commands: settings, logging and client construction.
"""

import os
import sys

import click

from slack_sheets.components.common.slack_client import SlackClient
from slack_sheets.core.config import LOG_LEVELS, Settings, get_settings
from slack_sheets.utils.logging_setup import setup_logging


def load_settings(token=None, workbook=None) -> Settings:
    """Build settings, exiting with a message if they are invalid."""
    try:
        return get_settings(SLACK_TOKEN=token, WORKBOOK_PATH=workbook)
    except ValueError as e:
        click.echo(f"\n✗ Invalid configuration: {e}", err=True)
        sys.exit(1)


def init_logging(settings: Settings, component: str, log_dir=None, log_level=None) -> None:
    """Initialise logging; SLACK_SHEETS_LOG_LEVEL overrides the configured level."""
    log_level = os.getenv('SLACK_SHEETS_LOG_LEVEL', log_level or settings.LOG_LEVEL).upper()
    if log_level not in LOG_LEVELS:
        click.echo(f"\n✗ Invalid configuration: unknown log level '{log_level}' (expected one of: {', '.join(LOG_LEVELS)})", err=True)
        sys.exit(1)
    setup_logging(log_level=log_level, log_dir=log_dir or settings.LOG_DIR, component=component)


def build_client(settings: Settings) -> SlackClient:
    """Create the Slack client, exiting if no token is configured."""
    if not settings.SLACK_TOKEN:
        click.echo("\n✗ Error: no Slack token configured.", err=True)
        click.echo("  Set SLACK_TOKEN (environment or .env) or pass --token.", err=True)
        sys.exit(1)
    return SlackClient(settings.SLACK_TOKEN, base_url=settings.SLACK_API_BASE_URL)
