#!/usr/bin/env python3
"""
Slack Sheets - Main Entry Point

Export Slack channels and members into workbook sheets, and run simple
Slack actions from the command line.

Commands:
  channels        - Export the channel list to a sheet
  users           - Export the member list to a sheet
  create-channel  - Create a channel
  invite          - Invite users to a channel
  open-dm         - Open a direct message
  post            - Post a message
  workflow        - Run a batch of exports from a YAML file

Usage:
  python main.py channels Channels
  python main.py users Users -f id -f name -f profile.email
  python main.py workflow [config.yaml]
"""

import click

from slack_sheets import __version__
from slack_sheets.cli.context import load_settings
from slack_sheets.cli.export_command import channels_command, users_command
from slack_sheets.cli.actions_command import (
    create_channel_command,
    invite_command,
    open_dm_command,
    post_command,
)
from slack_sheets.cli.workflow_command import workflow_command


@click.group()
@click.version_option(version=__version__, prog_name='Slack Sheets')
@click.option('--token', envvar='SLACK_TOKEN', help='Slack OAuth token (default: $SLACK_TOKEN)')
@click.option(
    '--workbook', '-w',
    type=click.Path(dir_okay=False),
    help='Workbook to write to (default: $WORKBOOK_PATH or ./slack.xlsx)'
)
@click.pass_context
def cli(ctx, token, workbook):
    """
    Slack Sheets - Slack listings as spreadsheet tables

    Nested Slack objects are flattened into columns with dotted names,
    e.g. profile.email or topic.value.

    \b
    Examples:
      # Export channels, then users
      python main.py channels Channels
      python main.py users Users

      # Only some columns
      python main.py users Users -f id -f real_name -f profile.email

      # Run default workflow
      python main.py workflow
    """
    ctx.obj = load_settings(token=token, workbook=workbook)


# Add commands
cli.add_command(channels_command)
cli.add_command(users_command)
cli.add_command(create_channel_command)
cli.add_command(invite_command)
cli.add_command(open_dm_command)
cli.add_command(post_command)
cli.add_command(workflow_command)


if __name__ == '__main__':
    cli()
