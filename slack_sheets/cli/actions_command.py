"""
Action Commands - Single Slack API calls

create-channel, invite, open-dm and post each make one request and print
the interesting part of the response.
"""

import sys
import click

from slack_sheets.cli.context import build_client, init_logging
from slack_sheets.components.common.slack_client import SlackError


def _call(settings, component, action):
    init_logging(settings, component)
    client = build_client(settings)

    try:
        return action(client)
    except SlackError as e:
        click.echo(f"\n✗ Slack request failed: {e}", err=True)
        sys.exit(1)


@click.command('create-channel')
@click.argument('name')
@click.option('--public', is_flag=True, default=False, help='Create a public channel (default: private)')
@click.pass_obj
def create_channel_command(settings, name, public):
    """
    Create a channel.

    NAME: Channel name (lowercase, no spaces)
    """
    channel = _call(
        settings,
        'slack-sheets-create-channel-command',
        lambda client: client.create_channel(name, is_private=not public)
    )
    click.echo(f"\n✓ Channel created: #{channel.get('name', name)} ({channel.get('id')})")


@click.command('invite')
@click.argument('channel_id')
@click.argument('user_ids', nargs=-1, required=True)
@click.pass_obj
def invite_command(settings, channel_id, user_ids):
    """
    Invite users to a channel.

    CHANNEL_ID: Channel ID (e.g. C0123456789)
    USER_IDS: One or more user IDs
    """
    _call(
        settings,
        'slack-sheets-invite-command',
        lambda client: client.invite_to_channel(channel_id, list(user_ids))
    )
    click.echo(f"\n✓ Invited {len(user_ids)} user(s) to {channel_id}")


@click.command('open-dm')
@click.argument('user_ids', nargs=-1, required=True)
@click.pass_obj
def open_dm_command(settings, user_ids):
    """
    Open a direct message with one or more users.

    USER_IDS: One or more user IDs
    """
    channel = _call(
        settings,
        'slack-sheets-open-dm-command',
        lambda client: client.open_direct_message(list(user_ids))
    )
    click.echo(f"\n✓ Conversation open: {channel.get('id')}")


@click.command('post')
@click.argument('channel_id')
@click.argument('text')
@click.pass_obj
def post_command(settings, channel_id, text):
    """
    Post a message to a channel.

    CHANNEL_ID: Channel ID or name (e.g. '#general')
    TEXT: Message text
    """
    response = _call(
        settings,
        'slack-sheets-post-command',
        lambda client: client.post_message(channel_id, text)
    )
    click.echo(f"\n✓ Message posted to {response.get('channel', channel_id)} (ts: {response.get('ts')})")
