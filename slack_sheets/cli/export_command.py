"""
Export Commands - Write Slack listings to workbook sheets

Each command fetches one listing, flattens it and replaces one sheet.
"""

import sys
import click

from slack_sheets.cli.context import build_client, init_logging
from slack_sheets.components.common.slack_client import SlackError
from slack_sheets.components.destination.workbook_destination import WorkbookDestination
from slack_sheets.orchestrator.exporter import ExportResult, SheetExporter


def _report(result: ExportResult, workbook_path) -> None:
    click.echo(f"\n✓ Export complete!")
    click.echo(f"  Workbook: {workbook_path}")
    click.echo(f"  Sheet: {result.sheet_name} ({result.range})")
    click.echo(f"  Rows: {result.rows}")
    click.echo(f"  Columns: {result.columns}")


def _run_export(settings, component, export):
    init_logging(settings, component)
    client = build_client(settings)
    exporter = SheetExporter(client, WorkbookDestination(settings.WORKBOOK_PATH))

    try:
        result = export(exporter)
    except SlackError as e:
        click.echo(f"\n✗ Export failed: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"\n✗ Could not build table: {e}", err=True)
        sys.exit(1)

    _report(result, settings.WORKBOOK_PATH)


@click.command('channels')
@click.argument('sheet')
@click.option('--field', '-f', 'fields', multiple=True, help='Column to include (repeatable, default: all keys of the first channel)')
@click.option(
    '--include-archived',
    is_flag=True,
    default=False,
    help='Include archived channels (default: excluded)'
)
@click.option('--types', default='public_channel,private_channel', show_default=True, help='Comma-separated channel types')
@click.option('--limit', type=int, default=100, show_default=True, help='Maximum number of channels')
@click.pass_obj
def channels_command(settings, sheet, fields, include_archived, types, limit):
    """
    Export the channel list to a sheet.

    SHEET: Sheet name (created if absent, replaced if present)

    \b
    Examples:
      python main.py channels Channels
      python main.py channels Channels -f id -f name -f topic.value
      python main.py channels Public --types public_channel --include-archived
    """
    _run_export(
        settings,
        'slack-sheets-channels-command',
        lambda exporter: exporter.export_channels(
            sheet,
            fields=list(fields) or None,
            exclude_archived=not include_archived,
            types=types,
            limit=limit
        )
    )


@click.command('users')
@click.argument('sheet')
@click.option('--field', '-f', 'fields', multiple=True, help='Column to include (repeatable, default: all keys of the first user)')
@click.pass_obj
def users_command(settings, sheet, fields):
    """
    Export the member list to a sheet.

    SHEET: Sheet name (created if absent, replaced if present)

    \b
    Examples:
      python main.py users Users
      python main.py users Users -f id -f name -f profile.email
    """
    _run_export(
        settings,
        'slack-sheets-users-command',
        lambda exporter: exporter.export_users(sheet, fields=list(fields) or None)
    )
