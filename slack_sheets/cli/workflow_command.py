"""
Workflow Command - Run a batch of exports

Executes every export listed in a workflow YAML file against one workbook.
"""

import sys
from pathlib import Path
import click

from slack_sheets.cli.context import build_client, init_logging
from slack_sheets.components.common.slack_client import SlackError
from slack_sheets.components.destination.workbook_destination import WorkbookDestination
from slack_sheets.orchestrator.exporter import SheetExporter
from slack_sheets.workflows import load_workflow, run_workflow


@click.command('workflow')
@click.argument(
    'config_file',
    type=click.Path(path_type=Path),
    required=False
)
@click.pass_obj
def workflow_command(settings, config_file):
    """
    Run a Slack Sheets workflow.

    CONFIG_FILE: Path to workflow YAML config (optional)

    If no config file is specified, uses: workflow_definitions/default.yaml

    \b
    Examples:
      # Run with default workflow
      python main.py workflow

      # Run with specific config
      python main.py workflow workflow_definitions/directory.yaml
    """
    if not config_file:
        config_file = Path('workflow_definitions/default.yaml')
        click.echo(f"Using default workflow: {config_file}")

    if not config_file.exists():
        click.echo(f"\n✗ Config file not found: {config_file}", err=True)
        if not config_file.is_absolute():
            click.echo(f"  Looking in: {config_file.absolute()}", err=True)
        sys.exit(1)

    try:
        workflow = load_workflow(config_file)
    except ValueError as e:
        click.echo(f"\n✗ Invalid workflow: {e}", err=True)
        sys.exit(1)

    init_logging(
        settings,
        'slack-sheets-workflow-command',
        log_dir=workflow.logging.log_dir,
        log_level=workflow.logging.log_level
    )

    workbook_path = Path(workflow.workbook.path) if workflow.workbook.path else settings.WORKBOOK_PATH
    client = build_client(settings)
    exporter = SheetExporter(client, WorkbookDestination(workbook_path))

    click.echo(f"\nWorkflow Configuration:")
    click.echo(f"  Workbook: {workbook_path}")
    click.echo(f"  Exports: {len(workflow.exports)}")
    click.echo(f"  Log dir: {workflow.logging.log_dir or settings.LOG_DIR}")
    click.echo("\nRunning workflow...\n")

    try:
        results = run_workflow(workflow, exporter)
    except (SlackError, ValueError) as e:
        click.echo(f"\n✗ Workflow failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"\n{'='*60}")
    click.echo(f"✓ Workflow complete!")
    click.echo(f"{'='*60}")
    for result in results:
        click.echo(f"  {result.sheet_name}: {result.rows} row(s), {result.columns} column(s) ({result.range})")
