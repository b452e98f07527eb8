"""
Slack Sheets - Workflow Loader

Loads a workflow definition from a YAML file and runs it.

THE LOADING PROCESS:
    1. Load .env file (if present) to populate environment variables
    2. Read YAML file from explicit path
    3. Resolve ${ENV_VAR} references in string values
    4. Validate the exports list
    5. Build WorkflowDefinition dataclasses

YAML STRUCTURE:
    workbook:
      path: ./slack.xlsx          # optional

    logging:                      # optional
      log_dir: ./logs
      log_level: INFO

    exports:
      - source: channels
        sheet: Channels
        fields: [id, name, topic.value]
        filters:
          exclude_archived: true
          types: public_channel
          limit: 200
      - source: users
        sheet: Users

ERROR HANDLING:
    - FileNotFoundError: YAML file doesn't exist
    - ValueError: missing/empty exports, unknown source, unset ${VAR}
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, List

import yaml
from dotenv import load_dotenv

from slack_sheets.orchestrator.exporter import ExportResult, SheetExporter
from .schema import WorkflowDefinition, ExportSpec, LoggingSpec, WorkbookSpec

logger = logging.getLogger(__name__)

ENV_REFERENCE = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)\}')


def resolve_env_vars(value: Any) -> Any:
    """
    Replace ${VAR} references with environment values, recursively.

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, dict):
        return {key: resolve_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve_env_vars(item) for item in value]
    if not isinstance(value, str):
        return value

    def substitute(match):
        name = match.group(1)
        if name not in os.environ:
            raise ValueError(f"Environment variable {name} referenced in workflow but not set")
        return os.environ[name]

    return ENV_REFERENCE.sub(substitute, value)


def load_workflow(yaml_path: Path) -> WorkflowDefinition:
    """
    Load workflow definition from YAML file.

    Args:
        yaml_path: Explicit path to workflow YAML file

    Returns:
        WorkflowDefinition

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is invalid or a referenced variable is unset
    """
    # Load .env file if it exists (populates os.environ)
    load_dotenv()

    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Workflow file not found: {yaml_path}")

    with open(yaml_path, encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Workflow file must contain a mapping: {yaml_path}")

    data = resolve_env_vars(data)

    exports = data.get('exports')
    if not exports or not isinstance(exports, list):
        raise ValueError(f"Missing or empty 'exports' list in workflow file: {yaml_path}")

    try:
        export_specs = [
            ExportSpec(
                source=item['source'],
                sheet=item['sheet'],
                fields=item.get('fields'),
                filters=item.get('filters') or {}
            )
            for item in exports
        ]

        workbook_spec = None
        if 'workbook' in data:
            workbook_spec = WorkbookSpec(path=(data['workbook'] or {}).get('path'))

        logging_spec = None
        if 'logging' in data:
            section = data['logging'] or {}
            logging_spec = LoggingSpec(
                log_dir=section.get('log_dir'),
                log_level=section.get('log_level')
            )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Invalid workflow structure in {yaml_path}: missing {e}")

    return WorkflowDefinition(exports=export_specs, workbook=workbook_spec, logging=logging_spec)


def run_workflow(workflow: WorkflowDefinition, exporter: SheetExporter) -> List[ExportResult]:
    """
    Run every export in order.

    The first failure propagates; exports before it have already been written.
    """
    results = []

    for number, spec in enumerate(workflow.exports, start=1):
        logger.info(f"Export {number}/{len(workflow.exports)}: {spec.source} -> '{spec.sheet}'")

        if spec.source == 'channels':
            result = exporter.export_channels(spec.sheet, fields=spec.fields, **spec.filters)
        else:
            result = exporter.export_users(spec.sheet, fields=spec.fields)

        results.append(result)

    return results
