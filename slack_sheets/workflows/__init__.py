"""Workflow files - batches of Slack exports described in YAML."""

from .schema import WorkflowDefinition, ExportSpec, LoggingSpec, WorkbookSpec
from .loader import load_workflow, run_workflow

__all__ = ['WorkflowDefinition', 'ExportSpec', 'LoggingSpec', 'WorkbookSpec', 'load_workflow', 'run_workflow']
