"""
Slack Sheets - Workflow Schema

Dataclass models for a workflow file. A workflow is an ordered list of
exports plus optional workbook and logging settings:

    WorkflowDefinition
    ├── exports: List[ExportSpec]
    ├── workbook: Optional[WorkbookSpec]
    └── logging: Optional[LoggingSpec]

Environment variable references (${VAR}) are resolved by the loader before
these objects are built.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from slack_sheets.core.config import LOG_LEVELS

SOURCES = ('channels', 'users')
CHANNEL_FILTERS = ('exclude_archived', 'types', 'limit')


@dataclass
class ExportSpec:
    """
    One export.

    Attributes:
        source: What to fetch ('channels' or 'users')
        sheet: Target sheet name
        fields: Optional ordered column list
        filters: Source-specific options (channels: exclude_archived, types, limit)

    Example:
        ExportSpec(source='channels', sheet='Channels', filters={'limit': 200})
    """
    source: str
    sheet: str
    fields: Optional[List[str]] = None
    filters: Dict = field(default_factory=dict)

    def __post_init__(self):
        if self.source not in SOURCES:
            raise ValueError(f"Unknown export source '{self.source}' (expected one of: {', '.join(SOURCES)})")
        if not self.sheet:
            raise ValueError(f"Export of '{self.source}' has no sheet name")
        if self.fields is not None and (
            not isinstance(self.fields, list) or not all(isinstance(name, str) for name in self.fields)
        ):
            raise ValueError(f"Export '{self.sheet}': fields must be a list of column names, got {self.fields!r}")
        if self.filters and self.source != 'channels':
            raise ValueError(f"Export source '{self.source}' does not take filters")
        unknown = sorted(set(self.filters) - set(CHANNEL_FILTERS))
        if unknown:
            raise ValueError(f"Unknown channel filter(s): {', '.join(unknown)}")


@dataclass
class WorkbookSpec:
    """Workbook location; None means use WORKBOOK_PATH from settings."""
    path: Optional[str] = None


@dataclass
class LoggingSpec:
    """
    Logging configuration. None falls back to LOG_DIR / LOG_LEVEL from settings.

    Attributes:
        log_dir: Directory for log files
        log_level: Log level (e.g., 'DEBUG', 'INFO')
    """
    log_dir: Optional[str] = None
    log_level: Optional[str] = None

    def __post_init__(self):
        if self.log_level is not None and str(self.log_level).upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}' (expected one of: {', '.join(LOG_LEVELS)})")


@dataclass
class WorkflowDefinition:
    """Complete workflow definition."""
    exports: List[ExportSpec]
    workbook: Optional[WorkbookSpec] = None
    logging: Optional[LoggingSpec] = None

    def __post_init__(self):
        """Set default workbook and logging config if not provided"""
        if self.workbook is None:
            self.workbook = WorkbookSpec()
        if self.logging is None:
            self.logging = LoggingSpec()
