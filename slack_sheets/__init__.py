"""
Slack Sheets - Export Slack workspace data into spreadsheet sheets.

Main exports:
- SlackClient: Minimal Slack Web API client
- flatten_record: Flatten nested JSON records
- to_table / from_table: Convert flat records to and from a grid
"""
from .components.common.slack_client import SlackClient, SlackError, SlackApiError, SlackTransportError
from .engine.flattener import flatten_record, flatten_records
from .engine.tables import to_table, from_table, TableError

__version__ = '0.1.0'

__all__ = [
    'SlackClient',
    'SlackError',
    'SlackApiError',
    'SlackTransportError',
    'flatten_record',
    'flatten_records',
    'to_table',
    'from_table',
    'TableError',
]
