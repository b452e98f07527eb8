"""Slack Sheets - Record flattening and tabulation engine"""

from .flattener import flatten_record, flatten_records
from .tables import to_table, from_table, TableError

__all__ = ['flatten_record', 'flatten_records', 'to_table', 'from_table', 'TableError']
