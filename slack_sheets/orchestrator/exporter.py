"""
Exporter - Coordinates one Slack-to-sheet export

Each export runs the same pipeline:
1. Fetch - one Slack API call (channels or users)
2. Flatten - nested records to dot-keyed rows
3. Tabulate - flat records to a header + rows grid
4. Write - replace the target sheet with the grid

The sheet is only touched after the fetch succeeded, so a failed API call
leaves the previous export in place.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from slack_sheets.components.common.slack_client import SlackClient
from slack_sheets.components.destination.workbook_destination import WorkbookDestination
from slack_sheets.engine.flattener import flatten_records
from slack_sheets.engine.tables import to_table

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """
    Outcome of a single export.

    Attributes:
        sheet_name: Sheet that was written
        rows: Number of data rows (header excluded)
        columns: Number of columns
        range: Written range in A1 notation
    """
    sheet_name: str
    rows: int
    columns: int
    range: str


class SheetExporter:
    """
    Exports Slack listings into workbook sheets.

    Both collaborators are injected so one client and one workbook can be
    shared by every export in a workflow.
    """

    def __init__(self, client: SlackClient, destination: WorkbookDestination):
        self.client = client
        self.destination = destination

    def _export(
        self,
        sheet_name: str,
        fetch: Callable[[], List[Dict]],
        fields: Optional[Sequence[str]] = None
    ) -> ExportResult:
        records = fetch()
        logger.info(f"Fetched {len(records)} record(s) for sheet '{sheet_name}'")

        table = to_table(flatten_records(records), fields=fields)
        written_range = self.destination.write_table(sheet_name, table)

        return ExportResult(
            sheet_name=sheet_name,
            rows=len(table) - 1,
            columns=len(table[0]),
            range=written_range
        )

    def export_channels(
        self,
        sheet_name: str,
        fields: Optional[Sequence[str]] = None,
        exclude_archived: bool = True,
        types: str = 'public_channel,private_channel',
        limit: int = 100
    ) -> ExportResult:
        """
        Write the channel list to a sheet.

        Args:
            sheet_name: Target sheet
            fields: Columns to keep (default: keys of the first channel)
            exclude_archived: Skip archived channels
            types: Comma-separated channel types
            limit: Maximum number of channels

        Returns:
            ExportResult
        """
        return self._export(
            sheet_name,
            lambda: self.client.list_channels(
                exclude_archived=exclude_archived,
                types=types,
                limit=limit
            ),
            fields
        )

    def export_users(self, sheet_name: str, fields: Optional[Sequence[str]] = None) -> ExportResult:
        """Write the member list to a sheet."""
        return self._export(sheet_name, self.client.list_users, fields)
