"""
WorkbookDestination - Write tables into sheets of a local .xlsx workbook

Each write replaces the target sheet's contents with the given table,
starting at A1. The workbook file is created on first write.
"""

import json
import logging
from pathlib import Path
from typing import Any, List

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from slack_sheets.engine.tables import Table

logger = logging.getLogger(__name__)


def _cell_value(value: Any) -> Any:
    """Convert values openpyxl cannot store (lists, dicts) to JSON text."""
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, ensure_ascii=False)
    return value


class WorkbookDestination:
    """
    Local workbook destination implementation.

    Opens the workbook for every call so no file handle outlives an operation.
    """

    def __init__(self, workbook_path):
        """
        Initialize WorkbookDestination.

        Args:
            workbook_path: Path to the .xlsx file (created if missing)
        """
        self.workbook_path = Path(workbook_path)

    def _open(self) -> Workbook:
        if self.workbook_path.exists():
            return load_workbook(self.workbook_path)

        self.workbook_path.parent.mkdir(parents=True, exist_ok=True)
        workbook = Workbook()
        # Drop the default empty 'Sheet'; write_table creates what it needs
        workbook.remove(workbook.active)
        return workbook

    def sheet_names(self) -> List[str]:
        """List sheet names (empty if the workbook does not exist yet)."""
        if not self.workbook_path.exists():
            return []
        workbook = load_workbook(self.workbook_path, read_only=True)
        names = workbook.sheetnames
        workbook.close()
        return names

    def write_table(self, sheet_name: str, table: Table) -> str:
        """
        Replace a sheet's contents with a table.

        The sheet is created if absent. An existing sheet is recreated at the
        same position, so no old cells survive.

        Args:
            sheet_name: Target sheet name
            table: Header row followed by data rows

        Returns:
            Written range in A1 notation (e.g. 'A1:C4')
        """
        workbook = self._open()

        if sheet_name in workbook.sheetnames:
            index = workbook.sheetnames.index(sheet_name)
            workbook.remove(workbook[sheet_name])
            sheet = workbook.create_sheet(sheet_name, index)
            logger.debug(f"Cleared existing sheet: {sheet_name}")
        else:
            sheet = workbook.create_sheet(sheet_name)
            logger.debug(f"Created sheet: {sheet_name}")

        for row in table:
            sheet.append([_cell_value(value) for value in row])

        for cell in sheet[1] if table else []:
            cell.font = Font(bold=True)

        workbook.save(self.workbook_path)

        columns = len(table[0]) if table else 0
        written_range = f"A1:{get_column_letter(max(columns, 1))}{max(len(table), 1)}"
        logger.info(f"Wrote {len(table)} row(s) to '{sheet_name}' ({written_range}) in {self.workbook_path}")
        return written_range

    def read_table(self, sheet_name: str) -> Table:
        """
        Read a sheet's used range back as a table.

        Empty cells are returned as "".

        Raises:
            FileNotFoundError: If the workbook does not exist
            KeyError: If the sheet does not exist
        """
        if not self.workbook_path.exists():
            raise FileNotFoundError(f"Workbook not found: {self.workbook_path}")

        workbook = load_workbook(self.workbook_path)
        if sheet_name not in workbook.sheetnames:
            raise KeyError(f"Sheet not found: {sheet_name}")

        sheet = workbook[sheet_name]
        if sheet.max_row == 1 and sheet.max_column == 1 and sheet['A1'].value is None:
            return []

        return [
            ["" if value is None else value for value in row]
            for row in sheet.iter_rows(values_only=True)
        ]
