"""Spreadsheet destinations."""

from .workbook_destination import WorkbookDestination

__all__ = ['WorkbookDestination']
