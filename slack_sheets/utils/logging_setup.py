"""
Shared logging setup for Slack Sheets.

Provides coloured console logging and detailed file logging for the entire application.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class ColourFormatter(logging.Formatter):
    """
    Custom formatter with colour support for console output.
    """

    # ANSI colour codes
    COLOURS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m',     # Reset
    }

    def format(self, record):
        """Format log record with colour, leaving the record itself untouched."""
        levelname = record.levelname
        if levelname not in self.COLOURS:
            return super().format(record)

        # The same record is passed on to the file handler
        record.levelname = f"{self.COLOURS[levelname]}{levelname:<8}{self.COLOURS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(log_level: str = 'INFO', log_dir: Optional[str] = None, component: str = 'slack-sheets'):
    """
    Set up logging for the application.

    Configures dual output:
    - Console: coloured output at specified log level
    - File: detailed DEBUG output in log file (includes raw Slack responses)

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files (None = use default ./logs)
        component: Component name for log filename

    Returns:
        Logger instance
    """
    level = getattr(logging, log_level.upper())

    # Root logger passes everything; handlers filter
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers
    logger.handlers = []

    # Console handler (with colour)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_formatter = ColourFormatter(
        '[%(asctime)s] %(levelname)s | %(name)-12s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File handler (no colour)
    log_path = Path(log_dir) if log_dir else Path('./logs')
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = log_path / f'{component}_{timestamp}.log'

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)  # Always DEBUG in file
    file_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)-8s | %(name)-12s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # urllib3 logs every connection at DEBUG; keep the file readable
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    logger.info(f"Logging initialised (level: {log_level.upper()}, file: {log_file})")

    return logger
