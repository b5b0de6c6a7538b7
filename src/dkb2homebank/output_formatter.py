"""
Output formatting for Homebank CSV imports.
"""

import csv
import io
import logging
from typing import TextIO

import pandas as pd

from .models import HOMEBANK_COLUMNS, HomebankRecord

logger = logging.getLogger(__name__)


class FileSavingError(Exception):
    """Exception raised when the output file cannot be written."""


class HomebankFormatter:
    """Writes records in the Homebank CSV import format."""

    def __init__(self, delimiter: str = ";"):
        self.delimiter = delimiter

    def write(self, records: list[HomebankRecord], stream: TextIO) -> None:
        """
        Write records to an open text stream.

        The header line is written unquoted, every value is quoted.
        """
        stream.write(self.delimiter.join(HOMEBANK_COLUMNS) + "\n")
        if not records:
            return

        df = pd.DataFrame(
            [record.to_csv_row() for record in records],
            columns=HOMEBANK_COLUMNS,
        )
        df.to_csv(
            stream,
            sep=self.delimiter,
            header=False,
            index=False,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
        )

    def write_file(self, records: list[HomebankRecord], file_path: str) -> None:
        """Write records to a UTF-8 file, replacing any existing content."""
        content = self.format(records)
        try:
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write {file_path}: {e}")
            raise FileSavingError(f"Failed to write {file_path}: {e}") from e

        logger.debug(f"Wrote {len(records)} records to {file_path}")

    def format(self, records: list[HomebankRecord]) -> str:
        """Return the CSV text for records."""
        buffer = io.StringIO()
        self.write(records, buffer)
        return buffer.getvalue()
