"""
CSV parsing functionality for DKB exports.
"""

import csv
import io
import logging
import warnings
from typing import TextIO

import pandas as pd

from .models import CreditRecord, FileType, GiroRecord

logger = logging.getLogger(__name__)

GIRO_MARKER = "Kontonummer:"
CREDIT_MARKER = "Kreditkarte:"
GIRO_HEADER_CELL = "Buchungstag"
CREDIT_HEADER_PREFIX = "Umsatz abgerechnet"


class ConversionError(Exception):
    """Base exception for files that cannot be converted."""


class EmptyFileError(ConversionError):
    """Exception raised when the input file has no content."""


class CSVFormatError(ConversionError):
    """Exception raised when the input file is not a readable DKB CSV export."""


class UnknownFileTypeError(ConversionError):
    """Exception raised when the export is neither a giro nor a credit card file."""


def detect_file_type(stream: TextIO, delimiter: str = ";") -> FileType:
    """
    Classify an export by the first cell of its first row.

    The stream is rewound afterwards so it can be parsed from the start.

    Raises:
        EmptyFileError: If the stream has no content
        CSVFormatError: If the first row cannot be tokenized
    """
    reader = csv.reader(stream, delimiter=delimiter, skipinitialspace=True)
    try:
        first_row = next(reader, None)
    except csv.Error as e:
        raise CSVFormatError(f"Could not read first row: {e}") from e
    finally:
        stream.seek(0)

    if first_row is None:
        raise EmptyFileError("Input file is empty")

    first_cell = first_row[0].strip() if first_row else ""
    if first_cell.startswith(CREDIT_MARKER):
        file_type = FileType.CREDIT
    elif first_cell == GIRO_MARKER:
        file_type = FileType.GIRO
    else:
        file_type = FileType.UNKNOWN

    logger.debug(f"Detected file type {file_type.name} from first cell '{first_cell}'")
    return file_type


class DKBCSVParser:
    """Parser for DKB CSV export files."""

    def __init__(
        self,
        encoding: str = "iso-8859-15",
        delimiter: str = ";",
    ):
        self.encoding = encoding
        self.delimiter = delimiter

    def read_file(
        self,
        file_path: str,
    ) -> tuple[FileType, list[GiroRecord] | list[CreditRecord]]:
        """
        Detect the export type of a DKB CSV file and parse its rows.

        Args:
            file_path: Path to the CSV file

        Returns:
            Tuple of (file type, list of records)

        Raises:
            UnknownFileTypeError: If the export type cannot be detected
            CSVFormatError: If the file cannot be decoded or tokenized
        """
        try:
            stream = open(file_path, encoding=self.encoding, newline="")
        except LookupError as e:
            raise ConversionError(f"Unknown encoding '{self.encoding}'") from e

        with stream:
            try:
                file_type = detect_file_type(stream, self.delimiter)
                if file_type is FileType.UNKNOWN:
                    raise UnknownFileTypeError(
                        f"Could not detect the DKB export type of {file_path}",
                    )
                records = self.parse_stream(stream, file_type)
            except UnicodeDecodeError as e:
                raise CSVFormatError(
                    f"Could not decode {file_path} as {self.encoding}: {e}",
                ) from e

        logger.debug(f"Parsed {len(records)} rows from {file_path}")
        return file_type, records

    def parse_stream(
        self,
        stream: TextIO,
        file_type: FileType,
    ) -> list[GiroRecord] | list[CreditRecord]:
        """
        Parse all transaction rows following the header row.

        Rows before the header (account number, date range, balance) are
        skipped. Rows are mapped by column name.

        Raises:
            CSVFormatError: If no header row is found or the body cannot be tokenized
        """
        if file_type is FileType.GIRO:
            record_class = GiroRecord
        elif file_type is FileType.CREDIT:
            record_class = CreditRecord
        else:
            raise UnknownFileTypeError("Cannot parse an export of unknown type")

        body = self._seek_header(stream.read(), file_type)

        # Rows with extra fields are truncated to the header width
        try:
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", pd.errors.ParserWarning)
                df = pd.read_csv(
                    io.StringIO(body),
                    sep=self.delimiter,
                    dtype=str,
                    keep_default_na=False,
                    skipinitialspace=True,
                    index_col=False,
                    engine="python",
                )
        except (pd.errors.ParserError, ValueError) as e:
            raise CSVFormatError(f"Error parsing CSV file: {e}") from e

        # Clean up column names
        df.columns = df.columns.str.strip()
        df = df.fillna("")

        return [record_class.from_csv_row(row) for row in df.to_dict("records")]

    def _seek_header(self, text: str, file_type: FileType) -> str:
        """Return the text from the header row on."""
        # Split on "\n" only
        lines = io.StringIO(text).readlines()
        reader = csv.reader(lines, delimiter=self.delimiter, skipinitialspace=True)

        try:
            for row in reader:
                if self._is_header(row, file_type):
                    header_index = reader.line_num - 1
                    logger.debug(f"Found header row at line {reader.line_num}")
                    return "".join(lines[header_index:])
        except csv.Error as e:
            raise CSVFormatError(
                f"Error reading line {reader.line_num}: {e}",
            ) from e

        raise CSVFormatError(f"No {file_type.value} header row found")

    @staticmethod
    def _is_header(row: list[str], file_type: FileType) -> bool:
        cells = [cell.strip() for cell in row]
        if file_type is FileType.GIRO:
            return GIRO_HEADER_CELL in cells
        return bool(cells) and cells[0].startswith(CREDIT_HEADER_PREFIX)
