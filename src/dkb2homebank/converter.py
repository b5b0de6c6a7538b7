"""
Main converter class that orchestrates the conversion process.
"""

import logging

from .csv_parser import DKBCSVParser
from .mapper import map_credit, map_giro
from .models import (
    ConversionConfig,
    ConversionResult,
    CreditRecord,
    FileType,
    GiroRecord,
    HomebankRecord,
)
from .output_formatter import HomebankFormatter

logger = logging.getLogger(__name__)


class DKBConverter:
    """Converts one DKB export into one Homebank import file."""

    def __init__(self, config: ConversionConfig):
        self.config = config
        self.csv_parser = DKBCSVParser(encoding=config.encoding)
        self.formatter = HomebankFormatter()

    def convert(self) -> ConversionResult:
        """
        Read the input file, map all rows and write the output file.

        The output file is only created once the input was parsed successfully.

        Returns:
            ConversionResult object
        """
        result = self.convert_records()
        self.formatter.write_file(result.records, self.config.output_file)
        return result

    def convert_records(self) -> ConversionResult:
        """Read and map the input file without writing anything."""
        file_type, source_records = self.csv_parser.read_file(self.config.input_file)
        logger.debug(
            f"Read {len(source_records)} {file_type.value} rows from {self.config.input_file}",
        )

        if file_type is FileType.GIRO:
            records = self._map_giro_records(source_records)
        else:
            records = self._map_credit_records(source_records)

        return ConversionResult(
            file_type=file_type,
            records=records,
            source_rows=len(source_records),
        )

    def _map_giro_records(self, source_records: list[GiroRecord]) -> list[HomebankRecord]:
        return [map_giro(record) for record in source_records]

    def _map_credit_records(
        self,
        source_records: list[CreditRecord],
    ) -> list[HomebankRecord]:
        records = []
        for record in source_records:
            mapped = map_credit(record, self.config.credit_info)
            if mapped is not None:
                records.append(mapped)
        return records
