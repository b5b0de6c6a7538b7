"""
DKB to Homebank - Convert DKB account statements into Homebank imports.

This package reads DKB checking account and credit card CSV exports and
writes them in the CSV import format of the Homebank finance application.
"""

from .converter import DKBConverter
from .csv_parser import DKBCSVParser, detect_file_type
from .mapper import map_credit, map_giro
from .models import (
    ConversionConfig,
    ConversionResult,
    CreditInfo,
    CreditRecord,
    FileType,
    GiroRecord,
    HomebankRecord,
)
from .output_formatter import HomebankFormatter

__version__ = "0.1.0"
__all__ = [
    "ConversionConfig",
    "ConversionResult",
    "CreditInfo",
    "CreditRecord",
    "DKBCSVParser",
    "DKBConverter",
    "FileType",
    "GiroRecord",
    "HomebankFormatter",
    "HomebankRecord",
    "detect_file_type",
    "map_credit",
    "map_giro",
]
