"""
Command-line interface for DKB to Homebank conversion.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .converter import DKBConverter
from .csv_parser import ConversionError
from .models import ConversionConfig, CreditInfo
from .output_formatter import FileSavingError

logger = logging.getLogger(__name__)


def load_config(config_file: str | None) -> dict:
    """Load CLI configuration from JSON file."""
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        logger.debug(f"CLI config file {config_file} does not exist")
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in CLI config file {config_file}: {e}")
        return {}
    except OSError as e:
        logger.warning(f"Failed to load CLI config from {config_file}: {e}")
        return {}

    if not isinstance(config, dict):
        logger.warning(f"CLI config file {config_file} does not contain an object")
        return {}

    logger.debug(f"Loaded CLI config from {config_file}")
    return config


def build_config(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> ConversionConfig:
    """Merge command line arguments over the config file into a ConversionConfig."""
    file_config = load_config(args.config)

    input_file = args.input or file_config.get("input")
    output_file = args.output or file_config.get("output")
    if not input_file or not output_file:
        parser.error("Input and output file must be given (--input, --output)")

    credit_info_value = args.credit_info or file_config.get(
        "credit_info",
        CreditInfo.RECEIPT_DATE.value,
    )
    try:
        credit_info = CreditInfo(credit_info_value)
    except ValueError:
        parser.error(f"Invalid credit_info value '{credit_info_value}'")

    return ConversionConfig(
        input_file=input_file,
        output_file=output_file,
        encoding=args.encoding or file_config.get("encoding", "iso-8859-15"),
        credit_info=credit_info,
    )


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Convert DKB CSV exports into the Homebank CSV import format",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    parser.add_argument(
        "--config",
        help="Path to CLI configuration file (contains defaults for input, output, encoding, credit_info)",
    )

    parser.add_argument(
        "--input",
        help="Input CSV file in DKB format",
    )

    parser.add_argument(
        "--output",
        help="Output CSV file in Homebank format",
    )

    parser.add_argument(
        "--encoding",
        help="Encoding of the input file (default: iso-8859-15)",
    )

    parser.add_argument(
        "--credit-info",
        choices=[choice.value for choice in CreditInfo],
        help="Info column of credit card rows: receipt date or original amount (default: receipt-date)",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    config = build_config(args, parser)

    try:
        result = DKBConverter(config).convert()
    except (ConversionError, FileSavingError, OSError) as e:
        logger.error(f"Error converting file: {e}")
        sys.exit(1)

    logger.info(
        f"Converted {result.file_type.value} export {config.input_file}: "
        f"{len(result.records)} transactions written to {config.output_file}, "
        f"{result.skipped_rows} skipped",
    )


if __name__ == "__main__":
    main()
