"""Unit tests for converter.py."""

import tempfile
from pathlib import Path

import pytest

from dkb2homebank.converter import DKBConverter
from dkb2homebank.csv_parser import UnknownFileTypeError
from dkb2homebank.models import ConversionConfig, CreditInfo, FileType

GIRO_CSV = """"Kontonummer:";"DE02120300000000202051 / Girokonto";

"Von:";"01.06.2013";
"Bis:";"30.06.2013";
"Kontostand vom 30.06.2013:";"4.321,12 EUR";

"Buchungstag";"Wertstellung";"Buchungstext";"Auftraggeber / Begünstigter";"Verwendungszweck";"Kontonummer";"BLZ";"Betrag (EUR)";"Gläubiger-ID";"Mandatsreferenz";"Kundenreferenz";
"24.06.13";"24.06.13";"LOHN, GEHALT, RENTE";"ACME GMBH";"LOHN / GEHALT 06/13";"0000202051";"12030000";"1234,56";"";"";"";
"26.06.13";"26.06.13";"LASTSCHRIFT";"Stadtwerke Süd";"Abschlag";"DE02120300000000202051";"BYLADEM1001";"-50,00";"DE0012345678";"MAN007";"00012345";
"27.06.13";"27.06.13";"BARGELDABHEBUNG";"";"Automat";"";"";"-20,00";"";"";"";
"""

CREDIT_CSV = """"Kreditkarte:";"1234********5678 Kreditkarte";

"Von:";"01.01.2018";
"Bis:";"31.01.2018";
"Saldo:";"-123,45 EUR";
"Datum:";"31.01.2018";

"Umsatz abgerechnet und nicht im Saldo enthalten";"Wertstellung";"Belegdatum";"Beschreibung";"Betrag (EUR)";"Ursprünglicher Betrag";
"Ja";"15.01.2018";"14.01.2018";"AMAZON EU";"-25,99";"";
"Nein";"30.01.2018";"29.01.2018";"NETFLIX";"-12,99";"";
"Ja";"20.01.2018";"18.01.2018";"HOTEL NEW YORK";"-92,00";"-110,00 USD";
"""


class TestDKBConverter:
    """Tests for DKBConverter class."""

    def _convert(self, content: str, **config_options):
        with tempfile.TemporaryDirectory() as tmpdir:
            input_file = Path(tmpdir) / "dkb.csv"
            output_file = Path(tmpdir) / "homebank.csv"
            input_file.write_text(content, encoding="iso-8859-15")

            config = ConversionConfig(
                input_file=str(input_file),
                output_file=str(output_file),
                **config_options,
            )
            result = DKBConverter(config).convert()
            output = output_file.read_text(encoding="utf-8")

        return result, output

    def test_convert_giro(self):
        """Test converting a giro export."""
        result, output = self._convert(GIRO_CSV)

        assert result.file_type == FileType.GIRO
        assert result.source_rows == 3
        assert result.skipped_rows == 0
        assert len(result.records) == 3

        salary, debit, cash = result.records
        assert salary.payment == "4"
        assert salary.amount == "1234,56"
        assert salary.payee == "ACME GMBH"
        assert salary.info == "Konto-Nr.: 0000202051, BLZ: 12030000"
        assert debit.payment == "11"
        assert debit.payee == "Stadtwerke Süd"
        assert debit.info == (
            "IBAN: DE02120300000000202051, BIC: BYLADEM1001\n"
            "Gläubiger-ID: DE0012345678\n"
            "Mandatsreferenz: MAN007\n"
            "Kundenreferenz: 00012345"
        )
        assert cash.payment == ""

        lines = output.splitlines()
        assert lines[0] == "date;paymode;info;payee;memo;amount;category;tags"
        assert lines[1] == (
            '"24.06.13";"4";"Konto-Nr.: 0000202051, BLZ: 12030000";"ACME GMBH";'
            '"LOHN / GEHALT 06/13";"1234,56";"";""'
        )

    def test_convert_credit(self):
        """Test converting a credit card export drops unsettled rows."""
        result, output = self._convert(CREDIT_CSV)

        assert result.file_type == FileType.CREDIT
        assert result.source_rows == 3
        assert result.skipped_rows == 1
        assert [record.payee for record in result.records] == [
            "AMAZON EU",
            "HOTEL NEW YORK",
        ]
        assert all(record.payment == "1" for record in result.records)
        assert result.records[1].info == "Belegedatum: 18.01.2018"
        assert result.records[1].memo == "-110,00 USD"
        assert "NETFLIX" not in output

    def test_convert_credit_original_amount_info(self):
        """Test the original amount info policy."""
        result, _ = self._convert(
            CREDIT_CSV,
            credit_info=CreditInfo.ORIGINAL_AMOUNT,
        )

        assert result.records[0].info == ""
        assert result.records[1].info == "-110,00 USD"

    def test_category_and_tags_always_empty(self):
        """Test that no record gets a category or tags."""
        giro_result, _ = self._convert(GIRO_CSV)
        credit_result, _ = self._convert(CREDIT_CSV)

        for record in giro_result.records + credit_result.records:
            assert record.category == ""
            assert record.tags == ""

    def test_unknown_file_writes_no_output(self):
        """Test that an unknown export aborts before creating the output file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            input_file = Path(tmpdir) / "unknown.csv"
            output_file = Path(tmpdir) / "homebank.csv"
            input_file.write_text("Header line 1\n", encoding="iso-8859-15")

            config = ConversionConfig(
                input_file=str(input_file),
                output_file=str(output_file),
            )
            with pytest.raises(UnknownFileTypeError):
                DKBConverter(config).convert()

            assert not output_file.exists()

    def test_convert_records_does_not_write(self):
        """Test that convert_records only reads the input."""
        with tempfile.TemporaryDirectory() as tmpdir:
            input_file = Path(tmpdir) / "dkb.csv"
            output_file = Path(tmpdir) / "homebank.csv"
            input_file.write_text(GIRO_CSV, encoding="iso-8859-15")

            config = ConversionConfig(
                input_file=str(input_file),
                output_file=str(output_file),
            )
            result = DKBConverter(config).convert_records()

            assert len(result.records) == 3
            assert not output_file.exists()
