"""
Data models for DKB to Homebank conversion.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

HOMEBANK_COLUMNS = [
    "date",
    "paymode",
    "info",
    "payee",
    "memo",
    "amount",
    "category",
    "tags",
]

# Both spellings of the settlement column seen across export revisions
CREDIT_CLEARED_COLUMNS = (
    "Umsatz abgerechnet und nicht im Saldo enthalten",
    "Umsatz abgerechnet",
)


class FileType(Enum):
    """Kind of DKB export."""

    GIRO = "Girokonto"
    CREDIT = "Kreditkarte"
    UNKNOWN = "Unbekannt"


class CreditInfo(Enum):
    """What goes into the info column of credit card transactions."""

    RECEIPT_DATE = "receipt-date"
    ORIGINAL_AMOUNT = "original-amount"


def _cell(row: dict[str, Any], column: str) -> str:
    value = row.get(column)
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class GiroRecord:
    """A single row of a DKB checking account export."""

    booking_date: str
    value_date: str
    transaction_text: str
    payer_or_payee: str
    purpose: str
    account_number: str
    bank_code: str
    amount: str
    creditor_id: str = ""
    mandate_reference: str = ""
    customer_reference: str = ""

    @classmethod
    def from_csv_row(cls, row: dict[str, Any]) -> "GiroRecord":
        """Create GiroRecord from CSV row data."""
        return cls(
            booking_date=_cell(row, "Buchungstag"),
            value_date=_cell(row, "Wertstellung"),
            transaction_text=_cell(row, "Buchungstext"),
            payer_or_payee=_cell(row, "Auftraggeber / Begünstigter"),
            purpose=_cell(row, "Verwendungszweck"),
            account_number=_cell(row, "Kontonummer"),
            bank_code=_cell(row, "BLZ"),
            amount=_cell(row, "Betrag (EUR)"),
            creditor_id=_cell(row, "Gläubiger-ID"),
            mandate_reference=_cell(row, "Mandatsreferenz"),
            customer_reference=_cell(row, "Kundenreferenz"),
        )


@dataclass(frozen=True)
class CreditRecord:
    """A single row of a DKB credit card export."""

    cleared: str
    value_date: str
    receipt_date: str
    description: str
    alternate_description: str
    amount: str
    original_amount: str

    @classmethod
    def from_csv_row(cls, row: dict[str, Any]) -> "CreditRecord":
        """Create CreditRecord from CSV row data."""
        cleared = ""
        for column in CREDIT_CLEARED_COLUMNS:
            if column in row:
                cleared = _cell(row, column)
                break

        return cls(
            cleared=cleared,
            value_date=_cell(row, "Wertstellung"),
            receipt_date=_cell(row, "Belegdatum"),
            description=_cell(row, "Beschreibung"),
            alternate_description=_cell(row, "Umsatzbeschreibung"),
            amount=_cell(row, "Betrag (EUR)"),
            original_amount=_cell(row, "Ursprünglicher Betrag"),
        )


@dataclass(frozen=True)
class HomebankRecord:
    """A row of the Homebank CSV import format."""

    date: str
    payment: str
    info: str
    payee: str
    memo: str
    amount: str
    category: str = ""
    tags: str = ""

    def to_csv_row(self) -> dict[str, str]:
        """Return the values keyed by Homebank column name."""
        return dict(
            zip(
                HOMEBANK_COLUMNS,
                [
                    self.date,
                    self.payment,
                    self.info,
                    self.payee,
                    self.memo,
                    self.amount,
                    self.category,
                    self.tags,
                ],
            ),
        )


@dataclass
class ConversionConfig:
    """Settings for a single conversion run."""

    input_file: str
    output_file: str
    encoding: str = "iso-8859-15"
    credit_info: CreditInfo = CreditInfo.RECEIPT_DATE


@dataclass
class ConversionResult:
    """Result of converting one export file."""

    file_type: FileType
    records: list[HomebankRecord] = field(default_factory=list)
    source_rows: int = 0

    @property
    def skipped_rows(self) -> int:
        return self.source_rows - len(self.records)
