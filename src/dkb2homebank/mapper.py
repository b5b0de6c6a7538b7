"""
Mapping of DKB records to Homebank records.
"""

import logging
from types import MappingProxyType

from .models import CreditInfo, CreditRecord, GiroRecord, HomebankRecord

logger = logging.getLogger(__name__)

# Homebank payment codes: 0 none, 1 credit card, 4 transfer, 5 internal
# transfer, 6 debit card, 7 standing order, 8 electronic payment,
# 11 direct debit
PAYMENT_TYPES = MappingProxyType(
    {
        "abschluss": "0",
        "lohn, gehalt, rente": "4",
        "online-ueberweisung": "4",
        "überweisung": "4",
        "rücküberweisung": "4",
        "wertpapiere": "4",
        "zins/dividende": "4",
        "auftrag": "5",
        "umbuchung": "5",
        "kartenzahlung/-abrechnung": "6",
        "sepa-elv-lastschrift": "6",
        "dauerauftrag": "7",
        "gutschrift": "8",
        "lastschrift": "11",
        "folgelastschrift": "11",
    },
)

CREDIT_CARD_PAYMENT = "1"
NOT_CLEARED = ("Nein", "No")


def payment_type_code(transaction_text: str) -> str:
    """Look up the Homebank payment code for a DKB booking text.

    Unknown texts map to an empty code.
    """
    code = PAYMENT_TYPES.get(transaction_text.lower(), "")
    if not code and transaction_text:
        logger.debug(f"No payment type for booking text '{transaction_text}'")
    return code


def build_giro_info(record: GiroRecord) -> str:
    """Collect account and SEPA reference details into one text."""
    lines = []

    if record.account_number:
        if record.account_number.isdigit():
            lines.append(
                f"Konto-Nr.: {record.account_number}, BLZ: {record.bank_code}",
            )
        else:
            lines.append(f"IBAN: {record.account_number}, BIC: {record.bank_code}")

    if record.creditor_id:
        lines.append(f"Gläubiger-ID: {record.creditor_id}")
    if record.mandate_reference:
        lines.append(f"Mandatsreferenz: {record.mandate_reference}")
    if record.customer_reference:
        lines.append(f"Kundenreferenz: {record.customer_reference}")

    return "\n".join(lines).strip()


def map_giro(record: GiroRecord) -> HomebankRecord:
    """Convert a checking account row."""
    return HomebankRecord(
        date=record.value_date,
        payment=payment_type_code(record.transaction_text),
        info=build_giro_info(record),
        payee=record.payer_or_payee,
        memo=record.purpose,
        amount=record.amount,
    )


def map_credit(
    record: CreditRecord,
    credit_info: CreditInfo = CreditInfo.RECEIPT_DATE,
) -> HomebankRecord | None:
    """
    Convert a credit card row.

    Args:
        record: Parsed credit card row
        credit_info: What to put into the info column

    Returns:
        HomebankRecord, or None if the transaction is not settled yet
    """
    if record.cleared in NOT_CLEARED:
        logger.debug(
            f"Skipping uncleared transaction {record.value_date} {record.description}",
        )
        return None

    if credit_info is CreditInfo.ORIGINAL_AMOUNT:
        info = record.original_amount
    else:
        info = f"Belegedatum: {record.receipt_date}"

    return HomebankRecord(
        date=record.value_date,
        payment=CREDIT_CARD_PAYMENT,
        info=info,
        payee=record.description or record.alternate_description,
        memo=record.original_amount,
        amount=record.amount,
    )
