"""Field Extraction — maps matched field slots onto a ParsedInstruction.

Invariants:
    - extract_fields never fails: invalid values are captured and judged by enforce_rules
    - Currency and execute_by are uppercased; account ids are kept verbatim
    - amount is int when integral, float otherwise, None when not a finite number
    - Finiteness follows double precision: 1e308 is a number, 1e309 is not
"""

import math
from decimal import Decimal, InvalidOperation

from app.core.domain_types import AccountId, Amount
from app.core.instruction_grammar import (
    AMOUNT, CREDIT_ACCOUNT, CURRENCY, DEBIT_ACCOUNT, EXECUTE_BY,
    MatchedInstruction, is_numeric_literal,
)
from app.core.payment_records import ParsedInstruction


def parse_amount(token: str) -> Amount | None:
    """Parse a decimal literal. Returns None for anything else."""
    if not is_numeric_literal(token):
        return None
    number = float(token)
    if not math.isfinite(number):
        return None
    if number == 0:
        return 0
    try:
        value = Decimal(token)
    except InvalidOperation:
        return None
    if value == value.to_integral_value():
        return int(value)
    return number


def extract_fields(
    matched: MatchedInstruction,
    parsed: ParsedInstruction | None = None,
) -> ParsedInstruction:
    """Fill type, amount, currency, account ids and execute_by."""
    fields = matched.fields
    execute_by = fields.get(EXECUTE_BY)
    return (parsed or ParsedInstruction()).with_fields(
        type=matched.type,
        amount=parse_amount(fields[AMOUNT]),
        currency=fields[CURRENCY].upper(),
        debit_account=AccountId(fields[DEBIT_ACCOUNT]),
        credit_account=AccountId(fields[CREDIT_ACCOUNT]),
        execute_by=execute_by.upper() if execute_by is not None else None,
    )
