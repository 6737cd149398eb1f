"""Ledger — scheduling decision and the balance transfer between two accounts.

Invariants:
    - decide_schedule is PURE: a strictly future execute_by → pending, else successful
    - Dates compare as YYYY-MM-DD strings; a date equal to today executes now
    - apply_transfer computes both balances before assigning either
    - apply_transfer is the only function in core/ that mutates an Account
"""

from app.core.domain_types import Amount, TransactionStatus
from app.core.errors import StatusCode
from app.core.payment_records import Account


def decide_schedule(
    execute_by: str | None, today: str,
) -> tuple[TransactionStatus, StatusCode]:
    if execute_by and execute_by > today:
        return TransactionStatus.PENDING, StatusCode.SCHEDULED_SUCCESS
    return TransactionStatus.SUCCESSFUL, StatusCode.EXECUTED_SUCCESS


def apply_transfer(debit: Account, credit: Account, amount: Amount) -> None:
    """Move amount from debit to credit in a single assignment."""
    debit_after = debit.balance - amount
    credit_after = credit.balance + amount
    debit.balance, credit.balance = debit_after, credit_after
