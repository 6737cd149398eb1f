"""Outcome Assembly — builds the single response record for every pipeline exit.

Invariants:
    - Settled outcomes list the debit snapshot, then the credit snapshot
    - Failed outcomes resolve accounts best-effort from the ids extracted so far;
      unresolved accounts are omitted, never padded with None
    - Failed snapshots always have balance_before == balance
"""

from collections.abc import Sequence

from app.core.domain_types import Amount, TransactionStatus
from app.core.enforce_rules import find_account
from app.core.errors import STATUS_REASONS, InstructionFailure, StatusCode
from app.core.payment_records import (
    Account, AccountSnapshot, Outcome, ParsedInstruction,
)


def build_settled_outcome(
    parsed: ParsedInstruction,
    status: TransactionStatus,
    code: StatusCode,
    debit: Account,
    credit: Account,
    balances_before: tuple[Amount, Amount],
) -> Outcome:
    """Outcome for a successful or pending transfer."""
    debit_before, credit_before = balances_before
    return Outcome(
        instruction=parsed,
        status=status,
        status_code=code,
        status_reason=STATUS_REASONS[code],
        accounts=(
            AccountSnapshot.capture(debit, debit_before),
            AccountSnapshot.capture(credit, credit_before),
        ),
    )


def build_failed_outcome(
    parsed: ParsedInstruction,
    failure: InstructionFailure,
    accounts: Sequence[Account],
) -> Outcome:
    resolved = (find_account(accounts, account_id) for account_id in parsed.account_ids)
    return Outcome(
        instruction=parsed,
        status=TransactionStatus.FAILED,
        status_code=failure.code,
        status_reason=failure.reason,
        accounts=tuple(
            AccountSnapshot.unchanged(account) for account in resolved if account is not None
        ),
    )
