"""Business Rule Enforcement — ordered checks over a parsed instruction and its accounts.

Invariants:
    - Every rule is PURE: returns InstructionFailure or None, never mutates
    - Rules run in table order; the first failure wins, later rules are not evaluated
    - INSTRUCTION_RULES need only the parsed instruction
    - ACCOUNT_RULES run only after resolve_accounts found both accounts
    - Order: AM01 → CU02 → AC04 → DT01 → AC03 → CU01 → AC02 → AC01

Design Decisions:
    - Evaluation order is the order of the rule tables
    - Date check is shape-only (YYYY-MM-DD); "2025-13-40" passes
"""

import re
from collections.abc import Callable, Sequence

from app.core.domain_types import SUPPORTED_CURRENCIES, AccountId
from app.core.errors import InstructionFailure, StatusCode
from app.core.payment_records import Account, ParsedInstruction


ACCOUNT_ID_PATTERN = re.compile(r"[A-Za-z0-9\-.@]+")
DATE_LENGTH: int = 10
DATE_SEPARATOR_POSITIONS: tuple[int, ...] = (4, 7)

InstructionRule = Callable[[ParsedInstruction], InstructionFailure | None]
AccountRule = Callable[[ParsedInstruction, Account, Account], InstructionFailure | None]


# ─── Instruction rules ───────────────────────────────────────────

def check_amount(parsed: ParsedInstruction) -> InstructionFailure | None:
    """Amount must be a finite, strictly positive integer."""
    amount = parsed.amount
    if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
        return InstructionFailure.of(StatusCode.INVALID_AMOUNT)
    return None


def check_currency_supported(parsed: ParsedInstruction) -> InstructionFailure | None:
    if parsed.currency not in SUPPORTED_CURRENCIES:
        return InstructionFailure.of(StatusCode.UNSUPPORTED_CURRENCY)
    return None


def is_valid_account_id(account_id: str | None) -> bool:
    return bool(account_id) and ACCOUNT_ID_PATTERN.fullmatch(account_id) is not None


def check_account_id_format(parsed: ParsedInstruction) -> InstructionFailure | None:
    invalid = [a for a in parsed.account_ids if not is_valid_account_id(a)]
    if invalid:
        return InstructionFailure.of(
            StatusCode.INVALID_ACCOUNT_ID_FORMAT, ", ".join(str(a) for a in invalid),
        )
    return None


def is_date_shaped(value: str) -> bool:
    """YYYY-MM-DD shape: 10 characters, hyphens at positions 4 and 7."""
    return len(value) == DATE_LENGTH and all(
        value[i] == "-" for i in DATE_SEPARATOR_POSITIONS
    )


def check_date_format(parsed: ParsedInstruction) -> InstructionFailure | None:
    """Only checked when the instruction carries an ON clause."""
    if parsed.execute_by is not None and not is_date_shaped(parsed.execute_by):
        return InstructionFailure.of(StatusCode.INVALID_DATE_FORMAT)
    return None


INSTRUCTION_RULES: tuple[InstructionRule, ...] = (
    check_amount,
    check_currency_supported,
    check_account_id_format,
    check_date_format,
)


# ─── Account resolution ──────────────────────────────────────────

def find_account(
    accounts: Sequence[Account], account_id: AccountId | None,
) -> Account | None:
    """First account with an exactly matching id (case-sensitive)."""
    if account_id is None:
        return None
    return next((a for a in accounts if a.id == account_id), None)


def resolve_accounts(
    parsed: ParsedInstruction, accounts: Sequence[Account],
) -> tuple[Account, Account] | InstructionFailure:
    debit = find_account(accounts, parsed.debit_account)
    credit = find_account(accounts, parsed.credit_account)
    if debit is None or credit is None:
        missing = [
            account_id
            for account_id, found in zip(parsed.account_ids, (debit, credit))
            if found is None
        ]
        return InstructionFailure.of(
            StatusCode.ACCOUNT_NOT_FOUND, ", ".join(str(a) for a in missing),
        )
    return debit, credit


# ─── Account rules ───────────────────────────────────────────────

def check_currency_consistency(
    parsed: ParsedInstruction, debit: Account, credit: Account,
) -> InstructionFailure | None:
    """Both accounts share one currency, equal to the instruction's."""
    if debit.currency != credit.currency:
        return InstructionFailure.of(StatusCode.ACCOUNT_CURRENCY_MISMATCH)
    if parsed.currency != debit.currency.upper():
        return InstructionFailure.of(StatusCode.ACCOUNT_CURRENCY_MISMATCH)
    return None


def check_distinct_accounts(
    parsed: ParsedInstruction, debit: Account, credit: Account,
) -> InstructionFailure | None:
    if parsed.debit_account == parsed.credit_account:
        return InstructionFailure.of(StatusCode.SAME_ACCOUNT)
    return None


def check_sufficient_funds(
    parsed: ParsedInstruction, debit: Account, credit: Account,
) -> InstructionFailure | None:
    if debit.balance < parsed.amount:
        return InstructionFailure.of(StatusCode.INSUFFICIENT_FUNDS)
    return None


ACCOUNT_RULES: tuple[AccountRule, ...] = (
    check_currency_consistency,
    check_distinct_accounts,
    check_sufficient_funds,
)


def first_instruction_failure(parsed: ParsedInstruction) -> InstructionFailure | None:
    for rule in INSTRUCTION_RULES:
        failure = rule(parsed)
        if failure is not None:
            return failure
    return None


def first_account_failure(
    parsed: ParsedInstruction, debit: Account, credit: Account,
) -> InstructionFailure | None:
    for rule in ACCOUNT_RULES:
        failure = rule(parsed, debit, credit)
        if failure is not None:
            return failure
    return None
