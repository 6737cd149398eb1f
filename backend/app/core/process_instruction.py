"""Instruction Pipeline — tokenize, match, extract, enforce, settle, assemble.

Invariants:
    - process_instruction never raises: every exit is an Outcome
    - Stages run strictly forward; the first InstructionFailure short-circuits
      to build_failed_outcome with the builder as filled so far
    - Balances are mutated at most once, and only for a successful outcome
    - today is injected (YYYY-MM-DD); the core never reads the clock
"""

from collections.abc import Sequence

from app.core.assemble_outcome import build_failed_outcome, build_settled_outcome
from app.core.domain_types import TransactionStatus
from app.core.enforce_rules import (
    first_account_failure, first_instruction_failure, resolve_accounts,
)
from app.core.errors import InstructionFailure
from app.core.extract_fields import extract_fields
from app.core.instruction_grammar import match_instruction, tokenize
from app.core.ledger import apply_transfer, decide_schedule
from app.core.payment_records import Account, Outcome, ParsedInstruction


def process_instruction(
    instruction: str, accounts: Sequence[Account], today: str,
) -> Outcome:
    """Run one instruction against its account set."""
    parsed = ParsedInstruction()

    matched = match_instruction(tokenize(instruction))
    if isinstance(matched, InstructionFailure):
        return build_failed_outcome(parsed, matched, accounts)

    parsed = extract_fields(matched, parsed)

    failure = first_instruction_failure(parsed)
    if failure:
        return build_failed_outcome(parsed, failure, accounts)

    resolved = resolve_accounts(parsed, accounts)
    if isinstance(resolved, InstructionFailure):
        return build_failed_outcome(parsed, resolved, accounts)
    debit, credit = resolved

    failure = first_account_failure(parsed, debit, credit)
    if failure:
        return build_failed_outcome(parsed, failure, accounts)

    return _settle(parsed, debit, credit, today)


def _settle(
    parsed: ParsedInstruction, debit: Account, credit: Account, today: str,
) -> Outcome:
    balances_before = (debit.balance, credit.balance)
    status, code = decide_schedule(parsed.execute_by, today)
    if status is TransactionStatus.SUCCESSFUL:
        apply_transfer(debit, credit, parsed.amount)
    return build_settled_outcome(parsed, status, code, debit, credit, balances_before)
