"""Instruction Failures — typed, stable status codes for every pipeline outcome.

Invariants:
    - Every outcome carries a StatusCode whose value is part of the public contract
    - InstructionFailure is returned by pipeline stages, never raised
    - The same StatusCode always maps to the same default reason text

Design Decisions:
    - Single failure kind (code + reason); no recoverable/fatal split inside the core
    - Frozen dataclass: failures compare by value
"""

from dataclasses import dataclass
from enum import Enum


class StatusCode(str, Enum):
    """Status code taxonomy. Values are stable; clients match on them."""
    # Syntax
    MISSING_KEYWORD = "SY01"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED_INSTRUCTION = "SY03"
    # Amount / currency
    INVALID_AMOUNT = "AM01"
    ACCOUNT_CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    # Accounts
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID_FORMAT = "AC04"
    # Dates
    INVALID_DATE_FORMAT = "DT01"
    # Approved
    EXECUTED_SUCCESS = "AP00"
    SCHEDULED_SUCCESS = "AP02"


STATUS_REASONS: dict[StatusCode, str] = {
    StatusCode.MISSING_KEYWORD: "Missing required keyword",
    StatusCode.INVALID_KEYWORD_ORDER: "Invalid keyword order",
    StatusCode.MALFORMED_INSTRUCTION: "Malformed instruction: unable to parse keywords",
    StatusCode.INVALID_AMOUNT: "Amount must be a positive integer",
    StatusCode.ACCOUNT_CURRENCY_MISMATCH: "Account currency mismatch",
    StatusCode.UNSUPPORTED_CURRENCY: "Unsupported currency. Only NGN, USD, GBP, and GHS are supported",
    StatusCode.INSUFFICIENT_FUNDS: "Insufficient funds in debit account",
    StatusCode.SAME_ACCOUNT: "Debit and credit accounts cannot be the same",
    StatusCode.ACCOUNT_NOT_FOUND: "Account not found",
    StatusCode.INVALID_ACCOUNT_ID_FORMAT: "Invalid account ID format",
    StatusCode.INVALID_DATE_FORMAT: "Invalid date format",
    StatusCode.EXECUTED_SUCCESS: "Transaction executed successfully",
    StatusCode.SCHEDULED_SUCCESS: "Transaction scheduled for future execution",
}


@dataclass(frozen=True)
class InstructionFailure:
    """First violated rule of an instruction. Returned, never raised."""
    code: StatusCode
    reason: str

    @classmethod
    def of(cls, code: StatusCode, detail: str | None = None) -> "InstructionFailure":
        """Build a failure with the default reason, optionally suffixed with detail."""
        reason = STATUS_REASONS[code]
        if detail:
            reason = f"{reason}: {detail}"
        return cls(code=code, reason=reason)
