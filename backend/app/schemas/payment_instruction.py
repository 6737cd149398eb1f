"""Payment Instruction Schemas — Pydantic models for the /payment-instructions boundary.

Invariants:
    - PaymentInstructionRequest: accounts[] of {id, balance, currency} plus instruction
    - balance is a JSON number (int or float); strings and booleans are rejected
    - Account ids are unique within one request
    - PaymentInstructionResponse mirrors Outcome.to_dict() field for field

Design Decisions:
    - Literal types for type and status
    - The instruction string is not constrained here: grammar faults are reported
      as failed outcomes with SY codes, not as 400s
"""

from typing import Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator

from app.core.domain_types import AccountId
from app.core.payment_records import Account


class AccountPayload(BaseModel):
    """One account supplied with the instruction."""
    id: str = Field(min_length=1)
    balance: StrictInt | StrictFloat
    currency: str = Field(min_length=1)

    def to_account(self) -> Account:
        return Account(id=AccountId(self.id), balance=self.balance, currency=self.currency)


class PaymentInstructionRequest(BaseModel):
    accounts: list[AccountPayload]
    instruction: str

    @field_validator("accounts")
    @classmethod
    def unique_account_ids(cls, v: list[AccountPayload]) -> list[AccountPayload]:
        seen: set[str] = set()
        for account in v:
            if account.id in seen:
                raise ValueError(f"duplicate account id: {account.id}")
            seen.add(account.id)
        return v

    def to_accounts(self) -> list[Account]:
        return [a.to_account() for a in self.accounts]


class AccountSnapshotResponse(BaseModel):
    id: str
    balance: StrictInt | StrictFloat
    balance_before: StrictInt | StrictFloat
    currency: str


class PaymentInstructionResponse(BaseModel):
    """Outcome of one instruction, returned with 200 for every status."""
    type: Literal["DEBIT", "CREDIT"] | None
    amount: StrictInt | StrictFloat | None
    currency: str | None
    debit_account: str | None
    credit_account: str | None
    execute_by: str | None
    status: Literal["successful", "pending", "failed"]
    status_code: str
    status_reason: str
    accounts: list[AccountSnapshotResponse]
