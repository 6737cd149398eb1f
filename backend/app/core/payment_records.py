"""Payment Records — accounts, the parsed-instruction builder, and the outcome record.

Invariants:
    - Account is the only mutable record; it belongs to a single request
    - ParsedInstruction is immutable: stages return updated copies via with_fields()
    - Outcome.to_dict() always emits every field of the response contract
    - A blank execute_by (bare ON) is echoed as None

Design Decisions:
    - Plain dataclasses with to_dict(); core does not import pydantic
"""

from dataclasses import dataclass, replace

from app.core.domain_types import AccountId, Amount, TransactionStatus, TransactionType
from app.core.errors import StatusCode


@dataclass
class Account:
    """Per-request account record. Balance is mutated by the ledger only."""
    id: AccountId
    balance: Amount
    currency: str


@dataclass(frozen=True)
class AccountSnapshot:
    id: AccountId
    balance: Amount
    balance_before: Amount
    currency: str

    @classmethod
    def capture(cls, account: Account, balance_before: Amount) -> "AccountSnapshot":
        return cls(
            id=account.id,
            balance=account.balance,
            balance_before=balance_before,
            currency=account.currency,
        )

    @classmethod
    def unchanged(cls, account: Account) -> "AccountSnapshot":
        """Snapshot for an account that was not mutated."""
        return cls.capture(account, account.balance)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "balance": self.balance,
            "balance_before": self.balance_before,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class ParsedInstruction:
    """Result builder. Fields stay None until the stage producing them has run."""
    type: TransactionType | None = None
    amount: Amount | None = None
    currency: str | None = None
    debit_account: AccountId | None = None
    credit_account: AccountId | None = None
    execute_by: str | None = None

    def with_fields(self, **changes) -> "ParsedInstruction":
        return replace(self, **changes)

    @property
    def account_ids(self) -> tuple[AccountId | None, AccountId | None]:
        return self.debit_account, self.credit_account


@dataclass(frozen=True)
class Outcome:
    """Terminal record for one instruction."""
    instruction: ParsedInstruction
    status: TransactionStatus
    status_code: StatusCode
    status_reason: str
    accounts: tuple[AccountSnapshot, ...] = ()

    @property
    def failed(self) -> bool:
        return self.status is TransactionStatus.FAILED

    def to_dict(self) -> dict:
        parsed = self.instruction
        return {
            "type": parsed.type.value if parsed.type else None,
            "amount": parsed.amount,
            "currency": parsed.currency,
            "debit_account": parsed.debit_account,
            "credit_account": parsed.credit_account,
            "execute_by": parsed.execute_by or None,
            "status": self.status.value,
            "status_code": self.status_code.value,
            "status_reason": self.status_reason,
            "accounts": [snapshot.to_dict() for snapshot in self.accounts],
        }
