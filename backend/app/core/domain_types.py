"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AccountId is the verbatim identifier token (case preserved)
    - Supported currencies are a closed set: NGN, USD, GBP, GHS
    - All valid states encoded as Enums, no raw string matching
"""

from enum import Enum
from typing import NewType, Union


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", str)


# ─── Value Types ─────────────────────────────────────────────────

Amount = Union[int, float]
IsoDate = NewType("IsoDate", str)       # YYYY-MM-DD


# ─── Enums ───────────────────────────────────────────────────────

class TransactionType(str, Enum):
    """Leading keyword of an instruction. Decides which account is named first."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransactionStatus(str, Enum):
    """Terminal outcome of one instruction."""
    SUCCESSFUL = "successful"
    PENDING = "pending"
    FAILED = "failed"


class Currency(str, Enum):
    NGN = "NGN"
    USD = "USD"
    GBP = "GBP"
    GHS = "GHS"


SUPPORTED_CURRENCIES: frozenset[str] = frozenset(c.value for c in Currency)
