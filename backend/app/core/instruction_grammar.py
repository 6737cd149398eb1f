"""Instruction Grammar — tokenizer and positional schema tables for payment instructions.

Invariants:
    - tokenize is PURE and never fails (length is validated downstream)
    - One schema table per TransactionType; each slot is a keyword or a named field
    - Keyword slots compare case-insensitively; field slots keep the raw token
    - match_instruction returns MatchedInstruction or InstructionFailure, never raises
    - Check order: token count (SY01) → leading type (SY03) → skeleton (SY02/SY03)
      → amount/currency transposition (SY02) → schedule clause (SY02)

Design Decisions:
    - A new instruction shape is one new schema table
    - Field slots are named by role (debit_account, credit_account), so the
      DEBIT/CREDIT role swap lives in the tables and not in the extractor
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from app.core.domain_types import TransactionType
from app.core.errors import InstructionFailure, StatusCode


MIN_TOKENS: int = 8

NUMERIC_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# ─── Field roles ─────────────────────────────────────────────────

AMOUNT = "amount"
CURRENCY = "currency"
DEBIT_ACCOUNT = "debit_account"
CREDIT_ACCOUNT = "credit_account"
EXECUTE_BY = "execute_by"


# ─── Schema tables ───────────────────────────────────────────────

class SlotKind(str, Enum):
    KEYWORD = "keyword"
    FIELD = "field"


@dataclass(frozen=True)
class Slot:
    """One position of an instruction shape: a literal keyword or a named field."""
    kind: SlotKind
    name: str


def keyword(word: str) -> Slot:
    return Slot(SlotKind.KEYWORD, word)


def field_slot(role: str) -> Slot:
    return Slot(SlotKind.FIELD, role)


DEBIT_SKELETON: tuple[Slot, ...] = (
    keyword("DEBIT"), field_slot(AMOUNT), field_slot(CURRENCY),
    keyword("FROM"), keyword("ACCOUNT"), field_slot(DEBIT_ACCOUNT),
    keyword("FOR"), keyword("CREDIT"),
    keyword("TO"), keyword("ACCOUNT"), field_slot(CREDIT_ACCOUNT),
)

CREDIT_SKELETON: tuple[Slot, ...] = (
    keyword("CREDIT"), field_slot(AMOUNT), field_slot(CURRENCY),
    keyword("TO"), keyword("ACCOUNT"), field_slot(CREDIT_ACCOUNT),
    keyword("FOR"), keyword("DEBIT"),
    keyword("FROM"), keyword("ACCOUNT"), field_slot(DEBIT_ACCOUNT),
)

SKELETONS: dict[TransactionType, tuple[Slot, ...]] = {
    TransactionType.DEBIT: DEBIT_SKELETON,
    TransactionType.CREDIT: CREDIT_SKELETON,
}

SCHEDULE_CLAUSE: tuple[Slot, ...] = (keyword("ON"), field_slot(EXECUTE_BY))


@dataclass(frozen=True)
class MatchedInstruction:
    """Raw tokens captured by field slots, keyed by role."""
    type: TransactionType
    fields: Mapping[str, str] = field(default_factory=dict)

    @property
    def has_schedule_clause(self) -> bool:
        return EXECUTE_BY in self.fields


# ─── Tokenizer ───────────────────────────────────────────────────

def tokenize(instruction: str) -> list[str]:
    """Split on whitespace, dropping empty tokens."""
    return instruction.split()


def is_numeric_literal(token: str) -> bool:
    return NUMERIC_LITERAL.fullmatch(token) is not None


# ─── Structural validation ───────────────────────────────────────

def match_instruction(
    tokens: Sequence[str],
) -> MatchedInstruction | InstructionFailure:
    """Match tokens against the schema table for their leading type keyword."""
    if len(tokens) < MIN_TOKENS:
        return InstructionFailure.of(
            StatusCode.MISSING_KEYWORD,
            f"expected at least {MIN_TOKENS} words, found {len(tokens)}",
        )

    txn_type = _leading_type(tokens[0])
    if txn_type is None:
        return InstructionFailure.of(
            StatusCode.MALFORMED_INSTRUCTION,
            "instruction must start with DEBIT or CREDIT",
        )

    skeleton = SKELETONS[txn_type]
    fields = _match_slots(tokens, skeleton)
    if isinstance(fields, InstructionFailure):
        return fields

    if _is_transposed(fields[AMOUNT], fields[CURRENCY]):
        return InstructionFailure.of(
            StatusCode.INVALID_KEYWORD_ORDER,
            "amount must come before currency",
        )

    schedule = _match_schedule_clause(tokens, start=len(skeleton))
    if isinstance(schedule, InstructionFailure):
        return schedule

    return MatchedInstruction(type=txn_type, fields={**fields, **schedule})


def _leading_type(token: str) -> TransactionType | None:
    try:
        return TransactionType(token.upper())
    except ValueError:
        return None


def _match_slots(
    tokens: Sequence[str], skeleton: Sequence[Slot],
) -> dict[str, str] | InstructionFailure:
    """Walk the skeleton slot by slot. First mismatch wins."""
    fields: dict[str, str] = {}
    for position, slot in enumerate(skeleton):
        token = tokens[position] if position < len(tokens) else None
        if slot.kind is SlotKind.KEYWORD:
            if token is None or token.upper() != slot.name:
                return InstructionFailure.of(
                    StatusCode.INVALID_KEYWORD_ORDER,
                    f"expected {slot.name} at word {position + 1}",
                )
        elif token is None:
            return InstructionFailure.of(
                StatusCode.MALFORMED_INSTRUCTION,
                f"missing {slot.name} at word {position + 1}",
            )
        else:
            fields[slot.name] = token
    return fields


def _is_transposed(amount_token: str, currency_token: str) -> bool:
    return not is_numeric_literal(amount_token) and is_numeric_literal(currency_token)


def _match_schedule_clause(
    tokens: Sequence[str], start: int,
) -> dict[str, str] | InstructionFailure:
    """Optional `ON <date>` tail. A bare ON captures an empty date."""
    trailing = tokens[start:]
    if not trailing:
        return {}
    marker_slot, date_slot = SCHEDULE_CLAUSE
    if trailing[0].upper() != marker_slot.name:
        return InstructionFailure.of(
            StatusCode.INVALID_KEYWORD_ORDER,
            f"expected {marker_slot.name} at word {start + 1}",
        )
    # words after the date are ignored
    return {date_slot.name: trailing[1] if len(trailing) > 1 else ""}
