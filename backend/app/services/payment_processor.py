"""Payment Processor — imperative shell around the pure instruction pipeline.

Invariants:
    - Converts the validated request into per-request Account records
    - Reads "today" from the clock in the configured timezone, then calls the core
    - Logs every outcome: failures at WARNING, successful/pending at INFO
    - Never raises for a failed instruction: failure is an Outcome
"""

import logging

from app.config import get_settings
from app.core.payment_records import Outcome
from app.core.process_instruction import process_instruction
from app.infrastructure.clock import today_iso
from app.schemas.payment_instruction import PaymentInstructionRequest

logger = logging.getLogger(__name__)


def run_payment_instruction(
    request: PaymentInstructionRequest, today: str | None = None,
) -> Outcome:
    """Process one request. today defaults to the current day in schedule_timezone."""
    if today is None:
        today = today_iso(get_settings().schedule_timezone)

    outcome = process_instruction(request.instruction, request.to_accounts(), today)
    _log_outcome(outcome)
    return outcome


def _log_outcome(outcome: Outcome) -> None:
    parsed = outcome.instruction
    extra = {
        "status_code": outcome.status_code.value,
        "instruction_type": parsed.type.value if parsed.type else None,
        "debit_account": parsed.debit_account,
        "credit_account": parsed.credit_account,
    }
    if outcome.failed:
        logger.warning(
            f"Payment instruction failed: {outcome.status_reason}", extra=extra,
        )
        return
    logger.info(
        f"Payment instruction {outcome.status.value}: {outcome.status_reason}",
        extra=extra,
    )
