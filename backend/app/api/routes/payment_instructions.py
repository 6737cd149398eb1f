"""Payment Instructions — POST endpoint that runs one instruction against its accounts.

Invariants:
    - Request body validated by Pydantic before reaching the handler (400 otherwise)
    - Responds 200 with the outcome verbatim, whatever its status
    - No business logic here (delegates to services.payment_processor)
"""

from fastapi import APIRouter, status

from app.schemas.payment_instruction import (
    PaymentInstructionRequest, PaymentInstructionResponse,
)
from app.services.payment_processor import run_payment_instruction

router = APIRouter(prefix="/payment-instructions", tags=["payment-instructions"])


@router.post(
    "", response_model=PaymentInstructionResponse,
    status_code=status.HTTP_200_OK,
)
async def process_payment_instruction(body: PaymentInstructionRequest):
    """Parse, validate and (unless scheduled) execute a payment instruction."""
    outcome = run_payment_instruction(body)
    return outcome.to_dict()
