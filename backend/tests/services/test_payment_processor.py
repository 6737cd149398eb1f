"""Payment Processor — tests for the shell around the instruction pipeline.

Invariants:
    - today defaults to the clock in schedule_timezone
    - failed outcomes are logged at WARNING with status_code as a structured extra
    - successful and pending outcomes are logged at INFO
"""

import logging

from app.schemas.payment_instruction import PaymentInstructionRequest
from app.services.payment_processor import run_payment_instruction


def _request(instruction: str) -> PaymentInstructionRequest:
    return PaymentInstructionRequest(
        accounts=[
            {"id": "ACC-001", "balance": 5000, "currency": "NGN"},
            {"id": "ACC-002", "balance": 1500, "currency": "NGN"},
        ],
        instruction=instruction,
    )


DEBIT_2000 = "DEBIT 2000 NGN FROM ACCOUNT ACC-001 FOR CREDIT TO ACCOUNT ACC-002"


def test_explicit_today_is_used():
    outcome = run_payment_instruction(
        _request(f"{DEBIT_2000} ON 2026-10-18"), today="2026-10-17",
    )
    assert outcome.status_code.value == "AP02"


def test_today_defaults_to_clock(monkeypatch):
    seen = {}

    def fake_today(timezone_name):
        seen["tz"] = timezone_name
        return "2026-10-18"

    monkeypatch.setattr("app.services.payment_processor.today_iso", fake_today)
    outcome = run_payment_instruction(_request(f"{DEBIT_2000} ON 2026-10-18"))
    assert outcome.status_code.value == "AP00"
    assert seen["tz"] == "UTC"


def test_request_accounts_are_not_shared_between_runs():
    request = _request(DEBIT_2000)
    first = run_payment_instruction(request, today="2026-10-17")
    second = run_payment_instruction(request, today="2026-10-17")
    assert first.accounts[0].balance == 3000
    assert second.accounts[0].balance == 3000
    assert request.accounts[0].balance == 5000


def test_failure_logged_as_warning(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.payment_processor"):
        run_payment_instruction(_request("DEBIT 2000"), today="2026-10-17")
    records = [r for r in caplog.records if r.name == "app.services.payment_processor"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert records[0].status_code == "SY01"


def test_success_logged_as_info(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.payment_processor"):
        run_payment_instruction(_request(DEBIT_2000), today="2026-10-17")
    records = [r for r in caplog.records if r.name == "app.services.payment_processor"]
    assert records[0].levelno == logging.INFO
    assert records[0].status_code == "AP00"
    assert records[0].instruction_type == "DEBIT"
