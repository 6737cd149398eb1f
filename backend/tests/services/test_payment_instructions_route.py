"""Payment Instructions Route — HTTP contract of POST /payment-instructions.

Invariants:
    - Every processed instruction returns 200 with the outcome verbatim
    - Schema violations return 400 with the VALIDATION_ERROR envelope
    - Far-future ON dates are pending, far-past ON dates execute
"""


DEBIT_2000 = "DEBIT 2000 NGN FROM ACCOUNT ACC-001 FOR CREDIT TO ACCOUNT ACC-002"


async def test_successful_debit(client, payment_body):
    res = await client.post("/payment-instructions", json=payment_body(DEBIT_2000))
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "successful"
    assert body["status_code"] == "AP00"
    assert body["status_reason"] == "Transaction executed successfully"
    assert body["accounts"] == [
        {"id": "ACC-001", "balance": 3000, "balance_before": 5000, "currency": "NGN"},
        {"id": "ACC-002", "balance": 3500, "balance_before": 1500, "currency": "NGN"},
    ]


async def test_response_has_every_contract_field(client, payment_body):
    res = await client.post("/payment-instructions", json=payment_body(DEBIT_2000))
    assert set(res.json()) == {
        "type", "amount", "currency", "debit_account", "credit_account",
        "execute_by", "status", "status_code", "status_reason", "accounts",
    }


async def test_far_future_date_is_pending(client, payment_body):
    res = await client.post(
        "/payment-instructions", json=payment_body(f"{DEBIT_2000} ON 2999-12-31"),
    )
    body = res.json()
    assert res.status_code == 200
    assert body["status"] == "pending"
    assert body["status_code"] == "AP02"
    assert body["execute_by"] == "2999-12-31"
    assert [a["balance"] for a in body["accounts"]] == [5000, 1500]


async def test_out_of_range_amount_is_a_failed_outcome(client, payment_body):
    res = await client.post(
        "/payment-instructions",
        json=payment_body(
            "DEBIT 1e9999999999999999999999 NGN FROM ACCOUNT ACC-001 FOR CREDIT TO ACCOUNT ACC-002",
        ),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["status_code"] == "AM01"
    assert body["amount"] is None


async def test_past_date_executes(client, payment_body):
    res = await client.post(
        "/payment-instructions", json=payment_body(f"{DEBIT_2000} ON 2000-01-01"),
    )
    assert res.json()["status_code"] == "AP00"


async def test_failed_instruction_returns_200(client, payment_body):
    res = await client.post(
        "/payment-instructions",
        json=payment_body("DEBIT NGN 2000 FROM ACCOUNT ACC-01 FOR CREDIT TO ACCOUNT ACC-02"),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "failed"
    assert body["status_code"] == "SY02"
    assert body["accounts"] == []


async def test_insufficient_funds_keeps_balances(client, payment_body):
    accounts = [
        {"id": "ACC-001", "balance": 1000, "currency": "NGN"},
        {"id": "ACC-002", "balance": 1500, "currency": "NGN"},
    ]
    res = await client.post(
        "/payment-instructions", json=payment_body(DEBIT_2000, accounts),
    )
    body = res.json()
    assert body["status_code"] == "AC01"
    assert body["amount"] == 2000
    assert [(a["balance"], a["balance_before"]) for a in body["accounts"]] == [
        (1000, 1000), (1500, 1500),
    ]


async def test_decimal_balance_round_trips(client, payment_body):
    accounts = [
        {"id": "ACC-001", "balance": 2500.75, "currency": "USD"},
        {"id": "ACC-002", "balance": 0, "currency": "USD"},
    ]
    res = await client.post(
        "/payment-instructions",
        json=payment_body(
            "CREDIT 500 USD TO ACCOUNT ACC-002 FOR DEBIT FROM ACCOUNT ACC-001", accounts,
        ),
    )
    body = res.json()
    assert body["status_code"] == "AP00"
    assert body["accounts"][0]["balance"] == 2000.75
    assert body["accounts"][1]["balance"] == 500


async def test_invalid_payload_returns_400(client):
    res = await client.post(
        "/payment-instructions",
        json={"accounts": [{"id": "ACC-001", "balance": "lots", "currency": "NGN"}]},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in error["details"]}
    assert "body.instruction" in fields


async def test_duplicate_account_ids_return_400(client, payment_body):
    accounts = [
        {"id": "ACC-001", "balance": 1, "currency": "NGN"},
        {"id": "ACC-001", "balance": 2, "currency": "NGN"},
    ]
    res = await client.post(
        "/payment-instructions", json=payment_body(DEBIT_2000, accounts),
    )
    assert res.status_code == 400
