from __future__ import annotations


PAYMENT = {
    "amount": 0.01,
    "transaction_hash": "0xdeadbeef",
    "from_address": "0xfrom",
    "to_address": "0xto",
}


def test_health_endpoints(client) -> None:
    heartbeat = client.get("/health/")
    assert heartbeat.status_code == 200
    assert heartbeat.json()["status"] == "ok"
    assert heartbeat.json()["environment"] == "test"

    db = client.get("/health/db")
    assert db.status_code == 200
    assert db.json()["orm"] == "ok"
    assert db.json()["dialect"] == "sqlite"


def test_record_and_list_payments(client, register) -> None:
    payer = register("payer@example.com")
    recorded = client.post("/api/payments", json=PAYMENT, headers=payer["headers"])
    assert recorded.status_code == 201
    body = recorded.json()
    assert body["status"] == "pending"
    assert body["currency"] == "ETH"
    assert body["purpose"] == "job-posting"

    duplicate = client.post("/api/payments", json=PAYMENT, headers=payer["headers"])
    assert duplicate.status_code == 409

    mine = client.get("/api/payments/me", headers=payer["headers"]).json()["payments"]
    assert [p["transaction_hash"] for p in mine] == ["0xdeadbeef"]

    other = register("other@example.com")
    assert client.get("/api/payments/me", headers=other["headers"]).json()["payments"] == []


def test_payment_for_unknown_job(client, register) -> None:
    payer = register("payer@example.com")
    response = client.post("/api/payments", json={**PAYMENT, "job_id": 9999}, headers=payer["headers"])
    assert response.status_code == 404


def test_update_payment_status(client, register) -> None:
    payer = register("payer@example.com")
    other = register("other@example.com")
    client.post("/api/payments", json=PAYMENT, headers=payer["headers"])

    url = f"/api/payments/{PAYMENT['transaction_hash']}/status"
    assert client.put(url, json={"status": "confirmed"}, headers=other["headers"]).status_code == 403

    response = client.put(url, json={"status": "confirmed", "block_number": 42}, headers=payer["headers"])
    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    assert response.json()["block_number"] == 42

    missing = client.put("/api/payments/0xmissing/status", json={"status": "failed"}, headers=payer["headers"])
    assert missing.status_code == 404
