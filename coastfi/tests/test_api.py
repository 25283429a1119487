from __future__ import annotations

from flask.testing import FlaskClient


def test_coast_fi_endpoint(client: FlaskClient, baseline_payload: dict):
    resp = client.post("/api/coast-fi", json=baseline_payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body) == {
        "coastFINumber",
        "isCoastFI",
        "yearsToCoastFI",
        "ageWhenCoastFI",
        "projectedRetirementValue",
        "actualRetirementIncome",
        "timeToCoastFI",
    }
    assert body["isCoastFI"] is False
    assert body["coastFINumber"] > 0


def test_projections_endpoint(client: FlaskClient, baseline_payload: dict):
    resp = client.post("/api/projections", json=baseline_payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["projections"]) == 61
    assert body["projections"][0]["value"] == 50000.0
    assert body["projections"][-1]["age"] == 90
    assert len(body["chart"]["value"]) == 61


def test_plan_endpoint_combines_both(client: FlaskClient, baseline_payload: dict):
    resp = client.post("/api/plan", json=baseline_payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["result"]["timeToCoastFI"]
    assert len(body["projections"]) == 61


def test_optional_rates_fall_back_to_defaults(client: FlaskClient):
    payload = {
        "currentAge": 30,
        "retirementAge": 65,
        "currentSavings": 50000,
        "desiredRetirementIncome": 4000,
    }
    resp = client.post("/api/coast-fi", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["timeToCoastFI"] == "Never (no contributions)"


def test_retirement_before_current_age_returns_422(client: FlaskClient, baseline_payload: dict):
    baseline_payload["retirementAge"] = 30

    resp = client.post("/api/coast-fi", json=baseline_payload)

    assert resp.status_code == 422
    body = resp.get_json()
    assert any("retirementAge" in error["msg"] for error in body["detail"])


def test_zero_withdrawal_rate_rejected(client: FlaskClient, baseline_payload: dict):
    baseline_payload["safeWithdrawalRate"] = 0

    resp = client.post("/api/projections", json=baseline_payload)

    assert resp.status_code == 422


def test_unknown_field_rejected(client: FlaskClient, baseline_payload: dict):
    baseline_payload["annualSalary"] = 90000

    resp = client.post("/api/plan", json=baseline_payload)

    assert resp.status_code == 422


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post("/api/coast-fi", data="{not json", content_type="application/json")

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_projection_past_end_age_is_empty(client: FlaskClient, baseline_payload: dict):
    baseline_payload.update(currentAge=101, retirementAge=102)

    resp = client.post("/api/projections", json=baseline_payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["projections"] == []
    assert body["chart"] == {"value": [], "realValue": [], "contributions": []}


def test_oversized_amount_rejected(client: FlaskClient, baseline_payload: dict):
    baseline_payload["desiredRetirementIncome"] = 1e307

    resp = client.post("/api/coast-fi", json=baseline_payload)

    assert resp.status_code == 422
    assert "Infinity" not in resp.get_data(as_text=True)


def test_overflowing_result_returns_422_not_infinity(client: FlaskClient, baseline_payload: dict):
    """A valid but tiny withdrawal rate divides the target up to inf."""
    baseline_payload.update(desiredRetirementIncome=1e12, safeWithdrawalRate=1e-300)

    resp = client.post("/api/coast-fi", json=baseline_payload)

    assert resp.status_code == 422
    text = resp.get_data(as_text=True)
    assert "Infinity" not in text and "NaN" not in text
    assert "coastFINumber" in resp.get_json()["fields"]


def test_overflowing_plan_returns_422(client: FlaskClient, baseline_payload: dict):
    baseline_payload.update(desiredRetirementIncome=1e12, safeWithdrawalRate=1e-300)

    resp = client.post("/api/plan", json=baseline_payload)

    assert resp.status_code == 422
    assert "result.coastFINumber" in resp.get_json()["fields"]
