from __future__ import annotations

from typing import Callable

import pytest
from flask.testing import FlaskClient

from coastfi.app import create_app
from coastfi.config import Settings
from coastfi.core.inputs import CoastFIInputs


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Settings(log_level="WARNING"))
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def make_inputs() -> Callable[..., CoastFIInputs]:
    """Factory for a baseline saver: 30 years old, retiring at 65, 50k saved, 1k/month."""

    def _make(**overrides) -> CoastFIInputs:
        values = {
            "currentAge": 30,
            "retirementAge": 65,
            "currentSavings": 50000.0,
            "monthlyContributions": 1000.0,
            "desiredRetirementIncome": 4000.0,
            "expectedReturn": 7.0,
            "inflationRate": 3.0,
            "safeWithdrawalRate": 4.0,
        }
        values.update(overrides)
        return CoastFIInputs(**values)

    return _make


@pytest.fixture()
def baseline_inputs(make_inputs) -> CoastFIInputs:
    return make_inputs()


@pytest.fixture()
def baseline_payload(baseline_inputs: CoastFIInputs) -> dict:
    return baseline_inputs.model_dump()
