from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CoastFIInputs(BaseModel):
    """Saver profile shared by the Coast FI calculator and the projection generator.

    Percent fields are whole numbers (7 means 7%). desiredRetirementIncome is a
    monthly amount in today's money. No range checks happen here; the HTTP layer
    validates before building one of these.
    """

    model_config = ConfigDict(frozen=True)

    currentAge: int
    retirementAge: int
    currentSavings: float
    monthlyContributions: float
    desiredRetirementIncome: float
    expectedReturn: float
    inflationRate: float
    safeWithdrawalRate: float

    @property
    def years_to_retirement(self) -> int:
        return self.retirementAge - self.currentAge
