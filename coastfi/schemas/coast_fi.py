"""Data contracts for the Coast FI endpoints."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from coastfi.core.chart import ChartDataPoint
from coastfi.core.coast_fi import CoastFIResult
from coastfi.core.inputs import CoastFIInputs
from coastfi.core.projection import InvestmentProjection


# ceiling for every money field
MAX_AMOUNT = 1e12


class CoastFIRequest(BaseModel):
    """Saver profile as posted by the frontend form."""

    model_config = ConfigDict(extra="forbid")

    currentAge: int = Field(..., ge=0, le=120)
    retirementAge: int = Field(..., ge=1, le=120)
    currentSavings: float = Field(..., ge=0, le=MAX_AMOUNT)
    monthlyContributions: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    desiredRetirementIncome: float = Field(
        ...,
        ge=0,
        le=MAX_AMOUNT,
        description="Monthly income wanted in retirement, in today's money.",
    )
    expectedReturn: float = Field(
        7.0,
        gt=-100,
        le=100,
        description="Expected annual return as a percentage (7 for 7%).",
    )
    inflationRate: float = Field(3.0, gt=-100, le=100, description="Annual inflation as a percentage.")
    safeWithdrawalRate: float = Field(
        4.0,
        gt=0,
        le=100,
        description="Share of the balance withdrawn per year in retirement, as a percentage.",
    )

    @model_validator(mode="after")
    def ensure_validity(self) -> "CoastFIRequest":
        if self.retirementAge <= self.currentAge:
            raise ValueError("retirementAge must be greater than currentAge")
        return self

    def to_inputs(self) -> CoastFIInputs:
        return CoastFIInputs(**self.model_dump())


class ProjectionResponse(BaseModel):
    projections: List[InvestmentProjection]
    chart: Dict[str, List[ChartDataPoint]]


class PlanResponse(BaseModel):
    result: CoastFIResult
    projections: List[InvestmentProjection]
