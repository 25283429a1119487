from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict

from coastfi.core.inputs import CoastFIInputs
from coastfi.core.rates import (
    MONTHS_PER_YEAR,
    divide,
    growth_factor,
    monthly_rate,
    to_fraction,
)

YEARS_AFTER_RETIREMENT = 25
MAX_PROJECTION_AGE = 100


class InvestmentProjection(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: int
    year: int
    value: float
    contributionsToDate: float
    realValue: float


def projection_end_age(inputs: CoastFIInputs) -> int:
    return min(inputs.retirementAge + YEARS_AFTER_RETIREMENT, MAX_PROJECTION_AGE)


def generate_projections(
    inputs: CoastFIInputs,
    current_year: Optional[int] = None,
) -> List[InvestmentProjection]:
    """
    Year-by-year account value from currentAge to min(retirementAge + 25, 100).

    Conventions:
      - The first row is the untouched starting balance at currentAge. The
        list is empty when currentAge is already past the end age.
      - Working years (age <= retirementAge): each month grows, then the
        contribution is added.
      - Retirement years (age > retirementAge): each month grows, then a fixed
        withdrawal is taken, flooring the balance at zero. The withdrawal is the
        desired monthly income inflated once to the retirement date and stays
        nominally flat afterwards.
      - realValue deflates the balance by inflation since currentAge.
    """
    annual_return = to_fraction(inputs.expectedReturn)
    annual_inflation = to_fraction(inputs.inflationRate)
    monthly_return = monthly_rate(annual_return)

    monthly_withdrawal = inputs.desiredRetirementIncome * growth_factor(
        annual_inflation, inputs.years_to_retirement
    )
    end_age = projection_end_age(inputs)
    year0 = current_year if current_year is not None else datetime.now().year

    value = float(inputs.currentSavings)
    total_contributions = 0.0

    rows: List[InvestmentProjection] = []
    for age in range(inputs.currentAge, end_age + 1):
        if inputs.currentAge < age <= inputs.retirementAge:
            for _ in range(MONTHS_PER_YEAR):
                value = value * (1 + monthly_return) + inputs.monthlyContributions
                total_contributions += inputs.monthlyContributions
        elif age > inputs.currentAge:
            for _ in range(MONTHS_PER_YEAR):
                value = max(0.0, value * (1 + monthly_return) - monthly_withdrawal)

        years_from_start = age - inputs.currentAge
        rows.append(
            InvestmentProjection(
                age=age,
                year=year0 + years_from_start,
                value=value,
                contributionsToDate=total_contributions,
                realValue=divide(value, growth_factor(annual_inflation, years_from_start)),
            )
        )

    if rows:
        logger.debug(
            f"Projected {len(rows)} years ({inputs.currentAge}-{end_age}), final value {rows[-1].value:,.2f}"
        )
    else:
        logger.debug(f"Nothing to project: age {inputs.currentAge} is past end age {end_age}")
    return rows

__all__ = [
    "MAX_PROJECTION_AGE",
    "YEARS_AFTER_RETIREMENT",
    "InvestmentProjection",
    "generate_projections",
    "projection_end_age",
]
