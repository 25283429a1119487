from __future__ import annotations

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

ALREADY_ACHIEVED = "Already achieved!"
NEVER_WITHOUT_CONTRIBUTIONS = "Never (no contributions)"
BEYOND_RETIREMENT = "Beyond retirement age"


class CoastFIResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    coastFINumber: float
    isCoastFI: bool
    yearsToCoastFI: float
    ageWhenCoastFI: float
    projectedRetirementValue: float
    actualRetirementIncome: float
    timeToCoastFI: str


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(months: int) -> str:
    """Render a month count as "2 years and 3 months", "1 year" or "5 months"."""
    years, remainder = divmod(months, MONTHS_PER_YEAR)
    if years == 0:
        return _plural(remainder, "month")
    if remainder == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} and {_plural(remainder, 'month')}"


def months_until_coast(
    inputs: CoastFIInputs,
    required_retirement_amount: float,
) -> int | None:
    """
    First month at which the balance covers the Coast FI threshold, or None.

    Each month the balance grows, then the contribution lands. The threshold is
    the required retirement amount discounted over the years still remaining, so
    it rises as retirement approaches. Retirement month itself is not checked.
    """
    annual_return = to_fraction(inputs.expectedReturn)
    monthly_return = monthly_rate(annual_return)
    years_to_retirement = inputs.years_to_retirement

    balance = inputs.currentSavings
    for month in range(1, years_to_retirement * MONTHS_PER_YEAR + 1):
        balance = balance * (1 + monthly_return) + inputs.monthlyContributions

        remaining_years = years_to_retirement - month / MONTHS_PER_YEAR
        if remaining_years <= 0:
            continue

        required_now = divide(required_retirement_amount, growth_factor(annual_return, remaining_years))
        if balance >= required_now:
            return month

    return None


def accumulate(inputs: CoastFIInputs, months: int) -> float:
    """Balance after `months` of growth-then-contribution from currentSavings."""
    monthly_return = monthly_rate(to_fraction(inputs.expectedReturn))
    balance = inputs.currentSavings
    for _ in range(months):
        balance = balance * (1 + monthly_return) + inputs.monthlyContributions
    return balance


def calculate_coast_fi(inputs: CoastFIInputs) -> CoastFIResult:
    """
    Work out the Coast FI number and when the saver gets there.

    The target is the desired monthly income, inflated to the retirement date and
    annualised, divided by the safe withdrawal rate. Discounting that target back
    to today at the expected return gives the Coast FI number.

    Inputs are not validated. A zero withdrawal rate or zero years to retirement
    give inf/nan or degenerate values instead of raising.
    """
    years_to_retirement = inputs.years_to_retirement
    annual_return = to_fraction(inputs.expectedReturn)
    annual_inflation = to_fraction(inputs.inflationRate)
    withdrawal_rate = to_fraction(inputs.safeWithdrawalRate)

    future_desired_income = (
        inputs.desiredRetirementIncome * MONTHS_PER_YEAR * growth_factor(annual_inflation, years_to_retirement)
    )
    required_retirement_amount = divide(future_desired_income, withdrawal_rate)
    coast_fi_number = divide(required_retirement_amount, growth_factor(annual_return, years_to_retirement))

    is_coast_fi = inputs.currentSavings >= coast_fi_number

    if is_coast_fi:
        years_to_coast_fi = 0.0
        age_when_coast_fi = float(inputs.currentAge)
        time_to_coast_fi = ALREADY_ACHIEVED
    elif inputs.monthlyContributions == 0:
        # growth alone could still cross the threshold; this branch reports Never without scanning
        years_to_coast_fi = float(years_to_retirement)
        age_when_coast_fi = float(inputs.retirementAge)
        time_to_coast_fi = NEVER_WITHOUT_CONTRIBUTIONS
    else:
        months = months_until_coast(inputs, required_retirement_amount)
        if months is None:
            years_to_coast_fi = float(years_to_retirement)
            age_when_coast_fi = float(inputs.retirementAge)
            time_to_coast_fi = BEYOND_RETIREMENT
        else:
            years_to_coast_fi = months / MONTHS_PER_YEAR
            age_when_coast_fi = inputs.currentAge + years_to_coast_fi
            time_to_coast_fi = format_duration(months)

    projected_retirement_value = accumulate(inputs, years_to_retirement * MONTHS_PER_YEAR)

    # monthly withdrawal at retirement, expressed in today's money
    future_monthly_income = projected_retirement_value * withdrawal_rate / MONTHS_PER_YEAR
    actual_retirement_income = divide(future_monthly_income, growth_factor(annual_inflation, years_to_retirement))

    logger.debug(
        f"Coast FI number {coast_fi_number:,.2f} for age {inputs.currentAge}->{inputs.retirementAge}: "
        f"{time_to_coast_fi}"
    )

    return CoastFIResult(
        coastFINumber=coast_fi_number,
        isCoastFI=is_coast_fi,
        yearsToCoastFI=years_to_coast_fi,
        ageWhenCoastFI=age_when_coast_fi,
        projectedRetirementValue=projected_retirement_value,
        actualRetirementIncome=actual_retirement_income,
        timeToCoastFI=time_to_coast_fi,
    )


__all__ = [
    "ALREADY_ACHIEVED",
    "BEYOND_RETIREMENT",
    "NEVER_WITHOUT_CONTRIBUTIONS",
    "CoastFIResult",
    "accumulate",
    "calculate_coast_fi",
    "format_duration",
    "months_until_coast",
]
