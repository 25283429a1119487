"""Coast FI calculation and projection routines."""

from coastfi.core.coast_fi import CoastFIResult, calculate_coast_fi
from coastfi.core.inputs import CoastFIInputs
from coastfi.core.projection import InvestmentProjection, generate_projections

__all__ = [
    "CoastFIInputs",
    "CoastFIResult",
    "InvestmentProjection",
    "calculate_coast_fi",
    "generate_projections",
]
