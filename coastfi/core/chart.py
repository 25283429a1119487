"""Chart-ready series built from a projection table."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from coastfi.core.projection import InvestmentProjection


class ChartDataPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    label: Optional[str] = None


def projection_chart_series(
    projections: Sequence[InvestmentProjection],
) -> Dict[str, List[ChartDataPoint]]:
    """Nominal value, real value and cumulative contributions keyed by age."""
    series: Dict[str, List[ChartDataPoint]] = {
        "value": [],
        "realValue": [],
        "contributions": [],
    }
    for row in projections:
        label = str(row.year)
        series["value"].append(ChartDataPoint(x=row.age, y=row.value, label=label))
        series["realValue"].append(ChartDataPoint(x=row.age, y=row.realValue, label=label))
        series["contributions"].append(ChartDataPoint(x=row.age, y=row.contributionsToDate, label=label))
    return series
