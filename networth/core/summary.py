"""Helpers the charts and goal cards build on top of a projection run."""

from __future__ import annotations

from typing import List, Optional

from networth.core.projection import ProjectionRun, retirement_start_year
from networth.schemas.projection import (
    PhaseSplit,
    ProjectionParameters,
    RetirementSummary,
    YearlyRecord,
)

SAFE_WITHDRAWAL_RATE = 0.04


def split_phases(
    records: List[YearlyRecord],
    params: ProjectionParameters,
    current_year: int,
) -> PhaseSplit:
    start_year = retirement_start_year(params, current_year)
    return PhaseSplit(
        retirementStartYear=start_year,
        accumulation=[r for r in records if r.year < start_year],
        retirement=[r for r in records if r.year >= start_year and r.totalAssets > 0],
    )


def _record_for_year(records: List[YearlyRecord], year: int) -> Optional[YearlyRecord]:
    for record in records:
        if record.year == year:
            return record
    return None


def summarize(
    params: ProjectionParameters,
    run: ProjectionRun,
    current_year: int,
) -> RetirementSummary:
    """Assets at retirement, 4%-rule income and whether the monthly goal is met.

    In retirement mode the "goal" is covering current expenses with income
    plus the 4% draw.
    """
    start_year = retirement_start_year(params, current_year)
    record = _record_for_year(list(run.records), start_year)
    assets = record.totalAssets if record else 0
    real_assets = record.realTotalAssets if record else 0

    if params.isRetirementMode:
        desired = params.retireeAnnualExpenses / 12
        pension = params.retireeAnnualIncome / 12
    else:
        desired = params.desiredMonthlyRetirement
        pension = params.expectedPension

    sustainable = assets * SAFE_WITHDRAWAL_RATE / 12
    total = sustainable + pension

    return RetirementSummary(
        retirementStartYear=start_year,
        assetsAtRetirement=assets,
        realAssetsAtRetirement=real_assets,
        sustainableMonthlyIncome=sustainable,
        expectedMonthlyPension=pension,
        totalExpectedMonthlyIncome=total,
        desiredMonthlyIncome=desired,
        goalMet=total >= desired,
        monthlyGapOrSurplus=total - desired,
        depletionAge=run.depletion_age,
    )
