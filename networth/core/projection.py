from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from networth.core.net_income import compute_net_salary
from networth.schemas.projection import ProjectionParameters, YearlyRecord

logger = logging.getLogger(__name__)

CAPITAL_GAINS_TAX_RATE = 0.25
CAPITAL_GAINS_ALLOWANCE = 1000


# -----------------------------
# Shared numeric helpers
# -----------------------------


def _pct(rate: float) -> float:
    return rate / 100.0


def round_unit(value: float) -> int:
    """Nearest whole currency unit, halves rounded up (no banker's rounding)."""
    return int(math.floor(value + 0.5))


def inflation_factor(inflation_rate: float, years: int) -> float:
    return (1 + _pct(inflation_rate)) ** years


def investment_gains(assets: float, return_rate: float) -> Tuple[float, float]:
    """Return (gross, net) gains on the assets held at the start of the year.

    Gains up to the annual allowance are untaxed; the rest is taxed at the
    flat capital-gains rate.
    """
    gross = assets * _pct(return_rate)
    if gross > CAPITAL_GAINS_ALLOWANCE:
        net = CAPITAL_GAINS_ALLOWANCE + (gross - CAPITAL_GAINS_ALLOWANCE) * (1 - CAPITAL_GAINS_TAX_RATE)
    else:
        net = gross
    return gross, net


def apply_inheritance(assets: float, params: ProjectionParameters, year: int) -> float:
    if params.inheritanceEnabled and year == params.inheritanceYear:
        return assets + params.inheritanceAmount
    return assets


def apply_depletion_floor(
    assets: float, age: int, depletion_age: Optional[int]
) -> Tuple[float, Optional[int]]:
    """Clamp assets at zero, remembering the first age they ran out."""
    if assets <= 0 and depletion_age is None:
        depletion_age = age
    if assets < 0:
        assets = 0.0
    return assets, depletion_age


def retirement_start_year(params: ProjectionParameters, current_year: int) -> int:
    if params.isRetirementMode:
        return current_year
    return current_year + (params.retirementAge - params.currentAge)


# -----------------------------
# Accumulation projector
# -----------------------------


@dataclass(frozen=True)
class NotYetRetired:
    pass


@dataclass(frozen=True)
class Retired:
    retirement_expenses: float
    assets_at_retirement: float


RetirementPhase = Union[NotYetRetired, Retired]


@dataclass(frozen=True)
class AccumulationState:
    current_assets: float
    current_gross_salary: float
    current_annual_expenses: float
    last_annual_net_salary: float = 0.0
    phase: RetirementPhase = NotYetRetired()
    depletion_age: Optional[int] = None

    @classmethod
    def initial(cls, params: ProjectionParameters) -> "AccumulationState":
        return cls(
            current_assets=float(params.initialAssets),
            current_gross_salary=float(params.initialGrossSalary),
            current_annual_expenses=float(params.monthlyExpenses) * 12,
        )


def _working_year(
    params: ProjectionParameters,
    state: AccumulationState,
    index: int,
    net_gains: float,
) -> Tuple[AccumulationState, Dict[str, float]]:
    salary = state.current_gross_salary
    expenses = state.current_annual_expenses
    if index > 0:
        salary *= 1 + _pct(params.salaryGrowthRate)
        # living costs grow with inflation
        expenses *= 1 + _pct(params.inflationRate)

    net_salary = compute_net_salary(salary)
    disposable = net_salary - expenses
    savings = disposable * _pct(params.savingsRate) if disposable > 0 else 0.0

    monthly_net = net_salary / 12
    monthly_disposable = monthly_net - expenses / 12
    monthly_savings = monthly_disposable * _pct(params.savingsRate) if monthly_disposable > 0 else 0.0

    new_state = replace(
        state,
        current_assets=state.current_assets + net_gains + savings,
        current_gross_salary=salary,
        current_annual_expenses=expenses,
        last_annual_net_salary=net_salary,
    )
    fields = {
        "grossSalary": salary,
        "netSalary": net_salary,
        "monthlyNetSalary": monthly_net,
        "monthlyExpenses": expenses / 12,
        "monthlyDisposableIncome": monthly_disposable,
        "monthlySavingsAmount": monthly_savings,
    }
    return new_state, fields


def _withdrawal_year(
    params: ProjectionParameters,
    state: AccumulationState,
    years_retired: int,
    net_gains: float,
    deflator: float,
) -> Tuple[AccumulationState, Dict[str, float]]:
    phase = state.phase
    if isinstance(phase, NotYetRetired):
        desired = params.desiredMonthlyRetirement * 12
        phase = Retired(
            retirement_expenses=desired if desired > 0 else state.last_annual_net_salary,
            assets_at_retirement=state.current_assets,
        )
    else:
        phase = replace(
            phase,
            retirement_expenses=phase.retirement_expenses * (1 + _pct(params.inflationRate)),
        )

    withdrawal = phase.retirement_expenses
    pension = params.expectedPension * 12 * inflation_factor(params.inflationRate, max(0, years_retired))
    needed = max(0.0, withdrawal - pension)

    new_state = replace(
        state,
        current_assets=state.current_assets + net_gains - needed,
        phase=phase,
    )
    fields = {
        "retirementWithdrawal": withdrawal,
        "realRetirementWithdrawal": withdrawal / deflator,
        # what investment income alone cannot cover after the pension
        "coverageGap": max(0.0, needed - net_gains),
    }
    return new_state, fields


def accumulation_step(
    params: ProjectionParameters,
    state: AccumulationState,
    index: int,
    year0: int,
) -> Tuple[AccumulationState, YearlyRecord]:
    """Advance the accumulation-mode projection by one year.

    Order of operations:
      1) gains on the start-of-year balance, after capital-gains tax
      2) working year: grow salary/expenses, add gains + savings
         retired year: latch or inflate spending, add gains, withdraw what the pension misses
      3) inheritance, if this is the inheritance year
      4) clamp at zero
    """
    year = year0 + index
    age = params.currentAge + index
    start_year = year0 + (params.retirementAge - params.currentAge)

    assets_at_year_start = state.current_assets
    gains, net_gains = investment_gains(assets_at_year_start, params.investmentReturnRate)
    deflator = inflation_factor(params.inflationRate, index)

    if year < start_year:
        state, fields = _working_year(params, state, index, net_gains)
    else:
        # year and index move in lockstep, so this equals index - (retirementAge - currentAge)
        state, fields = _withdrawal_year(params, state, year - start_year, net_gains, deflator)

    assets = apply_inheritance(state.current_assets, params, year)
    assets, depletion_age = apply_depletion_floor(assets, age, state.depletion_age)
    state = replace(state, current_assets=assets, depletion_age=depletion_age)

    record = YearlyRecord(
        year=year,
        age=age,
        totalAssets=round_unit(assets),
        realTotalAssets=round_unit(assets / deflator),
        investmentGains=round_unit(gains),
        netInvestmentGains=round_unit(net_gains),
        assetsAtYearStart=round_unit(assets_at_year_start),
        **{name: round_unit(value) for name, value in fields.items()},
    )
    return state, record


# -----------------------------
# Retirement-only projector
# -----------------------------


@dataclass(frozen=True)
class RetirementState:
    current_assets: float
    annual_net_income: float
    annual_expenses: float
    depletion_age: Optional[int] = None

    @classmethod
    def initial(cls, params: ProjectionParameters) -> "RetirementState":
        return cls(
            current_assets=float(params.retireeCurrentAssets),
            annual_net_income=float(params.retireeAnnualIncome),
            annual_expenses=float(params.retireeAnnualExpenses),
        )


def retirement_step(
    params: ProjectionParameters,
    state: RetirementState,
    index: int,
    year0: int,
) -> Tuple[RetirementState, YearlyRecord]:
    """Advance the retirement-mode projection by one year.

    Expenses grow with inflation, income with its own growth rate.
    """
    year = year0 + index
    age = params.retireeCurrentAge + index

    income = state.annual_net_income
    expenses = state.annual_expenses
    if index > 0:
        expenses *= 1 + _pct(params.inflationRate)
        income *= 1 + _pct(params.retireeIncomeGrowthRate)

    assets_at_year_start = state.current_assets
    gains, net_gains = investment_gains(assets_at_year_start, params.investmentReturnRate)

    total_income = income + net_gains
    coverage_gap = max(0.0, expenses - total_income)

    assets = assets_at_year_start + total_income - expenses
    assets = apply_inheritance(assets, params, year)
    assets, depletion_age = apply_depletion_floor(assets, age, state.depletion_age)

    deflator = inflation_factor(params.inflationRate, index)
    new_state = RetirementState(
        current_assets=assets,
        annual_net_income=income,
        annual_expenses=expenses,
        depletion_age=depletion_age,
    )
    record = YearlyRecord(
        year=year,
        age=age,
        annualNetIncome=round_unit(income),
        totalAssets=round_unit(assets),
        realTotalAssets=round_unit(assets / deflator),
        investmentGains=round_unit(gains),
        netInvestmentGains=round_unit(net_gains),
        retirementWithdrawal=round_unit(expenses),
        realRetirementWithdrawal=round_unit(expenses / deflator),
        coverageGap=round_unit(coverage_gap),
        assetsAtYearStart=round_unit(assets_at_year_start),
    )
    return new_state, record


# -----------------------------
# Runs and mode selector
# -----------------------------


@dataclass(frozen=True)
class ProjectionRun:
    records: Tuple[YearlyRecord, ...]
    depletion_age: Optional[int]


def _fold(
    step: Callable[..., Tuple[Any, YearlyRecord]],
    params: ProjectionParameters,
    state: Any,
    years: int,
    year0: int,
) -> ProjectionRun:
    records: List[YearlyRecord] = []
    for index in range(years + 1):
        state, record = step(params, state, index, year0)
        records.append(record)
    return ProjectionRun(records=tuple(records), depletion_age=state.depletion_age)


def run_accumulation(params: ProjectionParameters, current_year: Optional[int] = None) -> ProjectionRun:
    year0 = current_year or datetime.now().year
    run = _fold(
        accumulation_step,
        params,
        AccumulationState.initial(params),
        params.lifeExpectancy - params.currentAge,
        year0,
    )
    logger.debug("accumulation projection: %d years, depletion age %s", len(run.records), run.depletion_age)
    return run


def run_retirement(params: ProjectionParameters, current_year: Optional[int] = None) -> ProjectionRun:
    year0 = current_year or datetime.now().year
    run = _fold(
        retirement_step,
        params,
        RetirementState.initial(params),
        params.retireeLifeExpectancy - params.retireeCurrentAge,
        year0,
    )
    logger.debug("retirement projection: %d years, depletion age %s", len(run.records), run.depletion_age)
    return run


def simulate(params: ProjectionParameters, current_year: Optional[int] = None) -> ProjectionRun:
    if params.isRetirementMode:
        return run_retirement(params, current_year)
    return run_accumulation(params, current_year)


def project_accumulation(params: ProjectionParameters, current_year: Optional[int] = None) -> List[YearlyRecord]:
    return list(run_accumulation(params, current_year).records)


def project_retirement(params: ProjectionParameters, current_year: Optional[int] = None) -> List[YearlyRecord]:
    return list(run_retirement(params, current_year).records)


def project(params: ProjectionParameters, current_year: Optional[int] = None) -> List[YearlyRecord]:
    """Route to the retirement-only or the accumulation projector."""
    if params.isRetirementMode:
        return project_retirement(params, current_year)
    return project_accumulation(params, current_year)


def make_cached_simulator(maxsize: int = 256) -> Callable[[ProjectionParameters, int], ProjectionRun]:
    """Memoize runs by (parameters, year). Parameters and records are frozen."""
    return lru_cache(maxsize=maxsize)(simulate)


__all__ = [
    "CAPITAL_GAINS_ALLOWANCE",
    "CAPITAL_GAINS_TAX_RATE",
    "AccumulationState",
    "NotYetRetired",
    "ProjectionRun",
    "Retired",
    "RetirementState",
    "accumulation_step",
    "apply_depletion_floor",
    "apply_inheritance",
    "inflation_factor",
    "investment_gains",
    "make_cached_simulator",
    "project",
    "project_accumulation",
    "project_retirement",
    "retirement_start_year",
    "retirement_step",
    "round_unit",
    "run_accumulation",
    "run_retirement",
    "simulate",
]
