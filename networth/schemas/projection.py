"""Data contracts for the net worth projection engine."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProjectionParameters(BaseModel):
    """Inputs for one projection run.

    Rates are percentage points (``6`` means 6%). Defaults mirror the
    calculator's initial form state so a partial payload still projects.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    isRetirementMode: bool = False

    # accumulation mode
    currentAge: int = 29
    retirementAge: int = 69
    lifeExpectancy: int = 95
    initialGrossSalary: float = 40000.0
    salaryGrowthRate: float = 3.0
    monthlyExpenses: float = 2200.0
    savingsRate: float = 80.0
    initialAssets: float = 60000.0
    desiredMonthlyRetirement: float = 3000.0
    expectedPension: float = 1200.0

    # retirement mode
    retireeCurrentAge: int = 65
    retireeLifeExpectancy: int = 95
    retireeCurrentAssets: float = 500000.0
    retireeAnnualIncome: float = 24000.0
    retireeAnnualExpenses: float = 36000.0
    retireeIncomeGrowthRate: float = 1.5

    # shared
    investmentReturnRate: float = 6.0
    inflationRate: float = 2.0
    inheritanceEnabled: bool = False
    inheritanceAmount: float = 150000.0
    inheritanceYear: int = 2045


class YearlyRecord(BaseModel):
    """One simulated year. Monetary values are rounded to whole currency units."""

    model_config = ConfigDict(frozen=True)

    year: int
    age: int

    grossSalary: int = 0
    netSalary: int = 0
    monthlyNetSalary: int = 0
    monthlyExpenses: int = 0
    monthlyDisposableIncome: int = 0
    monthlySavingsAmount: int = 0

    annualNetIncome: int = 0

    totalAssets: int
    realTotalAssets: int
    investmentGains: int
    netInvestmentGains: int
    retirementWithdrawal: int = 0
    realRetirementWithdrawal: int = 0
    coverageGap: int = 0
    assetsAtYearStart: int


class NetSalaryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    grossSalary: float = Field(..., description="Gross annual salary.")


class NetIncomeBreakdown(BaseModel):
    """Statutory deductions from a gross annual salary."""

    model_config = ConfigDict(frozen=True)

    grossSalary: float
    healthContribution: float
    nursingCareContribution: float
    pensionContribution: float
    unemploymentContribution: float
    socialContributions: float
    taxableIncome: float
    incomeTax: float
    solidaritySurcharge: float
    netSalary: float


class PhaseSplit(BaseModel):
    """Records partitioned the way the charts and tables show them."""

    retirementStartYear: int
    accumulation: List[YearlyRecord]
    # only years with assets left
    retirement: List[YearlyRecord]


class RetirementSummary(BaseModel):
    retirementStartYear: int
    assetsAtRetirement: int
    realAssetsAtRetirement: int
    sustainableMonthlyIncome: float
    expectedMonthlyPension: float
    totalExpectedMonthlyIncome: float
    desiredMonthlyIncome: float
    goalMet: bool
    monthlyGapOrSurplus: float
    depletionAge: Optional[int] = None
