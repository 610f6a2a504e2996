from __future__ import annotations

from typing import List

from networth.schemas.projection import ProjectionParameters


class ParameterValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


ACCUMULATION_MONEY_FIELDS = (
    "initialGrossSalary",
    "monthlyExpenses",
    "initialAssets",
    "desiredMonthlyRetirement",
    "expectedPension",
)
ACCUMULATION_RATE_FIELDS = ("salaryGrowthRate", "savingsRate")

RETIREMENT_MONEY_FIELDS = (
    "retireeCurrentAssets",
    "retireeAnnualIncome",
    "retireeAnnualExpenses",
)
RETIREMENT_RATE_FIELDS = ("retireeIncomeGrowthRate",)

SHARED_RATE_FIELDS = ("investmentReturnRate", "inflationRate")


def _check_money(params: ProjectionParameters, names: tuple) -> List[str]:
    return [f"{name} must not be negative" for name in names if getattr(params, name) < 0]


def _check_rates(params: ProjectionParameters, names: tuple) -> List[str]:
    return [
        f"{name} must be between 0 and 100"
        for name in names
        if not 0 <= getattr(params, name) <= 100
    ]


def collect_parameter_errors(params: ProjectionParameters) -> List[str]:
    """Sanity checks for the active mode's fields plus the shared ones.

    The projectors never call this; it is meant for the request boundary.
    """
    errors: List[str] = []

    if params.isRetirementMode:
        if params.retireeLifeExpectancy <= params.retireeCurrentAge:
            errors.append("retireeLifeExpectancy must be greater than retireeCurrentAge")
        errors.extend(_check_money(params, RETIREMENT_MONEY_FIELDS))
        errors.extend(_check_rates(params, RETIREMENT_RATE_FIELDS))
    else:
        if params.lifeExpectancy <= params.currentAge:
            errors.append("lifeExpectancy must be greater than currentAge")
        if params.retirementAge < params.currentAge:
            errors.append("retirementAge must not be less than currentAge")
        errors.extend(_check_money(params, ACCUMULATION_MONEY_FIELDS))
        errors.extend(_check_rates(params, ACCUMULATION_RATE_FIELDS))

    errors.extend(_check_rates(params, SHARED_RATE_FIELDS))
    if params.inheritanceEnabled and params.inheritanceAmount < 0:
        errors.append("inheritanceAmount must not be negative")

    return errors


def validate_parameters(params: ProjectionParameters) -> ProjectionParameters:
    errors = collect_parameter_errors(params)
    if errors:
        raise ParameterValidationError(errors)
    return params
