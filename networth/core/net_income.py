"""Gross-to-net salary calculation.

Simplified statutory schedule for a single reference year: social insurance
contributions capped at their ceilings, a progressive income tax and the
solidarity surcharge on top of it.
"""

from __future__ import annotations

from networth.schemas.projection import NetIncomeBreakdown

HEALTH_INSURANCE_CEILING = 62100
PENSION_INSURANCE_CEILING = 90600

HEALTH_INSURANCE_RATE = 0.073 + 0.0085
NURSING_CARE_INSURANCE_RATE = 0.023
PENSION_INSURANCE_RATE = 0.093
UNEMPLOYMENT_INSURANCE_RATE = 0.013

FLAT_DEDUCTION = 1264
BASIC_TAX_FREE_ALLOWANCE = 11604

SOLIDARITY_THRESHOLD = 18130
SOLIDARITY_FLAT_THRESHOLD = 34332
SOLIDARITY_RATE = 0.055
SOLIDARITY_PHASE_IN_RATE = 0.119


def income_tax(taxable_income: float) -> float:
    """Progressive income tax on taxable income.

    Branch order and coefficients are fixed; the zones are:
      <= 11604          no tax
      <= 17005          (979.18 y + 1400) y,             y = (x - 11604) / 10000
      <= 66760          (192.59 z + 2397) z + 975.79,    z = (x - 17005) / 10000
      <= 277825         0.42 x - 10253.81
      above             0.45 x - 18588.56
    """
    if taxable_income <= BASIC_TAX_FREE_ALLOWANCE:
        return 0.0
    if taxable_income <= 17005:
        y = (taxable_income - BASIC_TAX_FREE_ALLOWANCE) / 10000
        return (979.18 * y + 1400) * y
    if taxable_income <= 66760:
        z = (taxable_income - 17005) / 10000
        return (192.59 * z + 2397) * z + 975.79
    if taxable_income <= 277825:
        return 0.42 * taxable_income - 10253.81
    return 0.45 * taxable_income - 18588.56


def solidarity_surcharge(tax: float) -> float:
    """Surcharge on income tax with a phase-in above the threshold."""
    if tax <= SOLIDARITY_THRESHOLD:
        return 0.0
    if tax > SOLIDARITY_FLAT_THRESHOLD:
        return SOLIDARITY_RATE * tax
    return min(SOLIDARITY_RATE * tax, SOLIDARITY_PHASE_IN_RATE * (tax - SOLIDARITY_THRESHOLD))


def net_income_breakdown(gross_salary: float) -> NetIncomeBreakdown:
    """Every intermediate quantity of the gross-to-net calculation."""
    health_base = min(gross_salary, HEALTH_INSURANCE_CEILING)
    pension_base = min(gross_salary, PENSION_INSURANCE_CEILING)

    health = health_base * HEALTH_INSURANCE_RATE
    nursing = health_base * NURSING_CARE_INSURANCE_RATE
    pension = pension_base * PENSION_INSURANCE_RATE
    unemployment = pension_base * UNEMPLOYMENT_INSURANCE_RATE
    social_contributions = health + nursing + pension + unemployment

    taxable_income = gross_salary - social_contributions - FLAT_DEDUCTION
    tax = income_tax(taxable_income)
    soli = solidarity_surcharge(tax)

    return NetIncomeBreakdown(
        grossSalary=gross_salary,
        healthContribution=health,
        nursingCareContribution=nursing,
        pensionContribution=pension,
        unemploymentContribution=unemployment,
        socialContributions=social_contributions,
        taxableIncome=taxable_income,
        incomeTax=tax,
        solidaritySurcharge=soli,
        netSalary=gross_salary - social_contributions - tax - soli,
    )


def compute_net_salary(gross_salary: float) -> float:
    """Net annual salary for a gross annual salary."""
    return net_income_breakdown(gross_salary).netSalary
