from __future__ import annotations

from math import isclose

import pytest

from networth.core.net_income import (
    compute_net_salary,
    income_tax,
    net_income_breakdown,
    solidarity_surcharge,
)


def test_zero_gross_yields_zero_net():
    assert compute_net_salary(0) == 0


def test_typical_salary():
    """40k gross: 8420 contributions, taxable 30316 in the second progressive zone."""
    breakdown = net_income_breakdown(40000)

    assert isclose(breakdown.socialContributions, 8420.0, abs_tol=0.01)
    assert isclose(breakdown.taxableIncome, 30316.0, abs_tol=0.01)
    assert isclose(breakdown.incomeTax, 4507.67, abs_tol=0.05)
    assert breakdown.solidaritySurcharge == 0
    assert isclose(breakdown.netSalary, 27072.33, abs_tol=0.05)
    assert breakdown.netSalary == compute_net_salary(40000)


def test_contributions_are_capped_at_ceilings():
    breakdown = net_income_breakdown(100000)

    assert isclose(breakdown.healthContribution, 62100 * 0.0815, abs_tol=0.01)
    assert isclose(breakdown.nursingCareContribution, 62100 * 0.023, abs_tol=0.01)
    assert isclose(breakdown.pensionContribution, 90600 * 0.093, abs_tol=0.01)
    assert isclose(breakdown.unemploymentContribution, 90600 * 0.013, abs_tol=0.01)
    assert isclose(breakdown.socialContributions, 16093.05, abs_tol=0.01)


def test_income_tax_zones():
    assert income_tax(-5000) == 0
    assert income_tax(11604) == 0
    assert income_tax(15000) > 0
    assert income_tax(100000) == pytest.approx(0.42 * 100000 - 10253.81)
    assert income_tax(300000) == pytest.approx(0.45 * 300000 - 18588.56)


@pytest.mark.parametrize("taxable", [11604, 277825])
def test_income_tax_continuous_at_outer_breakpoints(taxable):
    assert abs(income_tax(taxable + 0.01) - income_tax(taxable)) < 0.01


@pytest.mark.parametrize("taxable,max_jump", [(17005, 70), (66760, 120)])
def test_income_tax_middle_breakpoints_jump_stays_bounded(taxable, max_jump):
    """The fixed coefficients leave a small step at these two breakpoints."""
    assert abs(income_tax(taxable + 0.01) - income_tax(taxable)) < max_jump


@pytest.mark.parametrize("tax", [18130, 34332])
def test_solidarity_surcharge_continuous_at_breakpoints(tax):
    assert abs(solidarity_surcharge(tax + 0.01) - solidarity_surcharge(tax)) < 0.01


def test_solidarity_surcharge_phase_in_and_flat_rate():
    assert solidarity_surcharge(18130) == 0
    assert solidarity_surcharge(20000) == pytest.approx(0.119 * (20000 - 18130))
    assert solidarity_surcharge(40000) == pytest.approx(0.055 * 40000)


@pytest.mark.parametrize("gross", [17005, 62100, 66760, 90600, 277825])
def test_net_salary_continuous_in_gross(gross):
    assert abs(compute_net_salary(gross + 0.01) - compute_net_salary(gross)) < 0.05


def test_high_earner_pays_solidarity_surcharge():
    breakdown = net_income_breakdown(300000)

    assert breakdown.incomeTax > 34332
    assert breakdown.solidaritySurcharge == pytest.approx(0.055 * breakdown.incomeTax)
    assert breakdown.netSalary < 300000 - breakdown.incomeTax
