from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from networth.app import create_app
from networth.config import TestingConfig
from networth.schemas.projection import ProjectionParameters


@pytest.fixture()
def current_year() -> int:
    """Fixed calendar year so projections are reproducible."""
    return 2025


@pytest.fixture()
def app():
    return create_app(TestingConfig)


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def saver() -> ProjectionParameters:
    """Working 29-year-old who retires at 69."""
    return ProjectionParameters(
        initialGrossSalary=40000,
        salaryGrowthRate=3,
        monthlyExpenses=2200,
        savingsRate=80,
        initialAssets=60000,
        investmentReturnRate=6,
        inflationRate=2,
        currentAge=29,
        retirementAge=69,
        lifeExpectancy=95,
        desiredMonthlyRetirement=3000,
        expectedPension=1200,
        inheritanceEnabled=False,
    )


@pytest.fixture()
def retiree() -> ProjectionParameters:
    """Retiree with small savings and no income."""
    return ProjectionParameters(
        isRetirementMode=True,
        retireeCurrentAssets=50000,
        retireeAnnualIncome=0,
        retireeAnnualExpenses=36000,
        retireeIncomeGrowthRate=0,
        investmentReturnRate=2,
        inflationRate=2,
        retireeCurrentAge=65,
        retireeLifeExpectancy=95,
    )
