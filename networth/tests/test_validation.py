from __future__ import annotations

import pytest
from pydantic import ValidationError

from networth.domain.validation import (
    ParameterValidationError,
    collect_parameter_errors,
    validate_parameters,
)
from networth.schemas.projection import ProjectionParameters


def test_sensible_parameters_pass(saver, retiree):
    assert collect_parameter_errors(saver) == []
    assert collect_parameter_errors(retiree) == []
    assert validate_parameters(saver) is saver


def test_life_expectancy_must_exceed_current_age(saver):
    errors = collect_parameter_errors(saver.model_copy(update={"lifeExpectancy": 29}))
    assert "lifeExpectancy must be greater than currentAge" in errors


def test_retirement_before_current_age_is_rejected(saver):
    errors = collect_parameter_errors(saver.model_copy(update={"retirementAge": 25}))
    assert "retirementAge must not be less than currentAge" in errors


def test_negative_money_and_out_of_range_rates(saver):
    params = saver.model_copy(update={"initialAssets": -1, "savingsRate": 120, "inflationRate": -3})
    errors = collect_parameter_errors(params)

    assert "initialAssets must not be negative" in errors
    assert "savingsRate must be between 0 and 100" in errors
    assert "inflationRate must be between 0 and 100" in errors


def test_only_active_mode_is_checked(retiree):
    # accumulation fields are irrelevant in retirement mode
    params = retiree.model_copy(update={"currentAge": 90, "lifeExpectancy": 80, "initialAssets": -5})
    assert collect_parameter_errors(params) == []

    params = retiree.model_copy(update={"retireeLifeExpectancy": 60})
    assert collect_parameter_errors(params) == [
        "retireeLifeExpectancy must be greater than retireeCurrentAge"
    ]


def test_validate_raises_with_all_errors(saver):
    params = saver.model_copy(update={"lifeExpectancy": 20, "monthlyExpenses": -100})
    with pytest.raises(ParameterValidationError) as exc_info:
        validate_parameters(params)

    assert len(exc_info.value.errors) == 2
    assert "monthlyExpenses must not be negative" in str(exc_info.value)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_are_rejected_by_the_schema(value):
    with pytest.raises(ValidationError):
        ProjectionParameters(initialAssets=value)
