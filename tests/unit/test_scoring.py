"""Unit tests for the scoring engine"""

import math

import pytest

from penny_score.domain.exceptions import InvalidProfileError
from penny_score.domain.models import Area, FinancialProfile, JobType
from penny_score.domain.scoring import (
    compute_score,
    score_debt_ratio,
    score_emergency_buffer,
    score_housing,
    score_income_vs_costs,
    score_insurance,
    score_job_stability,
    score_savings_rate,
)


def parts_by_key(profile):
    return {p.key: p for p in compute_score(profile).parts}


def test_compute_score_scenario_a(profile):
    """Demo profile: every part matches its hand-computed value"""
    parts = parts_by_key(profile)

    assert parts["1A"].score == pytest.approx(150 * (0.4 / 0.5) ** 0.7)
    assert parts["1B"].score == 50
    assert parts["2A"].score == 150  # Zero debt
    assert parts["3A"].score == 100  # 75000 / 25000 = 3 months
    assert parts["3B"].score == 100  # 10% savings rate
    assert parts["4A"].score == 70  # LTV 2.2M / 3M = 0.733 falls in the < 0.85 band
    assert parts["5A"].score == pytest.approx(200 / 3)  # Contents + accident


def test_compute_score_totals(profile):
    """total and max_total are part sums; percent is their ratio"""
    breakdown = compute_score(profile)

    assert breakdown.max_total == 750
    assert breakdown.total == pytest.approx(sum(p.score for p in breakdown.parts))
    assert breakdown.percent == pytest.approx(breakdown.total / 750 * 100)


def test_compute_score_part_order_and_areas(profile):
    """Seven parts in fixed order, each owned by one area"""
    breakdown = compute_score(profile)

    assert [p.key for p in breakdown.parts] == ["1A", "1B", "2A", "3A", "3B", "4A", "5A"]
    assert [p.area for p in breakdown.parts] == [
        Area.INCOME_JOB,
        Area.INCOME_JOB,
        Area.DEBT,
        Area.SAVINGS,
        Area.SAVINGS,
        Area.HOUSING,
        Area.INSURANCE,
    ]
    assert [p.max_score for p in breakdown.parts] == [150, 50, 150, 100, 100, 100, 100]


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"net_income_12m": 0, "fixed_cost_avg_12m": 0},
        {"net_income_12m": 10000, "short_debt_balance": 1_000_000},
        {"emergency_buffer_kr": 0, "savings_rate_pct": 0, "house_value": 500_000, "house_loan": 600_000},
        {"net_income_12m": 1_000_000, "savings_rate_pct": 80, "emergency_buffer_kr": 10_000_000},
        {"job_type": JobType.UNEMPLOYMENT_BENEFIT, "has_home_contents": False, "has_accident": False},
    ],
)
def test_part_scores_within_bounds(profile_factory, overrides):
    """0 <= score <= max for every part, whatever the inputs"""
    breakdown = compute_score(profile_factory(**overrides))

    for part in breakdown.parts:
        assert 0 <= part.score <= part.max_score, part.key
    assert 0 <= breakdown.total <= 750


def test_zero_fixed_costs_does_not_blow_up(profile_factory):
    """Denominators floor at 1 so zero costs give finite scores"""
    breakdown = compute_score(profile_factory(fixed_cost_avg_12m=0))

    assert all(math.isfinite(p.score) for p in breakdown.parts)
    assert math.isfinite(breakdown.percent)
    parts = {p.key: p for p in breakdown.parts}
    assert parts["1A"].score == 150
    assert parts["3A"].score == 100


def test_zero_income_zero_costs():
    """Income equal to costs (both floored to 1) scores nothing on 1A"""
    assert score_income_vs_costs(0, 0) == 0
    assert score_debt_ratio(0, 0) == 150


def test_income_vs_costs_curve():
    """Ratio 1.0 scores 0, 1.5 and above scores 150, below 1.0 stays at 0"""
    assert score_income_vs_costs(25000, 25000) == 0
    assert score_income_vs_costs(37500, 25000) == pytest.approx(150)
    assert score_income_vs_costs(100000, 25000) == 150
    assert score_income_vs_costs(10000, 25000) == 0
    # Exponent 0.7 lifts the midpoint above linear
    assert score_income_vs_costs(31250, 25000) > 75


def test_income_vs_costs_monotonic():
    """More income at fixed costs never lowers the score"""
    scores = [score_income_vs_costs(income, 25000) for income in range(0, 60001, 2500)]
    assert scores == sorted(scores)


def test_debt_ratio_monotonic():
    """More debt never raises the debt score"""
    scores = [score_debt_ratio(debt, 35000) for debt in range(0, 200001, 10000)]
    assert scores == sorted(scores, reverse=True)
    # 30% of annual income (126000) and above scores 0
    assert score_debt_ratio(126000, 35000) == pytest.approx(0)
    assert score_debt_ratio(200000, 35000) == 0


def test_emergency_buffer_monotonic():
    """More buffer never lowers the buffer score; 3 months is full"""
    scores = [score_emergency_buffer(buffer, 25000) for buffer in range(0, 100001, 5000)]
    assert scores == sorted(scores)
    assert score_emergency_buffer(37500, 25000) == pytest.approx(50)
    assert score_emergency_buffer(150000, 25000) == 100


def test_savings_rate():
    assert score_savings_rate(0) == 0
    assert score_savings_rate(5) == pytest.approx(50)
    assert score_savings_rate(10) == pytest.approx(100)
    assert score_savings_rate(25) == 100


@pytest.mark.parametrize(
    "job_type,points",
    [
        (JobType.PERMANENT, 50),
        (JobType.FIXED_TERM, 35),
        (JobType.SELF_EMPLOYED, 25),
        (JobType.UNEMPLOYMENT_BENEFIT, 10),
        (JobType.STUDENT, 25),
    ],
)
def test_job_stability_table(job_type, points):
    assert score_job_stability(job_type) == points


def test_housing_no_house_defaults_to_60():
    """Scenario B: no house value and no loan"""
    assert score_housing(0, 0) == 60


def test_housing_owned_without_loan():
    """Scenario C: house owned outright"""
    assert score_housing(1_000_000, 0) == 100


def test_housing_loan_without_value_uses_default():
    assert score_housing(0, 500_000) == 60


@pytest.mark.parametrize(
    "loan,points",
    [
        (400_000, 100),  # 0.40
        (500_000, 85),  # 0.50 is not < 0.50
        (690_000, 85),
        (700_000, 70),
        (849_000, 70),
        (850_000, 50),
        (940_000, 50),
        (950_000, 25),
        (1_200_000, 25),
    ],
)
def test_housing_ltv_steps(loan, points):
    assert score_housing(1_000_000, loan) == points


@pytest.mark.parametrize(
    "flags,expected",
    [
        ((False, False, False), 0),
        ((True, False, False), 100 / 3),
        ((False, True, True), 200 / 3),
        ((True, True, True), 100),
    ],
)
def test_insurance_counts_three_policies(flags, expected):
    assert score_insurance(*flags) == pytest.approx(expected)


def test_insurance_ignores_critical_illness_and_income_protection(profile_factory):
    """
    Critical illness and income protection are collected but not scored.

    Likely an oversight in the product rules; pinned here so a change is
    a deliberate decision.
    """
    without = profile_factory(has_critical_illness=False, has_income_protection=False)
    with_both = profile_factory(has_critical_illness=True, has_income_protection=True)

    assert parts_by_key(without)["5A"].score == parts_by_key(with_both)["5A"].score


def test_unscored_fields_do_not_change_score(profile, profile_factory):
    """Fields listed as unscored have no effect on the breakdown"""
    changed = profile_factory(
        income_sources=5,
        tenure_months=1,
        income_std_dev=20000,
        negative_months_12m=12,
        short_debt_cards_count=9,
        car_loan=400_000,
        mortgage_rate_pct=9.5,
        pension_rate_pct=0,
        overdrafts_ltm=30,
        subs_pct_income=40,
    )

    assert compute_score(changed) == compute_score(profile)
    assert "has_critical_illness" in FinancialProfile.UNSCORED_FIELDS
    assert "net_income_12m" not in FinancialProfile.UNSCORED_FIELDS


def test_compute_score_is_deterministic(profile):
    assert compute_score(profile) == compute_score(profile)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_input_raises(profile_factory, value):
    """NaN/inf cannot be scored"""
    with pytest.raises(InvalidProfileError) as exc_info:
        compute_score(profile_factory(fixed_cost_avg_12m=value))

    assert exc_info.value.field_name == "fixed_cost_avg_12m"
