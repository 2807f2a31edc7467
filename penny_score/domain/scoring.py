"""Financial health scoring engine - core business logic for the Penny score"""

import logging
import math
from dataclasses import fields
from typing import Dict, List

from penny_score.domain.exceptions import InvalidProfileError
from penny_score.domain.models import Area, FinancialProfile, JobType, PartScore, ScoreBreakdown
from penny_score.utils.math_utils import clamp01

logger = logging.getLogger(__name__)

JOB_STABILITY_POINTS: Dict[JobType, int] = {
    JobType.PERMANENT: 50,
    JobType.FIXED_TERM: 35,
    JobType.SELF_EMPLOYED: 25,
    JobType.UNEMPLOYMENT_BENEFIT: 10,
    JobType.STUDENT: 25,
}
DEFAULT_JOB_POINTS = 25


def validate_profile(profile: FinancialProfile) -> None:
    """Reject NaN and infinite numbers before any arithmetic happens."""
    for f in fields(profile):
        value = getattr(profile, f.name)
        if isinstance(value, (int, float)) and not math.isfinite(value):
            raise InvalidProfileError(f.name, value)


def score_income_vs_costs(net_income: float, fixed_costs: float) -> float:
    """
    Income-to-fixed-costs ratio, 0-150 points.

    A ratio of 1.0 (income just covers costs) scores 0 and 1.5 scores the
    maximum. The 0.7 exponent softens the curve so moderate surpluses score
    better than a linear ramp would. The base is clamped first; a negative
    base would make the power complex.
    """
    ratio = net_income / max(fixed_costs, 1)
    x = clamp01(clamp01((ratio - 1.0) / 0.5) ** 0.7)
    return 150 * x


def score_job_stability(job_type: JobType) -> float:
    """Fixed lookup, 0-50 points"""
    return float(JOB_STABILITY_POINTS.get(job_type, DEFAULT_JOB_POINTS))


def score_debt_ratio(short_debt_balance: float, net_income: float) -> float:
    """
    Short-term debt against annual income, 0-150 points.

    Debt-free scores full; debt at or above 30% of annual income scores 0.
    """
    annual_income = max(net_income * 12, 1)
    ratio = short_debt_balance / annual_income
    return 150 * clamp01(1 - ratio / 0.3)


def score_emergency_buffer(buffer_kr: float, fixed_costs: float) -> float:
    """Months of fixed costs covered by the buffer, 3+ months is full credit (0-100)"""
    months = buffer_kr / max(fixed_costs, 1)
    return 100 * clamp01(months / 3)


def score_savings_rate(savings_rate_pct: float) -> float:
    """A savings rate of 10% or more is full credit (0-100)"""
    return 100 * clamp01((savings_rate_pct / 100) / 0.10)


def score_housing(house_value: float, house_loan: float) -> float:
    """
    Mortgage loan-to-value, 0-100 points.

    LTV bands:
    - < 0.50: 100
    - < 0.70: 85
    - < 0.85: 70
    - < 0.95: 50
    - else:   25

    No house value scores a neutral 60; an owned house without a loan is 100.
    """
    if house_value > 0 and house_loan > 0:
        ltv = house_loan / house_value
        if ltv < 0.50:
            return 100.0
        elif ltv < 0.70:
            return 85.0
        elif ltv < 0.85:
            return 70.0
        elif ltv < 0.95:
            return 50.0
        else:
            return 25.0
    if house_value > 0 and house_loan == 0:
        return 100.0
    return 60.0


def score_insurance(has_home_contents: bool, has_accident: bool, has_life: bool) -> float:
    """
    One third of 100 points per policy held.

    Only home contents, accident and life count. Critical illness and
    income protection are collected on the profile but not scored.
    """
    count = int(has_home_contents) + int(has_accident) + int(has_life)
    return 100 * count / 3


def compute_score(profile: FinancialProfile) -> ScoreBreakdown:
    """
    Main entry point: score a profile across the five areas.

    Returns a ScoreBreakdown whose parts are always in the order
    1A, 1B, 2A, 3A, 3B, 4A, 5A. Raises InvalidProfileError on NaN/inf input.
    """
    validate_profile(profile)

    parts: List[PartScore] = [
        PartScore(
            key="1A",
            label="Indkomst vs faste udgifter",
            score=score_income_vs_costs(profile.net_income_12m, profile.fixed_cost_avg_12m),
            max_score=150,
            area=Area.INCOME_JOB,
        ),
        PartScore(
            key="1B",
            label="Jobstabilitet",
            score=score_job_stability(profile.job_type),
            max_score=50,
            area=Area.INCOME_JOB,
        ),
        PartScore(
            key="2A",
            label="Gæld i forhold til indkomst",
            score=score_debt_ratio(profile.short_debt_balance, profile.net_income_12m),
            max_score=150,
            area=Area.DEBT,
        ),
        PartScore(
            key="3A",
            label="Nødopsparing",
            score=score_emergency_buffer(profile.emergency_buffer_kr, profile.fixed_cost_avg_12m),
            max_score=100,
            area=Area.SAVINGS,
        ),
        PartScore(
            key="3B",
            label="Månedlig opsparingsrate",
            score=score_savings_rate(profile.savings_rate_pct),
            max_score=100,
            area=Area.SAVINGS,
        ),
        PartScore(
            key="4A",
            label="Boliggæld (hvis relevant)",
            score=score_housing(profile.house_value, profile.house_loan),
            max_score=100,
            area=Area.HOUSING,
        ),
        PartScore(
            key="5A",
            label="Forsikringsdækning",
            score=score_insurance(profile.has_home_contents, profile.has_accident, profile.has_life),
            max_score=100,
            area=Area.INSURANCE,
        ),
    ]

    total = sum(p.score for p in parts)
    max_total = sum(p.max_score for p in parts)
    percent = total / max_total * 100

    logger.debug("Score computed", extra={"total": total, "percent": percent})

    return ScoreBreakdown(
        total=total,
        max_total=max_total,
        percent=percent,
        parts=tuple(parts),
    )
