"""Views derived from a score breakdown: area rollups, improvement ranking, savings estimate"""

import math
import random
from typing import Dict, List, Optional

from penny_score.domain.exceptions import InvalidProfileError
from penny_score.domain.models import (
    Area,
    AreaScore,
    FinancialProfile,
    Improvement,
    SavingsEstimate,
    ScoreBreakdown,
    ScoreZone,
)
from penny_score.domain.tips import pick_tip
from penny_score.utils.math_utils import round_half_up

# Savings heuristic assumptions
SHORT_DEBT_APR = 0.15
MORTGAGE_RATE_IMPROVEMENT = 0.005
MORTGAGE_LTV_THRESHOLD = 0.70
BUFFER_TARGET_MONTHS = 3
BUFFER_OPPORTUNITY_RATE = 0.05
SAVINGS_RATE_TARGET = 0.15
PREMIUM_FEE_RATE = 0.10


def _sum_by_area(breakdown: ScoreBreakdown) -> Dict[Area, List[float]]:
    sums: Dict[Area, List[float]] = {}
    for part in breakdown.parts:
        score_max = sums.setdefault(part.area, [0.0, 0.0])
        score_max[0] += part.score
        score_max[1] += part.max_score
    return dict(sorted(sums.items()))


def area_rollup(breakdown: ScoreBreakdown) -> List[AreaScore]:
    """Aggregate part scores per area as a 0-100 percentage (radar chart data)"""
    return [
        AreaScore(
            area=area,
            title=area.title,
            score=score,
            max_score=max_score,
            percent=round_half_up(score / max_score * 100),
        )
        for area, (score, max_score) in _sum_by_area(breakdown).items()
    ]


def top_improvements(
    breakdown: ScoreBreakdown,
    limit: int = 3,
    rng: Optional[random.Random] = None,
) -> List[Improvement]:
    """
    Rank areas by points lost and attach one random tip to each.

    lost = area maximum - area score, rounded to one decimal before sorting.
    Ties keep area order.
    """
    improvements = [
        Improvement(
            area=area,
            title=area.title,
            lost=round(max_score - score, 1),
            percent=round_half_up(score / max_score * 100),
            tip=None,
        )
        for area, (score, max_score) in _sum_by_area(breakdown).items()
    ]
    improvements.sort(key=lambda imp: imp.lost, reverse=True)

    return [
        Improvement(
            area=imp.area,
            title=imp.title,
            lost=imp.lost,
            percent=imp.percent,
            tip=pick_tip(imp.area, rng),
        )
        for imp in improvements[:limit]
    ]


def potential_savings(profile: FinancialProfile) -> SavingsEstimate:
    """
    Estimate how much a year the user could save by optimizing.

    Illustrative only, independent of the score. Four terms:
    - Interest on short-term debt at 15% APR
    - 0.5% of the mortgage when LTV exceeds 0.70 (better rate)
    - 5% return on the gap up to a 3-month emergency buffer
    - Shortfall to a 15% savings rate, annualized

    Every term but the mortgage one is floored at zero; the mortgage term is
    either zero or a share of the loan.

    Raises InvalidProfileError when the estimate overflows a float.
    """
    monthly_income = profile.net_income_12m

    debt_interest = max(0.0, profile.short_debt_balance * SHORT_DEBT_APR)

    ltv = profile.house_loan / profile.house_value if profile.house_value > 0 else 0.0
    mortgage_rate = profile.house_loan * MORTGAGE_RATE_IMPROVEMENT if ltv > MORTGAGE_LTV_THRESHOLD else 0.0

    buffer_deficit = max(0.0, profile.fixed_cost_avg_12m * BUFFER_TARGET_MONTHS - profile.emergency_buffer_kr)
    emergency_opportunity = buffer_deficit * BUFFER_OPPORTUNITY_RATE

    savings_gap = (
        max(0.0, monthly_income * SAVINGS_RATE_TARGET - monthly_income * (profile.savings_rate_pct / 100)) * 12
    )

    raw_total = debt_interest + mortgage_rate + emergency_opportunity + savings_gap
    if not math.isfinite(raw_total):
        # Finite inputs near the float limit can still overflow; blame the largest term
        terms = {
            "short_debt_balance": debt_interest,
            "house_loan": mortgage_rate,
            "fixed_cost_avg_12m": emergency_opportunity,
            "net_income_12m": savings_gap,
        }
        field_name = max(terms, key=terms.get)
        raise InvalidProfileError(field_name, getattr(profile, field_name), "is too large to estimate savings")

    total = round_half_up(raw_total)

    return SavingsEstimate(
        debt_interest=debt_interest,
        mortgage_rate=mortgage_rate,
        emergency_opportunity=emergency_opportunity,
        savings_gap=savings_gap,
        total=total,
    )


def premium_fee(savings_total: int) -> int:
    """Fee of the premium analysis: 10% of the estimated saving, never negative"""
    return max(0, round_half_up(savings_total * PREMIUM_FEE_RATE))


def score_zone(percent: float) -> ScoreZone:
    """
    Map the overall percentage to a gauge zone.

    - 0 - 33:   low
    - 33 - 66:  medium
    - 66+:      high
    """
    if percent < 33:
        return ScoreZone.LOW
    elif percent < 66:
        return ScoreZone.MEDIUM
    else:
        return ScoreZone.HIGH
