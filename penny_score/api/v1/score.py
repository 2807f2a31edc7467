"""POST /v1/score - financial health score endpoint"""

import logging
import random
import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from penny_score.api.dependencies import get_request_id, get_tip_rng
from penny_score.api.v1.schemas import (
    AreaScoreSchema,
    ImprovementSchema,
    PartScoreSchema,
    ProfileRequest,
    SavingsSchema,
    ScoreResponse,
    TipResponse,
)
from penny_score.config import settings
from penny_score.domain.exceptions import InvalidProfileError
from penny_score.domain.insights import (
    area_rollup,
    potential_savings,
    premium_fee,
    score_zone,
    top_improvements,
)
from penny_score.domain.models import Improvement
from penny_score.domain.scoring import compute_score
from penny_score.infrastructure.observability.logging import log_score
from penny_score.infrastructure.observability.metrics import record_score, record_tip
from penny_score.utils.math_utils import monthly_savings_amount

router = APIRouter()


def _improvement_schemas(improvements: List[Improvement]) -> List[ImprovementSchema]:
    items = []
    for imp in improvements:
        tip = None
        if imp.tip is not None:
            record_tip(imp.tip.area)
            tip = TipResponse(
                area=imp.tip.area,
                icon=imp.tip.icon,
                title=imp.tip.title,
                text=imp.tip.text,
                boost=imp.tip.boost,
            )
        items.append(
            ImprovementSchema(area=imp.area, title=imp.title, lost=imp.lost, percent=imp.percent, tip=tip)
        )
    return items


@router.post("/score", response_model=ScoreResponse)
def create_score(
    request_body: ProfileRequest,
    request: Request,
    rng: random.Random = Depends(get_tip_rng),
):
    """
    Score a financial profile.

    Flow:
    1. Build the profile snapshot from the request
    2. Compute the seven part scores and the total
    3. Derive area rollup, improvement ranking and savings estimate
    4. Record metrics and log the outcome
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        profile = request_body.to_profile()
        breakdown = compute_score(profile)
        savings = potential_savings(profile)
        zone = score_zone(breakdown.percent)

        response = ScoreResponse(
            total=breakdown.total,
            max_total=breakdown.max_total,
            percent=breakdown.percent,
            zone=zone.value,
            monthly_savings_kr=monthly_savings_amount(profile.savings_rate_pct, profile.net_income_12m),
            parts=[
                PartScoreSchema(key=p.key, label=p.label, score=p.score, max_score=p.max_score, area=p.area)
                for p in breakdown.parts
            ],
            areas=[
                AreaScoreSchema(area=a.area, title=a.title, score=a.score, max_score=a.max_score, percent=a.percent)
                for a in area_rollup(breakdown)
            ],
            improvements=_improvement_schemas(
                top_improvements(breakdown, limit=settings.improvement_count, rng=rng)
            ),
            potential_savings=SavingsSchema(
                debt_interest=savings.debt_interest,
                mortgage_rate=savings.mortgage_rate,
                emergency_opportunity=savings.emergency_opportunity,
                savings_gap=savings.savings_gap,
                total=savings.total,
            ),
            premium_fee=premium_fee(savings.total),
        )

    except InvalidProfileError as e:
        logging.warning(f"Invalid profile: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_score(breakdown.percent)
    log_score(request_id, breakdown.total, breakdown.percent, zone.value, duration_ms)

    return response
