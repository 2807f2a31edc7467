"""GET /v1/tips - improvement tip catalog and random tip selection"""

import random

from fastapi import APIRouter, Depends, HTTPException

from penny_score.api.dependencies import get_tip_rng
from penny_score.api.v1.schemas import TipAreaSchema, TipCatalogResponse, TipEntrySchema, TipResponse
from penny_score.domain.tips import TIP_CATALOG, pick_tip
from penny_score.infrastructure.observability.metrics import record_tip

router = APIRouter()


@router.get("/tips", response_model=TipCatalogResponse)
def list_tips():
    """Return the full catalog, area by area"""
    return TipCatalogResponse(
        areas=[
            TipAreaSchema(
                area=area,
                icon=section.icon,
                title=section.title,
                tips=[TipEntrySchema(text=t.text, boost=t.boost) for t in section.tips],
            )
            for area, section in TIP_CATALOG.items()
        ]
    )


@router.get("/tips/{area_id}", response_model=TipResponse)
def get_tip(area_id: int, rng: random.Random = Depends(get_tip_rng)):
    """
    Pick one random tip for an area (1-5).

    Returns:
        Tip text, boost label and the area's icon and title
    """
    tip = pick_tip(area_id, rng)
    if tip is None:
        raise HTTPException(status_code=404, detail="Unknown area")

    record_tip(tip.area)

    return TipResponse(
        area=tip.area,
        icon=tip.icon,
        title=tip.title,
        text=tip.text,
        boost=tip.boost,
    )
