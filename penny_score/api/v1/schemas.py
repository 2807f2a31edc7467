"""Pydantic schemas for API request/response validation"""

from typing import List, Optional

from pydantic import BaseModel, Field

from penny_score.domain.models import FinancialProfile, JobType
from penny_score.utils.math_utils import savings_rate_from_amount

# Upper bound for kr amounts (1000 billion kr)
MAX_AMOUNT_KR = 1e12


class ProfileRequest(BaseModel):
    """Request body for POST /v1/score.

    Every field defaults to the demo profile shown when the widget opens.
    """

    # Income & stability
    income_sources: int = Field(2, ge=0)
    job_type: JobType = JobType.PERMANENT
    tenure_months: int = Field(48, ge=0)
    net_income_12m: float = Field(35000, ge=0, le=MAX_AMOUNT_KR, description="Monthly net income (after tax)")
    net_income_3m: float = Field(35000, ge=0, le=MAX_AMOUNT_KR)
    net_income_9m: float = Field(35000, ge=0, le=MAX_AMOUNT_KR)
    income_std_dev: float = Field(500, ge=0, le=MAX_AMOUNT_KR)

    # Fixed costs & cash flow
    fixed_cost_avg_12m: float = Field(25000, ge=0, le=MAX_AMOUNT_KR, description="Monthly fixed costs")
    fixed_cost_median_12m: float = Field(25000, ge=0, le=MAX_AMOUNT_KR)
    negative_months_12m: int = Field(0, ge=0, le=12)
    surplus_months_12m: int = Field(12, ge=0, le=12)
    surplus_months_3m: int = Field(3, ge=0, le=3)

    # Short-term debt
    short_debt_cards_count: int = Field(0, ge=0)
    short_debt_balance: float = Field(0, ge=0, le=MAX_AMOUNT_KR, description="Credit card and consumer debt in kr")
    short_debt_avg_rate_pct: float = 0

    # Long-term debt & housing
    house_value: float = Field(3_000_000, ge=0, le=MAX_AMOUNT_KR)
    car_value: float = Field(0, ge=0, le=MAX_AMOUNT_KR)
    house_loan: float = Field(2_200_000, ge=0, le=MAX_AMOUNT_KR)
    car_loan: float = Field(0, ge=0, le=MAX_AMOUNT_KR)
    mortgage_fixed_rate: bool = True
    mortgage_rate_pct: float = 3.0
    interest_only_years_used: int = Field(0, ge=0)

    # Savings
    emergency_buffer_kr: float = Field(75000, ge=0, le=MAX_AMOUNT_KR)
    savings_rate_pct: float = Field(10, ge=0, le=100)
    monthly_savings_kr: Optional[float] = Field(
        None,
        ge=0,
        le=MAX_AMOUNT_KR,
        description="Monthly savings in kr; when set, replaces savings_rate_pct",
    )

    # Pension
    pension_rate_pct: float = 12
    pension_wealth_index: float = 120

    # Insurance
    has_home_contents: bool = True
    has_accident: bool = True
    has_critical_illness: bool = False
    has_income_protection: bool = True
    has_life: bool = False

    # Behaviour
    overdrafts_ltm: int = Field(0, ge=0)
    subs_pct_income: float = 5

    def to_profile(self) -> FinancialProfile:
        """Build the domain snapshot, converting a savings amount to a rate"""
        data = self.model_dump(exclude={"monthly_savings_kr"})
        if self.monthly_savings_kr is not None:
            data["savings_rate_pct"] = savings_rate_from_amount(self.monthly_savings_kr, self.net_income_12m)
        return FinancialProfile(**data)


class PartScoreSchema(BaseModel):
    """Single scored sub-criterion"""

    key: str
    label: str
    score: float
    max_score: float
    area: int


class AreaScoreSchema(BaseModel):
    """Per-area rollup"""

    area: int
    title: str
    score: float
    max_score: float
    percent: int


class TipResponse(BaseModel):
    """Response for GET /v1/tips/{area_id}"""

    area: int
    icon: str
    title: str
    text: str
    boost: str


class ImprovementSchema(BaseModel):
    """Area where the most points can be gained"""

    area: int
    title: str
    lost: float
    percent: int
    tip: Optional[TipResponse] = None


class SavingsSchema(BaseModel):
    """Estimated yearly saving, split by source"""

    debt_interest: float
    mortgage_rate: float
    emergency_opportunity: float
    savings_gap: float
    total: int


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    total: float
    max_total: float
    percent: float
    zone: str
    monthly_savings_kr: int = Field(..., description="Monthly savings in kr implied by the savings rate")
    parts: List[PartScoreSchema]
    areas: List[AreaScoreSchema]
    improvements: List[ImprovementSchema]
    potential_savings: SavingsSchema
    premium_fee: int


class TipEntrySchema(BaseModel):
    """Catalog entry"""

    text: str
    boost: str


class TipAreaSchema(BaseModel):
    """Catalog section for one area"""

    area: int
    icon: str
    title: str
    tips: List[TipEntrySchema]


class TipCatalogResponse(BaseModel):
    """Response for GET /v1/tips"""

    areas: List[TipAreaSchema]
