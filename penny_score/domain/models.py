"""Domain models - pure Python dataclasses representing the scoring entities"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple


class JobType(str, Enum):
    """Employment situation of the user"""

    PERMANENT = "permanent"
    FIXED_TERM = "fixed_term"
    SELF_EMPLOYED = "self_employed"
    UNEMPLOYMENT_BENEFIT = "unemployment_benefit"
    STUDENT = "student"


class Area(IntEnum):
    """The five financial health areas a part score belongs to"""

    INCOME_JOB = 1
    DEBT = 2
    SAVINGS = 3
    HOUSING = 4
    INSURANCE = 5

    @property
    def title(self) -> str:
        return AREA_TITLES[self]


AREA_TITLES = {
    Area.INCOME_JOB: "Indkomst & job",
    Area.DEBT: "Gæld",
    Area.SAVINGS: "Opsparing",
    Area.HOUSING: "Bolig",
    Area.INSURANCE: "Forsikring",
}


class ScoreZone(str, Enum):
    """Band of the overall percentage (red/yellow/green gauge arcs)"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class FinancialProfile:
    """Snapshot of the user's finances.

    Only a subset of fields feeds the score; see UNSCORED_FIELDS.
    """

    # Income & stability
    income_sources: int
    job_type: JobType
    tenure_months: int
    net_income_12m: float  # monthly average, after tax
    net_income_3m: float
    net_income_9m: float
    income_std_dev: float

    # Fixed costs & cash flow
    fixed_cost_avg_12m: float
    fixed_cost_median_12m: float
    negative_months_12m: int
    surplus_months_12m: int
    surplus_months_3m: int

    # Short-term debt
    short_debt_cards_count: int
    short_debt_balance: float
    short_debt_avg_rate_pct: float

    # Long-term debt & housing
    house_value: float
    car_value: float
    house_loan: float
    car_loan: float
    mortgage_fixed_rate: bool
    mortgage_rate_pct: float
    interest_only_years_used: int

    # Savings
    emergency_buffer_kr: float
    savings_rate_pct: float

    # Pension
    pension_rate_pct: float
    pension_wealth_index: float

    # Insurance
    has_home_contents: bool
    has_accident: bool
    has_critical_illness: bool
    has_income_protection: bool
    has_life: bool

    # Behaviour
    overdrafts_ltm: int
    subs_pct_income: float

    UNSCORED_FIELDS = (
        "income_sources",
        "tenure_months",
        "net_income_3m",
        "net_income_9m",
        "income_std_dev",
        "fixed_cost_median_12m",
        "negative_months_12m",
        "surplus_months_12m",
        "surplus_months_3m",
        "short_debt_cards_count",
        "short_debt_avg_rate_pct",
        "car_value",
        "car_loan",
        "mortgage_fixed_rate",
        "mortgage_rate_pct",
        "interest_only_years_used",
        "pension_rate_pct",
        "pension_wealth_index",
        "has_critical_illness",
        "has_income_protection",
        "overdrafts_ltm",
        "subs_pct_income",
    )


@dataclass(frozen=True)
class PartScore:
    """One scored sub-criterion"""

    key: str
    label: str
    score: float
    max_score: float
    area: Area


@dataclass(frozen=True)
class ScoreBreakdown:
    """Output of compute_score"""

    total: float
    max_total: float
    percent: float
    parts: Tuple[PartScore, ...]


@dataclass(frozen=True)
class Tip:
    """Catalog entry: suggestion text and a qualitative point-boost label"""

    text: str
    boost: str


@dataclass(frozen=True)
class TipArea:
    """Catalog section for one area"""

    icon: str
    title: str
    tips: Tuple[Tip, ...]


@dataclass(frozen=True)
class TipSuggestion:
    """A randomly selected tip with its area's icon and title"""

    area: Area
    icon: str
    title: str
    text: str
    boost: str


@dataclass(frozen=True)
class AreaScore:
    """Per-area rollup of part scores"""

    area: Area
    title: str
    score: float
    max_score: float
    percent: int


@dataclass(frozen=True)
class Improvement:
    """Area ranked by lost points, with a suggestion attached"""

    area: Area
    title: str
    lost: float
    percent: int
    tip: Optional[TipSuggestion]


@dataclass(frozen=True)
class SavingsEstimate:
    """Heuristic yearly saving, split by source"""

    debt_interest: float
    mortgage_rate: float
    emergency_opportunity: float
    savings_gap: float
    total: int
