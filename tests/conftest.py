"""Pytest fixtures for testing"""

import random

import pytest
from fastapi.testclient import TestClient

from penny_score.api.dependencies import get_tip_rng
from penny_score.api.main import create_app
from penny_score.domain.models import FinancialProfile, JobType


def make_profile(**overrides) -> FinancialProfile:
    """Scenario A profile (the widget's demo figures) with optional overrides"""
    data = dict(
        income_sources=2,
        job_type=JobType.PERMANENT,
        tenure_months=48,
        net_income_12m=35000,
        net_income_3m=35000,
        net_income_9m=35000,
        income_std_dev=500,
        fixed_cost_avg_12m=25000,
        fixed_cost_median_12m=25000,
        negative_months_12m=0,
        surplus_months_12m=12,
        surplus_months_3m=3,
        short_debt_cards_count=0,
        short_debt_balance=0,
        short_debt_avg_rate_pct=0,
        house_value=3_000_000,
        car_value=0,
        house_loan=2_200_000,
        car_loan=0,
        mortgage_fixed_rate=True,
        mortgage_rate_pct=3.0,
        interest_only_years_used=0,
        emergency_buffer_kr=75000,
        savings_rate_pct=10,
        pension_rate_pct=12,
        pension_wealth_index=120,
        has_home_contents=True,
        has_accident=True,
        has_critical_illness=False,
        has_income_protection=True,
        has_life=False,
        overdrafts_ltm=0,
        subs_pct_income=5,
    )
    data.update(overrides)
    return FinancialProfile(**data)


@pytest.fixture
def profile() -> FinancialProfile:
    """Scenario A profile"""
    return make_profile()


@pytest.fixture
def profile_factory():
    """Build scenario A variants: profile_factory(short_debt_balance=50000)"""
    return make_profile


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible tip picks"""
    return random.Random(1234)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a seeded tip RNG"""
    app = create_app()
    app.dependency_overrides[get_tip_rng] = lambda: random.Random(1234)
    return TestClient(app)
