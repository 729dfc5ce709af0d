"""Pytest configuration and fixtures."""

import os

import pytest

# Settings are cached on first logger creation, which happens at import time.
os.environ["SCORING_ENV"] = "test"


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SCORING_ENV"] = "test"
    os.environ["INCLUDE_EXPLANATION"] = "true"


@pytest.fixture
def best_case() -> dict:
    """Every answer at its most sales-ready option."""
    return {
        "crmUsage": "full",
        "speedToContact": "5min",
        "teamSize": "dedicated",
        "followUpClarity": "clear",
        "monthlySpend": "30k+",
        "cplAwareness": "yes",
        "pricingComfort": "comfortable",
        "desiredLeadsWeekly": 20,
        "maxCapacityWeekly": 20,
        "productFocusClarity": "clear",
        "geographicFocusClarity": "clear",
        "growthGoalClarity": "numeric",
        "timeline": "immediate",
    }


@pytest.fixture
def worst_case() -> dict:
    """Every answer at its least sales-ready option, with no capacity."""
    return {
        "crmUsage": "none",
        "speedToContact": "nextDay",
        "teamSize": "unclear",
        "followUpClarity": "none",
        "monthlySpend": "none",
        "cplAwareness": "no",
        "pricingComfort": "sensitive",
        "desiredLeadsWeekly": 0,
        "maxCapacityWeekly": 0,
        "productFocusClarity": "unclear",
        "geographicFocusClarity": "undefined",
        "growthGoalClarity": "vague",
        "timeline": "exploring",
    }


@pytest.fixture
def mid_case() -> dict:
    """Middle-of-the-road answers (op 59, budget 53, growth 54, intent 50)."""
    return {
        "crmUsage": "basic",
        "speedToContact": "30min",
        "teamSize": "small",
        "followUpClarity": "basic",
        "monthlySpend": "5k-15k",
        "cplAwareness": "rough",
        "pricingComfort": "flexible",
        "desiredLeadsWeekly": 10,
        "maxCapacityWeekly": 20,
        "productFocusClarity": "multiple",
        "geographicFocusClarity": "semi",
        "growthGoalClarity": "general",
        "timeline": "30days",
    }
