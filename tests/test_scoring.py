"""
Tests for the fallback scoring tables.
"""

import pytest

from ideaspark.models.profile import BudgetBracket, ExpertiseLevel, RiskTolerance
from ideaspark.services import scoring


class TestStartupCost:
    """Tests for calculate_startup_cost."""

    def test_under_1k_low_complexity(self):
        """The smallest budget with the simplest business gets the smallest band."""
        assert scoring.calculate_startup_cost(BudgetBracket.UNDER_1K, "low") == "$200 - $800"

    def test_mid_budget_medium_complexity(self):
        assert scoring.calculate_startup_cost(BudgetBracket.FROM_5K_TO_25K, "medium") == "$8,000 - $20,000"

    def test_unknown_budget_uses_default(self):
        """An unresolved budget falls back to the table default."""
        assert scoring.calculate_startup_cost(None, "low") == "$2,000 - $10,000"

    def test_unknown_complexity_uses_default(self):
        assert scoring.calculate_startup_cost(BudgetBracket.OVER_100K, "extreme") == "$2,000 - $10,000"


class TestDifficulty:
    """Tests for calculate_difficulty."""

    @pytest.mark.parametrize("expertise", [None] + list(ExpertiseLevel))
    @pytest.mark.parametrize("complexity", ["low", "medium", "high", "medium-high", "unknown"])
    def test_difficulty_stays_in_bounds(self, expertise, complexity):
        """Every experience level and tier yields a difficulty from 1 to 5."""
        assert 1 <= scoring.calculate_difficulty(expertise, complexity) <= 5

    def test_expert_on_high_complexity_is_clamped(self):
        """Base 4 plus modifier 1 clamps to 5."""
        assert scoring.calculate_difficulty(ExpertiseLevel.DOMAIN_EXPERT, "high") == 5

    def test_beginner_lowers_difficulty(self):
        assert scoring.calculate_difficulty(ExpertiseLevel.COMPLETE_BEGINNER, "low") == 1

    def test_unresolved_expertise_has_no_modifier(self):
        assert scoring.calculate_difficulty(None, "medium") == 3

    def test_unknown_tier_uses_base_three(self):
        assert scoring.calculate_difficulty(ExpertiseLevel.EXPERIENCED_PROFESSIONAL, "unknown") == 3


class TestRevenue:
    """Tests for calculate_revenue and get_budget_level."""

    @pytest.mark.parametrize(
        "budget, level",
        [
            (BudgetBracket.UNDER_1K, "low"),
            (BudgetBracket.FROM_1K_TO_5K, "low"),
            (BudgetBracket.FROM_5K_TO_25K, "medium"),
            (BudgetBracket.FROM_25K_TO_100K, "high"),
            (BudgetBracket.OVER_100K, "high"),
            (None, "high"),
        ],
    )
    def test_budget_level(self, budget, level):
        assert scoring.get_budget_level(budget) == level

    def test_full_time_uses_higher_band(self):
        assert scoring.calculate_revenue(BudgetBracket.FROM_5K_TO_25K, True, "consulting") == "$8K - $35K monthly"
        assert scoring.calculate_revenue(BudgetBracket.FROM_5K_TO_25K, False, "consulting") == "$3K - $18K monthly"

    def test_unknown_business_type_uses_default(self):
        assert scoring.calculate_revenue(BudgetBracket.UNDER_1K, True, "franchise") == "$3K - $20K monthly"


class TestRiskLevel:
    """Tests for assess_risk_level."""

    def test_aggressive_medium_high(self):
        assert scoring.assess_risk_level(RiskTolerance.AGGRESSIVE, "medium-high") == "High"

    def test_conservative_medium(self):
        assert scoring.assess_risk_level(RiskTolerance.CONSERVATIVE, "medium") == "Low-Medium"

    def test_unknown_business_risk_uses_default(self):
        assert scoring.assess_risk_level(RiskTolerance.MODERATE, "extreme") == "Medium"


class TestLookupText:
    """Tests for market insight and target audience lookups."""

    def test_known_interest_and_type(self):
        insight = scoring.generate_market_insight("Finance", "automation")
        assert insight == "Financial automation reducing processing costs by 40-60%"

    def test_known_interest_unknown_type(self):
        insight = scoring.generate_market_insight("Finance", "retail")
        assert insight == "Finance market showing strong growth with emerging opportunities in retail"

    def test_unknown_interest(self):
        insight = scoring.generate_market_insight("Pet Care", "consulting")
        assert insight == "Pet Care sector experiencing growth with increasing demand for specialized consulting solutions"

    def test_audience_known_interest(self):
        audience = scoring.generate_target_audience("Education", "b2c")
        assert audience == "Students, professionals, and lifelong learners seeking skill development"

    def test_audience_known_interest_unknown_model(self):
        audience = scoring.generate_target_audience("Health & Wellness", "d2c")
        assert audience == "Professionals and businesses in the health & wellness sector"

    def test_audience_unknown_interest(self):
        audience = scoring.generate_target_audience("Gaming", "b2b")
        assert audience == "Gaming professionals, businesses, and enthusiasts seeking specialized solutions"
