"""
Validation report for a single idea.
Market, competitor and financial figures come from static tables; the
adjustments are rough heuristics, not forecasts.
"""

import math
import re
from typing import List

from ideaspark.models.idea import BusinessIdea
from ideaspark.models.profile import BudgetBracket, ExpertiseLevel, UserProfile
from ideaspark.models.validation import (
    CompetitorInfo,
    FinancialProjection,
    MarketValidation,
    ReturnOnInvestment,
    RevenueProjection,
)

MARKET_SIZES = {
    "Technology": "$5.2 trillion global market, growing 8% annually",
    "Consulting": "$160 billion market, 7% annual growth",
    "Education": "$350 billion online education market, 15% growth",
    "Services": "$2.4 trillion business services market",
    "E-commerce": "$6.2 trillion global market, 12% growth",
}

COMPETITION_LEVELS = {
    "Technology": "High - Many established players, but room for innovation",
    "Consulting": "Medium - Fragmented market with local opportunities",
    "Education": "Medium-High - Growing market with differentiation opportunities",
    "Services": "Medium - Local competition, relationship-based",
    "E-commerce": "High - Dominated by major platforms, niche opportunities exist",
}

TRENDS = {
    "Technology": "AI/ML adoption accelerating, remote work driving digital transformation",
    "Consulting": "Digital transformation consulting in high demand, sustainability focus growing",
    "Education": "Microlearning and skill-based education trending, corporate training expanding",
    "Services": "Automation creating new service categories, personalization increasingly important",
    "E-commerce": "Social commerce growing, sustainability and local sourcing trending",
}

BREAKEVEN_TIMES = {
    "Consulting": "3-6 months",
    "Services": "4-8 months",
    "Technology": "8-18 months",
    "Education": "6-12 months",
    "E-commerce": "6-15 months",
}

SCALABILITY_SCORES = {
    "Technology": 9,
    "Education": 8,
    "Consulting": 6,
    "Services": 5,
    "E-commerce": 7,
}

# Monthly revenue at maturity for a part-time founder
BASE_MONTHLY_REVENUE = {
    "Technology": 8000,
    "Consulting": 12000,
    "Education": 6000,
    "Services": 10000,
}

COMPETITORS = {
    "Technology": [
        CompetitorInfo(
            name="TechCorp Solutions",
            description="Enterprise software solutions",
            strengths=["Established brand", "Large client base", "Comprehensive features"],
            weaknesses=["High pricing", "Complex setup", "Poor customer service"],
            market_share="15%",
            pricing="$500-2000/month",
        ),
        CompetitorInfo(
            name="InnovateTech",
            description="Startup-focused tech solutions",
            strengths=["Modern UI", "Competitive pricing", "Fast implementation"],
            weaknesses=["Limited features", "Small team", "New to market"],
            market_share="3%",
            pricing="$50-300/month",
        ),
    ],
    "Consulting": [
        CompetitorInfo(
            name="Big Consulting Firm",
            description="Global management consulting",
            strengths=["Brand recognition", "Extensive resources", "Proven methodologies"],
            weaknesses=["Very expensive", "Slow delivery", "One-size-fits-all approach"],
            market_share="25%",
            pricing="$200-500/hour",
        ),
    ],
}

DEFAULT_INITIAL_INVESTMENT = 5000
NOT_REACHED = "Not reached within projection"


def _round(value: float) -> int:
    # Half-up, so 0.5 never rounds to the even neighbour
    return int(math.floor(value + 0.5))


class ValidationService:
    """Builds market validation, competitor and financial reports for an idea."""

    def validate_business_idea(self, idea: BusinessIdea, profile: UserProfile) -> MarketValidation:
        category = idea.category
        return MarketValidation(
            market_size=MARKET_SIZES.get(category, "$50+ billion addressable market with steady growth"),
            competition_level=COMPETITION_LEVELS.get(
                category, "Medium - Competitive but opportunities exist for differentiation"
            ),
            trend_analysis=TRENDS.get(
                category, "Market showing positive growth trends with digital adoption increasing"
            ),
            barriers=self.identify_barriers(category, profile),
            opportunities=self.find_opportunities(profile),
            risk_factors=self.assess_risks(category, profile),
            success_probability=self.calculate_success_probability(idea, profile),
            time_to_breakeven=self.estimate_breakeven(category, profile),
            scalability_score=SCALABILITY_SCORES.get(category, 6),
        )

    def identify_barriers(self, category: str, profile: UserProfile) -> List[str]:
        barriers = ["Initial capital requirements", "Customer acquisition costs", "Regulatory compliance"]

        if profile.budget_bracket is BudgetBracket.UNDER_1K:
            return barriers + ["Limited marketing budget", "Bootstrap growth challenges"]
        if category == "Technology":
            return barriers + ["Technical complexity", "Development time", "Talent acquisition"]
        return barriers

    def find_opportunities(self, profile: UserProfile) -> List[str]:
        opportunities = ["Growing market demand", "Digital transformation acceleration"]

        if "Artificial Intelligence" in profile.interests:
            return opportunities + ["AI integration opportunities", "Automation potential"]
        if "Environmental" in profile.interests:
            return opportunities + ["Sustainability focus", "Green technology adoption"]
        return opportunities + ["Niche specialization potential", "Partnership opportunities"]

    def assess_risks(self, category: str, profile: UserProfile) -> List[str]:
        risks = ["Market competition", "Economic downturns", "Customer acquisition challenges"]

        if profile.expertise_level is ExpertiseLevel.COMPLETE_BEGINNER:
            return risks + ["Learning curve challenges", "Operational inexperience"]
        if category == "Technology":
            return risks + ["Technical obsolescence", "Security vulnerabilities", "Scalability challenges"]
        return risks

    def calculate_success_probability(self, idea: BusinessIdea, profile: UserProfile) -> int:
        """Start at 60%, adjust for experience, skill coverage and budget, clamp to 20..85."""
        probability = 60

        expertise = profile.expertise_level
        if expertise is ExpertiseLevel.SERIAL_ENTREPRENEUR:
            probability += 15
        if expertise is ExpertiseLevel.DOMAIN_EXPERT:
            probability += 10
        if expertise is ExpertiseLevel.COMPLETE_BEGINNER:
            probability -= 10

        if idea.difficulty <= 2 and len(profile.skills) >= 3:
            probability += 10
        if idea.difficulty >= 4 and len(profile.skills) < 2:
            probability -= 15

        if profile.budget_bracket is BudgetBracket.OVER_100K and "Under" in idea.startup_cost:
            probability += 5

        return max(20, min(85, probability))

    def estimate_breakeven(self, category: str, profile: UserProfile) -> str:
        estimate = BREAKEVEN_TIMES.get(category, "6-12 months")

        # A shoestring budget pushes both ends of the range out by two months
        if profile.budget_bracket is BudgetBracket.UNDER_1K:
            estimate = re.sub(r"\d+", lambda match: str(int(match.group(0)) + 2), estimate)
        return estimate

    def get_competitor_analysis(self, category: str) -> List[CompetitorInfo]:
        return list(COMPETITORS.get(category, []))

    def generate_financial_projection(self, idea: BusinessIdea, profile: UserProfile) -> FinancialProjection:
        cost_match = re.search(r"\$?([\d,]+)", idea.startup_cost)
        initial_investment = int(cost_match.group(1).replace(",", "") or 0) if cost_match else 0
        if initial_investment <= 0:
            initial_investment = DEFAULT_INITIAL_INVESTMENT

        monthly_expenses = _round(initial_investment * 0.15)

        multiplier = 1.5 if profile.is_full_time else 1
        monthly_base = BASE_MONTHLY_REVENUE.get(idea.category, 8000) * multiplier

        year1_margin = monthly_base * 0.7 - monthly_expenses
        if year1_margin > 0:
            break_even_point = f"{math.ceil(initial_investment / year1_margin)} months"
        else:
            break_even_point = NOT_REACHED

        return FinancialProjection(
            initial_investment=initial_investment,
            monthly_expenses=monthly_expenses,
            projected_revenue=RevenueProjection(
                month6=_round(monthly_base * 0.3),
                year1=_round(monthly_base * 0.7),
                year2=_round(monthly_base * 1.2),
                year3=_round(monthly_base * 1.8),
            ),
            break_even_point=break_even_point,
            roi=ReturnOnInvestment(
                year1=self._roi(monthly_base * 0.7, monthly_expenses, initial_investment, include_investment=True),
                year2=self._roi(monthly_base * 1.2, monthly_expenses, initial_investment),
                year3=self._roi(monthly_base * 1.8, monthly_expenses, initial_investment),
            ),
        )

    @staticmethod
    def _roi(monthly_revenue: float, monthly_expenses: int, investment: int, include_investment: bool = False) -> str:
        annual_profit = monthly_revenue * 12 - monthly_expenses * 12
        if include_investment:
            annual_profit -= investment
        return f"{_round(annual_profit / investment * 100)}%"
