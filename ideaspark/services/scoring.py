"""
Lookup tables and scoring helpers used by the fallback generator.

Every helper is a pure function of categorical inputs. Anything a table
cannot resolve falls back to the table's default rather than raising.
"""

from typing import Optional

from ideaspark.models.profile import BudgetBracket, ExpertiseLevel, RiskTolerance

DEFAULT_STARTUP_COST = "$2,000 - $10,000"
DEFAULT_REVENUE = "$3K - $20K monthly"
DEFAULT_RISK_LEVEL = "Medium"
DEFAULT_COMPLEXITY_BASE = 3

# budget bracket -> complexity tier -> cost range
STARTUP_COSTS = {
    BudgetBracket.UNDER_1K: {
        "low": "$200 - $800",
        "low-medium": "$500 - $1,000",
        "medium": "$800 - $1,200",
        "high": "$1,000+",
    },
    BudgetBracket.FROM_1K_TO_5K: {
        "low": "$500 - $2,000",
        "low-medium": "$1,000 - $3,000",
        "medium": "$2,000 - $5,000",
        "high": "$3,000 - $7,000",
    },
    BudgetBracket.FROM_5K_TO_25K: {
        "low": "$2,000 - $8,000",
        "low-medium": "$5,000 - $12,000",
        "medium": "$8,000 - $20,000",
        "high": "$15,000 - $30,000",
    },
    BudgetBracket.FROM_25K_TO_100K: {
        "low": "$10,000 - $30,000",
        "low-medium": "$20,000 - $50,000",
        "medium": "$40,000 - $80,000",
        "high": "$60,000 - $120,000",
    },
    BudgetBracket.OVER_100K: {
        "low": "$25,000 - $75,000",
        "low-medium": "$50,000 - $100,000",
        "medium": "$75,000 - $150,000",
        "high": "$100,000 - $250,000",
    },
}

COMPLEXITY_BASE = {
    "low": 2,
    "medium": 3,
    "high": 4,
    "medium-high": 4,
}

EXPERTISE_MODIFIERS = {
    ExpertiseLevel.COMPLETE_BEGINNER: -1,
    ExpertiseLevel.SOME_BUSINESS_KNOWLEDGE: 0,
    ExpertiseLevel.EXPERIENCED_PROFESSIONAL: 0,
    ExpertiseLevel.MANAGEMENT_EXPERIENCE: 1,
    ExpertiseLevel.SERIAL_ENTREPRENEUR: 1,
    ExpertiseLevel.DOMAIN_EXPERT: 1,
    ExpertiseLevel.TECHNICAL_SPECIALIST: 1,
    ExpertiseLevel.CREATIVE_PROFESSIONAL: 0,
}

# business type -> budget level -> (part-time band, full-time band)
REVENUE_BANDS = {
    "consulting": {
        "low": ("$1K - $8K monthly", "$3K - $15K monthly"),
        "medium": ("$3K - $18K monthly", "$8K - $35K monthly"),
        "high": ("$6K - $30K monthly", "$15K - $60K monthly"),
    },
    "platform": {
        "low": ("$500 - $8K monthly", "$2K - $20K monthly"),
        "medium": ("$2K - $25K monthly", "$5K - $50K monthly"),
        "high": ("$4K - $50K monthly", "$10K - $100K monthly"),
    },
    "education": {
        "low": ("$800 - $5K monthly", "$2K - $12K monthly"),
        "medium": ("$2K - $15K monthly", "$5K - $30K monthly"),
        "high": ("$4K - $30K monthly", "$10K - $60K monthly"),
    },
    "service": {
        "low": ("$1.5K - $10K monthly", "$4K - $20K monthly"),
        "medium": ("$3K - $20K monthly", "$8K - $40K monthly"),
        "high": ("$6K - $35K monthly", "$15K - $75K monthly"),
    },
    "saas": {
        "low": ("$300 - $6K monthly", "$1K - $15K monthly"),
        "medium": ("$1K - $20K monthly", "$3K - $40K monthly"),
        "high": ("$3K - $40K monthly", "$8K - $80K monthly"),
    },
}

# risk tolerance -> business base risk -> reported risk level
RISK_LEVELS = {
    RiskTolerance.CONSERVATIVE: {
        "low": "Low",
        "low-medium": "Low",
        "medium": "Low-Medium",
        "medium-high": "Medium",
        "high": "Medium",
    },
    RiskTolerance.MODERATE: {
        "low": "Low",
        "low-medium": "Low-Medium",
        "medium": "Medium",
        "medium-high": "Medium-High",
        "high": "High",
    },
    RiskTolerance.AGGRESSIVE: {
        "low": "Low-Medium",
        "low-medium": "Medium",
        "medium": "Medium-High",
        "medium-high": "High",
        "high": "High",
    },
}

MARKET_INSIGHTS = {
    "Technology": {
        "consulting": "Tech consulting market growing 8% annually as businesses accelerate digital transformation",
        "technology": "B2B software platforms seeing 25% annual growth with increasing demand for specialized solutions",
        "education": "Tech education market valued at $85B with 15% annual growth driven by skill gaps",
        "services": "Technology services market expanding rapidly as companies outsource specialized functions",
        "automation": "Business automation market growing 12% annually as companies seek efficiency gains",
    },
    "Health & Wellness": {
        "consulting": "Wellness consulting growing 12% annually as corporate wellness programs expand",
        "technology": "Digital health platforms attracting $14B+ in annual investment",
        "education": "Health education market growing 9% annually with focus on preventive care",
        "services": "Wellness services market valued at $639B with strong consumer demand",
        "automation": "Health tech automation reducing costs by 20-30% while improving outcomes",
    },
    "Education": {
        "consulting": "EdTech consulting growing 18% annually as institutions modernize",
        "technology": "Online learning platforms market expected to reach $350B by 2025",
        "education": "Professional development market growing 13% annually",
        "services": "Educational services seeing increased demand for personalized learning",
        "automation": "AI in education market growing 45% annually with focus on personalization",
    },
    "Finance": {
        "consulting": "Financial consulting growing 7% annually driven by regulatory changes",
        "technology": "FinTech market attracting $100B+ in annual investment",
        "education": "Financial literacy education market expanding as awareness grows",
        "services": "Financial services digitization creating new opportunities",
        "automation": "Financial automation reducing processing costs by 40-60%",
    },
}

TARGET_AUDIENCES = {
    "Technology": {
        "b2b": "Tech companies, startups, and digital agencies seeking specialized expertise",
        "b2c": "Tech professionals, developers, and digital enthusiasts",
        "b2b2c": "Technology service providers and their end customers",
    },
    "Health & Wellness": {
        "b2b": "Healthcare providers, wellness companies, and corporate wellness programs",
        "b2c": "Health-conscious individuals, fitness enthusiasts, and wellness seekers",
        "b2b2c": "Healthcare organizations and their patients/members",
    },
    "Education": {
        "b2b": "Educational institutions, training companies, and corporate learning departments",
        "b2c": "Students, professionals, and lifelong learners seeking skill development",
        "b2b2c": "Educational organizations and their students/employees",
    },
    "Finance": {
        "b2b": "Financial institutions, accounting firms, and business owners",
        "b2c": "Individual investors, small business owners, and financial planning seekers",
        "b2b2c": "Financial service providers and their clients",
    },
}


def calculate_startup_cost(budget: Optional[BudgetBracket], complexity: str) -> str:
    return STARTUP_COSTS.get(budget, {}).get(complexity, DEFAULT_STARTUP_COST)


def calculate_difficulty(expertise: Optional[ExpertiseLevel], complexity: str) -> int:
    """Clamp the tier's base difficulty plus the experience modifier into 1..5."""
    modifier = EXPERTISE_MODIFIERS.get(expertise, 0)
    base = COMPLEXITY_BASE.get(complexity, DEFAULT_COMPLEXITY_BASE)
    return max(1, min(5, base + modifier))


def get_budget_level(budget: Optional[BudgetBracket]) -> str:
    if budget in (BudgetBracket.UNDER_1K, BudgetBracket.FROM_1K_TO_5K):
        return "low"
    if budget is BudgetBracket.FROM_5K_TO_25K:
        return "medium"
    return "high"


def calculate_revenue(budget: Optional[BudgetBracket], full_time: bool, business_type: str) -> str:
    bands = REVENUE_BANDS.get(business_type, {}).get(get_budget_level(budget))
    if bands is None:
        return DEFAULT_REVENUE
    part_time_band, full_time_band = bands
    return full_time_band if full_time else part_time_band


def assess_risk_level(tolerance: RiskTolerance, business_risk: str) -> str:
    return RISK_LEVELS.get(tolerance, RISK_LEVELS[RiskTolerance.MODERATE]).get(business_risk, DEFAULT_RISK_LEVEL)


def generate_market_insight(interest: str, business_type: str) -> str:
    insights = MARKET_INSIGHTS.get(interest)
    if insights is None:
        return f"{interest} sector experiencing growth with increasing demand for specialized {business_type} solutions"
    return insights.get(
        business_type,
        f"{interest} market showing strong growth with emerging opportunities in {business_type}",
    )


def generate_target_audience(interest: str, business_model: str) -> str:
    audiences = TARGET_AUDIENCES.get(interest)
    if audiences is None:
        return f"{interest} professionals, businesses, and enthusiasts seeking specialized solutions"
    return audiences.get(business_model, f"Professionals and businesses in the {interest.lower()} sector")
