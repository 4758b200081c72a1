"""
Models for the validation report of a single idea.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class MarketValidation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    market_size: str = Field(..., alias="marketSize")
    competition_level: str = Field(..., alias="competitionLevel")
    trend_analysis: str = Field(..., alias="trendAnalysis")
    barriers: List[str]
    opportunities: List[str]
    risk_factors: List[str] = Field(..., alias="riskFactors")
    success_probability: int = Field(..., alias="successProbability", ge=0, le=100, description="Percent")
    time_to_breakeven: str = Field(..., alias="timeToBreakeven")
    scalability_score: int = Field(..., alias="scalabilityScore", ge=1, le=10)


class CompetitorInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    strengths: List[str]
    weaknesses: List[str]
    market_share: str = Field(..., alias="marketShare")
    pricing: str


class RevenueProjection(BaseModel):
    month6: int
    year1: int
    year2: int
    year3: int


class ReturnOnInvestment(BaseModel):
    year1: str
    year2: str
    year3: str


class FinancialProjection(BaseModel):
    """Monthly revenue figures per horizon, with break-even and ROI derived from them."""

    model_config = ConfigDict(populate_by_name=True)

    initial_investment: int = Field(..., alias="initialInvestment")
    monthly_expenses: int = Field(..., alias="monthlyExpenses")
    projected_revenue: RevenueProjection = Field(..., alias="projectedRevenue")
    break_even_point: str = Field(..., alias="breakEvenPoint")
    roi: ReturnOnInvestment
