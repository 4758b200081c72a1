"""
User profile model and the closed categories its answers resolve to.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ideaspark.exceptions import InvalidProfile


class BudgetBracket(str, Enum):
    UNDER_1K = "Under $1,000"
    FROM_1K_TO_5K = "$1,000 - $5,000"
    FROM_5K_TO_25K = "$5,000 - $25,000"
    FROM_25K_TO_100K = "$25,000 - $100,000"
    OVER_100K = "Over $100,000"


class ExpertiseLevel(str, Enum):
    COMPLETE_BEGINNER = "Complete beginner"
    SOME_BUSINESS_KNOWLEDGE = "Some business knowledge"
    EXPERIENCED_PROFESSIONAL = "Experienced professional"
    MANAGEMENT_EXPERIENCE = "Management experience"
    SERIAL_ENTREPRENEUR = "Serial entrepreneur"
    DOMAIN_EXPERT = "Domain expert"
    TECHNICAL_SPECIALIST = "Technical specialist"
    CREATIVE_PROFESSIONAL = "Creative professional"


class TimeCommitment(str, Enum):
    PART_TIME = "Part-time"
    FULL_TIME = "Full-time"


class RiskTolerance(str, Enum):
    CONSERVATIVE = "Conservative"
    MODERATE = "Moderate"
    AGGRESSIVE = "Aggressive"


def resolve_budget(label: str) -> Optional[BudgetBracket]:
    label = label.strip()
    for bracket in BudgetBracket:
        if label == bracket.value:
            return bracket
    return None


def resolve_expertise(label: str) -> Optional[ExpertiseLevel]:
    # Wizard labels read "Domain expert - Deep industry knowledge"
    head = label.split(" - ")[0].strip().lower()
    for level in ExpertiseLevel:
        if head == level.value.lower():
            return level
    return None


def resolve_time_commitment(label: str) -> TimeCommitment:
    if TimeCommitment.FULL_TIME.value in label:
        return TimeCommitment.FULL_TIME
    return TimeCommitment.PART_TIME


def resolve_risk_tolerance(label: str) -> RiskTolerance:
    for tolerance in RiskTolerance:
        if tolerance.value in label:
            return tolerance
    return RiskTolerance.MODERATE


class UserProfile(BaseModel):
    """Answers collected by the wizard.

    The free-text labels are kept as given. Each label is resolved once, on
    construction, into the closed category the scoring tables are keyed by.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    interests: List[str] = Field(default_factory=list, description="Interest categories, primary first")
    skills: List[str] = Field(default_factory=list, description="Skills, primary and secondary first")
    budget: str = Field("", description="Startup budget bracket label")
    expertise: str = Field("", description="Business experience label")
    time_commitment: str = Field("", alias="timeCommitment", description="Weekly time commitment label")
    risk_tolerance: str = Field("", alias="riskTolerance", description="Risk tolerance label")

    _budget_bracket: Optional[BudgetBracket] = PrivateAttr(None)
    _expertise_level: Optional[ExpertiseLevel] = PrivateAttr(None)
    _commitment: TimeCommitment = PrivateAttr(TimeCommitment.PART_TIME)
    _risk_category: RiskTolerance = PrivateAttr(RiskTolerance.MODERATE)

    def model_post_init(self, __context: Any) -> None:
        self._budget_bracket = resolve_budget(self.budget)
        self._expertise_level = resolve_expertise(self.expertise)
        self._commitment = resolve_time_commitment(self.time_commitment)
        self._risk_category = resolve_risk_tolerance(self.risk_tolerance)

    @property
    def budget_bracket(self) -> Optional[BudgetBracket]:
        return self._budget_bracket

    @property
    def expertise_level(self) -> Optional[ExpertiseLevel]:
        return self._expertise_level

    @property
    def commitment(self) -> TimeCommitment:
        return self._commitment

    @property
    def risk_category(self) -> RiskTolerance:
        return self._risk_category

    @property
    def primary_interest(self) -> str:
        return self.interests[0]

    @property
    def primary_skill(self) -> str:
        return self.skills[0]

    @property
    def secondary_skill(self) -> str:
        return self.skills[1] if len(self.skills) > 1 else "Strategy"

    @property
    def is_full_time(self) -> bool:
        return self.commitment is TimeCommitment.FULL_TIME

    def ensure_complete(self):
        """Raise InvalidProfile unless there is at least one interest and one skill."""
        if not self.interests:
            raise InvalidProfile("Profile has no interests")
        if not self.skills:
            raise InvalidProfile("Profile has no skills")
